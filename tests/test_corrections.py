"""Tests for the correction engine."""

import pytest

from wtf_fixer.corrections.engine import (
    CUSTOM_FIX_REASON,
    MAX_CORRECTIONS,
    Correction,
    TypoRule,
    find_corrections,
    jaro_winkler,
)
from wtf_fixer.corrections.tables import (
    BUILTIN_TABLES,
    ReferenceTables,
    TypoFix,
    is_builtin_typo,
)

EMPTY_TABLES = ReferenceTables(typos=(), common_commands=())


def fixed(corrections: list[Correction] | None) -> list[str]:
    return [c.fixed_cmd for c in corrections or []]


class TestTokenization:
    """Test handling of blank input."""

    @pytest.mark.parametrize("cmd", ["", "   ", "\t\n"])
    def test_blank_command_has_no_corrections(self, cmd: str) -> None:
        """Test that a command without tokens yields None."""
        assert find_corrections(cmd, [TypoRule("gp", "git push")]) is None

    def test_nothing_matched_returns_none(self) -> None:
        """Test that an empty result is None, not an empty list."""
        assert find_corrections("gp", [], EMPTY_TABLES) is None


class TestOverrides:
    """Test user override matching."""

    def test_exact_match(self) -> None:
        """Test a whole-command override."""
        corrections = find_corrections("gp", [TypoRule("gp", "git push")], EMPTY_TABLES)

        assert corrections == [Correction(fixed_cmd="git push", reason="custom fix", confidence=1.0)]

    def test_first_token_match_appends_args(self) -> None:
        """Test that args follow the replacement after a single space."""
        corrections = find_corrections(
            "gco -b feature/x", [TypoRule("gco", "git checkout")], EMPTY_TABLES
        )

        assert fixed(corrections) == ["git checkout -b feature/x"]
        assert corrections[0].reason == CUSTOM_FIX_REASON
        assert corrections[0].confidence == 1.0

    def test_prefix_match_preserves_trailing_text(self) -> None:
        """Test that a multi-word rule keeps the remainder verbatim."""
        corrections = find_corrections(
            "git co  -b x", [TypoRule("git co", "git checkout")], EMPTY_TABLES
        )

        assert fixed(corrections) == ["git checkout  -b x"]

    def test_prefix_requires_space_boundary(self) -> None:
        """Test that a rule does not match inside a longer word."""
        assert find_corrections("gpx", [TypoRule("gp", "git push")], EMPTY_TABLES) is None

    def test_multiple_rules_all_kept(self) -> None:
        """Test that every matching override contributes, even with equal text."""
        overrides = [
            TypoRule("gp", "git push"),
            TypoRule("gp origin", "git push origin"),
        ]

        corrections = find_corrections("gp origin main", overrides, EMPTY_TABLES)

        assert fixed(corrections) == ["git push origin main", "git push origin main"]


class TestBuiltins:
    """Test the built-in typo table."""

    def test_exact_builtin(self) -> None:
        """Test a whole-command built-in typo."""
        corrections = find_corrections("sl")

        assert corrections is not None
        assert corrections[0].fixed_cmd == "ls"
        assert corrections[0].reason == "reversed command"
        assert corrections[0].confidence == 1.0

    def test_first_token_builtin_with_args(self) -> None:
        """Test a built-in command typo followed by arguments."""
        corrections = find_corrections("gti status")

        assert fixed(corrections) == ["git status"]

    def test_multi_word_builtin_keeps_remainder(self) -> None:
        """Test that the text after a multi-word typo is untouched."""
        corrections = find_corrections("git psuh  origin main")

        assert fixed(corrections) == ["git push  origin main"]

    def test_override_and_builtin_coexist(self) -> None:
        """Test that a differing override appears alongside the built-in fix."""
        corrections = find_corrections("gti status", [TypoRule("gti", "got")])

        assert fixed(corrections) == ["got status", "git status"]
        assert corrections[0].reason == CUSTOM_FIX_REASON
        assert corrections[1].reason == "transposed letters"

    def test_builtin_duplicate_of_override_not_added(self) -> None:
        """Test deduplication by resulting text."""
        corrections = find_corrections("gti status", [TypoRule("gti", "git")])

        assert len(corrections) == 1
        assert corrections[0].reason == CUSTOM_FIX_REASON

    def test_results_capped(self) -> None:
        """Test that more than five matches are truncated in discovery order."""
        tables = ReferenceTables(
            typos=tuple(TypoFix("foo", f"bar{i}", f"reason {i}") for i in range(7)),
            common_commands=(),
        )

        corrections = find_corrections("foo", [], tables)

        assert len(corrections) == MAX_CORRECTIONS
        assert fixed(corrections) == [f"bar{i}" for i in range(5)]

    def test_is_builtin_typo(self) -> None:
        """Test detection of pairs overlapping the built-in table."""
        assert is_builtin_typo("gti", "anything")
        assert is_builtin_typo("anything", "git")
        assert not is_builtin_typo("gp", "git push")


class TestSimilarity:
    """Test approximate matching against the command vocabulary."""

    @staticmethod
    def tables(*commands: str) -> ReferenceTables:
        return ReferenceTables(typos=(), common_commands=commands)

    @pytest.mark.parametrize("score", [0.5, 0.85, 1.0])
    def test_scores_outside_window_rejected(self, score: float) -> None:
        """Test that 0.85 and 1.0 are both excluded."""
        corrections = find_corrections("alhpa", [], self.tables("alpha"), scorer=lambda a, b: score)

        assert corrections is None

    def test_score_above_threshold_accepted(self) -> None:
        """Test the fix text, reason and confidence of an approximate match."""
        corrections = find_corrections(
            "alhpa -v  now", [], self.tables("alpha"), scorer=lambda a, b: 0.86
        )

        assert corrections == [
            Correction(fixed_cmd="alpha -v now", reason="similar to 'alpha'", confidence=0.86)
        ]

    def test_only_first_token_scored(self) -> None:
        """Test that the scorer sees the command name only."""
        seen = []

        def scorer(a: str, b: str) -> float:
            seen.append(a)
            return 0.0

        find_corrections("alhpa one two", [], self.tables("alpha", "beta"), scorer=scorer)

        assert seen == ["alhpa", "alhpa"]

    def test_sorted_and_capped(self) -> None:
        """Test ordering by confidence with stable ties and a cap of five."""
        scores = {"a": 0.9, "b": 0.95, "c": 0.87, "d": 0.95, "e": 0.99, "f": 0.86, "g": 0.88}

        corrections = find_corrections(
            "x", [], self.tables(*scores), scorer=lambda a, b: scores[b]
        )

        assert fixed(corrections) == ["e", "b", "d", "a", "g"]

    def test_skipped_when_rules_match(self) -> None:
        """Test that similarity matching never runs alongside rule matches."""
        calls = []

        def scorer(a: str, b: str) -> float:
            calls.append((a, b))
            return 0.99

        tables = ReferenceTables(
            typos=(TypoFix("sl", "ls", "reversed command"),),
            common_commands=("ls", "sed"),
        )

        corrections = find_corrections("sl", [], tables, scorer=scorer)

        assert fixed(corrections) == ["ls"]
        assert calls == []

    def test_builtin_vocabulary(self) -> None:
        """Test a real approximate match with the default scorer."""
        corrections = find_corrections("kubectll get pods")

        assert corrections is not None
        assert corrections[0].fixed_cmd == "kubectl get pods"
        assert corrections[0].reason == "similar to 'kubectl'"
        assert 0.85 < corrections[0].confidence < 1.0

    def test_correct_command_not_flagged(self) -> None:
        """Test that a known command with an exact vocabulary hit is left alone."""
        assert find_corrections("git status") is None

    def test_jaro_winkler(self) -> None:
        """Test the default scorer's range."""
        assert jaro_winkler("git", "git") == 1.0
        assert jaro_winkler("kubectll", "kubectl") == pytest.approx(0.975, abs=1e-3)
        assert jaro_winkler("abc", "xyz") == 0.0


class TestDeterminism:
    """Test that the engine is a pure function."""

    def test_repeated_calls_identical(self) -> None:
        """Test identical ordered output for identical input."""
        overrides = [TypoRule("gti", "got")]

        first = find_corrections("gti status", overrides, BUILTIN_TABLES)
        second = find_corrections("gti status", overrides, BUILTIN_TABLES)

        assert first == second

    def test_tables_unchanged(self) -> None:
        """Test that a query does not mutate the reference tables."""
        before = (BUILTIN_TABLES.typos, BUILTIN_TABLES.common_commands)

        find_corrections("kubectll get pods")

        assert (BUILTIN_TABLES.typos, BUILTIN_TABLES.common_commands) == before
