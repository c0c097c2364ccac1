"""Correction engine - turn a mistyped command into ranked fix candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from rapidfuzz.distance import JaroWinkler

from .tables import BUILTIN_TABLES, ReferenceTables

if TYPE_CHECKING:
    from collections.abc import Callable

SIMILARITY_THRESHOLD = 0.85
MAX_CORRECTIONS = 5
CUSTOM_FIX_REASON = "custom fix"


@dataclass(frozen=True)
class TypoRule:
    """A user-defined mapping from a mistyped command to its correct form."""

    wrong: str
    correct: str


@dataclass
class Correction:
    """A suggested replacement for the previous command."""

    fixed_cmd: str
    reason: str
    confidence: float  # 0.0 to 1.0


def jaro_winkler(a: str, b: str) -> float:
    """Jaro-Winkler similarity normalized to [0, 1]."""
    return JaroWinkler.normalized_similarity(a, b, prefix_weight=0.1)


def _is_prefix_of(cmd: str, wrong: str) -> bool:
    """True when ``cmd`` is ``wrong`` followed by a space and more text."""
    return len(cmd) > len(wrong) and cmd.startswith(wrong) and cmd[len(wrong)] == " "


def _join(head: str, args: str) -> str:
    return f"{head} {args}" if args else head


def _match_overrides(
    cmd: str,
    command: str,
    args: str,
    overrides: Iterable[TypoRule],
) -> list[Correction]:
    corrections = []

    for rule in overrides:
        if cmd == rule.wrong:
            fixed = rule.correct
        elif command == rule.wrong:
            fixed = _join(rule.correct, args)
        elif _is_prefix_of(cmd, rule.wrong):
            fixed = rule.correct + cmd[len(rule.wrong):]
        else:
            continue

        corrections.append(Correction(
            fixed_cmd=fixed,
            reason=CUSTOM_FIX_REASON,
            confidence=1.0,
        ))

    return corrections


def _match_builtins(
    cmd: str,
    command: str,
    args: str,
    tables: ReferenceTables,
    corrections: list[Correction],
) -> None:
    for entry in tables.typos:
        if cmd == entry.typo:
            fixed = entry.fix
        elif _is_prefix_of(cmd, entry.typo):
            # Keep the original separator and trailing text untouched
            fixed = entry.fix + cmd[len(entry.typo):]
        elif command == entry.typo:
            fixed = _join(entry.fix, args)
        else:
            continue

        if any(c.fixed_cmd == fixed for c in corrections):
            continue

        corrections.append(Correction(
            fixed_cmd=fixed,
            reason=entry.reason,
            confidence=1.0,
        ))


def _match_similar(
    command: str,
    args: str,
    tables: ReferenceTables,
    scorer: Callable[[str, str], float],
) -> list[Correction]:
    corrections = []

    for candidate in tables.common_commands:
        similarity = scorer(command, candidate)

        # 1.0 means the command is already correct
        if SIMILARITY_THRESHOLD < similarity < 1.0:
            corrections.append(Correction(
                fixed_cmd=_join(candidate, args),
                reason=f"similar to '{candidate}'",
                confidence=similarity,
            ))

    return corrections


def find_corrections(
    cmd: str,
    overrides: Iterable[TypoRule] = (),
    tables: ReferenceTables = BUILTIN_TABLES,
    scorer: Callable[[str, str], float] = jaro_winkler,
) -> list[Correction] | None:
    """Find fix candidates for a command.

    User overrides are checked first, then the built-in typo table. Only
    when neither produces anything is the first token compared against
    the common command vocabulary by similarity.

    Args:
        cmd: The command line to correct
        overrides: User typo rules, in insertion order
        tables: Built-in typo table and command vocabulary
        scorer: Similarity function returning a score in [0, 1]

    Returns:
        Up to ``MAX_CORRECTIONS`` candidates ordered by confidence,
        or None when nothing matched
    """
    parts = cmd.split()
    if not parts:
        return None

    command = parts[0]
    args = " ".join(parts[1:])

    corrections = _match_overrides(cmd, command, args, overrides)
    _match_builtins(cmd, command, args, tables, corrections)

    if not corrections:
        corrections = _match_similar(command, args, tables, scorer)

    # sorted() is stable, equal scores keep discovery order
    corrections = sorted(corrections, key=lambda c: c.confidence, reverse=True)

    return corrections[:MAX_CORRECTIONS] or None
