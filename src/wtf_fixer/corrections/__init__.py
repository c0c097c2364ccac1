"""Typo correction engine and its reference tables."""

from .engine import Correction, TypoRule, find_corrections
from .tables import BUILTIN_TABLES, ReferenceTables, TypoFix

__all__ = [
    "Correction",
    "TypoRule",
    "find_corrections",
    "BUILTIN_TABLES",
    "ReferenceTables",
    "TypoFix",
]
