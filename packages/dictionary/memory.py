"""
In-memory spell checker.

Backed by a plain set of lowercase words. Useful for tests and for embedding
a small fixed dictionary; the whole word is reported as one misspelled span
when it is absent.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set
from .base import BaseSpellChecker, MisspellingRange, register


@register
class MemorySpellChecker(BaseSpellChecker):
    id = "memory"
    name = "In-memory word set"

    def __init__(self, words: Iterable[str] = (), locale: str = "en"):
        super().__init__(locale)
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def check_spelling(self, word: str, locale: str) -> Optional[MisspellingRange]:
        if not self.supports(locale):
            raise LookupError(f"{self.id} checker has no dictionary for locale {locale!r}")
        if word in self.words:
            return None
        return (0, len(word))
