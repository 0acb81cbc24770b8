"""
File-backed spell checker.

Reads a newline-delimited dictionary (one word per line) the first time it is
asked about a word, then answers from memory. A missing file surfaces as
FileNotFoundError from the first lookup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set

from packages.datasets.io import load_word_list
from .base import MisspellingRange, register
from .memory import MemorySpellChecker

logger = logging.getLogger(__name__)


@register
class WordListSpellChecker(MemorySpellChecker):
    id = "wordlist"
    name = "Word-list file"

    def __init__(self, path: Path | str, locale: str = "en"):
        super().__init__((), locale)
        self.path = Path(path)
        self._loaded = False

    def load(self) -> Set[str]:
        if not self._loaded:
            self.words = set(load_word_list(self.path))
            self._loaded = True
            logger.debug("Dictionary %s ready (%s, %d words)", self.path, self.locale, len(self.words))
        return self.words

    def __contains__(self, word: str) -> bool:
        return word in self.load()

    def __len__(self) -> int:
        return len(self.load())

    def check_spelling(self, word: str, locale: str) -> Optional[MisspellingRange]:
        self.load()
        return super().check_spelling(word, locale)
