from __future__ import annotations
from typing import List
from .base import BaseSpellChecker, MisspellingRange, REGISTRY, register

from . import memory  # noqa: F401
from . import wordlist  # noqa: F401
from .memory import MemorySpellChecker
from .wordlist import WordListSpellChecker


def create_checker(checker_id: str, **kwargs) -> BaseSpellChecker:
    """
    Factory: instantiate a registered spell checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown spell checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_checker_ids() -> List[str]:
    """
    Return all registered spell checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "BaseSpellChecker", "MisspellingRange", "MemorySpellChecker", "WordListSpellChecker",
    "REGISTRY", "register", "create_checker", "get_checker_ids",
]
