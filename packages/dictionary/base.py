from __future__ import annotations
from typing import Dict, Optional, Tuple, Type

# A reported misspelling: (start offset, length) within the checked word.
MisspellingRange = Tuple[int, int]

# ---- Global spell-checker registry ----
REGISTRY: Dict[str, Type["BaseSpellChecker"]] = {}


def register(cls: Type["BaseSpellChecker"]) -> Type["BaseSpellChecker"]:
    """
    Decorator: @register on a spell-checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate spell checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that spell checkers inherit ----
class BaseSpellChecker:
    id = "base"
    name = "Base"

    def __init__(self, locale: str = "en"):
        self.locale = locale

    def supports(self, locale: str) -> bool:
        return locale == self.locale

    def check_spelling(self, word: str, locale: str) -> Optional[MisspellingRange]:
        """
        Return the span of the first misspelling in `word`, or None if the
        whole word is spelled correctly.
        """
        raise NotImplementedError("Override in subclass")
