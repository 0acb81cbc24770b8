"""
Guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is accepted iff, in this order:
  - it is original    : not already in the session history
  - it is possible    : spellable from the root word's letters
  - it is a real word : the dictionary capability reports no misspelling

The order is fixed and short-circuits, so the reported reason is always the
first rule the guess breaks.

Normalization (lowercase + strip) is done once by the caller via
`normalize_guess`; the predicates below never renormalize.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Optional

from .outcome import Reason

logger = logging.getLogger(__name__)


def normalize_guess(raw: str) -> str:
    """Lowercase and trim surrounding whitespace (including newlines)."""
    return raw.lower().strip()


def is_original(candidate: str, history: Iterable[str]) -> bool:
    """True iff `candidate` has not been used yet."""
    return candidate not in history


def is_possible(candidate: str, root_word: str) -> bool:
    """
    True iff every letter of `candidate` can be taken from `root_word`,
    consuming one occurrence per use.

    Examples:
      is_possible("mar", "alarm")   -> True
      is_possible("liar", "alarm")  -> False   (no 'i')
      is_possible("llama", "lama")  -> False   (needs two 'l's)
    """
    if not candidate:
        raise ValueError("candidate must be non-empty")

    remaining = Counter(root_word)
    for letter in candidate:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1  # consume one instance
    return True


def is_real_word(candidate: str, locale: str, checker) -> bool:
    """
    Ask the dictionary capability whether `candidate` is spelled correctly.

    `checker` exposes check_spelling(word, locale) -> (start, length) | None.
    A missing or failing checker counts as "not recognized".
    """
    if checker is None:
        logger.warning("No spell checker configured; rejecting %r", candidate)
        return False
    try:
        misspelled = checker.check_spelling(candidate, locale)
    except Exception as e:
        logger.warning("Spell checker failed on %r (%s): %s", candidate, locale, e)
        return False
    return misspelled is None


def first_violation(
        candidate: str,
        *,
        root_word: str,
        history: Iterable[str],
        locale: str,
        checker,
) -> Optional[Reason]:
    """
    Run the three checks in order and return the first rule `candidate`
    breaks, or None if it passes all of them.
    """
    if not is_original(candidate, history):
        return Reason.ALREADY_USED
    if not is_possible(candidate, root_word):
        return Reason.NOT_POSSIBLE
    if not is_real_word(candidate, locale, checker):
        return Reason.NOT_RECOGNIZED
    return None
