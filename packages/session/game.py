"""
Game session: one root word plus the history of accepted guesses.

- new_session:           deal a root word at random from a word list.
- new_session_from_file: same, from the bundled (or any) newline-delimited resource.
- GameSession.submit_guess: the only operation that mutates a session.

A session never ends on its own; callers discard it or deal a new one.
The root word counts as already used, so guessing it is ALREADY_USED.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from packages.datasets.io import DEFAULT_ROOTS_PATH, load_word_list
from packages.engine import Accepted, Rejected, Reason, first_violation, normalize_guess

logger = logging.getLogger(__name__)

# Dealt when the word list turns out to be empty.
DEFAULT_ROOT_WORD = "silkworm"
DEFAULT_LOCALE = "en"

Outcome = Union[Accepted, Rejected]


class GameSession:
    def __init__(self, root_word: str, *, checker=None, locale: str = DEFAULT_LOCALE):
        root = normalize_guess(root_word)
        if not root or any(ch.isspace() for ch in root):
            raise ValueError(f"Root word must be a single non-empty word; got {root_word!r}")
        self._root_word = root
        self._history: List[str] = []  # most recent first
        self.checker = checker
        self.locale = locale

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def history(self) -> Tuple[str, ...]:
        """Accepted guesses, most recent first."""
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def __contains__(self, word: str) -> bool:
        return word in self._history

    def __iter__(self) -> Iterator[str]:
        return iter(self.history)

    def __repr__(self) -> str:
        return f"GameSession(root_word={self._root_word!r}, guesses={len(self._history)})"

    def submit_guess(self, raw: str) -> Outcome:
        """
        Normalize `raw` and run it through the validation pipeline.

        Returns Accepted(word) after recording it at the front of the history,
        or Rejected(word, reason, root_word) for the first rule it breaks. Rejections
        leave the session untouched.
        """
        answer = normalize_guess(raw)
        if not answer:
            return Rejected(answer, Reason.EMPTY_INPUT, self._root_word)

        # The root word is seeded into the "used" set.
        used = [self._root_word, *self._history]
        reason = first_violation(
            answer,
            root_word=self._root_word,
            history=used,
            locale=self.locale,
            checker=self.checker,
        )
        if reason is not None:
            logger.debug("Rejected %r for root %r: %s", answer, self._root_word, reason.value)
            return Rejected(answer, reason, self._root_word)

        self._history.insert(0, answer)
        logger.debug("Accepted %r for root %r (%d so far)", answer, self._root_word, len(self._history))
        return Accepted(answer)


def pick_root_word(word_list: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Choose a root word uniformly at random, skipping blank entries and
    entries with whitespace inside them.
    Falls back to DEFAULT_ROOT_WORD when nothing usable is left.
    """
    rng = rng or random.Random()
    entries = [w.strip().lower() for w in word_list if w.strip()]
    pool = [w for w in entries if not any(ch.isspace() for ch in w)]
    if len(pool) < len(entries):
        logger.warning("Skipped %d word list entries containing whitespace", len(entries) - len(pool))
    if not pool:
        logger.warning("Word list has no usable entries, using default root word %r", DEFAULT_ROOT_WORD)
        return DEFAULT_ROOT_WORD
    return pool[rng.randrange(len(pool))]


def new_session(
        word_list: Sequence[str],
        *,
        checker=None,
        locale: str = DEFAULT_LOCALE,
        rng: Optional[random.Random] = None,
) -> GameSession:
    """Deal a fresh session from an in-memory word list."""
    return GameSession(pick_root_word(word_list, rng), checker=checker, locale=locale)


def new_session_from_file(
        path: Path | str = DEFAULT_ROOTS_PATH,
        *,
        checker=None,
        locale: str = DEFAULT_LOCALE,
        rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Deal a fresh session from a newline-delimited word-list file.

    Raises WordListUnavailable if the file cannot be located; no session can
    exist without a root word, so callers should treat it as fatal.
    """
    words = load_word_list(path)
    return new_session(words, checker=checker, locale=locale, rng=rng)
