# apps/cli/play.py
"""
Interactive word-scramble game in the terminal.

This script:
  1) Loads the root-word list and the offline dictionary.
  2) Deals a root word and reads guesses from stdin, one per line.
  3) Prints "title: message" for rejected guesses and the running list of
     accepted words (with their lengths) after each success.

Commands:
  :new   deal a new root word
  :quit  exit (EOF works too)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from packages.datasets import DEFAULT_DICTIONARY_PATH, DEFAULT_ROOTS_PATH, load_word_list
from packages.dictionary import create_checker
from packages.session import (
    DEFAULT_LOCALE,
    GameSession,
    WordListUnavailable,
    new_session,
)


def _print_history(session: GameSession) -> None:
    for word in session.history:
        print(f"  ({len(word)}) {word}")


def _deal(words, args, checker, rng) -> GameSession:
    if args.root is not None:
        session = GameSession(args.root, checker=checker, locale=args.locale)
    else:
        session = new_session(words, checker=checker, locale=args.locale, rng=rng)
    print(f"\nRoot word: {session.root_word}")
    return session


def play(session_factory, lines) -> GameSession:
    """
    Drive sessions from an iterable of input lines. Returns the last session.
    """
    session = session_factory()
    for line in lines:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session = session_factory()
            continue

        outcome = session.submit_guess(line)
        if outcome.ok:
            _print_history(session)
        elif not outcome.silent:
            print(f"{outcome.title}: {outcome.message}")
    return session


def _stdin_lines():
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def main():
    ap = argparse.ArgumentParser(description="word scramble — spell words from a root word")
    ap.add_argument("--words", default=str(DEFAULT_ROOTS_PATH),
                    help="path to the root-word list (one per line)")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY_PATH),
                    help="path to the dictionary used to recognize words")
    ap.add_argument("--locale", default=DEFAULT_LOCALE, help="dictionary locale")
    ap.add_argument("--seed", type=int, help="RNG seed for dealing root words")
    ap.add_argument("--root", help="play this root word instead of dealing one")
    ap.add_argument("--debug", action="store_true", help="verbose logging")
    args = ap.parse_args()

    loglevel = "DEBUG" if args.debug else "WARNING"
    logging.basicConfig(format="%(levelname)s [%(asctime)s] %(message)s",
                        datefmt="%Y-%m-%d %H:%M:%S", level=loglevel)

    try:
        words = load_word_list(args.words)
    except WordListUnavailable as e:
        print(f"Could not load word list: {e}", file=sys.stderr)
        sys.exit(1)

    if args.root is not None:
        try:
            GameSession(args.root)
        except ValueError as e:
            print(f"Invalid root word: {e}", file=sys.stderr)
            sys.exit(1)

    checker = create_checker("wordlist", path=args.dictionary, locale=args.locale)
    rng = random.Random(args.seed)

    session = play(lambda: _deal(words, args, checker, rng), _stdin_lines())
    print(f"\n{len(session)} word(s) found from {session.root_word}.")


if __name__ == "__main__":
    main()
