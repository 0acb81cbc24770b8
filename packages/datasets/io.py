from __future__ import annotations

import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

# Bundled resources shipped with the package.
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ROOTS_PATH = DATA_DIR / "start.txt"
DEFAULT_DICTIONARY_PATH = DATA_DIR / "dictionary_en.txt"


class WordListUnavailable(FileNotFoundError):
    """The word-list resource could not be located at all."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_word_list(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    Order is preserved. Raises WordListUnavailable if the file is missing.
    """
    p = Path(p)
    if not p.is_file():
        raise WordListUnavailable(f"Word list file not found: {p}")
    words = [w.strip().lower() for w in read_lines(p) if w.strip()]
    logger.info("Loaded %s words from %s", len(words), p)
    return words
