from .validator import validate_wordlists, pretty_summary
from .io import (
    read_lines,
    load_word_list,
    WordListUnavailable,
    DEFAULT_ROOTS_PATH,
    DEFAULT_DICTIONARY_PATH,
)

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "load_word_list", "WordListUnavailable",
    "DEFAULT_ROOTS_PATH", "DEFAULT_DICTIONARY_PATH",
]
