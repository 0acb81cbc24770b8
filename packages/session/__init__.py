from packages.datasets.io import WordListUnavailable
from .game import (
    GameSession,
    DEFAULT_ROOT_WORD,
    DEFAULT_LOCALE,
    pick_root_word,
    new_session,
    new_session_from_file,
)

__all__ = [
    "GameSession", "DEFAULT_ROOT_WORD", "DEFAULT_LOCALE", "WordListUnavailable",
    "pick_root_word", "new_session", "new_session_from_file",
]
