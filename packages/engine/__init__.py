from .outcome import Accepted, Rejected, Reason
from .validation import (
    normalize_guess,
    is_original,
    is_possible,
    is_real_word,
    first_violation,
)

__all__ = [
    "Accepted", "Rejected", "Reason",
    "normalize_guess", "is_original", "is_possible", "is_real_word", "first_violation",
]
