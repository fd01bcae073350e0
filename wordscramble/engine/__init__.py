from .results import Accepted, Rejected, RejectReason, ValidationResult
from .rules import is_long_enough, is_original, is_possible, is_real
from .validation import normalize, validate_word

__all__ = [
    "Accepted", "Rejected", "RejectReason", "ValidationResult",
    "is_long_enough", "is_original", "is_possible", "is_real",
    "normalize", "validate_word",
]
