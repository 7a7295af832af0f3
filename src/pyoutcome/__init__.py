from ._core import Pipeable
from ._outcome import Failed, Outcome, Succeeded, failed, of, of_optional, succeeded

__all__ = [
    "Failed",
    "Outcome",
    "Pipeable",
    "Succeeded",
    "failed",
    "of",
    "of_optional",
    "succeeded",
]
