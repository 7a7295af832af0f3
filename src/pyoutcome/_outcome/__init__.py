from ._factories import failed, of, of_optional, succeeded
from ._outcome import Failed, Outcome, Succeeded

__all__ = [
    "Failed",
    "Outcome",
    "Succeeded",
    "failed",
    "of",
    "of_optional",
    "succeeded",
]
