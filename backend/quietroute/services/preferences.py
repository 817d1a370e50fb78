"""
User comfort preferences for one scoring call.
"""
from dataclasses import dataclass


class InvalidPreferencesError(ValueError):
    """Raised when a preference value lies outside [0, 1]."""


def validate_preference(name: str, value: float) -> float:
    """
    Check that a preference value lies in [0, 1].

    Out-of-range values are rejected, never clamped, so upstream bugs are
    not masked.

    Raises:
        InvalidPreferencesError: If value is outside [0, 1] or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidPreferencesError(f"{name} must be a number in [0, 1]. Got: {value!r}")
    if not 0.0 <= value <= 1.0:
        raise InvalidPreferencesError(f"{name} must be in [0, 1]. Got: {value}")
    return float(value)


@dataclass(frozen=True)
class Preferences:
    """
    How strongly the user cares about each comfort dimension.

    Attributes:
        quietness: 0 = ignore noise entirely, 1 = fully avoid loud roads
        brightness: 0 = ignore lighting entirely, 1 = fully prefer lit roads
    """

    quietness: float
    brightness: float

    def __post_init__(self):
        validate_preference("quietness", self.quietness)
        validate_preference("brightness", self.brightness)
