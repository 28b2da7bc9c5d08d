# textutils/core/exceptions.py

"""Custom exception hierarchy for the text utilities.

Matching and masking never raise for malformed input; absence of a match
or a failed mask is reported through return values. These errors cover
configuration problems and misuse of the public interface.
"""


class TextUtilsError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(TextUtilsError):
    """Raised when pattern tables or settings fail to load or validate."""

    pass


class MaskError(TextUtilsError):
    """Raised when a mask selector cannot be resolved."""

    pass


class UnknownPresetError(MaskError):
    """Raised when a preset name is not present in the preset table."""

    def __init__(self, name: str):
        super().__init__(f"Unknown mask preset: {name!r}")
        self.name = name


class ValidationError(TextUtilsError):
    """Raised when input validation fails (e.g., non-string text input)."""

    pass
