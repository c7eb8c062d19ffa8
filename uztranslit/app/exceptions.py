"""
Exception hierarchy for uztranslit.

Transliteration itself never fails on text input; these exceptions cover
static table defects, bad configuration and bad caller arguments.
"""


class TranslitException(Exception):
    """Base exception for all uztranslit errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class GraphemeTableError(TranslitException):
    """Static grapheme table defect (duplicate or empty source grapheme)."""

    pass


class ConfigurationError(TranslitException):
    """Configuration validation errors (invalid settings, missing values)."""

    pass


class ValidationError(TranslitException, ValueError):
    """Invalid caller arguments (unknown direction, bad selection bounds)."""

    pass


class DecodingError(TranslitException):
    """Input bytes could not be decoded with the requested encoding."""

    pass
