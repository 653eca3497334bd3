"""
Error types for the Radix color generator.

Conversion errors are local to a single variable and never abort a run.
Source and discovery errors are fatal.
"""

from pathlib import Path


class RadixTailwindError(Exception):
    """Base exception for all generator errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ConversionError(RadixTailwindError):
    """
    Raised when a single color literal cannot be turned into output.

    Callers log these and skip the affected variable.
    """

    pass


class MalformedLiteral(ConversionError):
    """
    Raised when a color literal does not match the shape of its format.

    Examples:
    - Hex code with the wrong digit count (#F00)
    - Hex code without a leading hash (FF0000)
    - Non-hex characters (#GGGFFF)
    - rgba()/hsla() with the wrong number of arguments
    """

    pass


class FormatMismatch(ConversionError):
    """Raised when a display-p3 literal has (or lacks) alpha against the caller's requirement."""

    pass


class SourceUnreadable(RadixTailwindError):
    """
    Raised when a source stylesheet exists but cannot be read.

    A missing file is not an error; dark-mode companions are optional.
    """

    pass


class NoSourceArtifacts(RadixTailwindError):
    """Raised when the source directory is missing or holds no usable stylesheets."""

    pass


class ConfigError(RadixTailwindError):
    """Raised when the generator configuration file is invalid."""

    pass
