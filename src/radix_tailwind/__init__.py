"""
radix-colors-tailwind - Radix Colors as Tailwind CSS theme variables.

Converts the Radix color stylesheets into OKLCH-based custom properties
that Tailwind CSS v4 consumes through ``@theme inline``.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ConfigError,
    FormatMismatch,
    MalformedLiteral,
    NoSourceArtifacts,
    RadixTailwindError,
    SourceUnreadable,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "RadixTailwindError",
    "MalformedLiteral",
    "FormatMismatch",
    "SourceUnreadable",
    "NoSourceArtifacts",
    "ConfigError",
]
