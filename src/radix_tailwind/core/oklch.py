"""
Pure-Python color conversion to OKLCH.

Converts the color literals found in Radix stylesheets (hex, rgba(), hsla())
into OKLCH lightness/chroma/hue triples. Display-P3 literals are never
converted; their channel text is extracted as-is. No external color
libraries required.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .errors import FormatMismatch, MalformedLiteral

# Decimal places kept for every emitted number.
PRECISION = 3

# Below this chroma the hue is noise and is reported as 0.
ACHROMATIC_EPSILON = 1e-5

_NUMBER = r"(\d+(?:\.\d+)?|\.\d+)"

_RGBA_RE = re.compile(
    rf"rgba\(\s*{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}\s*\)"
)
_HSLA_RE = re.compile(
    rf"hsla\(\s*{_NUMBER}\s*,\s*{_NUMBER}%\s*,\s*{_NUMBER}%\s*,\s*{_NUMBER}\s*\)"
)
_P3_RE = re.compile(
    rf"color\(display-p3\s+{_NUMBER}\s+{_NUMBER}\s+{_NUMBER}(?:\s*/\s*{_NUMBER})?\s*\)"
)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_GAMUT_PREFIX = "color(display-p3"


@dataclass(frozen=True)
class OklchColor:
    """A color in OKLCH space, rounded for reproducible output.

    Attributes:
        lightness: Perceptual lightness (0-1).
        chroma: Colorfulness (0-~0.4).
        hue: Hue angle in degrees, in [0, 360).
        alpha: Opacity (0-1), or None when the color is opaque.
    """

    lightness: float
    chroma: float
    hue: float
    alpha: float | None = None

    @property
    def channels(self) -> str:
        """Space-separated channel text (``L C H`` or ``L C H / A``)."""
        text = " ".join(_format_number(v) for v in (self.lightness, self.chroma, self.hue))
        if self.alpha is not None and self.alpha != 1:
            text += f" / {_format_number(self.alpha)}"
        return text

    def __str__(self) -> str:
        return self.channels


def _round(value: float) -> float:
    """Round half-up to PRECISION decimal places."""
    factor = 10**PRECISION
    return math.floor(value * factor + 0.5) / factor


def _format_number(value: float) -> str:
    """Format a rounded number without trailing zeros (1, 0.6, 0.628)."""
    if value == 0:
        return "0"
    text = f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _srgb_to_linear(c: float) -> float:
    """sRGB transfer function inverse (companded to linear light)."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def srgb_to_oklch(r: float, g: float, b: float, alpha: float | None = None) -> OklchColor:
    """Convert 8-bit-range sRGB channels to OKLCH.

    Args:
        r: Red channel (0-255, fractional values allowed).
        g: Green channel (0-255).
        b: Blue channel (0-255).
        alpha: Optional opacity (0-1). Rounded, never converted.

    Returns:
        Rounded OklchColor.
    """
    r_lin = _srgb_to_linear(r / 255)
    g_lin = _srgb_to_linear(g / 255)
    b_lin = _srgb_to_linear(b / 255)

    # Linear sRGB -> LMS
    l_ = 0.4122214708 * r_lin + 0.5363325363 * g_lin + 0.0514459929 * b_lin
    m_ = 0.2119034982 * r_lin + 0.6806995451 * g_lin + 0.1073969566 * b_lin
    s_ = 0.0883024619 * r_lin + 0.2817188376 * g_lin + 0.6299787005 * b_lin

    l_root = math.cbrt(max(0.0, l_))
    m_root = math.cbrt(max(0.0, m_))
    s_root = math.cbrt(max(0.0, s_))

    # LMS -> OKLab
    lightness = 0.2104542553 * l_root + 0.793617785 * m_root - 0.0040720468 * s_root
    ok_a = 1.9779984951 * l_root - 2.428592205 * m_root + 0.4505937099 * s_root
    ok_b = 0.0259040371 * l_root + 0.7827717662 * m_root - 0.808675766 * s_root

    chroma = math.hypot(ok_a, ok_b)
    hue = 0.0
    if chroma > ACHROMATIC_EPSILON:
        hue = math.degrees(math.atan2(ok_b, ok_a))
        if hue < 0:
            hue += 360

    hue = _round(hue)
    if hue >= 360:
        hue = 0.0

    return OklchColor(
        lightness=_round(lightness),
        chroma=_round(chroma),
        hue=hue,
        alpha=_round(alpha) if alpha is not None else None,
    )


def hex_to_oklch(literal: str) -> OklchColor:
    """Convert ``#RRGGBB`` or ``#RRGGBBAA`` to OKLCH.

    The alpha byte of an 8-digit code is decoded to [0, 1].

    Raises:
        MalformedLiteral: Wrong length, missing ``#`` or non-hex characters.
    """
    if not literal.startswith("#") or len(literal) not in (7, 9):
        raise MalformedLiteral(f"Invalid hex code format: {literal}")
    digits = literal[1:]
    if not set(digits) <= _HEX_DIGITS:
        raise MalformedLiteral(
            f"Invalid hex code format (contains non-hex characters): {literal}"
        )

    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else None
    return srgb_to_oklch(r, g, b, alpha)


def rgba_to_oklch(literal: str) -> OklchColor:
    """Convert ``rgba(r, g, b, a)`` to OKLCH.

    Raises:
        MalformedLiteral: Not exactly four numeric arguments.
    """
    match = _RGBA_RE.fullmatch(literal.strip())
    if not match:
        raise MalformedLiteral(f"Invalid RGBA string format: {literal}")
    r, g, b, a = (float(v) for v in match.groups())
    return srgb_to_oklch(r, g, b, a)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsla_to_oklch(literal: str) -> OklchColor:
    """Convert ``hsla(h, s%, l%, a)`` to OKLCH.

    The HSL color is first resolved to integer 8-bit RGB channels.

    Raises:
        MalformedLiteral: Missing percent signs or wrong argument count.
    """
    match = _HSLA_RE.fullmatch(literal.strip())
    if not match:
        raise MalformedLiteral(f"Invalid HSLA string format: {literal}")
    h, s, l, a = (float(v) for v in match.groups())  # noqa: E741

    saturation = s / 100
    lightness = l / 100
    if saturation == 0:
        r = g = b = lightness
    else:
        q = (
            lightness * (1 + saturation)
            if lightness < 0.5
            else lightness + saturation - lightness * saturation
        )
        p = 2 * lightness - q
        h_norm = h / 360
        r = _hue_to_rgb(p, q, h_norm + 1 / 3)
        g = _hue_to_rgb(p, q, h_norm)
        b = _hue_to_rgb(p, q, h_norm - 1 / 3)

    return srgb_to_oklch(
        math.floor(r * 255 + 0.5),
        math.floor(g * 255 + 0.5),
        math.floor(b * 255 + 0.5),
        a,
    )


def is_gamut_literal(value: str) -> bool:
    """Check whether a value is a wide-gamut ``color(display-p3 ...)`` call."""
    return value.strip().startswith(_GAMUT_PREFIX)


def convert_literal(literal: str) -> OklchColor:
    """Convert any supported fallback literal to OKLCH.

    Raises:
        MalformedLiteral: Unsupported format or malformed literal.
    """
    value = literal.strip()
    if value.startswith("#"):
        return hex_to_oklch(value)
    if value.startswith("rgba("):
        return rgba_to_oklch(value)
    if value.startswith("hsla("):
        return hsla_to_oklch(value)
    raise MalformedLiteral(f"Unsupported color literal: {literal}")


def extract_p3_channels(literal: str, require_alpha: bool) -> str:
    """Extract channel text from a display-p3 literal without converting it.

    Args:
        literal: ``color(display-p3 r g b)`` or ``color(display-p3 r g b / a)``.
        require_alpha: True to accept only literals with alpha, False to
            accept only literals without.

    Returns:
        ``"r g b"`` or ``"r g b / a"`` using the literal's own number text.

    Raises:
        MalformedLiteral: Not a display-p3 literal.
        FormatMismatch: Alpha presence differs from ``require_alpha``.
    """
    match = _P3_RE.fullmatch(literal.strip())
    if not match:
        raise MalformedLiteral(f"Invalid display-p3 format: {literal}")
    r, g, b, a = match.groups()
    if require_alpha and a is None:
        raise FormatMismatch(f"Expected alpha in display-p3 value: {literal}")
    if not require_alpha and a is not None:
        raise FormatMismatch(f"Unexpected alpha in display-p3 value: {literal}")
    channels = f"{r} {g} {b}"
    if a is not None:
        channels += f" / {a}"
    return channels
