"""
Tailwind config helpers for projects still using a JavaScript/JSON theme.

Maps Radix family names to CSS color expressions that read the generated
``--color-*`` variables. A family name ending in ``Alpha`` (``redAlpha``)
selects the alpha steps ``a1`` .. ``a12``.

Solid steps keep Tailwind's ``<alpha-value>`` placeholder working by mixing
the color with transparent; alpha steps already carry their own opacity.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

STEPS: tuple[int, ...] = tuple(range(1, 13))

_FAMILY_RE = re.compile(r"^[a-z]+(?:Alpha)?$")


def _split_family(family_name: str) -> tuple[str, bool]:
    if not _FAMILY_RE.match(family_name):
        raise ValueError(f"Invalid Radix family name: {family_name!r}")
    is_alpha = family_name.endswith("Alpha")
    return family_name.removesuffix("Alpha"), is_alpha


def _solid(stem: str, index: str) -> str:
    return (
        f"color-mix(in oklab, var(--color-{stem}-{index}) "
        "calc(<alpha-value> * 100%), transparent)"
    )


def _alpha(stem: str, index: str) -> str:
    return f"var(--color-{stem}-{index})"


def transform_radix_color(family_name: str, number: int) -> str:
    """Transform one Radix color step to a Tailwind color value.

    Args:
        family_name: Family name, with an ``Alpha`` suffix for alpha steps.
        number: Step number (1-12).
    """
    stem, is_alpha = _split_family(family_name)
    if is_alpha:
        return _alpha(stem, f"a{number}")
    return _solid(stem, str(number))


def transform_radix_colors(family_name: str) -> dict[str, str]:
    """Transform all twelve steps of one family, keyed ``"1"`` .. ``"12"``."""
    stem, is_alpha = _split_family(family_name)
    return {
        str(n): _alpha(stem, f"a{n}") if is_alpha else _solid(stem, str(n)) for n in STEPS
    }


def transform_radix_colors_with_alpha(family_name: str) -> dict[str, str]:
    """Transform solid and alpha steps of one family, keyed ``"1"`` .. ``"a12"``.

    Raises:
        ValueError: The name already carries the ``Alpha`` suffix.
    """
    stem, is_alpha = _split_family(family_name)
    if is_alpha:
        raise ValueError(f"{family_name!r} already names an alpha family")
    colors = {str(n): _solid(stem, str(n)) for n in STEPS}
    colors.update({f"a{n}": _alpha(stem, f"a{n}") for n in STEPS})
    return colors


def build_preset(family_names: Iterable[str]) -> dict[str, Any]:
    """Build a Tailwind preset ``{"theme": {"extend": {"colors": ...}}}``."""
    colors: dict[str, dict[str, str]] = {}
    for family_name in family_names:
        stem, is_alpha = _split_family(family_name)
        if is_alpha:
            colors[family_name] = transform_radix_colors(family_name)
        else:
            colors[stem] = transform_radix_colors_with_alpha(family_name)
    return {"theme": {"extend": {"colors": colors}}}


def export_preset_file(family_names: Iterable[str], output_path: Path) -> Path:
    """Build a preset and write it as JSON.

    Returns:
        Path to the written file.
    """
    preset = build_preset(family_names)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(preset, indent=2) + "\n", encoding="utf-8")
    return output_path
