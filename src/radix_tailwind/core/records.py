"""
Data types shared by the parser, emitter and orchestrator.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

# Families that only ship alpha steps and have no dark companion.
ACHROMATIC_ALPHA_FAMILIES: frozenset[str] = frozenset({"black-alpha", "white-alpha"})

_SOURCE_VAR_RE = re.compile(r"^--(?P<stem>[a-z]+(?:-[a-z]+)*)-(?P<index>\d+|a\d+)$")


class Slot(StrEnum):
    """The four places a source value can land."""

    LIGHT = "light"
    LIGHT_P3 = "light_p3"
    DARK = "dark"
    DARK_P3 = "dark_p3"


@dataclass
class ParsedColorValue:
    """Raw light/dark values collected for one Radix variable (e.g. ``--blue-1``)."""

    light: str | None = None
    light_p3: str | None = None
    dark: str | None = None
    dark_p3: str | None = None

    def assign(self, slot: Slot, value: str) -> bool:
        """Fill a slot unless it already holds a value.

        Returns:
            True if the value was stored, False if an earlier one won.
        """
        if getattr(self, slot.value) is not None:
            return False
        setattr(self, slot.value, value)
        return True


# Variable name -> collected values, for one family group.
ParsedTable = dict[str, ParsedColorValue]


@dataclass(frozen=True)
class FamilyGroup:
    """A family base name and the source stylesheets that contribute to it."""

    family: str
    sources: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def is_achromatic_alpha(self) -> bool:
        return self.family in ACHROMATIC_ALPHA_FAMILIES

    @property
    def output_stem(self) -> str:
        """Stem used in generated names (``black-alpha`` -> ``black``)."""
        return output_stem(self.family)

    @property
    def output_filename(self) -> str:
        return f"{self.family}.css"


def output_stem(family: str) -> str:
    if family in ACHROMATIC_ALPHA_FAMILIES:
        return family.removesuffix("-alpha")
    return family


def accepted_stems(family: str) -> frozenset[str]:
    """Source stems whose variables belong to a family.

    ``black-alpha`` and ``white-alpha`` declare ``--black-a*`` and
    ``--white-a*``, so the bare achromatic stem is accepted as well.
    """
    if family in ACHROMATIC_ALPHA_FAMILIES:
        return frozenset({family, output_stem(family)})
    return frozenset({family})


def split_source_name(name: str) -> tuple[str, str] | None:
    """Split ``--red-a9`` into ``("red", "a9")``; None if the index is invalid."""
    match = _SOURCE_VAR_RE.match(name)
    if not match:
        return None
    return match.group("stem"), match.group("index")


@dataclass(frozen=True)
class VariableNames:
    """The three generated names for one color step."""

    base: str
    intermediate: str
    theme: str

    @classmethod
    def for_index(cls, stem: str, index: str) -> VariableNames:
        return cls(
            base=f"--radix-rgb-{stem}-{index}",
            intermediate=f"--radix-intermediate-{stem}-{index}",
            theme=f"--color-{stem}-{index}",
        )
