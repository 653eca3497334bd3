"""
Source stylesheet discovery.

Radix publishes one stylesheet per family and mode, e.g. ``red.css``,
``red-dark.css``, ``red-alpha.css`` and ``red-dark-alpha.css``, plus the
alpha-only ``black-alpha.css`` and ``white-alpha.css``. Files are grouped
by family so each group produces one combined output file.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .errors import NoSourceArtifacts
from .records import FamilyGroup

logger = logging.getLogger(__name__)

RADIX_PACKAGE_PATH = Path("node_modules") / "@radix-ui" / "colors"

_NAME_RE = re.compile(r"^([a-z]+)(?:-(?:dark|alpha))*\.css$")
_ACHROMATIC_ALPHA_NAME_RE = re.compile(r"^(black|white)-alpha\.css$")


def classify_source_file(filename: str) -> str | None:
    """Get the family a source filename belongs to.

    Returns:
        ``black-alpha``/``white-alpha`` for the achromatic alpha files, the
        leading name for other Radix files, or None for anything else.
    """
    if match := _ACHROMATIC_ALPHA_NAME_RE.match(filename):
        return f"{match.group(1)}-alpha"
    if match := _NAME_RE.match(filename):
        return match.group(1)
    return None


def _source_order(path: Path) -> tuple[int, str]:
    # red.css, red-alpha.css, red-dark.css, red-dark-alpha.css
    return (path.stem.count("-"), path.name)


def group_source_files(paths: Iterable[Path]) -> list[FamilyGroup]:
    """Group source stylesheets by family, sorted by family name."""
    grouped: dict[str, list[Path]] = {}
    for path in paths:
        family = classify_source_file(path.name)
        if family is None:
            logger.debug("Ignoring unrecognised source file %s", path.name)
            continue
        grouped.setdefault(family, []).append(path)

    return [
        FamilyGroup(family=family, sources=tuple(sorted(grouped[family], key=_source_order)))
        for family in sorted(grouped)
    ]


def locate_source_dir(start: Path) -> Path:
    """Find the installed ``@radix-ui/colors`` package from ``start`` upwards.

    Raises:
        NoSourceArtifacts: No ``node_modules/@radix-ui/colors`` directory found.
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / RADIX_PACKAGE_PATH
        if candidate.is_dir():
            return candidate
    raise NoSourceArtifacts(
        f"Cannot find {RADIX_PACKAGE_PATH.as_posix()}. Install it with: npm install @radix-ui/colors",
        start,
    )


def discover_family_groups(source_dir: Path) -> list[FamilyGroup]:
    """List and group every usable stylesheet in a source directory.

    Raises:
        NoSourceArtifacts: The directory is missing or holds no Radix stylesheets.
    """
    if not source_dir.is_dir():
        raise NoSourceArtifacts("Source directory does not exist", source_dir)

    css_files = sorted(p for p in source_dir.iterdir() if p.is_file() and p.suffix == ".css")
    groups = group_source_files(css_files)
    if not groups:
        raise NoSourceArtifacts(
            "No Radix color stylesheets found. The package is probably broken after an update.",
            source_dir,
        )
    logger.info("Found %d color families in %s", len(groups), source_dir)
    return groups
