"""
Line-oriented scanner for Radix source stylesheets.

Radix ships each family as a handful of small stylesheets:

    :root, .light, .light-theme {
      --red-1: #fffcfc;
      ...
    }

    @supports (color: color(display-p3 1 1 1)) {
      @media (color-gamut: p3) {
        :root, .light, .light-theme {
          --red-1: color(display-p3 0.998 0.989 0.988);
          ...

Instead of a full CSS parser, a small state machine tracks which selector
scope (light or dark) the current line belongs to and how deeply nested it
is. Declarations outside a recognised scope, or lines that do not look
like ``--name: value;``, are ignored.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from .errors import SourceUnreadable
from .oklch import is_gamut_literal
from .records import (
    FamilyGroup,
    ParsedColorValue,
    ParsedTable,
    Slot,
    accepted_stems,
    split_source_name,
)

logger = logging.getLogger(__name__)

_LIGHT_OPEN_RE = re.compile(r"^(?::root|\.light|\.light-theme)\s*(?:,|\{|$)")
_DARK_OPEN_RE = re.compile(r"^(?:\.dark|\.dark-theme)\s*(?:,|\{|$)")
_DARK_MEDIA_RE = re.compile(r"^@media\b.*prefers-color-scheme:\s*dark")
_DECLARATION_RE = re.compile(r"^(--\w+(?:-\w+)*):\s*(.*);$")


class ScopeState(StrEnum):
    """Selector scope of the line being scanned."""

    UNKNOWN = "unknown"
    LIGHT = "light"
    DARK = "dark"


class ScopeTracker:
    """Tracks selector scope and brace depth across the lines of one file."""

    def __init__(self) -> None:
        self.state = ScopeState.UNKNOWN
        self.depth = 0
        # Selector seen, block brace not yet.
        self.pending = False

    def _opening_scope(self, line: str) -> ScopeState | None:
        if _LIGHT_OPEN_RE.match(line):
            return ScopeState.LIGHT
        if _DARK_OPEN_RE.match(line) or _DARK_MEDIA_RE.match(line):
            return ScopeState.DARK
        return None

    def reset(self) -> None:
        self.state = ScopeState.UNKNOWN
        self.depth = 0
        self.pending = False

    def feed(self, line: str) -> ScopeState | None:
        """Consume one trimmed line.

        Returns:
            The scope a declaration on this line belongs to, or None when the
            line is outside any recognised scope.
        """
        if self.state is ScopeState.UNKNOWN:
            scope = self._opening_scope(line)
            if scope is None:
                return None
            self.state = scope
            self.depth = 0
            self.pending = True

        delta = line.count("{") - line.count("}")
        if self.pending:
            if "{" not in line:
                return None
            self.pending = False
            # ":root { --x: 1; }" opens and closes on one line.
            self.depth = delta
        else:
            self.depth += delta

        if self.depth <= 0:
            self.reset()
            return None
        return self.state


def _slot_for(scope: ScopeState, value: str) -> Slot:
    gamut = is_gamut_literal(value)
    if scope is ScopeState.LIGHT:
        return Slot.LIGHT_P3 if gamut else Slot.LIGHT
    return Slot.DARK_P3 if gamut else Slot.DARK


def parse_source_text(text: str, family: str, table: ParsedTable | None = None) -> ParsedTable:
    """Collect a family's declarations from one stylesheet.

    Args:
        text: Full stylesheet text.
        family: Family group name (``red``, ``black-alpha``, ...).
        table: Table from earlier files of the same group. Slots already
            filled there are never overwritten.

    Returns:
        The updated table (the same object when one was passed in).
    """
    if table is None:
        table = {}
    stems = accepted_stems(family)
    tracker = ScopeTracker()

    for raw_line in text.splitlines():
        line = raw_line.strip()
        scope = tracker.feed(line)
        if scope is None or not line.startswith("--"):
            continue

        match = _DECLARATION_RE.match(line)
        if not match:
            continue
        name, value = match.group(1), match.group(2).strip()

        parts = split_source_name(name)
        if parts is None or parts[0] not in stems:
            continue

        record = table.setdefault(name, ParsedColorValue())
        record.assign(_slot_for(scope, value), value)

    return table


def parse_family_sources(group: FamilyGroup) -> ParsedTable:
    """Parse every source file of a family group into one table.

    Files are read in the group's order; the first value seen for a slot
    wins. Missing files contribute nothing.

    Raises:
        SourceUnreadable: A file exists but cannot be read or decoded.
    """
    table: ParsedTable = {}
    for path in group.sources:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Skipping missing source %s for %s", path, group.family)
            continue
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadable(f"Cannot read source stylesheet: {e}", path) from e
        if not text:
            continue
        parse_source_text(text, group.family, table)
    return table
