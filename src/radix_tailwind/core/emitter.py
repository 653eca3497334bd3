"""
Combined CSS emitter for one Radix color family.

Each color step is exposed through three layers of custom properties:

    --radix-rgb-red-9: 0.628 0.258 29.234;                          base
    --radix-intermediate-red-9: oklch(var(--radix-rgb-red-9));      intermediate
    --color-red-9: var(--radix-intermediate-red-9);                 theme alias

On wide-gamut displays the base value is replaced by display-p3 channels
and the intermediate swaps its ``oklch()`` wrapper for ``color(display-p3)``,
so the theme alias never changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConversionError
from .header import header_comment
from .oklch import convert_literal, extract_p3_channels
from .records import (
    ACHROMATIC_ALPHA_FAMILIES,
    FamilyGroup,
    ParsedTable,
    VariableNames,
    output_stem,
    split_source_name,
)
from .scope_parser import parse_family_sources
from .sorting import sort_var_names

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"
LIGHT_SELECTORS = ":root,\n.light,\n.light-theme"
DARK_SELECTORS = ".dark,\n.dark-theme"
DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"
THEME_AT_RULE = "@theme inline"
GAMUT_SUPPORTS = "@supports (color: color(display-p3 1 1 1))"
GAMUT_MEDIA = "@media (color-gamut: p3)"


@dataclass
class FamilyBlocks:
    """Declarations per output block, keyed by generated variable name."""

    light: dict[str, str] = field(default_factory=dict)
    intermediate: dict[str, str] = field(default_factory=dict)
    dark: dict[str, str] = field(default_factory=dict)
    theme: dict[str, str] = field(default_factory=dict)
    intermediate_p3: dict[str, str] = field(default_factory=dict)
    light_p3: dict[str, str] = field(default_factory=dict)
    dark_p3: dict[str, str] = field(default_factory=dict)

    @property
    def has_gamut_overrides(self) -> bool:
        return bool(self.intermediate_p3 or self.light_p3 or self.dark_p3)


@dataclass
class FamilyResult:
    """Result from generating one family stylesheet."""

    family: str
    output_path: Path | None = None
    variable_count: int = 0
    warnings: list[str] = field(default_factory=list)

    @property
    def written(self) -> bool:
        return self.output_path is not None


def _convert(name: str, literal: str, mode: str, warnings: list[str]) -> str | None:
    try:
        return convert_literal(literal).channels
    except ConversionError as e:
        logger.warning("Error converting %s value for %s: %s", mode, name, e)
        warnings.append(f"Error converting {mode} value for {name}: {e}")
        return None


def _extract_p3(
    name: str, literal: str, require_alpha: bool, mode: str, warnings: list[str]
) -> str | None:
    try:
        return extract_p3_channels(literal, require_alpha)
    except ConversionError as e:
        logger.warning("Error extracting %s P3 value for %s: %s", mode, name, e)
        warnings.append(f"Error extracting {mode} P3 value for {name}: {e}")
        return None


def collect_blocks(
    family: str, table: ParsedTable, warnings: list[str] | None = None
) -> FamilyBlocks:
    """Convert a family's parsed table into per-block declarations."""
    if warnings is None:
        warnings = []
    stem = output_stem(family)
    blocks = FamilyBlocks()

    for source_name in sort_var_names(table):
        parts = split_source_name(source_name)
        if parts is None:
            continue
        index = parts[1]
        names = VariableNames.for_index(stem, index)
        record = table[source_name]

        blocks.theme.setdefault(names.theme, f"var({names.intermediate})")

        for literal, target, mode in (
            (record.light, blocks.light, "light"),
            (record.dark, blocks.dark, "dark"),
        ):
            if not literal:
                continue
            channels = _convert(source_name, literal, mode, warnings)
            if channels is None:
                continue
            target.setdefault(names.base, channels)
            blocks.intermediate.setdefault(names.intermediate, f"oklch(var({names.base}))")

        for literal, target, mode in (
            (record.light_p3, blocks.light_p3, "light"),
            (record.dark_p3, blocks.dark_p3, "dark"),
        ):
            if not literal:
                continue
            channels = _extract_p3(source_name, literal, index.startswith("a"), mode, warnings)
            if channels is None:
                continue
            target.setdefault(names.base, channels)
            blocks.intermediate_p3.setdefault(
                names.intermediate, f"color(display-p3 var({names.base}))"
            )

    return blocks


def render_block(selectors: str, declarations: dict[str, str], indent: int = 0) -> str | None:
    """Render one selector block, or None when it has no declarations."""
    if not declarations:
        return None
    pad = "  " * indent
    lines = [f"{pad}{selector}" for selector in selectors.split("\n")]
    lines[-1] += " {"
    for name in sort_var_names(declarations):
        lines.append(f"{pad}  {name}: {declarations[name]};")
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _wrap(at_rule: str, inner: list[str], indent: int = 0) -> str:
    pad = "  " * indent
    return f"{pad}{at_rule} {{\n" + "\n\n".join(inner) + f"\n{pad}}}"


def render_document(
    family: str,
    blocks: FamilyBlocks,
    *,
    version: str,
    media_query_dark: bool = False,
) -> str:
    """Assemble the final stylesheet text from collected blocks."""
    light_selectors = ROOT_SELECTOR if family in ACHROMATIC_ALPHA_FAMILIES else LIGHT_SELECTORS
    sections: list[str | None] = [
        header_comment(version),
        render_block(light_selectors, blocks.light),
        render_block(ROOT_SELECTOR, blocks.intermediate),
        render_block(DARK_SELECTORS, blocks.dark),
    ]

    if media_query_dark and blocks.dark:
        inner = render_block(ROOT_SELECTOR, blocks.dark, indent=1)
        sections.append(_wrap(DARK_MEDIA_QUERY, [inner] if inner else []))

    sections.append(render_block(THEME_AT_RULE, blocks.theme))

    if blocks.has_gamut_overrides:
        overrides = [
            block
            for block in (
                render_block(ROOT_SELECTOR, blocks.intermediate_p3, indent=2),
                render_block(light_selectors, blocks.light_p3, indent=2),
                render_block(DARK_SELECTORS, blocks.dark_p3, indent=2),
            )
            if block
        ]
        sections.append(_wrap(GAMUT_SUPPORTS, [_wrap(GAMUT_MEDIA, overrides, indent=1)]))

    return "\n\n".join(s for s in sections if s).strip() + "\n"


def build_family_css(
    family: str,
    table: ParsedTable,
    *,
    version: str,
    media_query_dark: bool = False,
    warnings: list[str] | None = None,
) -> str:
    """Build the combined stylesheet for one family from its parsed table.

    Args:
        family: Family group name (``red``, ``black-alpha``, ...).
        table: Parsed source values keyed by source variable name.
        version: Package version written into the header comment.
        media_query_dark: Also emit the dark values inside a
            ``prefers-color-scheme: dark`` media query.
        warnings: Optional list that receives one message per skipped value.

    Returns:
        Stylesheet text ending in exactly one newline.
    """
    blocks = collect_blocks(family, table, warnings)
    return render_document(family, blocks, version=version, media_query_dark=media_query_dark)


def write_family_css(
    group: FamilyGroup,
    output_dir: Path,
    *,
    version: str,
    media_query_dark: bool = False,
) -> FamilyResult:
    """Parse a family group's sources and write ``<output_dir>/<family>.css``.

    A family without any matching variables writes nothing.

    Raises:
        SourceUnreadable: A source file exists but cannot be read.
    """
    result = FamilyResult(family=group.family)
    table = parse_family_sources(group)
    if not table:
        logger.warning(
            "No %s variables found in %d source file(s)", group.family, len(group.sources)
        )
        result.warnings.append(
            f"No {group.family} variables found in {len(group.sources)} source file(s)"
        )
        return result

    content = build_family_css(
        group.family,
        table,
        version=version,
        media_query_dark=media_query_dark,
        warnings=result.warnings,
    )
    output_path = output_dir / group.output_filename
    output_path.write_text(content, encoding="utf-8")

    result.output_path = output_path
    result.variable_count = len(table)
    logger.info("Generated %s (%d variables)", output_path.name, len(table))
    return result
