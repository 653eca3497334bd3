"""Tests for the light/dark scope scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from radix_tailwind.core.errors import SourceUnreadable
from radix_tailwind.core.records import FamilyGroup, ParsedColorValue
from radix_tailwind.core.scope_parser import (
    ScopeState,
    ScopeTracker,
    parse_family_sources,
    parse_source_text,
)


class TestScopeTracker:
    def test_starts_unknown(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed("--red-1: #fff;") is None
        assert tracker.state is ScopeState.UNKNOWN

    def test_light_selector_group_with_brace(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(":root, .light, .light-theme {") is ScopeState.LIGHT
        assert tracker.depth == 1
        assert tracker.feed("--red-1: #fff;") is ScopeState.LIGHT
        assert tracker.feed("}") is None
        assert tracker.state is ScopeState.UNKNOWN

    def test_standalone_root(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(":root {") is ScopeState.LIGHT

    def test_dark_class_group(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(".dark, .dark-theme {") is ScopeState.DARK

    def test_selector_list_across_lines(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(":root,") is None
        assert tracker.feed(".light,") is None
        assert tracker.feed(".light-theme {") is ScopeState.LIGHT
        assert tracker.feed("--red-1: #fff;") is ScopeState.LIGHT

    def test_brace_on_next_line(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(".dark") is None
        assert tracker.feed("{") is ScopeState.DARK

    def test_dark_media_query_keeps_nested_root_dark(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed("@media (prefers-color-scheme: dark) {") is ScopeState.DARK
        assert tracker.feed(":root {") is ScopeState.DARK
        assert tracker.depth == 2
        assert tracker.feed("--red-1: #111;") is ScopeState.DARK
        assert tracker.feed("}") is ScopeState.DARK
        assert tracker.feed("}") is None
        assert tracker.state is ScopeState.UNKNOWN

    def test_unrelated_at_rules_are_ignored(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed("@supports (color: color(display-p3 1 1 1)) {") is None
        assert tracker.feed("@media (color-gamut: p3) {") is None
        assert tracker.feed(":root, .light, .light-theme {") is ScopeState.LIGHT
        assert tracker.feed("}") is None
        assert tracker.feed("}") is None
        assert tracker.feed("}") is None
        assert tracker.state is ScopeState.UNKNOWN

    def test_unbalanced_close_resets(self) -> None:
        tracker = ScopeTracker()
        tracker.feed(".dark {")
        assert tracker.feed("}}") is None
        assert tracker.state is ScopeState.UNKNOWN
        assert tracker.depth == 0

    def test_single_line_block_closes_scope(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(":root { --red-1: #fff; }") is None
        assert tracker.state is ScopeState.UNKNOWN
        assert tracker.feed(".dark, .dark-theme {") is ScopeState.DARK

    def test_empty_block_closes_scope(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(".dark {}") is None
        assert tracker.feed(":root {") is ScopeState.LIGHT

    def test_lookalike_selectors_do_not_open(self) -> None:
        tracker = ScopeTracker()
        assert tracker.feed(".lightbox {") is None
        assert tracker.feed(".darker, .dark-mode {") is None


LIGHT_AND_P3 = """\
:root, .light, .light-theme {
  --red-1: #fffcfc;
  --red-9: #FF0000;
}

@supports (color: color(display-p3 1 1 1)) {
  @media (color-gamut: p3) {
    :root, .light, .light-theme {
      --red-9: color(display-p3 0.83 0.1 0.1);
    }
  }
}
"""


class TestParseSourceText:
    def test_light_and_gamut_slots(self) -> None:
        table = parse_source_text(LIGHT_AND_P3, "red")
        assert table["--red-9"] == ParsedColorValue(
            light="#FF0000", light_p3="color(display-p3 0.83 0.1 0.1)"
        )
        assert table["--red-1"].light == "#fffcfc"
        assert table["--red-1"].light_p3 is None

    def test_dark_slots(self) -> None:
        text = ".dark, .dark-theme {\n  --red-9: #880000;\n}\n"
        table = parse_source_text(text, "red")
        assert table["--red-9"].dark == "#880000"
        assert table["--red-9"].light is None

    def test_filters_other_families(self) -> None:
        text = ":root {\n  --red-9: #FF0000;\n  --blue-9: #0000FF;\n  --redish-9: #FF0001;\n}\n"
        table = parse_source_text(text, "red")
        assert list(table) == ["--red-9"]

    def test_invalid_index_is_excluded(self) -> None:
        text = ":root {\n  --red-9: #FF0000;\n  --red-b9: #FF0000;\n  --red-contrast: #fff;\n}\n"
        table = parse_source_text(text, "red")
        assert list(table) == ["--red-9"]

    def test_achromatic_alpha_family_accepts_bare_stem(self) -> None:
        text = ":root {\n  --black-a1: rgba(0, 0, 0, 0.05);\n}\n"
        table = parse_source_text(text, "black-alpha")
        assert table["--black-a1"].light == "rgba(0, 0, 0, 0.05)"

    def test_declarations_outside_scope_are_ignored(self) -> None:
        text = "--red-1: #fff;\n.other {\n  --red-2: #eee;\n}\n"
        assert parse_source_text(text, "red") == {}

    def test_malformed_lines_are_skipped(self) -> None:
        text = ":root {\n  --red-1 #fff\n  --red-2: #eee\n  --red-3: #ddd;\n}\n"
        table = parse_source_text(text, "red")
        assert list(table) == ["--red-3"]

    def test_first_definition_wins(self) -> None:
        text = ":root {\n  --red-9: #FF0000;\n}\n:root {\n  --red-9: #00FF00;\n}\n"
        table = parse_source_text(text, "red")
        assert table["--red-9"].light == "#FF0000"

    def test_existing_table_is_extended_not_overwritten(self) -> None:
        table = {"--red-9": ParsedColorValue(light="#111111")}
        result = parse_source_text(":root {\n  --red-9: #FF0000;\n  --red-1: #fff;\n}\n", "red", table)
        assert result is table
        assert table["--red-9"].light == "#111111"
        assert table["--red-1"].light == "#fff"

    def test_dark_block_after_single_line_light_block(self) -> None:
        text = ":root { --red-1: #fff; }\n.dark, .dark-theme {\n  --red-1: #000;\n}\n"
        table = parse_source_text(text, "red")
        assert table["--red-1"].dark == "#000"
        assert table["--red-1"].light is None

    def test_media_query_dark(self) -> None:
        text = "@media (prefers-color-scheme: dark) {\n  :root {\n    --red-9: #880000;\n  }\n}\n"
        table = parse_source_text(text, "red")
        assert table["--red-9"].dark == "#880000"


class TestParseFamilySources:
    def test_merges_files_first_wins(self, tmp_path: Path) -> None:
        first = tmp_path / "red.css"
        second = tmp_path / "red-dark.css"
        first.write_text(":root {\n  --red-9: #FF0000;\n}\n")
        second.write_text(
            ":root {\n  --red-9: #00FF00;\n}\n.dark, .dark-theme {\n  --red-9: #880000;\n}\n"
        )
        table = parse_family_sources(FamilyGroup("red", (first, second)))
        assert table["--red-9"].light == "#FF0000"
        assert table["--red-9"].dark == "#880000"

    def test_missing_file_is_tolerated(self, tmp_path: Path) -> None:
        light = tmp_path / "red.css"
        light.write_text(":root {\n  --red-9: #FF0000;\n}\n")
        table = parse_family_sources(FamilyGroup("red", (light, tmp_path / "red-dark.css")))
        assert table["--red-9"].light == "#FF0000"
        assert table["--red-9"].dark is None

    def test_undecodable_file_raises(self, tmp_path: Path) -> None:
        bad = tmp_path / "red.css"
        bad.write_bytes(b"\xff\xfe\xfa\x00invalid")
        with pytest.raises(SourceUnreadable) as exc_info:
            parse_family_sources(FamilyGroup("red", (bad,)))
        assert exc_info.value.path == bad

    def test_directory_in_place_of_file_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "red.css"
        blocker.mkdir()
        with pytest.raises(SourceUnreadable):
            parse_family_sources(FamilyGroup("red", (blocker,)))

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX non-root")
    def test_unreadable_file_raises(self, tmp_path: Path) -> None:
        locked = tmp_path / "red.css"
        locked.write_text(":root {}\n")
        locked.chmod(0o000)
        try:
            with pytest.raises(SourceUnreadable):
                parse_family_sources(FamilyGroup("red", (locked,)))
        finally:
            locked.chmod(0o644)

    def test_fixture_red_family(self, radix_fixtures_dir: Path) -> None:
        sources = tuple(
            radix_fixtures_dir / name
            for name in ("red.css", "red-alpha.css", "red-dark.css", "red-dark-alpha.css")
        )
        table = parse_family_sources(FamilyGroup("red", sources))
        assert table["--red-9"] == ParsedColorValue(
            light="#FF0000",
            light_p3="color(display-p3 0.83 0.1 0.1)",
            dark="#880000",
            dark_p3="color(display-p3 0.5 0 0)",
        )
        assert table["--red-a1"].light_p3 == "color(display-p3 0.675 0.024 0.024 / 0.012)"
        assert table["--red-a9"].dark == "#fe4e54e4"
