"""
Core generation pipeline.

- oklch: color literal conversion
- sorting: deterministic variable ordering
- scope_parser: light/dark scope scanning of source stylesheets
- emitter: combined per-family stylesheet assembly
- discovery / generator: source grouping and the parallel rebuild
"""

from .config import GeneratorConfig, load_config
from .emitter import build_family_css, write_family_css
from .generator import GenerationReport, generate, write_manifest
from .oklch import OklchColor, convert_literal, extract_p3_channels
from .scope_parser import parse_family_sources, parse_source_text
from .sorting import compare_var_names, sort_var_names

__all__ = [
    "GeneratorConfig",
    "load_config",
    "build_family_css",
    "write_family_css",
    "GenerationReport",
    "generate",
    "write_manifest",
    "OklchColor",
    "convert_literal",
    "extract_p3_channels",
    "parse_family_sources",
    "parse_source_text",
    "compare_var_names",
    "sort_var_names",
]
