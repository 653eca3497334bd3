"""
Generator configuration.

Read from ``radix-tailwind.toml`` (top-level keys) or from the
``[tool.radix-tailwind]`` table of ``pyproject.toml`` in the project root.
Every key is optional:

    [tool.radix-tailwind]
    source_dir = "node_modules/@radix-ui/colors"
    output_dir = "dist"
    manifest_name = "radix-colors.css"
    import_template = "radix-colors-tailwind/dist/{file}"
    media_query_dark = false
    clean = true
    max_workers = 8
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

CONFIG_FILE = "radix-tailwind.toml"
PYPROJECT_FILE = "pyproject.toml"
PYPROJECT_TABLE = "radix-tailwind"


class GeneratorConfig(BaseModel):
    """Complete generator configuration."""

    model_config = ConfigDict(extra="forbid")

    source_dir: Path | None = None
    output_dir: Path = Path("dist")
    manifest_name: str = "radix-colors.css"
    import_template: str = "radix-colors-tailwind/dist/{file}"
    media_query_dark: bool = False
    clean: bool = True
    max_workers: int = Field(default=8, ge=1)

    @field_validator("manifest_name")
    @classmethod
    def _manifest_is_css(cls, value: str) -> str:
        if not value.endswith(".css") or "/" in value:
            raise ValueError("manifest_name must be a bare .css filename")
        return value

    @field_validator("import_template")
    @classmethod
    def _template_has_placeholder(cls, value: str) -> str:
        if "{file}" not in value:
            raise ValueError("import_template must contain '{file}'")
        return value

    def resolve_output_dir(self, project_root: Path) -> Path:
        """Get absolute output directory path."""
        if self.output_dir.is_absolute():
            return self.output_dir
        return project_root / self.output_dir

    def resolve_source_dir(self, project_root: Path) -> Path | None:
        """Get absolute source directory path, or None to search for it."""
        if self.source_dir is None or self.source_dir.is_absolute():
            return self.source_dir
        return project_root / self.source_dir


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", path) from e


def load_config(project_root: Path) -> GeneratorConfig:
    """
    Load generator configuration for a project.

    ``radix-tailwind.toml`` takes precedence over ``pyproject.toml``.

    Args:
        project_root: Project root directory

    Returns:
        GeneratorConfig with parsed values or defaults

    Raises:
        ConfigError: The file is not valid TOML or holds invalid values.
    """
    config_path = project_root / CONFIG_FILE
    if config_path.exists():
        data = _read_toml(config_path)
    else:
        config_path = project_root / PYPROJECT_FILE
        if not config_path.exists():
            return GeneratorConfig()
        data = _read_toml(config_path).get("tool", {}).get(PYPROJECT_TABLE, {})

    if not data:
        return GeneratorConfig()

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", config_path) from e
