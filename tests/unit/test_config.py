"""Tests for generator configuration loading."""

from pathlib import Path

import pytest

from radix_tailwind.core.config import GeneratorConfig, load_config
from radix_tailwind.core.errors import ConfigError


class TestLoadConfig:
    def test_defaults_without_files(self, tmp_path):
        config = load_config(tmp_path)
        assert config == GeneratorConfig()
        assert config.output_dir == Path("dist")
        assert config.source_dir is None
        assert config.media_query_dark is False
        assert config.clean is True
        assert config.max_workers == 8

    def test_pyproject_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "site"\n\n'
            '[tool.radix-tailwind]\noutput_dir = "build/colors"\nmedia_query_dark = true\n'
        )
        config = load_config(tmp_path)
        assert config.output_dir == Path("build/colors")
        assert config.media_query_dark is True

    def test_pyproject_without_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "site"\n')
        assert load_config(tmp_path) == GeneratorConfig()

    def test_dedicated_file_takes_precedence(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[tool.radix-tailwind]\noutput_dir = "a"\n')
        (tmp_path / "radix-tailwind.toml").write_text('output_dir = "b"\nmax_workers = 2\n')
        config = load_config(tmp_path)
        assert config.output_dir == Path("b")
        assert config.max_workers == 2

    def test_invalid_toml(self, tmp_path):
        (tmp_path / "radix-tailwind.toml").write_text("output_dir = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_unknown_key(self, tmp_path):
        (tmp_path / "radix-tailwind.toml").write_text('outptu_dir = "dist"\n')
        with pytest.raises(ConfigError, match="Invalid configuration") as exc_info:
            load_config(tmp_path)
        assert exc_info.value.path == tmp_path / "radix-tailwind.toml"

    @pytest.mark.parametrize(
        "body",
        [
            "max_workers = 0\n",
            'manifest_name = "colors.scss"\n',
            'manifest_name = "nested/colors.css"\n',
            'import_template = "dist/colors.css"\n',
        ],
    )
    def test_invalid_values(self, tmp_path, body):
        (tmp_path / "radix-tailwind.toml").write_text(body)
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestResolvePaths:
    def test_relative_output(self, tmp_path):
        assert GeneratorConfig().resolve_output_dir(tmp_path) == tmp_path / "dist"

    def test_absolute_output(self, tmp_path):
        target = tmp_path / "elsewhere"
        config = GeneratorConfig(output_dir=target)
        assert config.resolve_output_dir(Path("/unused")) == target

    def test_source_unset(self, tmp_path):
        assert GeneratorConfig().resolve_source_dir(tmp_path) is None

    def test_relative_source(self, tmp_path):
        config = GeneratorConfig(source_dir=Path("vendor/colors"))
        assert config.resolve_source_dir(tmp_path) == tmp_path / "vendor" / "colors"
