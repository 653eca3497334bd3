"""
Generation orchestrator.

Discovers the Radix source stylesheets, writes one combined stylesheet per
family in parallel, then writes the aggregate manifest that imports them.

Usage::

    from radix_tailwind.core.config import load_config
    from radix_tailwind.core.generator import generate

    report = generate(load_config(Path.cwd()), project_root=Path.cwd())
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from .config import GeneratorConfig
from .discovery import discover_family_groups, locate_source_dir
from .emitter import FamilyResult, write_family_css
from .errors import ConfigError
from .header import header_comment
from .records import FamilyGroup

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of one full generation run."""

    source_dir: Path
    output_dir: Path
    manifest_path: Path | None = None
    families: list[FamilyResult] = field(default_factory=list)

    @property
    def files_written(self) -> list[Path]:
        return sorted(r.output_path for r in self.families if r.output_path is not None)

    @property
    def warnings(self) -> list[str]:
        return [w for r in self.families for w in r.warnings]


def prepare_output_dir(output_dir: Path, *, clean: bool) -> None:
    """Create the output directory, removing stale stylesheets when ``clean``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    if not clean:
        return
    for stale in output_dir.glob("*.css"):
        stale.unlink()


def write_manifest(
    output_dir: Path,
    *,
    version: str,
    manifest_name: str = "radix-colors.css",
    import_template: str = "radix-colors-tailwind/dist/{file}",
) -> Path:
    """Write the stylesheet that imports every generated family file.

    The output directory is listed after generation, so the manifest covers
    exactly what is on disk, sorted by filename.
    """
    generated = sorted(
        p.name for p in output_dir.glob("*.css") if p.is_file() and p.name != manifest_name
    )
    lines = [header_comment(version), ""]
    lines.extend(f'@import "{import_template.format(file=name)}";' for name in generated)

    manifest_path = output_dir / manifest_name
    manifest_path.write_text("\n".join(lines).strip() + "\n", encoding="utf-8")
    logger.info("Wrote manifest %s (%d imports)", manifest_path.name, len(generated))
    return manifest_path


def _generate_families(
    groups: list[FamilyGroup],
    output_dir: Path,
    *,
    version: str,
    media_query_dark: bool,
    max_workers: int,
) -> list[FamilyResult]:
    """Write every family file on a thread pool; the first failure propagates."""
    results: list[FamilyResult] = []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(groups))) as executor:
        futures = {
            executor.submit(
                write_family_css,
                group,
                output_dir,
                version=version,
                media_query_dark=media_query_dark,
            ): group
            for group in groups
        }
        for future in as_completed(futures):
            results.append(future.result())
    return sorted(results, key=lambda r: r.family)


def generate(
    config: GeneratorConfig,
    *,
    project_root: Path,
    version: str | None = None,
) -> GenerationReport:
    """Run a full rebuild of every family stylesheet and the manifest.

    Args:
        config: Generator configuration.
        project_root: Directory relative paths in ``config`` resolve against.
        version: Version for header comments. Defaults to the package version.

    Returns:
        GenerationReport describing what was written.

    Raises:
        NoSourceArtifacts: No source directory or no usable stylesheets.
            Raised before anything is written.
        SourceUnreadable: A source stylesheet exists but cannot be read.
        ConfigError: The output directory is the source directory.
    """
    if version is None:
        from radix_tailwind._version import get_version

        version = get_version()

    source_dir = config.resolve_source_dir(project_root) or locate_source_dir(project_root)
    groups = discover_family_groups(source_dir)

    output_dir = config.resolve_output_dir(project_root)
    if output_dir.resolve() == source_dir.resolve():
        raise ConfigError("Output directory must differ from the source directory", output_dir)
    prepare_output_dir(output_dir, clean=config.clean)

    report = GenerationReport(source_dir=source_dir, output_dir=output_dir)
    report.families = _generate_families(
        groups,
        output_dir,
        version=version,
        media_query_dark=config.media_query_dark,
        max_workers=config.max_workers,
    )
    report.manifest_path = write_manifest(
        output_dir,
        version=version,
        manifest_name=config.manifest_name,
        import_template=config.import_template,
    )
    logger.info("Generated Radix color files in %s", output_dir)
    return report
