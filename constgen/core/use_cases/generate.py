"""
Generate use case — extract, render and write constants per domain.

Ties together settings loading, the project data provider, the
extractors, the C# generator and the file writer. Each domain runs to
completion (or fails) on its own; ``generate_all`` records a failed
domain in its report and moves on to the next one.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from constgen.adapters.base import ProjectDataProvider
from constgen.adapters.mock import StaticDataProvider
from constgen.adapters.unity.project import UnityProjectProvider
from constgen.core.config.loader import ConfigError, find_config_file, load_settings
from constgen.core.errors import GenerationError
from constgen.core.models.settings import DOMAIN_LABELS, DOMAINS, GeneratorSettings
from constgen.core.persistence.file_writer import write_generated_file
from constgen.core.services.extractors import extract
from constgen.core.services.generators.csharp import generate_constants_file

logger = logging.getLogger(__name__)


@dataclass
class DomainReport:
    """Outcome of generating one domain."""

    domain: str
    path: str = ""
    constants: int = 0
    groups: int = 0
    written: bool = False
    content: str | None = None
    error: str | None = None
    error_type: str | None = None
    duration_ms: int = 0

    @property
    def label(self) -> str:
        return DOMAIN_LABELS.get(self.domain, self.domain)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        result: dict = {
            "domain": self.domain,
            "ok": self.ok,
            "path": self.path,
            "constants": self.constants,
            "groups": self.groups,
            "written": self.written,
            "duration_ms": self.duration_ms,
        }
        if self.error:
            result["error"] = self.error
            result["error_type"] = self.error_type
        return result


@dataclass
class GenerateReport:
    """Outcome of a (possibly batched) generation run."""

    domains: list[DomainReport] = field(default_factory=list)
    project_root: Path | None = None
    provider: str = ""
    dry_run: bool = False
    error: str | None = None

    @property
    def total(self) -> int:
        return len(self.domains)

    @property
    def succeeded(self) -> int:
        return sum(1 for d in self.domains if d.ok)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def status(self) -> str:
        """``ok``, ``partial`` or ``failed``."""
        if self.error or (self.total and self.succeeded == 0):
            return "failed"
        if self.failed:
            return "partial"
        return "ok"

    def to_dict(self) -> dict:
        if self.error:
            return {"status": self.status, "error": self.error}
        return {
            "status": self.status,
            "project_root": str(self.project_root) if self.project_root else None,
            "provider": self.provider,
            "dry_run": self.dry_run,
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "domains": [d.to_dict() for d in self.domains],
        }


def generate_domain(
    domain: str,
    settings: GeneratorSettings,
    provider: ProjectDataProvider,
    project_root: Path,
    dry_run: bool = False,
) -> DomainReport:
    """Generate one domain's constants file.

    Any ``GenerationError`` is captured in the report; the file on disk
    is only touched once extraction and rendering have both succeeded.

    Args:
        domain: One of ``DOMAINS``.
        settings: Output settings.
        provider: Source of raw project data.
        project_root: Root the output path is relative to.
        dry_run: Render only; keep the content in the report.

    Raises:
        ValueError: For an unknown domain.
    """
    if domain not in DOMAINS:
        raise ValueError(f"Unknown domain '{domain}'. Valid: {', '.join(DOMAINS)}")

    report = DomainReport(domain=domain, path=settings.output_path(domain))
    start = time.monotonic()

    try:
        result = extract(domain, provider, settings)
        report.constants = result.constant_count
        report.groups = result.group_count

        generated = generate_constants_file(result, settings)

        if dry_run:
            report.content = generated.content
        else:
            write_generated_file(project_root, generated)
            report.written = True
    except GenerationError as e:
        logger.error("%s generation failed: %s", DOMAIN_LABELS[domain], e)
        report.error = str(e)
        report.error_type = type(e).__name__

    report.duration_ms = int((time.monotonic() - start) * 1000)
    return report


def preview_domain(
    domain: str,
    settings: GeneratorSettings,
    provider: ProjectDataProvider,
    project_root: Path,
) -> DomainReport:
    """Render one domain without touching the file system."""
    return generate_domain(domain, settings, provider, project_root, dry_run=True)


def generate_all(
    settings: GeneratorSettings,
    provider: ProjectDataProvider,
    project_root: Path,
    domains: list[str] | None = None,
    dry_run: bool = False,
) -> GenerateReport:
    """Generate several domains in the fixed order, collecting failures.

    Args:
        domains: Subset to run (default: all). Always run in ``DOMAINS`` order.
    """
    selected = domains or list(DOMAINS)
    unknown = [d for d in selected if d not in DOMAINS]
    if unknown:
        raise ValueError(f"Unknown domain(s): {', '.join(unknown)}")

    report = GenerateReport(project_root=project_root, provider=provider.name, dry_run=dry_run)
    for domain in DOMAINS:
        if domain in selected:
            report.domains.append(
                generate_domain(domain, settings, provider, project_root, dry_run=dry_run)
            )

    logger.info(
        "Generation %s: %d/%d domain(s) succeeded", report.status, report.succeeded, report.total
    )
    return report


def resolve_project_root(
    config_path: Path | None = None,
    project_dir: Path | None = None,
) -> Path:
    """Project root: explicit dir, else the config file's dir, else cwd."""
    if project_dir is not None:
        return project_dir.resolve()
    if config_path is None:
        config_path = find_config_file()
    return config_path.parent.resolve() if config_path else Path.cwd().resolve()


def build_provider(
    project_root: Path,
    settings: GeneratorSettings,
    fixture: Path | None = None,
) -> ProjectDataProvider:
    """Fixture provider when a fixture file is given, else the Unity project."""
    if fixture is not None:
        return StaticDataProvider.from_file(fixture)
    provider = UnityProjectProvider(project_root, assets_dir=settings.assets_dir)
    if not provider.is_unity_project():
        logger.warning("%s does not look like a Unity project", project_root)
    return provider


def run_generate(
    domains: list[str] | None = None,
    config_path: Path | None = None,
    project_dir: Path | None = None,
    fixture: Path | None = None,
    dry_run: bool = False,
) -> GenerateReport:
    """Full entry point used by the CLI: settings, provider, then generate.

    Configuration and fixture problems are reported in ``error`` rather
    than raised.
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        return GenerateReport(error=str(e))

    project_root = resolve_project_root(config_path, project_dir)

    try:
        provider = build_provider(project_root, settings, fixture)
    except GenerationError as e:
        return GenerateReport(project_root=project_root, error=str(e))

    logger.debug("Generating into %s using %r", project_root, provider)
    return generate_all(settings, provider, project_root, domains=domains, dry_run=dry_run)
