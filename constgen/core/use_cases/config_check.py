"""
Config check use case — validate constgen.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath, PureWindowsPath

from constgen.core.config.loader import ConfigError, find_config_file, load_settings
from constgen.core.errors import EmptyIdentifier
from constgen.core.models.settings import DOMAINS, GeneratorSettings
from constgen.core.services.naming import sanitize


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: GeneratorSettings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "outputs": (
                {d: self.settings.output_path(d) for d in DOMAINS} if self.settings else {}
            ),
        }


def _is_absolute(path: str) -> bool:
    return PurePosixPath(path).is_absolute() or PureWindowsPath(path).is_absolute()


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate generator configuration and report issues.

    A missing config file is valid (defaults apply) but produces a warning.

    Args:
        config_path: Optional explicit path to constgen.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            result.warnings.append("No constgen.yml found. Default settings apply.")

    result.config_path = config_path

    try:
        settings = load_settings(config_path)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    output = settings.output

    # Output location must stay inside the project
    if _is_absolute(settings.assets_dir):
        result.errors.append(f"assets_dir must be relative: {settings.assets_dir}")
    if _is_absolute(output.base_dir):
        result.errors.append(f"output.base_dir must be relative: {output.base_dir}")
    if ".." in PurePosixPath(output.base_dir.replace("\\", "/")).parts:
        result.warnings.append(f"output.base_dir leaves the assets folder: {output.base_dir}")

    # Two domains writing the same file would overwrite each other
    seen: dict[str, str] = {}
    for domain in DOMAINS:
        filename = output.filenames[domain]
        if filename in seen:
            result.errors.append(
                f"Domains '{seen[filename]}' and '{domain}' share the filename {filename}"
            )
        else:
            seen[filename] = domain
        if not filename.endswith(".cs"):
            result.warnings.append(f"Filename for '{domain}' is not a .cs file: {filename}")

    if output.namespace:
        for part in output.namespace.split("."):
            try:
                if sanitize(part) != part:
                    result.warnings.append(
                        f"Namespace segment '{part}' will be emitted as '{sanitize(part)}'"
                    )
            except EmptyIdentifier:
                result.errors.append(f"Invalid namespace: {output.namespace!r}")
                break

    if not output.indent:
        result.warnings.append("output.indent is empty. Generated code will not be indented.")
    elif output.indent.strip():
        result.warnings.append(f"output.indent contains non-whitespace: {output.indent!r}")

    result.valid = len(result.errors) == 0
    return result
