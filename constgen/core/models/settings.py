"""
Generator settings — loaded from constgen.yml.

Every value has a default, so a project without a config file
generates into ``Assets/Scripts/Constants`` with no namespace and
4-space indentation.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Literal

from pydantic import BaseModel, Field, field_validator

# Fixed generation order for "generate all"
DOMAINS: tuple[str, ...] = (
    "scenes",
    "tags",
    "layers",
    "sorting_layers",
    "input_axes",
    "mixer_parameters",
    "animator_parameters",
)

# Top-level class emitted for each domain
CLASS_NAMES: dict[str, str] = {
    "scenes": "Scenes",
    "tags": "Tags",
    "layers": "Layers",
    "sorting_layers": "SortingLayers",
    "input_axes": "InputAxes",
    "mixer_parameters": "AudioMixerParameters",
    "animator_parameters": "AnimatorParameters",
}

DOMAIN_LABELS: dict[str, str] = {
    "scenes": "Scenes",
    "tags": "Tags",
    "layers": "Layers",
    "sorting_layers": "Sorting Layers",
    "input_axes": "Input Axes",
    "mixer_parameters": "Audio Mixer Parameters",
    "animator_parameters": "Animator Parameters",
}


def _default_filenames() -> dict[str, str]:
    return {domain: f"{name}.cs" for domain, name in CLASS_NAMES.items()}


class OutputSettings(BaseModel):
    """Where and how generated files are written."""

    base_dir: str = "Scripts/Constants"
    namespace: str = ""
    indent: str = "    "
    filenames: dict[str, str] = Field(default_factory=_default_filenames)

    @field_validator("filenames")
    @classmethod
    def _merge_defaults(cls, value: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(value) - set(DOMAINS))
        if unknown:
            raise ValueError(f"Unknown domain(s) in filenames: {', '.join(unknown)}")
        merged = _default_filenames()
        merged.update(value)
        return merged


class GeneratorSettings(BaseModel):
    """Root configuration for a generation run."""

    assets_dir: str = "Assets"
    output: OutputSettings = Field(default_factory=OutputSettings)
    hash_algorithm: Literal["crc32", "fnv1"] = "crc32"

    def filename_for(self, domain: str) -> str:
        return self.output.filenames[domain]

    def output_path(self, domain: str) -> str:
        """Output path for a domain, relative to the project root."""
        path = PurePosixPath(self.assets_dir) / self.output.base_dir / self.filename_for(domain)
        return path.as_posix()
