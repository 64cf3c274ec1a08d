"""
Extractors — turn one domain's raw provider data into constants.

One function per domain, each ``(provider, settings) -> ExtractionResult``.
Raw names are sanitized here; tags, axes and asset parameters are
de-duplicated by raw name first (first occurrence wins). Errors from
the provider and the sanitizer propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import PurePosixPath, PureWindowsPath

from constgen.adapters.base import ProjectDataProvider
from constgen.core.models.constants import ConstantEntry, ExtractionResult, ScopeGroup
from constgen.core.models.settings import CLASS_NAMES, GeneratorSettings
from constgen.core.models.sources import LAYER_COUNT
from constgen.core.services.hashing import string_to_hash
from constgen.core.services.naming import sanitize

logger = logging.getLogger(__name__)

Extractor = Callable[[ProjectDataProvider, GeneratorSettings], ExtractionResult]


def _unique(names: Iterable[str]) -> list[str]:
    """Drop repeated raw names, keeping first-seen order."""
    seen: set[str] = set()
    result = []
    for name in names:
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return result


def _scene_name(path: str) -> str:
    # Build settings always use "/", but tolerate hand-written fixtures
    return PurePosixPath(PureWindowsPath(path).as_posix()).stem


def _merge_assets(assets: Iterable[tuple[str, list[str]]]) -> dict[str, list[str]]:
    """Group parameter names by asset name; same-named assets are merged."""
    merged: dict[str, list[str]] = {}
    for asset_name, params in assets:
        merged[asset_name] = _unique([*merged.get(asset_name, []), *params])
    return merged


def _result(domain: str, items: list) -> ExtractionResult:
    result = ExtractionResult(domain=domain, class_name=CLASS_NAMES[domain], items=items)
    logger.info(
        "Extracted %s: %d constant(s) in %d group(s)",
        domain, result.constant_count, result.group_count,
    )
    return result


# ── Domains ─────────────────────────────────────────────────────


def extract_scenes(provider: ProjectDataProvider, settings: GeneratorSettings) -> ExtractionResult:
    """Scene name -> build index."""
    items = [
        ConstantEntry.integer(sanitize(_scene_name(scene.path)), index)
        for index, scene in enumerate(provider.scenes())
    ]
    return _result("scenes", items)


def extract_tags(provider: ProjectDataProvider, settings: GeneratorSettings) -> ExtractionResult:
    """Tag -> tag string."""
    items = [ConstantEntry.string(sanitize(tag), tag) for tag in _unique(provider.tags())]
    return _result("tags", items)


def extract_layers(provider: ProjectDataProvider, settings: GeneratorSettings) -> ExtractionResult:
    """Layer name -> name string, plus ``<Name>Mask`` -> ``1 << slot``."""
    items = []
    for index, name in enumerate(provider.layers()[:LAYER_COUNT]):
        if not name:
            continue
        items.append(ConstantEntry.string(sanitize(name), name))
        items.append(ConstantEntry.integer(sanitize(name + "Mask"), 1 << index))
    return _result("layers", items)


def extract_sorting_layers(
    provider: ProjectDataProvider, settings: GeneratorSettings
) -> ExtractionResult:
    """Sorting layer name -> unique id."""
    items = [
        ConstantEntry.integer(sanitize(layer.name), layer.id)
        for layer in provider.sorting_layers()
    ]
    return _result("sorting_layers", items)


def extract_input_axes(provider: ProjectDataProvider, settings: GeneratorSettings) -> ExtractionResult:
    """Axis name -> axis name. Unity allows repeated axes (keyboard + joystick)."""
    items = [ConstantEntry.string(sanitize(axis), axis) for axis in _unique(provider.input_axes())]
    return _result("input_axes", items)


def extract_mixer_parameters(
    provider: ProjectDataProvider, settings: GeneratorSettings
) -> ExtractionResult:
    """One nested class per mixer: exposed parameter -> parameter name."""
    merged = _merge_assets((m.asset_name, m.exposed_parameter_names) for m in provider.mixers())
    items = [
        ScopeGroup(
            name=mixer_name,
            entries=[ConstantEntry.string(sanitize(param), param) for param in params],
        )
        for mixer_name, params in merged.items()
    ]
    return _result("mixer_parameters", items)


def extract_animator_parameters(
    provider: ProjectDataProvider, settings: GeneratorSettings
) -> ExtractionResult:
    """One nested class per controller: parameter name and ``<Name>Hash``."""
    merged = _merge_assets(
        (c.asset_name, c.parameter_names) for c in provider.animator_controllers()
    )
    items = []
    for controller_name, params in merged.items():
        entries = []
        for param in params:
            entries.append(ConstantEntry.string(sanitize(param), param))
            entries.append(ConstantEntry.integer(
                sanitize(param + "Hash"),
                string_to_hash(param, settings.hash_algorithm),
            ))
        items.append(ScopeGroup(name=controller_name, entries=entries))
    return _result("animator_parameters", items)


EXTRACTORS: dict[str, Extractor] = {
    "scenes": extract_scenes,
    "tags": extract_tags,
    "layers": extract_layers,
    "sorting_layers": extract_sorting_layers,
    "input_axes": extract_input_axes,
    "mixer_parameters": extract_mixer_parameters,
    "animator_parameters": extract_animator_parameters,
}


def extract(domain: str, provider: ProjectDataProvider, settings: GeneratorSettings) -> ExtractionResult:
    """Run the extractor registered for ``domain``.

    Raises:
        KeyError: For an unknown domain.
    """
    return EXTRACTORS[domain](provider, settings)
