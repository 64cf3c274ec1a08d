"""
Static provider — serves project data from memory or a fixture file.

Used by the test suite and by ``--fixture`` on the CLI, for projects
whose settings were exported elsewhere. Any domain missing from the
data raises ``SourceUnavailable``, exactly like a missing settings
file would for the Unity provider.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from constgen.adapters.base import ProjectDataProvider
from constgen.core.errors import SourceUnavailable
from constgen.core.models.sources import (
    LAYER_COUNT,
    AnimatorControllerAsset,
    MixerAsset,
    SceneRef,
    SortingLayerRef,
)

logger = logging.getLogger(__name__)


class StaticDataProvider(ProjectDataProvider):
    """Provider backed by a plain mapping.

    Accepted keys and shapes::

        scenes:               ["Assets/Scenes/Main.unity", {path: ...}]
        tags:                 ["Untagged", "Player"]
        layers:               ["Default", null, ...] or {0: Default, 8: Ground}
        sorting_layers:       [{name: Default, id: 0}]
        input_axes:           ["Horizontal", "Fire1"]
        mixers:               [{asset_name: Master, exposed_parameter_names: [...]}]
        animator_controllers: [{asset_name: Player, parameter_names: [...]}]
    """

    def __init__(self, data: dict[str, Any] | None = None, provider_name: str = "static"):
        self._data = dict(data or {})
        self._name = provider_name
        self._call_log: list[str] = []

    @classmethod
    def from_file(cls, path: Path) -> StaticDataProvider:
        """Load provider data from a YAML (or JSON) fixture file.

        Raises:
            SourceUnavailable: If the file is missing or not a mapping.
        """
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise SourceUnavailable("fixture", f"cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SourceUnavailable("fixture", f"{path} is not UTF-8 text: {e}") from e
        except yaml.YAMLError as e:
            raise SourceUnavailable("fixture", f"invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SourceUnavailable(
                "fixture", f"expected a mapping in {path}, got {type(data).__name__}"
            )
        logger.debug("Loaded fixture %s (%s)", path, ", ".join(sorted(data)) or "empty")
        return cls(data, provider_name=f"fixture:{path.name}")

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[str]:
        """Domain keys requested so far, in call order."""
        return self._call_log

    def _get(self, key: str) -> Any:
        self._call_log.append(key)
        if key not in self._data or self._data[key] is None:
            raise SourceUnavailable(key, f"no '{key}' data in {self._name}")
        return self._data[key]

    def _get_list(self, key: str) -> list:
        value = self._get(key)
        if not isinstance(value, list):
            raise SourceUnavailable(key, f"expected a list, got {type(value).__name__}")
        return value

    def scenes(self) -> list[SceneRef]:
        result = []
        for item in self._get_list("scenes"):
            if isinstance(item, str):
                result.append(SceneRef(path=item))
            else:
                result.append(self._validate(SceneRef, item, "scenes"))
        return result

    def tags(self) -> list[str]:
        return [str(t) for t in self._get_list("tags")]

    def layers(self) -> list[str | None]:
        raw = self._get("layers")
        slots: list[str | None] = [None] * LAYER_COUNT
        if isinstance(raw, dict):
            for index, name in raw.items():
                try:
                    slot = int(index)
                except (TypeError, ValueError) as e:
                    raise SourceUnavailable("layers", f"layer slot {index!r} is not an integer") from e
                if 0 <= slot < LAYER_COUNT:
                    slots[slot] = str(name) if name else None
        elif isinstance(raw, list):
            for slot, name in enumerate(raw[:LAYER_COUNT]):
                slots[slot] = str(name) if name else None
        else:
            raise SourceUnavailable("layers", f"expected a list or mapping, got {type(raw).__name__}")
        return slots

    def sorting_layers(self) -> list[SortingLayerRef]:
        return [self._validate(SortingLayerRef, item, "sorting_layers")
                for item in self._get_list("sorting_layers")]

    def input_axes(self) -> list[str]:
        return [str(a) for a in self._get_list("input_axes")]

    def mixers(self) -> list[MixerAsset]:
        return [self._validate(MixerAsset, item, "mixers")
                for item in self._get_list("mixers")]

    def animator_controllers(self) -> list[AnimatorControllerAsset]:
        return [self._validate(AnimatorControllerAsset, item, "animator_controllers")
                for item in self._get_list("animator_controllers")]

    @staticmethod
    def _validate(model: type, item: Any, key: str) -> Any:
        try:
            return model.model_validate(item)
        except ValidationError as e:
            raise SourceUnavailable(key, f"malformed entry {item!r}: {e}") from e
