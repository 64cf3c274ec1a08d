"""
Unity project provider — read constants sources from a project on disk.

Sources:
    ProjectSettings/EditorBuildSettings.asset   scenes
    ProjectSettings/TagManager.asset            tags, layers, sorting layers
    ProjectSettings/InputManager.asset          input axes
    <assets_dir>/**/*.mixer                     audio mixer exposed parameters
    <assets_dir>/**/*.controller                animator controller parameters

Asset files are visited in sorted path order so that two runs over
the same project produce the same output.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from constgen.adapters.base import ProjectDataProvider
from constgen.adapters.unity.documents import as_list, find_document, load_unity_documents
from constgen.core.errors import SourceUnavailable
from constgen.core.models.sources import (
    LAYER_COUNT,
    AnimatorControllerAsset,
    MixerAsset,
    SceneRef,
    SortingLayerRef,
)
from constgen.core.services.hashing import to_int32

logger = logging.getLogger(__name__)

PROJECT_SETTINGS_DIR = "ProjectSettings"

# Tags every Unity project has; TagManager.asset lists only custom ones
BUILTIN_TAGS: tuple[str, ...] = (
    "Untagged",
    "Respawn",
    "Finish",
    "EditorOnly",
    "MainCamera",
    "Player",
    "GameController",
)

# Pre-5.x TagManager stores layers as "Builtin Layer N" / "User Layer N" keys
_LEGACY_LAYER_KEY = re.compile(r"^(?:Builtin|User) Layer (\d+)$")


class UnityProjectProvider(ProjectDataProvider):
    """Reads a Unity project's serialized settings and assets.

    Args:
        project_root: Directory containing ``Assets/`` and ``ProjectSettings/``.
        assets_dir: Assets folder name relative to the root.
    """

    def __init__(self, project_root: Path, assets_dir: str = "Assets"):
        self._root = Path(project_root)
        self._assets_dir = assets_dir
        self._documents: dict[Path, list[tuple[str, dict[str, Any]]]] = {}

    @property
    def name(self) -> str:
        return "unity"

    @property
    def project_root(self) -> Path:
        return self._root

    @property
    def assets_root(self) -> Path:
        return self._root / self._assets_dir

    def is_unity_project(self) -> bool:
        """Whether the root looks like a Unity project."""
        return (self._root / PROJECT_SETTINGS_DIR).is_dir() and self.assets_root.is_dir()

    # ── File access ─────────────────────────────────────────────

    def _load(self, path: Path, domain: str) -> list[tuple[str, dict[str, Any]]]:
        if path in self._documents:
            return self._documents[path]
        if not path.is_file():
            raise SourceUnavailable(domain, f"{path} not found")
        try:
            documents = load_unity_documents(path)
        except OSError as e:
            raise SourceUnavailable(domain, f"cannot read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SourceUnavailable(domain, f"{path} is not a text-serialized asset: {e}") from e
        except yaml.YAMLError as e:
            raise SourceUnavailable(domain, f"cannot parse {path}: {e}") from e
        self._documents[path] = documents
        return documents

    def _settings(self, filename: str, class_name: str, domain: str) -> dict[str, Any]:
        path = self._root / PROJECT_SETTINGS_DIR / filename
        fields = find_document(self._load(path, domain), class_name)
        if fields is None:
            raise SourceUnavailable(domain, f"no {class_name} object in {path}")
        return fields

    def _find_assets(self, pattern: str, domain: str) -> list[Path]:
        if not self.assets_root.is_dir():
            raise SourceUnavailable(domain, f"assets folder {self.assets_root} not found")
        paths = sorted(p for p in self.assets_root.rglob(pattern) if p.is_file())
        logger.debug("Found %d %s asset(s) under %s", len(paths), pattern, self.assets_root)
        return paths

    # ── Domains ─────────────────────────────────────────────────

    def scenes(self) -> list[SceneRef]:
        fields = self._settings("EditorBuildSettings.asset", "EditorBuildSettings", "scenes")
        # Every entry keeps its slot: the list position is the build index
        return [
            SceneRef(path=str(entry.get("path") or "") if isinstance(entry, dict) else "")
            for entry in as_list(fields.get("m_Scenes"))
        ]

    def tags(self) -> list[str]:
        fields = self._settings("TagManager.asset", "TagManager", "tags")
        custom = [str(t) for t in as_list(fields.get("tags")) if t]
        return list(BUILTIN_TAGS) + custom

    def layers(self) -> list[str | None]:
        fields = self._settings("TagManager.asset", "TagManager", "layers")
        slots: list[str | None] = [None] * LAYER_COUNT

        if isinstance(fields.get("layers"), list):
            for index, name in enumerate(fields["layers"][:LAYER_COUNT]):
                slots[index] = str(name) if name else None
            return slots

        for key, name in fields.items():
            match = _LEGACY_LAYER_KEY.match(str(key))
            if match and name:
                index = int(match.group(1))
                if 0 <= index < LAYER_COUNT:
                    slots[index] = str(name)
        return slots

    def sorting_layers(self) -> list[SortingLayerRef]:
        fields = self._settings("TagManager.asset", "TagManager", "sorting_layers")
        result = []
        for entry in as_list(fields.get("m_SortingLayers")):
            if not isinstance(entry, dict) or not entry.get("name"):
                continue
            try:
                unique_id = int(entry.get("uniqueID", 0))
            except (TypeError, ValueError) as e:
                raise SourceUnavailable(
                    "sorting_layers", f"bad uniqueID for '{entry['name']}': {e}"
                ) from e
            # Stored unsigned; SortingLayer.id reads it back as int
            result.append(SortingLayerRef(name=str(entry["name"]), id=to_int32(unique_id)))
        return result

    def input_axes(self) -> list[str]:
        fields = self._settings("InputManager.asset", "InputManager", "input_axes")
        return [
            str(axis["m_Name"])
            for axis in as_list(fields.get("m_Axes"))
            if isinstance(axis, dict) and axis.get("m_Name")
        ]

    def mixers(self) -> list[MixerAsset]:
        result = []
        for path in self._find_assets("*.mixer", "mixer_parameters"):
            fields = find_document(self._load(path, "mixer_parameters"), "AudioMixerController")
            if fields is None:
                logger.warning("Skipping %s: no AudioMixerController object", path)
                continue
            names = [
                str(p["name"])
                for p in as_list(fields.get("m_ExposedParameters"))
                if isinstance(p, dict) and p.get("name")
            ]
            result.append(MixerAsset(asset_name=path.stem, exposed_parameter_names=names))
        return result

    def animator_controllers(self) -> list[AnimatorControllerAsset]:
        result = []
        for path in self._find_assets("*.controller", "animator_parameters"):
            fields = find_document(self._load(path, "animator_parameters"), "AnimatorController")
            if fields is None:
                logger.warning("Skipping %s: no AnimatorController object", path)
                continue
            names = [
                str(p["m_Name"])
                for p in as_list(fields.get("m_AnimatorParameters"))
                if isinstance(p, dict) and p.get("m_Name")
            ]
            result.append(AnimatorControllerAsset(asset_name=path.stem, parameter_names=names))
        return result
