"""
Source models — raw data as the project data provider returns it.

These mirror the settings Unity keeps for a project, before any
name sanitization or de-duplication.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

LAYER_COUNT = 32


class SceneRef(BaseModel):
    """A scene registered in the build settings. Its list position is the build index."""

    path: str


class SortingLayerRef(BaseModel):
    """A sorting layer and its stable unique id."""

    name: str
    id: int


class MixerAsset(BaseModel):
    """An audio mixer asset and the parameters it exposes to scripts."""

    asset_name: str
    exposed_parameter_names: list[str] = Field(default_factory=list)


class AnimatorControllerAsset(BaseModel):
    """An animator controller asset and its parameter names."""

    asset_name: str
    parameter_names: list[str] = Field(default_factory=list)
