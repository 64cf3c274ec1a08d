"""
Provider base — the read-only contract between extractors and a project.

Extractors never touch the filesystem or the editor directly; they
ask a provider for one domain's raw collection. Swapping the provider
(a Unity project on disk, a fixture file, a test double) leaves the
extraction and emission logic untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from constgen.core.models.sources import (
    AnimatorControllerAsset,
    MixerAsset,
    SceneRef,
    SortingLayerRef,
)


class ProjectDataProvider(ABC):
    """Abstract base class for all project data providers.

    Every method returns the domain's collection in its native order.
    A provider that cannot read a domain's source MUST raise
    ``SourceUnavailable`` rather than return an empty collection, so a
    missing settings file is never mistaken for an empty one.

    To create a new provider:
        1. Subclass ProjectDataProvider
        2. Implement name and the seven domain methods
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The provider identifier (e.g., 'unity', 'static')."""

    @abstractmethod
    def scenes(self) -> list[SceneRef]:
        """Scenes in build-settings order."""

    @abstractmethod
    def tags(self) -> list[str]:
        """All defined tags, built-in ones first."""

    @abstractmethod
    def layers(self) -> list[str | None]:
        """Layer names indexed by slot (0-31). Unused slots are None or empty."""

    @abstractmethod
    def sorting_layers(self) -> list[SortingLayerRef]:
        """Sorting layers in render order."""

    @abstractmethod
    def input_axes(self) -> list[str]:
        """Input axis names in definition order, duplicates included."""

    @abstractmethod
    def mixers(self) -> list[MixerAsset]:
        """Every audio mixer asset in the project."""

    @abstractmethod
    def animator_controllers(self) -> list[AnimatorControllerAsset]:
        """Every animator controller asset in the project."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
