"""Unity project bindings — read settings and assets from a project on disk."""

from constgen.adapters.unity.project import UnityProjectProvider

__all__ = ["UnityProjectProvider"]
