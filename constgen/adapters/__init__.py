"""Providers — read-only access to a project's constants sources.

Public re-exports for convenient access.
"""

from constgen.adapters.base import ProjectDataProvider
from constgen.adapters.mock import StaticDataProvider
from constgen.adapters.unity import UnityProjectProvider

__all__ = [
    "ProjectDataProvider",
    "StaticDataProvider",
    "UnityProjectProvider",
]
