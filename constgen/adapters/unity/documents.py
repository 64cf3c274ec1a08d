"""
Unity YAML reader.

Unity serializes assets as multi-document YAML with a custom tag
shorthand::

    %YAML 1.1
    %TAG !u! tag:unity3d.com,2011:
    --- !u!78 &1
    TagManager:
      tags:
      - Enemy

The ``!u!<classID> &<fileID>`` headers (and the ``stripped`` marker on
prefab variants) are not loadable by a safe loader, so they are
dropped before parsing. Each document body is a one-key mapping from
the Unity class name to its fields.

Plain scalars are always loaded as strings: a tag called ``Yes`` or an
axis called ``0x10`` must come back exactly as written, so callers
convert numeric fields themselves.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_TAG_DIRECTIVE = re.compile(r"^%TAG .*$", re.MULTILINE)
_DOCUMENT_HEADER = re.compile(r"^--- !u!\d+ &-?\d+.*$", re.MULTILINE)


class UnityLoader(yaml.SafeLoader):
    """Safe loader with no implicit scalar typing."""


UnityLoader.yaml_implicit_resolvers = {}


def normalize_unity_yaml(text: str) -> str:
    """Rewrite Unity's document headers into plain YAML separators."""
    text = _TAG_DIRECTIVE.sub("", text)
    return _DOCUMENT_HEADER.sub("---", text)


def load_unity_documents(path: Path) -> list[tuple[str, dict[str, Any]]]:
    """Parse a Unity asset file into ``(class_name, fields)`` pairs.

    Documents that are not a single-key mapping are skipped.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the asset is binary-serialized.
        yaml.YAMLError: If the normalized text is not valid YAML.
    """
    text = path.read_text(encoding="utf-8")
    documents: list[tuple[str, dict[str, Any]]] = []

    for doc in yaml.load_all(normalize_unity_yaml(text), Loader=UnityLoader):
        if not isinstance(doc, dict) or len(doc) != 1:
            continue
        class_name, fields = next(iter(doc.items()))
        documents.append((str(class_name), fields if isinstance(fields, dict) else {}))

    logger.debug("Parsed %d document(s) from %s", len(documents), path)
    return documents


def find_document(
    documents: list[tuple[str, dict[str, Any]]],
    class_name: str,
) -> dict[str, Any] | None:
    """Return the fields of the first document of the given Unity class."""
    for name, fields in documents:
        if name == class_name:
            return fields
    return None


def as_list(value: Any) -> list:
    """Unity writes empty arrays as ``[]`` and missing ones not at all."""
    return value if isinstance(value, list) else []
