"""
File writer — put a GeneratedFile on disk.

Creates the destination directory tree, then truncates and rewrites
the file. There is no temp-file-and-rename step: an interrupted write
leaves a partial file, which the next generation run replaces.
"""

from __future__ import annotations

import logging
from pathlib import Path

from constgen.core.errors import IOFailure
from constgen.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def write_generated_file(project_root: Path, generated: GeneratedFile) -> Path:
    """Write a GeneratedFile relative to the project root.

    Args:
        project_root: Unity project root directory.
        generated: The file to write.

    Returns:
        Absolute path of the written file.

    Raises:
        IOFailure: If the directory or the file cannot be written.
    """
    target = (project_root / generated.path).resolve()

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(generated.content)
    except OSError as e:
        logger.error("Failed to write %s: %s", target, e)
        raise IOFailure(target, e) from e

    logger.info("Wrote generated file: %s", target)
    return target
