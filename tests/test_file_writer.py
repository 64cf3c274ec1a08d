"""
Tests for writing generated files to disk.
"""

from pathlib import Path

import pytest

from constgen.core.errors import IOFailure
from constgen.core.models.template import GeneratedFile
from constgen.core.persistence.file_writer import write_generated_file


class TestWriteGeneratedFile:
    def test_creates_directories(self, tmp_path: Path):
        generated = GeneratedFile(path="Assets/Scripts/Constants/Tags.cs", content="// x\n")
        target = write_generated_file(tmp_path, generated)
        assert target == (tmp_path / "Assets/Scripts/Constants/Tags.cs").resolve()
        assert target.read_text(encoding="utf-8") == "// x\n"

    def test_overwrites_previous_content(self, tmp_path: Path):
        path = tmp_path / "Tags.cs"
        path.write_text("old content that is longer than the new one\n")
        write_generated_file(tmp_path, GeneratedFile(path="Tags.cs", content="new\n"))
        assert path.read_text() == "new\n"

    def test_unix_line_endings(self, tmp_path: Path):
        write_generated_file(tmp_path, GeneratedFile(path="A.cs", content="a\nb\n"))
        assert (tmp_path / "A.cs").read_bytes() == b"a\nb\n"

    def test_directory_blocked_by_file(self, tmp_path: Path):
        (tmp_path / "Assets").write_text("not a directory")
        with pytest.raises(IOFailure) as exc_info:
            write_generated_file(tmp_path, GeneratedFile(path="Assets/Tags.cs", content="x\n"))
        assert isinstance(exc_info.value.cause, OSError)
