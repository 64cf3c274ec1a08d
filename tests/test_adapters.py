"""
Tests for the static data provider.
"""

from pathlib import Path

import pytest

from constgen.adapters.mock import StaticDataProvider
from constgen.core.errors import SourceUnavailable


class TestStaticDataProvider:
    def test_scene_strings_and_mappings(self):
        provider = StaticDataProvider({
            "scenes": ["Assets/A.unity", {"path": "Assets/B.unity"}],
        })
        scenes = provider.scenes()
        assert [s.path for s in scenes] == ["Assets/A.unity", "Assets/B.unity"]

    def test_layers_from_list(self):
        layers = StaticDataProvider({"layers": ["Default", None, "", "Water"]}).layers()
        assert len(layers) == 32
        assert layers[:4] == ["Default", None, None, "Water"]

    def test_layers_mapping_bad_slot(self):
        provider = StaticDataProvider({"layers": {"eight": "Ground"}})
        with pytest.raises(SourceUnavailable, match="not an integer"):
            provider.layers()

    def test_layers_mapping_ignores_out_of_range(self):
        layers = StaticDataProvider({"layers": {3: "Three", 40: "Nope"}}).layers()
        assert layers[3] == "Three"
        assert "Nope" not in layers

    def test_missing_key(self):
        with pytest.raises(SourceUnavailable, match="input_axes"):
            StaticDataProvider({}).input_axes()

    def test_null_key_is_missing(self):
        with pytest.raises(SourceUnavailable):
            StaticDataProvider({"tags": None}).tags()

    def test_wrong_shape(self):
        with pytest.raises(SourceUnavailable, match="expected a list"):
            StaticDataProvider({"tags": "Player"}).tags()

    def test_malformed_entry(self):
        provider = StaticDataProvider({"sorting_layers": [{"name": "Default"}]})
        with pytest.raises(SourceUnavailable, match="malformed entry"):
            provider.sorting_layers()

    def test_call_log(self, provider):
        provider.tags()
        provider.mixers()
        assert provider.call_log == ["tags", "mixers"]


class TestFixtureFile:
    def test_from_file(self, tmp_path: Path):
        path = tmp_path / "project.yml"
        path.write_text("input_axes: [Horizontal, Jump]\n")
        provider = StaticDataProvider.from_file(path)
        assert provider.name == "fixture:project.yml"
        assert provider.input_axes() == ["Horizontal", "Jump"]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        with pytest.raises(SourceUnavailable):
            StaticDataProvider.from_file(path).tags()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SourceUnavailable, match="cannot read"):
            StaticDataProvider.from_file(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("tags: [unclosed\n")
        with pytest.raises(SourceUnavailable, match="invalid YAML"):
            StaticDataProvider.from_file(path)
