"""
Tests for the name sanitizer.
"""

import re

import pytest

from constgen.core.errors import EmptyIdentifier, GenerationError
from constgen.core.services.naming import sanitize

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class TestSanitize:
    def test_strips_spaces(self):
        assert sanitize("Player 1") == "Player1"

    def test_leading_digit_gets_underscore(self):
        assert sanitize("3Lives") == "_3Lives"

    def test_only_symbols_raises(self):
        with pytest.raises(EmptyIdentifier) as exc_info:
            sanitize("---")
        assert exc_info.value.raw == "---"
        assert "'---'" in str(exc_info.value)

    def test_empty_string_raises(self):
        with pytest.raises(EmptyIdentifier):
            sanitize("")

    def test_empty_identifier_is_generation_error(self):
        with pytest.raises(GenerationError):
            sanitize("   ")

    def test_plain_name_unchanged(self):
        assert sanitize("MainCamera") == "MainCamera"

    def test_underscores_and_punctuation_removed(self):
        assert sanitize("Ignore_Raycast!") == "IgnoreRaycast"

    def test_non_ascii_letters_removed(self):
        assert sanitize("Näme") == "Nme"

    def test_digit_after_stripping(self):
        """A digit that becomes first only after stripping is still guarded."""
        assert sanitize("-2D Layer") == "_2DLayer"

    @pytest.mark.parametrize(
        "raw",
        ["Player 1", "3Lives", "Ignore Raycast", "UI", "__9", "a-b-c", "Vol-1", "x"],
    )
    def test_result_is_valid_identifier(self, raw: str):
        result = sanitize(raw)
        assert result
        assert _IDENTIFIER.match(result)

    @pytest.mark.parametrize("raw", ["Player 1", "3Lives", "_3Lives", "Sfx Volume (dB)", "42"])
    def test_idempotent(self, raw: str):
        once = sanitize(raw)
        assert sanitize(once) == once

    def test_distinct_names_can_collide(self):
        """The sanitizer itself does not guarantee uniqueness."""
        assert sanitize("Vol-1") == sanitize("Vol1") == "Vol1"
