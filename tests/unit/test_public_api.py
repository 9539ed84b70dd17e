"""
Tests for the top-level package surface.

Exercises the documented properties through the public imports.
"""

from __future__ import annotations

import pytest

import helperlibs
from helperlibs import (
    InvalidInputError,
    build_string,
    from_base64,
    is_empty_or_null,
    is_valid_email,
    left,
    reverse,
    right,
    to_base64,
)

SAMPLES = ["", "a", "Hello, World!", "😀", "  spaced  ", "用户@例子.公司"]


class TestExports:
    """Public names resolve."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in helperlibs.__all__:
            assert hasattr(helperlibs, name), name


class TestProperties:
    """Properties that hold across inputs."""

    @pytest.mark.parametrize("value", SAMPLES)
    @pytest.mark.parametrize("n", [-5, -1, 0])
    def test_non_positive_counts_give_empty(self, value: str, n: int) -> None:
        assert left(value, n) == ""
        assert right(value, n) == ""

    @pytest.mark.parametrize("value", SAMPLES)
    def test_left_right_whole_string(self, value: str) -> None:
        assert left(value, len(value)) == value
        assert left(value, len(value) + 3) == value
        assert right(value, len(value) + 3) == value

    @pytest.mark.parametrize("value", SAMPLES)
    def test_left_plus_remaining_right(self, value: str) -> None:
        for n in range(1, len(value)):
            assert left(value, n) + right(value, len(value) - n) == value

    @pytest.mark.parametrize("value", SAMPLES)
    def test_reverse_involution(self, value: str) -> None:
        assert reverse(reverse(value)) == value

    @pytest.mark.parametrize("value", SAMPLES)
    def test_base64_round_trip(self, value: str) -> None:
        assert from_base64(to_base64(value)) == value

    def test_build_string_skips_none(self) -> None:
        assert build_string(["a", None, "b"]) == "ab"
        assert build_string([]) == build_string(None) == ""

    def test_collection_emptiness(self) -> None:
        assert is_empty_or_null(None) is True
        assert is_empty_or_null([]) is True
        assert is_empty_or_null(["x"]) is False


class TestLiteralScenarios:
    """Reference examples."""

    def test_substrings(self) -> None:
        assert left("Hello, World!", 5) == "Hello"
        assert right("Hello, World!", 6) == "World!"

    def test_reverse(self) -> None:
        assert reverse("abc") == "cba"
        assert reverse("") == ""
        assert reverse(None) is None

    def test_base64(self) -> None:
        assert to_base64("Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
        assert to_base64("😀") == "8J+YgA=="
        with pytest.raises(InvalidInputError):
            from_base64("Invalid_Base64_String")

    def test_email(self) -> None:
        assert is_valid_email("user@domain..com") is False
        assert is_valid_email("test@example.com") is True
        assert is_valid_email("user@domain.c") is False
        assert is_valid_email("   ") is False
