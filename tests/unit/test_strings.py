"""Tests for identifier casing helpers."""

import pytest

from tokensmith.core.strings import (
    font_family_compact,
    font_family_slug,
    format_number,
    to_camel_case,
    to_kebab_case,
)


class TestToKebabCase:
    """Tests for to_kebab_case."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("skyblueBase", "skyblue-base"),
            ("primary-skyblueBase", "primary-skyblue-base"),
            ("Primary Color", "primary-color"),
            ("gray_100", "gray-100"),
            ("Primary Color/100", "primary-color-100"),
            ("__Gray  50__", "gray-50"),
            ("a--b", "a-b"),
            ("Brand.Primary", "brand-primary"),
        ],
    )
    def test_conversions(self, value: str, expected: str) -> None:
        assert to_kebab_case(value) == expected

    def test_empty_string(self) -> None:
        assert to_kebab_case("") == ""

    def test_only_separators(self) -> None:
        assert to_kebab_case(" _/- ") == ""

    @pytest.mark.parametrize("value", ["skyblueBase", "Primary Color/100", "__x__Y", "ABC"])
    def test_idempotent(self, value: str) -> None:
        once = to_kebab_case(value)
        assert to_kebab_case(once) == once

    def test_output_alphabet(self) -> None:
        result = to_kebab_case("Héllo Wörld! #1")
        assert all(c.islower() or c.isdigit() or c == "-" for c in result)
        assert not result.startswith("-")
        assert not result.endswith("-")
        assert "--" not in result

    def test_uppercase_runs_are_not_split(self) -> None:
        assert to_kebab_case("ABC") == "abc"


class TestToCamelCase:
    """Tests for to_camel_case."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("typo-mobile-kr-title1-700", "typoMobileKrTitle1700"),
            ("font_family name", "fontFamilyName"),
            ("Title", "title"),
            ("a--b", "aB"),
        ],
    )
    def test_conversions(self, value: str, expected: str) -> None:
        assert to_camel_case(value) == expected

    def test_empty_string(self) -> None:
        assert to_camel_case("") == ""

    def test_only_separators(self) -> None:
        assert to_camel_case("-_ -") == ""

    def test_uppercase_input(self) -> None:
        assert to_camel_case("ABC") == "aBC"

    @pytest.mark.parametrize(
        "value", ["ABC", "Hello World", "typo-mobile-kr-title1-700", "_x_", "already camelCase", "제목-700"]
    )
    def test_idempotent(self, value: str) -> None:
        once = to_camel_case(value)
        assert to_camel_case(once) == once


class TestFontFamilyKeys:
    """Tests for font family key derivation."""

    def test_slug(self) -> None:
        assert font_family_slug("Noto Sans KR") == "noto-sans-kr"

    def test_slug_drops_punctuation(self) -> None:
        assert font_family_slug("SF Pro (Display)") == "sf-pro-display"

    def test_compact(self) -> None:
        assert font_family_compact("Noto Sans KR") == "notosanskr"


class TestFormatNumber:
    """Tests for format_number."""

    def test_integral_float(self) -> None:
        assert format_number(16.0) == "16"

    def test_fraction(self) -> None:
        assert format_number(-0.5) == "-0.5"

    def test_int(self) -> None:
        assert format_number(700) == "700"
