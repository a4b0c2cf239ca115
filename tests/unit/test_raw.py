"""Tests for the raw token node decoder."""

import pytest

from tokensmith.core.raw import (
    ColorLeaf,
    GradientLeaf,
    Interior,
    Skipped,
    TypographyLeaf,
    clean_hex_color,
    decode_node,
)


class TestCleanHexColor:
    """Tests for alpha stripping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("#3366FFff", "#3366FF"),
            ("#3366FFFF", "#3366FF"),
            ("3366FFff", "3366FF"),
            ("#3366FF80", "#3366FF80"),
            ("#3366FF", "#3366FF"),
            ("#FFF", "#FFF"),
            ("rgba(0, 0, 0, 0.5)", "rgba(0, 0, 0, 0.5)"),
        ],
    )
    def test_clean(self, value: str, expected: str) -> None:
        assert clean_hex_color(value) == expected

    def test_idempotent(self) -> None:
        once = clean_hex_color("#AABBCCff")
        assert clean_hex_color(once) == once


class TestDecodeNode:
    """Tests for decode_node."""

    def test_color_leaf(self) -> None:
        assert decode_node({"type": "color", "value": "#112233ff"}) == ColorLeaf("#112233")

    def test_color_with_non_string_value(self) -> None:
        assert isinstance(decode_node({"type": "color", "value": 12}), Skipped)

    def test_typography_leaf(self) -> None:
        node = decode_node(
            {
                "type": "custom-fontStyle",
                "value": {"fontFamily": "Inter", "fontSize": 16, "fontWeight": 400, "lineHeight": 24},
            }
        )
        assert isinstance(node, TypographyLeaf)
        assert node.token.font_family == "Inter"
        assert node.token.letter_spacing == 0

    def test_typography_missing_field(self) -> None:
        node = decode_node({"type": "custom-fontStyle", "value": {"fontFamily": "Inter"}})
        assert isinstance(node, Skipped)

    def test_gradient_leaf(self) -> None:
        node = decode_node(
            {
                "type": "custom-gradient",
                "value": {
                    "gradientType": "radial",
                    "rotation": 45.0,
                    "stops": [{"position": 0.5, "color": "#000000"}],
                },
            }
        )
        assert isinstance(node, GradientLeaf)
        assert node.token.type == "radial"
        assert node.token.rotation == 45
        assert node.token.stops[0].position == 0.5

    def test_gradient_bad_stops(self) -> None:
        node = decode_node(
            {"type": "custom-gradient", "value": {"gradientType": "linear", "rotation": 0, "stops": "x"}}
        )
        assert isinstance(node, Skipped)

    def test_unknown_type(self) -> None:
        assert isinstance(decode_node({"type": "custom-shadow", "value": {}}), Skipped)

    def test_group_is_interior(self) -> None:
        children = {"primary": {"type": "color", "value": "#000"}}
        assert decode_node(children) == Interior(children)

    def test_non_string_type_is_interior(self) -> None:
        # a group that happens to contain a child named "type"
        node = {"type": {"type": "color", "value": "#000"}, "value": {"type": "color", "value": "#fff"}}
        assert isinstance(decode_node(node), Interior)

    @pytest.mark.parametrize("value", ["text", 3, None, [1, 2]])
    def test_scalars_are_skipped(self, value: object) -> None:
        assert isinstance(decode_node(value), Skipped)
