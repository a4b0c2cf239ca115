"""Tests for the Figma token parser."""

from typing import Any

from tokensmith.core.ir import NormalizedTokens, TypographyToken
from tokensmith.core.parser import parse_colors, parse_figma_tokens, parse_gradients, parse_typography


def font_style(
    family: str = "Pretendard",
    size: float = 16,
    weight: float = 400,
    line_height: float = 24,
    letter_spacing: float | None = None,
) -> dict[str, Any]:
    value: dict[str, Any] = {
        "fontFamily": family,
        "fontSize": size,
        "fontWeight": weight,
        "lineHeight": line_height,
    }
    if letter_spacing is not None:
        value["letterSpacing"] = letter_spacing
    return {"type": "custom-fontStyle", "value": value}


def color(value: str) -> dict[str, Any]:
    return {"type": "color", "value": value}


class TestParseColors:
    """Tests for color tree normalization."""

    def test_camel_case_keys_are_split(self) -> None:
        result = parse_colors({"primary": {"skyblueBase": color("#0EA5E9")}})
        assert result == {"primary": {"skyblue": {"base": "#0EA5E9"}}}

    def test_siblings_deep_merge(self) -> None:
        result = parse_colors(
            {"primary": {"skyblueBase": color("#111111"), "skyblueLight": color("#222222")}}
        )
        assert result == {"primary": {"skyblue": {"base": "#111111", "light": "#222222"}}}

    def test_opaque_alpha_stripped(self) -> None:
        assert parse_colors({"brand": color("#3366FFff")}) == {"brand": "#3366FF"}

    def test_translucent_alpha_kept(self) -> None:
        assert parse_colors({"overlay": color("#00000080")}) == {"overlay": "#00000080"}

    def test_key_normalizing_to_nothing_is_skipped(self) -> None:
        assert parse_colors({"__": color("#000000"), "ok": color("#FFFFFF")}) == {"ok": "#FFFFFF"}

    def test_malformed_nodes_are_skipped(self) -> None:
        result = parse_colors(
            {
                "note": "not a token",
                "count": 3,
                "bad": {"type": "color", "value": 42},
                "font": font_style(),
                "good": color("#ABCDEF"),
            }
        )
        assert result == {"good": "#ABCDEF"}

    def test_leaf_then_branch_collision(self) -> None:
        result = parse_colors({"gray": color("#777777"), "grayDark": color("#333333")})
        assert result == {"gray": {"dark": "#333333"}}

    def test_empty_section(self) -> None:
        assert parse_colors({}) == {}


class TestParseTypography:
    """Tests for typography normalization."""

    def test_locale_level_kept(self) -> None:
        result = parse_typography({"mobile": {"kr": {"title1-700": font_style(size=24)}}})
        assert list(result) == ["mobile"]
        assert result["mobile"]["kr"]["title1-700"].font_size == 24

    def test_direct_styles_lifted_to_default_locale(self) -> None:
        result = parse_typography({"mobile": {"display6": font_style(size=12)}})
        expected = TypographyToken(font_family="Pretendard", font_size=12, font_weight=400, line_height=24)
        assert result["mobile"] == {"default": {"display6": expected}}

    def test_mixed_device(self) -> None:
        result = parse_typography(
            {"mobile": {"kr": {"body": font_style()}, "caption": font_style(size=10)}}
        )
        assert set(result["mobile"]) == {"kr", "default"}
        assert result["mobile"]["default"]["caption"].font_size == 10

    def test_letter_spacing_defaults_to_zero(self) -> None:
        result = parse_typography({"web": {"en": {"body": font_style()}}})
        assert result["web"]["en"]["body"].letter_spacing == 0

    def test_letter_spacing_null_is_zero(self) -> None:
        style = font_style()
        style["value"]["letterSpacing"] = None
        result = parse_typography({"web": {"en": {"body": style}}})
        assert result["web"]["en"]["body"].letter_spacing == 0

    def test_invalid_style_dropped(self) -> None:
        result = parse_typography(
            {"web": {"en": {"broken": {"type": "custom-fontStyle", "value": {}}, "ok": font_style()}}}
        )
        assert list(result["web"]["en"]) == ["ok"]

    def test_empty_locales_and_devices_pruned(self) -> None:
        result = parse_typography(
            {
                "web": {"en": {"broken": {"type": "custom-fontStyle", "value": {}}}},
                "tablet": "not an object",
                "mobile": {"kr": {"ok": font_style()}, "jp": {}},
            }
        )
        assert result == {"mobile": {"kr": {"ok": result["mobile"]["kr"]["ok"]}}}

    def test_integral_floats_normalized(self) -> None:
        result = parse_typography({"web": {"en": {"body": font_style(size=16.0)}}})
        size = result["web"]["en"]["body"].font_size
        assert size == 16
        assert isinstance(size, int)


class TestParseGradients:
    """Tests for gradient normalization."""

    def gradient(self, rotation: float = 90) -> dict[str, Any]:
        return {
            "type": "custom-gradient",
            "value": {
                "gradientType": "linear",
                "rotation": rotation,
                "stops": [{"position": 0, "color": "#000000"}, {"position": 1, "color": "#FFFFFF"}],
            },
        }

    def test_category_and_name(self) -> None:
        result = parse_gradients({"brand": {"sunset": self.gradient()}})
        assert list(result) == ["brand"]
        assert result["brand"]["sunset"].rotation == 90

    def test_multi_segment_category(self) -> None:
        result = parse_gradients({"brandPrimary": {"sunsetGlow": self.gradient()}})
        assert list(result["brand-primary-sunset"]) == ["glow"]

    def test_single_segment_uses_default_category(self) -> None:
        result = parse_gradients({"sunset": self.gradient()})
        assert list(result["default"]) == ["sunset"]

    def test_stop_order_preserved(self) -> None:
        token = parse_gradients({"a": {"b": self.gradient()}})["a"]["b"]
        assert [stop.color for stop in token.stops] == ["#000000", "#FFFFFF"]


class TestParseFigmaTokens:
    """Tests for the full parse."""

    def test_fixture_colors(self, tokens: NormalizedTokens) -> None:
        assert tokens.colors["brand"] == {"primary": "#3366FF", "secondary": "#FF6633"}
        assert tokens.colors["primary"] == {"skyblue": {"base": "#0EA5E9", "light": "#7DD3FC"}}
        assert tokens.colors["gray"] == {"100": "#F5F5F5", "900": "#171717"}
        assert "description" not in tokens.colors

    def test_fixture_typography(self, tokens: NormalizedTokens) -> None:
        assert list(tokens.typography) == ["mobile", "desktop"]
        assert list(tokens.typography["mobile"]) == ["kr", "default"]
        assert tokens.typography["mobile"]["kr"]["title1-700"].letter_spacing == -0.5

    def test_fixture_gradients(self, tokens: NormalizedTokens) -> None:
        assert tokens.gradients is not None
        assert list(tokens.gradients["brand"]) == ["sunset"]

    def test_unknown_sections_ignored(self) -> None:
        tokens = parse_figma_tokens({"effect": {"x": 1}, "grid": []})
        assert tokens.colors == {}
        assert tokens.typography == {}

    def test_gradients_absent_is_none(self) -> None:
        assert parse_figma_tokens({"color": {}}).gradients is None

    def test_empty_gradient_section_is_empty(self) -> None:
        assert parse_figma_tokens({"gradient": {}}).gradients == {}

    def test_non_object_sections_ignored(self) -> None:
        tokens = parse_figma_tokens({"color": "red", "font": [], "gradient": 1})
        assert tokens == NormalizedTokens()

    def test_deterministic(self, raw_tokens: dict[str, Any]) -> None:
        assert parse_figma_tokens(raw_tokens) == parse_figma_tokens(raw_tokens)
