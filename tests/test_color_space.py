"""Tests for hex/HSL conversion and the color-modifier algebra."""

import pytest


def _channels(hex_color: str) -> tuple[int, int, int]:
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


class TestHslConversion:
    @pytest.mark.parametrize("color", ["#000000", "#ffffff", "#4f81bd", "#c0504d", "#123456", "#fedcba", "#808080"])
    def test_round_trip_within_rounding(self, color):
        from src.pptx_engine.color_space import hex_to_hsl, hsl_to_hex

        result = hsl_to_hex(*hex_to_hsl(color))
        for a, b in zip(_channels(result), _channels(color)):
            assert abs(a - b) <= 1

    def test_achromatic_has_zero_hue_and_saturation(self):
        from src.pptx_engine.color_space import hex_to_hsl

        hsl = hex_to_hsl("#808080")
        assert hsl.h == 0
        assert hsl.s == 0
        assert hsl.l == pytest.approx(128 / 255)

    def test_primary_hues(self):
        from src.pptx_engine.color_space import hex_to_hsl

        assert hex_to_hsl("#ff0000").h == pytest.approx(0)
        assert hex_to_hsl("#00ff00").h == pytest.approx(120)
        assert hex_to_hsl("#0000ff").h == pytest.approx(240)

    def test_hsl_to_hex_clamps(self):
        from src.pptx_engine.color_space import hsl_to_hex

        assert hsl_to_hex(0, 2.0, 1.5) == "#ffffff"
        assert hsl_to_hex(0, -1.0, -0.5) == "#000000"

    def test_short_hex_accepted(self):
        from src.pptx_engine.color_space import hex_to_hsl

        assert hex_to_hsl("#fff") == hex_to_hsl("#ffffff")

    def test_invalid_hex_raises(self):
        from src.pptx_engine.color_space import hex_to_hsl

        with pytest.raises(ValueError):
            hex_to_hsl("not-a-color")


class TestModifiers:
    def test_tint_boundaries(self):
        from src.pptx_engine.color_space import apply_tint

        assert apply_tint("#4f81bd", 0) == "#4f81bd"
        assert apply_tint("#4f81bd", 1) == "#ffffff"

    def test_shade_boundaries(self):
        from src.pptx_engine.color_space import apply_shade

        assert apply_shade("#4f81bd", 1) == "#4f81bd"
        assert apply_shade("#4f81bd", 0) == "#000000"

    def test_lum_mod_darkens(self):
        from src.pptx_engine.color_space import apply_lum_mod, hex_to_hsl

        darker = apply_lum_mod("#4f81bd", 0.75)
        assert hex_to_hsl(darker).l < hex_to_hsl("#4f81bd").l

    def test_lum_off_is_capped_at_white(self):
        from src.pptx_engine.color_space import apply_lum_off

        assert apply_lum_off("#808080", 1.0) == "#ffffff"

    def test_sat_mod_zero_gives_gray(self):
        from src.pptx_engine.color_space import apply_sat_mod

        r, g, b = _channels(apply_sat_mod("#c0504d", 0))
        assert r == g == b

    def test_sat_off_increases_saturation(self):
        from src.pptx_engine.color_space import apply_sat_off, hex_to_hsl

        assert hex_to_hsl(apply_sat_off("#8c7373", 0.3)).s > hex_to_hsl("#8c7373").s

    def test_empty_chain_is_identity(self):
        from src.pptx_engine.color_space import apply_color_modifiers

        assert apply_color_modifiers("#4f81bd", []) == "#4f81bd"

    def test_alpha_is_ignored(self):
        from src.pptx_engine.color_space import apply_color_modifiers

        assert apply_color_modifiers("#4f81bd", [("alpha", 0.5)]) == "#4f81bd"

    def test_modifiers_apply_in_order(self):
        from src.pptx_engine.color_space import apply_color_modifiers, apply_lum_mod, apply_lum_off

        expected = apply_lum_off(apply_lum_mod("#4f81bd", 0.2), 0.8)
        assert apply_color_modifiers("#4f81bd", [("lumMod", 0.2), ("lumOff", 0.8)]) == expected

    def test_modifier_fraction(self):
        from src.pptx_engine.color_space import modifier_fraction

        assert modifier_fraction("100000") == 1.0
        assert modifier_fraction("75000") == 0.75
        assert modifier_fraction("abc") is None
        assert modifier_fraction(None) is None


class TestHelpers:
    def test_lighten_black(self):
        from src.pptx_engine.color_space import lighten_color

        assert lighten_color("#000000", 0.3) == "#4d4d4d"

    def test_lighten_white_unchanged(self):
        from src.pptx_engine.color_space import lighten_color

        assert lighten_color("#ffffff", 0.3) == "#ffffff"

    def test_is_valid_hex_color(self):
        from src.pptx_engine.color_space import is_valid_hex_color

        assert is_valid_hex_color("#fff")
        assert is_valid_hex_color("#A1B2C3")
        assert not is_valid_hex_color("fff")
        assert not is_valid_hex_color("#abcd")
        assert not is_valid_hex_color("#ggg")

    def test_normalize_hex(self):
        from src.pptx_engine.color_space import normalize_hex

        assert normalize_hex("#abc") == "#AABBCC"
        assert normalize_hex("aabbcc") == "#AABBCC"
        assert normalize_hex("#A1B2C3") == "#A1B2C3"
        assert normalize_hex("#12345") is None
        assert normalize_hex("") is None
        assert normalize_hex(None) is None
