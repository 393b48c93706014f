"""Tests for cascade layer helpers."""

import pytest

from modern_css.errors import StyleConfigError
from modern_css.layers import (
    CSS_LAYERS,
    CSS_RESET,
    UTILITY_CLASSES,
    CSSLayer,
    base_stylesheet,
    create_component,
    create_utility,
    generate_layer_declaration,
    ordered_layers,
    resolve_layer,
    wrap_in_layer,
)


# ---------------------------------------------------------------------------
# Layer order
# ---------------------------------------------------------------------------


class TestLayerOrder:
    def test_declaration_order(self):
        assert generate_layer_declaration() == (
            "@layer reset, tokens, utilities, components, overrides;"
        )

    def test_overrides_beat_components(self):
        order = {cfg.name: cfg.order for cfg in CSS_LAYERS.values()}
        assert order[CSSLayer.OVERRIDES] > order[CSSLayer.COMPONENTS]
        assert order[CSSLayer.COMPONENTS] > order[CSSLayer.UTILITIES]
        assert order[CSSLayer.UTILITIES] > order[CSSLayer.TOKENS] > order[CSSLayer.RESET]

    def test_ordered_layers(self):
        assert [layer.value for layer in ordered_layers()] == [
            "reset",
            "tokens",
            "utilities",
            "components",
            "overrides",
        ]

    def test_public_api_flags(self):
        assert CSS_LAYERS[CSSLayer.COMPONENTS].is_public_api
        assert not CSS_LAYERS[CSSLayer.UTILITIES].is_public_api


class TestResolveLayer:
    def test_accepts_strings_and_members(self):
        assert resolve_layer("tokens") is CSSLayer.TOKENS
        assert resolve_layer(CSSLayer.RESET) is CSSLayer.RESET

    def test_rejects_unknown(self):
        with pytest.raises(StyleConfigError, match="Unknown cascade layer 'base'"):
            resolve_layer("base")


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------


class TestWrapInLayer:
    def test_empty_css(self):
        assert wrap_in_layer("components", "") == ""

    def test_whitespace_css(self):
        assert wrap_in_layer("components", "  ") == ""
        assert wrap_in_layer("components", "\n\t") == ""

    def test_wraps(self):
        assert wrap_in_layer("components", ".a { color: red; }") == (
            "@layer components { .a { color: red; } }"
        )

    def test_enum_member_renders_value(self):
        assert wrap_in_layer(CSSLayer.OVERRIDES, ".a { b: c; }").startswith("@layer overrides {")


class TestUtilitiesAndComponents:
    def test_create_utility_adds_prefix(self):
        assert create_utility("stack", "display: flex;") == (
            "@layer utilities { :where(.u-stack) { display: flex; } }"
        )

    def test_create_utility_keeps_existing_prefix(self):
        assert ":where(.u-grid)" in create_utility("u-grid", "display: grid;")

    def test_create_component(self):
        assert create_component("card", " padding: 1rem; ") == (
            "@layer components { .card { padding: 1rem; } }"
        )


class TestBaseStylesheet:
    def test_declaration_comes_first(self):
        sheet = base_stylesheet()
        assert sheet.startswith(generate_layer_declaration())
        assert sheet.index(CSS_RESET) < sheet.index(UTILITY_CLASSES)

    def test_reset_in_reset_layer(self):
        assert CSS_RESET.startswith("@layer reset {")

    def test_utilities_use_where(self):
        assert ":where(.u-visually-hidden)" in UTILITY_CLASSES
