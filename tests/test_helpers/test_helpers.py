"""Tests for style pattern helpers."""

from modern_css.compiler import compile_style_object
from modern_css.helpers import dark_mode, focus_visible, keyframes, reduced_motion, token


class TestToken:
    def test_reference(self):
        assert token("color", "primary-500") == "var(--color-primary-500)"


class TestKeyframes:
    def test_renders_frames(self):
        css = keyframes("fade-in", {"0%": {"opacity": 0}, "100%": {"opacity": 1}})
        assert css == "@keyframes fade-in { 0% { opacity: 0; } 100% { opacity: 1; } }"

    def test_kebab_cases_and_units(self):
        css = keyframes("slide", {"from": {"marginLeft": 10}})
        assert css == "@keyframes slide { from { margin-left: 10px; } }"


class TestFocusVisible:
    def test_structure(self):
        styles = focus_visible({"outlineColor": "red"})
        assert styles["&:focus"] == {"outline": "none"}
        assert styles["&:focus-visible"]["outline"] == "2px solid var(--color-primary-500)"
        assert styles["&:focus-visible"]["outlineColor"] == "red"

    def test_compiles(self):
        rules = compile_style_object(focus_visible(), "btn")
        assert rules == [
            ".btn:focus { outline: none; }",
            ".btn:focus-visible { outline: 2px solid var(--color-primary-500); "
            "outline-offset: 2px; }",
        ]


class TestMediaVariants:
    def test_reduced_motion(self):
        rules = compile_style_object(
            reduced_motion({"transition": "all 200ms"}, {"transition": "none"}), "s"
        )
        assert rules == [
            ".s { transition: all 200ms; }",
            "@media (prefers-reduced-motion: reduce) { .s { transition: none; } }",
        ]

    def test_dark_mode(self):
        styles = dark_mode({"color": "black"}, {"color": "white"})
        assert styles == {"color": "black", "@media": {"dark": {"color": "white"}}}
