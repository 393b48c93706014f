"""Small builders for common style patterns."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from modern_css.compiler import format_value
from modern_css.naming import kebab_case

__all__ = ["dark_mode", "focus_visible", "keyframes", "reduced_motion", "token"]


def token(category: str, key: str) -> str:
    """Reference a design token, e.g. ``token("color", "primary-500")``."""
    return f"var(--{category}-{key})"


def keyframes(name: str, frames: Mapping[str, Mapping[str, Any]]) -> str:
    """Render an ``@keyframes`` block from ``{"0%": {...}, "100%": {...}}``."""
    blocks = []
    for selector, declarations in frames.items():
        body = " ".join(
            f"{kebab_case(prop)}: {format_value(prop, value)};"
            for prop, value in declarations.items()
        )
        blocks.append(f"{selector} {{ {body} }}")
    return f"@keyframes {name} {{ {' '.join(blocks)} }}"


def focus_visible(styles: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Drop the default focus ring and draw one only for keyboard focus."""
    return {
        "&:focus": {"outline": "none"},
        "&:focus-visible": {
            "outline": f"2px solid {token('color', 'primary-500')}",
            "outlineOffset": "2px",
            **(styles or {}),
        },
    }


def reduced_motion(
    normal: Mapping[str, Any], reduced: Mapping[str, Any]
) -> dict[str, Any]:
    return {**normal, "@media": {"reduced-motion": dict(reduced)}}


def dark_mode(light: Mapping[str, Any], dark: Mapping[str, Any]) -> dict[str, Any]:
    return {**light, "@media": {"dark": dict(dark)}}
