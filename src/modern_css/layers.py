"""Cascade layers: the fixed layer order and helpers that wrap CSS in them.

Layer order (lowest to highest precedence):
    1. reset      - minimal browser normalization
    2. tokens     - design tokens as custom properties
    3. utilities  - private ``.u-*`` layout primitives
    4. components - public semantic component classes
    5. overrides  - consumer escape hatch

Layers beat selector specificity, so a rule in ``overrides`` always wins over
``components`` no matter how specific the component selector is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from modern_css.errors import StyleConfigError

__all__ = [
    "CSSLayer",
    "LayerConfig",
    "CSS_LAYERS",
    "CSS_RESET",
    "UTILITY_CLASSES",
    "base_stylesheet",
    "create_component",
    "create_utility",
    "generate_layer_declaration",
    "resolve_layer",
    "wrap_in_layer",
]


class CSSLayer(StrEnum):
    RESET = "reset"
    TOKENS = "tokens"
    UTILITIES = "utilities"
    COMPONENTS = "components"
    OVERRIDES = "overrides"


@dataclass(frozen=True)
class LayerConfig:
    """Metadata for one cascade layer."""

    name: CSSLayer
    order: int
    description: str
    is_public_api: bool


CSS_LAYERS: dict[CSSLayer, LayerConfig] = {
    CSSLayer.RESET: LayerConfig(
        CSSLayer.RESET, 1, "Minimal, orthogonal browser normalization", False
    ),
    CSSLayer.TOKENS: LayerConfig(
        CSSLayer.TOKENS, 2, "Design tokens as CSS custom properties", True
    ),
    CSSLayer.UTILITIES: LayerConfig(
        CSSLayer.UTILITIES, 3, "Private .u-* prefixed layout primitives", False
    ),
    CSSLayer.COMPONENTS: LayerConfig(
        CSSLayer.COMPONENTS, 4, "Public semantic component classes", True
    ),
    CSSLayer.OVERRIDES: LayerConfig(
        CSSLayer.OVERRIDES, 5, "Consumer escape hatch for customization", True
    ),
}


def resolve_layer(value: str | CSSLayer) -> CSSLayer:
    """Return the :class:`CSSLayer` named by *value*.

    Raises :class:`StyleConfigError` for anything outside the five layers.
    """
    try:
        return CSSLayer(value)
    except ValueError:
        known = ", ".join(layer.value for layer in ordered_layers())
        raise StyleConfigError(
            f"Unknown cascade layer {value!r}; expected one of: {known}", key="layer"
        ) from None


def ordered_layers() -> list[CSSLayer]:
    return [cfg.name for cfg in sorted(CSS_LAYERS.values(), key=lambda c: c.order)]


def generate_layer_declaration() -> str:
    """Return the ``@layer`` statement that fixes the cascade order.

    It must appear once, before any layered rules, at the top of a full
    stylesheet.
    """
    return f"@layer {', '.join(layer.value for layer in ordered_layers())};"


def wrap_in_layer(layer: str | CSSLayer, css: str) -> str:
    """Wrap *css* in an ``@layer`` block; blank input yields ``""``."""
    if not css.strip():
        return ""
    return f"@layer {layer} {{ {css} }}"


def create_utility(name: str, declarations: str) -> str:
    """Build a zero-specificity ``u-`` utility rule in the utilities layer."""
    class_name = name if name.startswith("u-") else f"u-{name}"
    return wrap_in_layer(
        CSSLayer.UTILITIES, f":where(.{class_name}) {{ {declarations.strip()} }}"
    )


def create_component(name: str, declarations: str) -> str:
    """Build a semantic component rule in the components layer."""
    return wrap_in_layer(CSSLayer.COMPONENTS, f".{name} {{ {declarations.strip()} }}")


CSS_RESET = wrap_in_layer(
    CSSLayer.RESET,
    "\n".join(
        [
            "*, *::before, *::after { box-sizing: border-box; }",
            "* { margin: 0; }",
            "body { line-height: 1.5; -webkit-font-smoothing: antialiased; }",
            "img, picture, video, canvas, svg { display: block; max-width: 100%; }",
            "input, button, textarea, select { font: inherit; }",
            "p, h1, h2, h3, h4, h5, h6 { overflow-wrap: break-word; }",
            ":focus { outline: 2px solid transparent; outline-offset: 2px; }",
            ":focus-visible { outline: 2px solid currentColor; outline-offset: 2px; }",
            "@media (prefers-reduced-motion: reduce) { *, *::before, *::after {"
            " animation-duration: 0.01ms !important;"
            " animation-iteration-count: 1 !important;"
            " transition-duration: 0.01ms !important;"
            " scroll-behavior: auto !important; } }",
        ]
    ),
)

UTILITY_CLASSES = "\n".join(
    [
        create_utility(
            "stack",
            "display: flex; flex-direction: column; justify-content: flex-start;"
            " gap: var(--space-4, 1rem);",
        ),
        create_utility(
            "cluster",
            "display: flex; flex-wrap: wrap; gap: var(--space-4, 1rem);"
            " justify-content: flex-start; align-items: center;",
        ),
        create_utility(
            "center",
            "box-sizing: content-box; margin-inline: auto;"
            " max-inline-size: var(--measure, 60ch);"
            " padding-inline-start: var(--space-4, 1rem);"
            " padding-inline-end: var(--space-4, 1rem);",
        ),
        create_utility(
            "grid",
            "display: grid; gap: var(--space-4, 1rem);"
            " grid-template-columns: repeat(auto-fit, minmax(var(--grid-min, 16rem), 1fr));",
        ),
        create_utility(
            "visually-hidden",
            "position: absolute !important; width: 1px !important;"
            " height: 1px !important; padding: 0 !important; margin: -1px !important;"
            " overflow: hidden !important; clip: rect(0, 0, 0, 0) !important;"
            " white-space: nowrap !important; border: 0 !important;",
        ),
    ]
)


def base_stylesheet() -> str:
    """Layer declaration, reset and utilities, in that order."""
    return "\n\n".join([generate_layer_declaration(), CSS_RESET, UTILITY_CLASSES])
