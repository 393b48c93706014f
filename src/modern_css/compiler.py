"""Style object compiler: nested style mappings to flat, layered CSS text.

A style object is an ordered mapping whose keys are either CSS properties,
nested selectors, or at-rule groups::

    {
        "padding": "1rem",
        "&:hover": {"opacity": 0.8},
        " .icon": {"width": 16},
        "@media": {"mobile": {"padding": "0.5rem"}},
        "@container": {"(min-width: 400px)": {"display": "grid"}},
        "@supports": {"(display: grid)": {"display": "grid"}},
    }

Every key is classified up front (:func:`classify_key`), then emitted in a
fixed bucket order: base rule, nested selectors, container queries, media
queries, supports queries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from modern_css.config import CompilerSettings
from modern_css.errors import StyleConfigError
from modern_css.layers import CSSLayer, wrap_in_layer
from modern_css.model import (
    CompiledStyles,
    ComponentStyleConfig,
    ContainerConfig,
    KeyKind,
    StyleObject,
)
from modern_css.naming import generate_class_name, kebab_case

__all__ = [
    "BREAKPOINTS",
    "UNITLESS_PROPERTIES",
    "StyleBuckets",
    "classify_key",
    "compile_style_object",
    "compile_styles",
    "create_component_styles",
    "format_value",
    "partition",
    "resolve_media_query",
    "responsive_component",
]

logger = logging.getLogger(__name__)

_UNITLESS_CAMEL = (
    "opacity",
    "flexGrow",
    "flexShrink",
    "fontWeight",
    "lineHeight",
    "order",
    "zIndex",
    "animationIterationCount",
    "aspectRatio",
)

# Accept both spellings so "z-index" and "zIndex" behave the same.
UNITLESS_PROPERTIES = frozenset(_UNITLESS_CAMEL) | frozenset(
    kebab_case(name) for name in _UNITLESS_CAMEL
)

BREAKPOINTS: dict[str, str] = {
    "mobile": "(max-width: 640px)",
    "tablet": "(min-width: 641px) and (max-width: 1024px)",
    "desktop": "(min-width: 1025px)",
    "wide": "(min-width: 1441px)",
    "print": "print",
    "reduced-motion": "(prefers-reduced-motion: reduce)",
    "dark": "(prefers-color-scheme: dark)",
    "light": "(prefers-color-scheme: light)",
    "high-contrast": "(prefers-contrast: high)",
}

_AT_RULE_KINDS: dict[str, KeyKind] = {
    "@container": KeyKind.CONTAINER,
    "@media": KeyKind.MEDIA,
    "@supports": KeyKind.SUPPORTS,
}


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify_key(key: str) -> KeyKind:
    """Classify a style key by its syntax. Total over all strings."""
    if key.startswith("&") or key.startswith(" "):
        return KeyKind.NESTED_SELECTOR
    return _AT_RULE_KINDS.get(key, KeyKind.PROPERTY)


@dataclass(frozen=True)
class StyleBuckets:
    """A style object split by key kind, each bucket in insertion order."""

    base: list[tuple[str, Any]] = field(default_factory=list)
    nested: list[tuple[str, StyleObject]] = field(default_factory=list)
    container: list[tuple[str, StyleObject]] = field(default_factory=list)
    media: list[tuple[str, StyleObject]] = field(default_factory=list)
    supports: list[tuple[str, StyleObject]] = field(default_factory=list)


def _conditions(
    key: str, value: Any, path: tuple[str, ...]
) -> list[tuple[str, StyleObject]]:
    if not isinstance(value, Mapping):
        raise StyleConfigError(
            f"{key} must map condition strings to style objects, "
            f"got {type(value).__name__}",
            key=key,
            path=path,
        )
    groups: list[tuple[str, StyleObject]] = []
    for condition, inner in value.items():
        if inner is None:
            continue
        if not isinstance(inner, Mapping):
            raise StyleConfigError(
                f"{key} condition {condition!r} must be a style object, "
                f"got {type(inner).__name__}",
                key=key,
                path=path,
            )
        groups.append((str(condition), inner))
    return groups


def partition(style: StyleObject, path: tuple[str, ...] = ()) -> StyleBuckets:
    """Split *style* into buckets. Pure: the same input gives the same buckets.

    ``None`` values are dropped. Raises :class:`StyleConfigError` when a
    nested selector or at-rule group is not a mapping, or when a property
    holds a mapping.
    """
    buckets = StyleBuckets()
    for key, value in style.items():
        if value is None:
            continue
        kind = classify_key(key)
        if kind is KeyKind.PROPERTY:
            if isinstance(value, Mapping):
                raise StyleConfigError(
                    f"property {key!r} holds a nested style object; nested "
                    "selectors must start with '&' or a space",
                    key=key,
                    path=path,
                )
            buckets.base.append((key, value))
        elif kind is KeyKind.NESTED_SELECTOR:
            if not isinstance(value, Mapping):
                raise StyleConfigError(
                    f"nested selector {key!r} must be a style object, "
                    f"got {type(value).__name__}",
                    key=key,
                    path=path,
                )
            buckets.nested.append((key, value))
        elif kind is KeyKind.CONTAINER:
            buckets.container.extend(_conditions(key, value, path))
        elif kind is KeyKind.MEDIA:
            buckets.media.extend(_conditions(key, value, path))
        else:
            buckets.supports.extend(_conditions(key, value, path))
    return buckets


# ---------------------------------------------------------------------------
# Values and conditions
# ---------------------------------------------------------------------------


def _number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(prop: str, value: Any) -> str:
    """Render a declaration value; bare numbers get ``px`` unless unitless."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        if prop in UNITLESS_PROPERTIES:
            return _number(value)
        return f"{_number(value)}px"
    return str(value)


def resolve_media_query(condition: str) -> str:
    """Map a breakpoint name or raw condition to a media query.

    Named breakpoints come from :data:`BREAKPOINTS`; parenthesized features
    pass through; anything else is taken as a ``min-width`` value.
    """
    if condition in BREAKPOINTS:
        return BREAKPOINTS[condition]
    if condition.startswith("(") and condition.endswith(")"):
        return condition
    logger.debug("Unknown breakpoint %r, treating it as min-width", condition)
    return f"(min-width: {condition})"


# ---------------------------------------------------------------------------
# Recursive compilation
# ---------------------------------------------------------------------------


def _compose_selector(parent: str, key: str) -> str:
    if key.startswith("&"):
        return key.replace("&", parent, 1)
    return f"{parent}{key}"


def _declarations(base: list[tuple[str, Any]]) -> str:
    return " ".join(f"{kebab_case(prop)}: {format_value(prop, value)};" for prop, value in base)


def _compile(style: StyleObject, selector: str, path: tuple[str, ...]) -> list[str]:
    buckets = partition(style, path)
    rules: list[str] = []

    if buckets.base:
        rules.append(f"{selector} {{ {_declarations(buckets.base)} }}")

    for key, nested in buckets.nested:
        rules.extend(_compile(nested, _compose_selector(selector, key), path + (key,)))

    at_rules = (
        ("@container", buckets.container, lambda c: c),
        ("@media", buckets.media, resolve_media_query),
        ("@supports", buckets.supports, lambda c: c),
    )
    for at_keyword, groups, resolve in at_rules:
        for condition, inner in groups:
            inner_rules = _compile(inner, selector, path + (at_keyword, condition))
            if inner_rules:
                rules.append(f"{at_keyword} {resolve(condition)} {{ {' '.join(inner_rules)} }}")

    return rules


def compile_style_object(style: StyleObject, selector: str) -> list[str]:
    """Compile *style* for the class *selector* (no leading dot).

    Returns rule fragments in bucket order. An empty style object yields an
    empty list rather than an empty rule.
    """
    return _compile(style, f".{selector}", (selector,))


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def _container_rule(container: ContainerConfig, settings: CompilerSettings) -> str:
    declarations = []
    if container.name:
        declarations.append(f"container-name: {container.name};")
    if container.type:
        declarations.append(f"container-type: {container.type};")
    if not declarations:
        return ""
    return f".{settings.container_selector} {{ {' '.join(declarations)} }}"


def compile_styles(
    config: ComponentStyleConfig, settings: CompilerSettings | None = None
) -> CompiledStyles:
    """Compile every style in *config* and wrap the result in its layer.

    Class names are minted with a counter that starts at zero for each call,
    so the same key compiled in two calls is not guaranteed a stable name.
    """
    settings = settings or CompilerSettings()
    class_map: dict[str, str] = {}
    rules: list[str] = []

    if config.container is not None:
        container_css = _container_rule(config.container, settings)
        if container_css:
            rules.append(container_css)

    for counter, (key, style) in enumerate(config.styles.items()):
        if not isinstance(style, Mapping):
            raise StyleConfigError(
                f"style {key!r} must be a mapping", key=key, path=("styles",)
            )
        class_name = generate_class_name(key, counter)
        class_map[key] = class_name
        rules.extend(_compile(style, f".{class_name}", (key,)))

    css = wrap_in_layer(config.layer, settings.rule_separator.join(rules))
    logger.debug(
        "Compiled %d style(s) into %d rule(s) in layer %s",
        len(class_map),
        len(rules),
        config.layer,
    )
    return CompiledStyles(class_map=class_map, css=css)


def create_component_styles(
    name: str,
    styles: Mapping[str, StyleObject],
    *,
    use_container: bool = True,
    layer: str | CSSLayer | None = None,
    settings: CompilerSettings | None = None,
) -> CompiledStyles:
    """Compile component styles, by default inside an inline-size container named *name*."""
    settings = settings or CompilerSettings()
    layer = layer or settings.default_layer
    container = ContainerConfig(name=name, type="inline-size") if use_container else None
    return compile_styles(
        ComponentStyleConfig(styles=styles, layer=layer, container=container), settings
    )


def responsive_component(
    name: str, styles: Mapping[str, StyleObject], settings: CompilerSettings | None = None
) -> CompiledStyles:
    return create_component_styles(name, styles, settings=settings)
