"""Style model: component configs, compiled results, and key kinds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Union

from modern_css.errors import StyleConfigError
from modern_css.layers import CSSLayer, resolve_layer

__all__ = [
    "CompiledStyles",
    "ComponentStyleConfig",
    "ContainerConfig",
    "KeyKind",
    "StyleObject",
    "StyleValue",
]

StyleValue = Union[str, int, float, None, Mapping[str, Any]]
StyleObject = Mapping[str, Any]

CONTAINER_TYPES = ("normal", "size", "inline-size", "block-size")


class KeyKind(StrEnum):
    """What a style key denotes, decided from its syntax alone."""

    PROPERTY = "property"
    NESTED_SELECTOR = "nested_selector"
    CONTAINER = "container"
    MEDIA = "media"
    SUPPORTS = "supports"


@dataclass(frozen=True)
class ContainerConfig:
    """Container setup emitted as ``container-name`` / ``container-type``."""

    name: str | None = None
    type: str | None = None  # normal, size, inline-size, block-size


@dataclass(frozen=True)
class ComponentStyleConfig:
    """Input to :func:`modern_css.compile_styles`.

    Attributes:
        styles: Semantic style key (``"button"``) to its StyleObject.
        layer: Target cascade layer; normalized to :class:`CSSLayer`.
        container: Optional container metadata.
    """

    styles: Mapping[str, StyleObject]
    layer: CSSLayer = CSSLayer.COMPONENTS
    container: ContainerConfig | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "layer", resolve_layer(self.layer))
        if not isinstance(self.styles, Mapping):
            raise StyleConfigError("styles must be a mapping", key="styles")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComponentStyleConfig:
        """Build a config from plain data, e.g. a decoded JSON document."""
        if not isinstance(data, Mapping):
            raise StyleConfigError("component config must be a mapping")
        styles = data.get("styles")
        if not isinstance(styles, Mapping):
            raise StyleConfigError("'styles' must be a mapping", key="styles")
        for name, style in styles.items():
            if not isinstance(style, Mapping):
                raise StyleConfigError(
                    f"style {name!r} must be a mapping", key=name, path=("styles",)
                )

        container = None
        raw_container = data.get("container")
        if raw_container is not None:
            if not isinstance(raw_container, Mapping):
                raise StyleConfigError("'container' must be a mapping", key="container")
            ctype = raw_container.get("type")
            if ctype is not None and ctype not in CONTAINER_TYPES:
                raise StyleConfigError(
                    f"container type {ctype!r} is not one of {', '.join(CONTAINER_TYPES)}",
                    key="type",
                    path=("container",),
                )
            container = ContainerConfig(name=raw_container.get("name"), type=ctype)

        return cls(
            styles=styles,
            layer=data.get("layer", CSSLayer.COMPONENTS),
            container=container,
        )


@dataclass(frozen=True)
class CompiledStyles:
    """Result of one compile call. ``class_map`` is unique to this call."""

    class_map: dict[str, str] = field(default_factory=dict)
    css: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"class_map": dict(self.class_map), "css": self.css}
