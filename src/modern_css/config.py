from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompilerSettings:
    container_selector: str = "component-container"
    default_layer: str = "components"
    rule_separator: str = "\n"
