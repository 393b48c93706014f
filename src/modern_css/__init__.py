"""modern_css: nested style objects compiled into cascade-layered CSS."""
from __future__ import annotations

__version__ = "0.1.0"

from modern_css.compiler import (  # noqa: E402
    classify_key,
    compile_style_object,
    compile_styles,
    create_component_styles,
    format_value,
    partition,
    resolve_media_query,
    responsive_component,
)
from modern_css.config import CompilerSettings  # noqa: E402
from modern_css.errors import ModernCSSError, StyleConfigError  # noqa: E402
from modern_css.helpers import (  # noqa: E402
    dark_mode,
    focus_visible,
    keyframes,
    reduced_motion,
    token,
)
from modern_css.layers import (  # noqa: E402
    CSS_LAYERS,
    CSSLayer,
    base_stylesheet,
    create_component,
    create_utility,
    generate_layer_declaration,
    wrap_in_layer,
)
from modern_css.model import (  # noqa: E402
    CompiledStyles,
    ComponentStyleConfig,
    ContainerConfig,
    KeyKind,
)
from modern_css.naming import generate_class_name, kebab_case  # noqa: E402
from modern_css.registry import (  # noqa: E402
    inline_style_tag,
    pop_style_scope,
    push_style_scope,
    should_inject_style,
    style_key,
    style_scope,
)

__all__ = [
    "__version__",
    "CSS_LAYERS",
    "CSSLayer",
    "CompiledStyles",
    "CompilerSettings",
    "ComponentStyleConfig",
    "ContainerConfig",
    "KeyKind",
    "ModernCSSError",
    "StyleConfigError",
    "base_stylesheet",
    "classify_key",
    "compile_style_object",
    "compile_styles",
    "create_component",
    "create_component_styles",
    "create_utility",
    "dark_mode",
    "focus_visible",
    "format_value",
    "generate_class_name",
    "generate_layer_declaration",
    "inline_style_tag",
    "kebab_case",
    "keyframes",
    "partition",
    "pop_style_scope",
    "push_style_scope",
    "reduced_motion",
    "resolve_media_query",
    "responsive_component",
    "should_inject_style",
    "style_key",
    "style_scope",
    "token",
    "wrap_in_layer",
]
