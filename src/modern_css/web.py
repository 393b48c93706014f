"""Flask integration: one style dedup scope per request."""

from __future__ import annotations

from flask import Flask, g
from markupsafe import Markup

from modern_css.registry import inline_style_tag, pop_style_scope, push_style_scope

_SCOPE_FLAG = "_modern_css_scope"


def _open_scope() -> None:
    push_style_scope()
    setattr(g, _SCOPE_FLAG, True)


def _close_scope(exc: BaseException | None = None) -> None:
    # Only pop what this request pushed.
    if g.pop(_SCOPE_FLAG, False):
        pop_style_scope()


def style_tag(component_name: str, css: str) -> Markup:
    """Template helper: ``{{ style_tag("card", card_css) }}``."""
    return Markup(inline_style_tag(component_name, css))


def init_app(app: Flask) -> Flask:
    """Bracket every request of *app* in a style dedup scope.

    Also registers ``style_tag`` as a Jinja global.
    """
    app.before_request(_open_scope)
    app.teardown_request(_close_scope)
    app.add_template_global(style_tag, "style_tag")
    app.extensions["modern_css"] = {"style_tag": style_tag}
    return app
