from __future__ import annotations

import pytest
from flask import Flask, render_template_string

from modern_css.compiler import compile_styles
from modern_css.model import ComponentStyleConfig
from modern_css.registry import inline_style_tag, scope_depth
from modern_css.web import init_app

CARD = compile_styles(
    ComponentStyleConfig(styles={"card": {"padding": "1rem", "&:hover": {"opacity": 0.9}}})
)


def _card(title: str) -> str:
    """Render one card, emitting its styles only the first time per request."""
    cls = CARD.class_map["card"]
    return f'{inline_style_tag("card", CARD.css)}<div class="{cls}">{title}</div>'


@pytest.fixture
def app():
    """Create a Flask app with style scoping installed."""
    application = Flask(__name__)
    application.config["TESTING"] = True
    init_app(application)

    @application.route("/cards")
    def cards():
        return "".join(_card(title) for title in ("one", "two", "three"))

    @application.route("/template")
    def template():
        return render_template_string(
            "{{ style_tag('card', css) }}{{ style_tag('card', css) }}<p>ok</p>",
            css=CARD.css,
        )

    @application.route("/depth")
    def depth():
        return str(scope_depth())

    @application.route("/boom")
    def boom():
        raise RuntimeError("render failed")

    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def card():
    """The compiled card styles shared by every route."""
    return CARD
