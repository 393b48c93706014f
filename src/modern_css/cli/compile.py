"""CLI command: modern-css compile -- compile a JSON component style config."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from modern_css.compiler import compile_styles
from modern_css.errors import StyleConfigError
from modern_css.layers import CSSLayer
from modern_css.model import ComponentStyleConfig


@click.command("compile")
@click.argument("config_file", type=click.Path(exists=True))
@click.option(
    "--layer",
    type=click.Choice([layer.value for layer in CSSLayer]),
    default=None,
    help="Override the cascade layer from the config file",
)
@click.option("--json", "as_json", is_flag=True, help="Print class map and CSS as JSON")
def compile_command(config_file: str, layer: str | None, as_json: bool) -> None:
    """Compile a component style config (JSON) into layered CSS.

    The file holds ``{"layer": ..., "container": {...}, "styles": {...}}``.
    Exits with code 1 on malformed input.
    """
    path = Path(config_file)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Invalid JSON in {path.name}: {exc}", err=True)
        sys.exit(1)

    if layer is not None and isinstance(data, dict):
        data["layer"] = layer

    try:
        config = ComponentStyleConfig.from_dict(data)
        result = compile_styles(config)
    except StyleConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.css)
