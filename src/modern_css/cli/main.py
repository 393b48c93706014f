"""modern-css CLI entry point: Click group with subcommands."""

import logging

import click

from modern_css import __version__
from modern_css.layers import base_stylesheet, generate_layer_declaration


@click.group()
@click.version_option(version=__version__, prog_name="modern-css")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """modern-css - compile nested style objects into layered CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
def layers() -> None:
    """Print the @layer statement that fixes the cascade order."""
    click.echo(generate_layer_declaration())


@cli.command()
def stylesheet() -> None:
    """Print the base stylesheet: layer order, reset and utilities."""
    click.echo(base_stylesheet())


from modern_css.cli.compile import compile_command  # noqa: E402

cli.add_command(compile_command)
