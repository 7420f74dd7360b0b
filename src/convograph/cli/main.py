"""CLI entry point."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from convograph import __version__
from convograph.cli.commands.analyze import analyze
from convograph.cli.commands.ask import ask
from convograph.cli.commands.graph import graph_group
from convograph.cli.output import print_banner
from convograph.config import load_settings

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="convograph")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="YAML settings file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Turn conversations into a queryable knowledge graph."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["console"] = console

    if ctx.invoked_subcommand is None:
        print_banner(console, __version__)
        click.echo(ctx.get_help())


cli.add_command(analyze)
cli.add_command(ask)
cli.add_command(graph_group, "graph")
