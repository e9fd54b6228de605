"""CLI entry point for ramldoc."""

import logging
from pathlib import Path

import click

from ramldoc import __version__
from ramldoc.exceptions import RamlDocError
from ramldoc.flatten import FlatModel, flatten_hierarchy
from ramldoc.parser.raml import load_raml
from ramldoc.render.html import HtmlRenderer


def _build_model(input_path: Path) -> FlatModel:
    """Load and flatten a RAML file, turning our errors into CLI errors."""
    try:
        document = load_raml(input_path)
        return flatten_hierarchy(document)
    except RamlDocError as e:
        raise click.ClickException(f"Error parsing {input_path}: {e}") from e
    except OSError as e:
        raise click.ClickException(f"Cannot read {input_path}: {e}") from e


@click.group()
@click.version_option(__version__, prog_name="ramldoc")
def main():
    """ramldoc: render RAML API descriptions as HTML."""
    pass


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Write HTML here instead of stdout.")
@click.option("-v", "--verbose", is_flag=True, help="Log flattening details to stderr.")
def render(input_path: Path, output: Path | None, verbose: bool):
    """Render a RAML file into a single HTML page."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    click.echo(f"Parsing {input_path}...", err=True)
    model = _build_model(input_path)
    click.echo(f"Found {len(model.resources)} resources.", err=True)

    page = HtmlRenderer().render(model)

    if output is None:
        click.echo(page, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page, encoding="utf-8")
    click.echo(f"HTML saved to {output}", err=True)
