#!/usr/bin/env python3
"""
csv2rdf Command Line Interface

Runs a converter over a CSV file and writes the resulting N-Triples file, and
lists the vocabulary namespaces available to converters.
"""

import importlib
import logging
import os
import sys
from typing import Dict, Optional, Tuple, Type

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from csv2rdf import __version__
from csv2rdf.config import load_config
from csv2rdf.converters.converter import Converter
from csv2rdf.converters.errors import ConverterError

console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True)]
)
logger = logging.getLogger(__name__)


def load_converter_class(import_path: str) -> Type[Converter]:
    """Resolve a ``module:ClassName`` path to a Converter subclass."""
    module_name, _, class_name = import_path.partition(':')
    if not module_name or not class_name:
        raise click.BadParameter(f"expected 'module:ClassName', got '{import_path}'")

    # Converters usually live next to the data, not in an installed package
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import module '{module_name}': {e}")

    converter_class = getattr(module, class_name, None)
    if not isinstance(converter_class, type) or not issubclass(converter_class, Converter):
        raise click.BadParameter(f"'{import_path}' is not a Converter subclass")

    return converter_class


def parse_context_options(options: Tuple[str, ...]) -> Dict[str, str]:
    """Turn repeated ``KEY=VALUE`` options into a dict."""
    context = {}
    for option in options:
        key, sep, value = option.partition('=')
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{option}'", param_hint="'--context'")
        context[key.strip()] = value
    return context


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.pass_context
def cli(ctx, version):
    """csv2rdf Conversion CLI

    Converts CSV files into RDF graphs serialized as N-Triples.
    """
    if version:
        console.print(f"[bold blue]csv2rdf v{__version__}[/bold blue]")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command('convert')
@click.argument('converter')
@click.argument('csv_in', type=click.Path())
@click.option('--output-dir', help='Output directory; the file is named after the input with a .nt suffix')
@click.option('--output', help='Exact output file path')
@click.option('--config', 'config_path', help='YAML file with context and vocabularies')
@click.option('--context', 'context_options', multiple=True, help='Context entry as KEY=VALUE (repeatable)')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def convert(converter: str, csv_in: str, output_dir: Optional[str], output: Optional[str],
            config_path: Optional[str], context_options: Tuple[str, ...], verbose: bool):
    """Run CONVERTER (module:ClassName) over CSV_IN."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if bool(output_dir) == bool(output):
        raise click.UsageError("Specify exactly one of --output-dir or --output")

    converter_class = load_converter_class(converter)
    context_overrides = parse_context_options(context_options)

    try:
        run_config = load_config(config_path)
        context = {**run_config.context, **context_overrides}

        if output_dir:
            job = converter_class.from_output_directory(csv_in, output_dir, context,
                                                        vocabularies=run_config.vocabularies)
        else:
            job = converter_class.from_output_path(csv_in, output, context,
                                                   vocabularies=run_config.vocabularies)

        job.run()

    except (ConverterError, NotImplementedError, OSError) as e:
        console.print(f"[red]✗ Conversion failed: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)

    stats = job.get_conversion_statistics()
    table = Table(title="Conversion Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    for key, value in stats.items():
        table.add_row(key.replace('_', ' ').title(), str(value))

    console.print(table)
    console.print(f"[green]✓[/green] N-Triples written to: {escape(str(job.rdf_out))}")


@cli.command('vocabularies')
@click.option('--config', 'config_path', help='YAML file with extra vocabularies')
def vocabularies(config_path: Optional[str]):
    """List the vocabulary namespaces available to converters."""
    try:
        run_config = load_config(config_path)
    except ConverterError as e:
        console.print(f"[red]✗ Failed to load vocabularies: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Vocabularies")
    table.add_column("Prefix", style="cyan")
    table.add_column("Namespace", style="green")

    for prefix, base_uri in run_config.vocabularies.namespaces().items():
        table.add_row(prefix, base_uri)

    console.print(table)


if __name__ == "__main__":
    cli()
