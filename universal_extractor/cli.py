"""CLI interface for Universal Extractor."""

import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console

from . import __version__
from .config import Config
from .definitions import ExtractionDefinition, get_definition
from .engine import extract as extract_tokens
from .engine import list_definitions
from .exceptions import (
    ConfigurationError,
    DefinitionNotFoundError,
    UniversalExtractorError,
)
from .formats import SUPPORTED_EXTENSIONS
from .reader import DocumentReader
from .utils import save_result, setup_logging, suggest_output_filename

# Load environment variables
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

console = Console()


def _resolve_definition(
    ctx: click.Context, param: click.Parameter, value: str
) -> ExtractionDefinition:
    try:
        return get_definition(value)
    except DefinitionNotFoundError as e:
        raise click.BadParameter(
            f"{e}. Run 'universal-extractor definitions' to list them."
        ) from e


@click.group()
@click.version_option(version=__version__, prog_name="universal-extractor")
def cli() -> None:
    """Universal Extractor CLI - Pull e-mails, phone numbers, IBANs, hashes
    and more out of PDF, Word, OpenDocument, RTF and text files."""
    pass


@cli.command()
def definitions() -> None:
    """List the available extraction definitions."""
    for definition in list_definitions():
        console.print(
            f"[green]{definition.name}[/green] "
            f"([cyan]{definition.slug}[/cyan]) - {definition.description}"
        )


@cli.command()
def formats() -> None:
    """List the supported file extensions."""
    console.print(" ".join(sorted(SUPPORTED_EXTENSIONS)))


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--definition",
    "-d",
    "definition",
    required=True,
    callback=_resolve_definition,
    help="Name of the data to extract, e.g. 'E-mail address' or 'IPv4_addresses'",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    help="Directory for the result file (default: current directory)",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    help="Exact path of the result file (overrides --output-dir)",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the extracted values instead of writing a file",
)
@click.option(
    "--encoding",
    help="Text encoding for plain text files (default: utf-8-sig)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def extract(
    file_path: str,
    definition: ExtractionDefinition,
    output_dir: Optional[str],
    output_file: Optional[str],
    to_stdout: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """Extract one kind of data from a document and save it as text.

    The result holds one value per line, deduplicated and sorted without
    regard to case. By default it is written to
    <file name>_<definition>.txt in the output directory.
    """
    try:
        config = Config.from_env()
        config = Config(
            encoding=encoding or config.encoding,
            output_dir=output_dir or config.output_dir,
            verbose=verbose or config.verbose,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        sys.exit(1)

    setup_logging(config.verbose)

    file_path_obj = Path(file_path)
    reader = DocumentReader(config)

    if not reader.is_supported(file_path_obj):
        console.print("[yellow]Unsupported file type selected.[/yellow]")
        sys.exit(1)

    try:
        if not to_stdout:
            console.print(f"[green]Document:[/green] {file_path_obj.name}")
            console.print(f"[green]Extracting:[/green] {definition.name}")

        text = reader.read_as_text(file_path_obj)
        result = extract_tokens(definition, text)

        if to_stdout:
            for value in result:
                click.echo(value)
            return

        if not result:
            console.print(
                "[yellow]No matching data found. "
                "An empty output will be created.[/yellow]"
            )
        else:
            console.print(f"[green]Found {len(result)} unique values[/green]")

        if output_file:
            destination = Path(output_file)
        else:
            destination = Path(config.output_dir) / suggest_output_filename(
                file_path_obj, definition
            )

        save_result(result, destination)
        console.print("[green]Extraction file created successfully.[/green]")
        console.print(f"[green]Saved to:[/green] {destination}")

    except UniversalExtractorError as e:
        console.print(f"[red]Extraction failed: {str(e)}[/red]")
        if config.verbose:
            console.print_exception()
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not write result: {str(e)}[/red]")
        if config.verbose:
            console.print_exception()
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
