"""
tokensmith command-line interface.

Commands:
- convert: token export -> artifacts for one output format
- formats: list the supported output formats
- inspect: summarize a token export without generating anything
"""

import logging
import os
import sys
from pathlib import Path

import typer
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ._version import __version__
from .core.errors import TokensmithError
from .core.fileset import write_artifacts
from .core.ir import NormalizedTokens
from .core.loader import load_token_file
from .core.manifest import resolve_config
from .core.parser import parse_figma_tokens
from .core.tree import walk_leaves
from .generators import FORMAT_INFO, generate, resolve_format

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "TOKENSMITH_LOG_LEVEL"

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tokensmith version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """DEBUG with --verbose, else $TOKENSMITH_LOG_LEVEL, else WARNING."""
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelNamesMapping().get(name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("tokensmith").setLevel(level)


def print_error(message: str) -> None:
    err_console.print(Text(f"✗ {message}", style="bold red"))


def swatch(value: str) -> Text:
    """Colored block for a hex value; blank when the terminal cannot parse it."""
    try:
        Color.parse(value)
    except ColorParseError:
        return Text("")
    return Text("      ", style=f"on {value}")


def _load_tokens(path: Path) -> NormalizedTokens:
    return parse_figma_tokens(load_token_file(path))


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="tokensmith - convert Figma design-token exports into theme files",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """tokensmith main callback for global options."""
    configure_logging(verbose)


@app.command()
def convert(
    input_file: Path | None = typer.Argument(  # noqa: B008
        None,
        help="Figma token export (.json). Defaults to 'input' from tokensmith.toml",
    ),
    fmt: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (see 'tokensmith formats')",
    ),
    output_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--output",
        "-o",
        help="Directory to write artifacts into",
    ),
    stdout: bool = typer.Option(False, "--stdout", help="Print artifacts instead of writing them"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Path to tokensmith.toml or pyproject.toml",
    ),
) -> None:
    """
    Convert a token export into one output format.
    """
    try:
        config = resolve_config(config_path)
        logger.debug("Config: %s", config.source or "defaults")
        source = input_file or config.input
        if source is None:
            print_error("No input file given and no 'input' configured")
            raise typer.Exit(code=1)

        output_format = resolve_format(fmt) if fmt else config.format
        tokens = _load_tokens(source)
        results = generate(tokens, output_format)
    except TokensmithError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if stdout:
        for result in results:
            console.rule(result.filename)
            console.print(Syntax(result.content, result.language, word_wrap=True))
        return

    target = output_dir or config.output_dir
    try:
        written = write_artifacts(results, target)
    except OSError as e:
        print_error(f"Could not write artifacts to {target}: {e}")
        raise typer.Exit(code=1) from e
    info = FORMAT_INFO[output_format]
    console.print(f"[green]✓[/green] Generated {len(written)} {info.name} file(s) in {target}")
    for path in written:
        console.print(f"  • {path.name}")


@app.command()
def formats() -> None:
    """
    List the supported output formats.
    """
    table = Table(title="Output formats")
    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Description", style="bright_black")
    for output_format, info in FORMAT_INFO.items():
        table.add_row(output_format.value, info.name, info.description)
    console.print(table)


@app.command()
def inspect(
    input_file: Path = typer.Argument(..., help="Figma token export (.json)"),  # noqa: B008
) -> None:
    """
    Summarize the colors, typography and gradients in a token export.
    """
    try:
        tokens = _load_tokens(input_file)
    except TokensmithError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    colors = list(walk_leaves(tokens.colors))
    console.print(f"[bold]Colors:[/bold] {len(colors)}")
    if colors:
        table = Table()
        table.add_column("Token", style="cyan")
        table.add_column("Value")
        table.add_column("Preview")
        for path, value in colors:
            table.add_row(".".join(path), value, swatch(value))
        console.print(table)

    styles = list(tokens.iter_typography())
    console.print(f"[bold]Typography styles:[/bold] {len(styles)}")
    if styles:
        table = Table()
        table.add_column("Device", style="cyan")
        table.add_column("Locale")
        table.add_column("Styles", justify="right")
        for device, locales in tokens.typography.items():
            for locale, locale_styles in locales.items():
                table.add_row(device, locale, str(len(locale_styles)))
        console.print(table)
        console.print(f"Font families: {', '.join(tokens.font_families())}")

    gradients = list(tokens.iter_gradients())
    console.print(f"[bold]Gradients:[/bold] {len(gradients)}")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
