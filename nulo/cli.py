"""
nulo-lex: scan a Nulo source file and print its tokens.

Examples:
    nulo-lex                      # Scan hello.nulo in the current directory
    nulo-lex prog.nulo            # Scan another file
    nulo-lex prog.nulo --table    # Show the tokens as a table
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .display import render_plain, render_table
from .lexer.errors import SourceReadError
from .lexer.scanner import Scanner
from .source import DEFAULT_SOURCE, read_source
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, default=DEFAULT_SOURCE,
                type=click.Path(dir_okay=True, path_type=str))
@click.option("--table", is_flag=True, help="Render the tokens as a table.")
@click.option("--encoding", default="utf-8", show_default=True,
              help="Text encoding of the source file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="nulo-lex")
def main(path: str, table: bool, encoding: str, verbose: bool) -> None:
    """Scan PATH (default: hello.nulo) and print one line per token."""
    err_console = Console(stderr=True)
    configure_logging(
        logging.DEBUG if verbose else logging.WARNING,
        RichHandler(console=err_console, show_path=False),
    )

    try:
        source = read_source(path, encoding=encoding)
    except SourceReadError as e:
        logger.debug("Failed to load %s (%s)", path, e.code)
        click.echo(f"error: {e.message}", err=True)
        if e.diagnostic.help_text:
            click.echo(f"  help: {e.diagnostic.help_text}", err=True)
        raise SystemExit(1)

    # The scanner's iterator stops right after the first EOF token
    tokens = Scanner(source)
    if table:
        render_table(tokens, Console(file=sys.stdout), title=path)
    else:
        render_plain(tokens, sys.stdout)


if __name__ == "__main__":
    main()
