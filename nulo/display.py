"""Rendering token streams for people to read."""

import sys
from typing import Iterable, Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table

from .lexer.tokens import Token, TokenType


def format_token(token: Token) -> str:
    """One line per token: line number, type label and lexeme (except for EOF)."""
    head = f"{token.line:4d}  {token.type.label:<10}"
    if token.type == TokenType.EOF:
        return head.rstrip()
    return f"{head} {token.text}"


def render_plain(tokens: Iterable[Token], stream: Optional[TextIO] = None) -> int:
    """
    Write each token on its own line.

    Returns:
        Number of tokens written
    """
    out = stream if stream is not None else sys.stdout
    count = 0
    for token in tokens:
        out.write(format_token(token) + "\n")
        count += 1
    return count


def build_table(tokens: Iterable[Token], title: Optional[str] = "Tokens") -> Table:
    table = Table(
        title=title,
        header_style="bold cyan",
        box=box.SIMPLE_HEAD,
        show_lines=False,
    )
    table.add_column("Line", style="dim", justify="right", width=6)
    table.add_column("Type", style="bold")
    table.add_column("Lexeme", overflow="fold")

    for token in tokens:
        lexeme = "" if token.type == TokenType.EOF else repr(token.text)
        table.add_row(f"{token.line:04d}", token.type.label, lexeme)
    return table


def render_table(tokens: Iterable[Token], console: Optional[Console] = None,
                 title: Optional[str] = "Tokens") -> None:
    """Print the tokens as a rich table."""
    console = console or Console()
    console.print(build_table(tokens, title=title))
