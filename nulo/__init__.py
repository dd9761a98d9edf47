"""
Nulo Language Package

Front end for the Nulo programming language. Currently this is the lexer:
source text goes in, a flat stream of classified tokens comes out.

Architecture:
    nulo/
    ├── lexer/           # Tokens, scanner, scanner config, diagnostics
    ├── source.py        # Loading source files into memory
    ├── display.py       # Printing token streams
    └── cli.py           # nulo-lex command

License: MIT
"""

__version__ = "0.1.0-alpha"
__license__ = "MIT"

from .lexer import (
    Scanner, ScannerConfig, ScannerState, Token, TokenType,
    tokenize, tokenize_file, NuloError, SourceReadError,
)
from .source import read_source, DEFAULT_SOURCE

__all__ = [
    # Core classes
    "Scanner",
    "ScannerConfig",
    "ScannerState",
    "Token",
    "TokenType",

    # Functions
    "tokenize",
    "tokenize_file",
    "read_source",
    "DEFAULT_SOURCE",

    # Errors
    "NuloError",
    "SourceReadError",

    # Version info
    "__version__",
    "__license__",
]
