"""
Nulo Lexer Package

Implements a hand-written lexical scanner for the Nulo language.

Key Features:
- Pull-based scanning: one token per call, finite stream ending in EOF
- Line tracking for every token
- Maximal-munch identifiers and integers, single-character symbols
- Extensible keyword table
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, KEYWORD_TYPES
from .config import ScannerConfig
from .scanner import Scanner, ScannerState, tokenize, tokenize_file
from .errors import NuloError, SourceReadError

__all__ = [
    "Scanner",
    "ScannerState",
    "ScannerConfig",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "KEYWORD_TYPES",
    "tokenize",
    "tokenize_file",
    "NuloError",
    "SourceReadError",
]
