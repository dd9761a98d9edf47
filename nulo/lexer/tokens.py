"""
Token definitions for the Nulo lexer.

This module defines the token types produced by the scanner:
- Identifiers and keywords
- Integer literals
- Single-character symbols (punctuation, operators, anything unrecognized)
- The end-of-input marker
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """
    Enumeration of all token types in Nulo.

    The set is closed: every character of a source buffer ends up in exactly
    one of these.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input, spans zero characters

    # ========================================================================
    # Literals
    # ========================================================================
    NUMBER = auto()                 # 42, 007 (plain decimal digits only)

    # ========================================================================
    # Identifiers and Keywords
    # ========================================================================
    IDENTIFIER = auto()             # add, _tmp, x1

    FUNC = auto()                   # func

    # ========================================================================
    # Symbols
    # ========================================================================
    SYMBOL = auto()                 # ( ) { } ; , = + and every other single char

    @property
    def label(self) -> str:
        """Human-readable name used when displaying tokens."""
        return TOKEN_LABELS[self]


# Keyword types all display as "Keyword"; the lexeme tells them apart
TOKEN_LABELS = {
    TokenType.EOF: "EndOfInput",
    TokenType.NUMBER: "Number",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.FUNC: "Keyword",
    TokenType.SYMBOL: "Symbol",
}


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics and for displaying where a token came from.
    """
    filename: str
    line: int
    offset: int  # Character index from start of buffer

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Nulo language.

    The text is a copy of the consumed span, so a token stays valid after
    the source buffer is gone.
    """
    type: TokenType
    text: str                       # Raw text from source
    length: int                     # Always len(text)
    line: int                       # Line on which the token's first char was consumed
    offset: int = 0                 # Index of the first char in the source buffer

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return f"{self.type.name}(line {self.line})"
        return f"{self.type.name}({self.text!r}, line {self.line})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.text!r}, "
                f"{self.length}, {self.line}, {self.offset})")

    @property
    def end(self) -> int:
        """Index one past the last character of the token."""
        return self.offset + self.length

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    def location(self, filename: str = "<string>") -> SourceLocation:
        """Build the source location of this token."""
        return SourceLocation(filename, self.line, self.offset)


# Keyword lookup table. Matching is exact and case-sensitive, and only
# happens once the full identifier span is known.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "func": TokenType.FUNC,
})

# Token types a keyword table entry may map to
KEYWORD_TYPES = frozenset({
    TokenType.FUNC,
})
