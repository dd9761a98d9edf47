"""
Nulo scanner - turns source text into tokens, one at a time.

Single forward pass over an in-memory buffer, no regex, no rewinds.
Every character classifies into some token, so scanning cannot fail.
"""

import string
from typing import Iterator, List, NamedTuple, Optional

from .config import DEFAULT_CONFIG, ScannerConfig
from .tokens import Token, TokenType
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Returned by _peek() past the end of the buffer. End of input is decided by
# the index, so a NUL inside the source is still ordinary input.
SENTINEL = "\0"

_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)
_WORD_CHARS = _LETTERS | _DIGITS


class ScannerState(NamedTuple):
    """Snapshot of a scanner's cursor."""
    token_start: int
    current: int
    line: int


class Scanner:
    """
    Nulo lexical scanner.

    Holds a cursor over an immutable source string and a running line
    counter. Each call to next_token() skips whitespace, consumes exactly
    one token and returns it. Once the end of input is reached every
    further call returns an EOF token.

    Usage:
        >>> scanner = Scanner("func f")
        >>> [str(tok) for tok in scanner]
        ["FUNC('func', line 1)", "IDENTIFIER('f', line 1)", 'EOF(line 1)']

    Not safe for concurrent use; scan independent buffers with independent
    scanners.
    """

    __slots__ = (
        "_source",
        "_source_len",
        "_config",
        "token_start",
        "current",
        "line",
        "_token_count",
        "_reported_end",
    )

    def __init__(self, source: Optional[str], config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner at the start of the buffer, on line 1.

        Args:
            source: Source text; None is treated as an empty buffer
            config: Keyword table and whitespace set to scan with
        """
        self._source = source if source is not None else ""
        self._source_len = len(self._source)
        self._config = config if config is not None else DEFAULT_CONFIG
        self.token_start = 0
        self.current = 0
        self.line = 1
        self._token_count = 0
        self._reported_end = False

    @property
    def source(self) -> str:
        return self._source

    @property
    def config(self) -> ScannerConfig:
        return self._config

    @property
    def state(self) -> ScannerState:
        return ScannerState(self.token_start, self.current, self.line)

    @property
    def at_end(self) -> bool:
        """True once every character of the buffer has been consumed."""
        return self.current >= self._source_len

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Never raises. At end of input returns a zero-length EOF token
        without consuming anything, so it can be called again safely.
        """
        self._skip_whitespace()
        self.token_start = self.current

        if self.at_end:
            if not self._reported_end:
                self._reported_end = True
                logger.debug("End of input after %d tokens on line %d",
                             self._token_count, self.line)
            return self._make_token(TokenType.EOF)

        lead = self._advance()

        if self._is_identifier_start(lead):
            return self._identifier_or_keyword()

        if lead in _DIGITS:
            return self._number()

        # No multi-character symbols: each one is its own token
        return self._make_token(TokenType.SYMBOL)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _identifier_or_keyword(self) -> Token:
        """Consume the rest of a word, then look the whole word up."""
        while self._is_identifier_continue(self._peek()):
            self._advance()

        lexeme = self._source[self.token_start:self.current]
        token_type = self._config.keywords.get(lexeme, TokenType.IDENTIFIER)
        return self._make_token(token_type)

    def _number(self) -> Token:
        while self._peek() in _DIGITS:
            self._advance()
        return self._make_token(TokenType.NUMBER)

    def _skip_whitespace(self):
        """Skip blanks, counting line feeds."""
        whitespace = self._config.whitespace
        while True:
            char = self._peek()
            if char == "\n":
                self.line += 1
                self._advance()
            elif char in whitespace and not self.at_end:
                self._advance()
            else:
                return

    def _make_token(self, token_type: TokenType) -> Token:
        text = self._source[self.token_start:self.current]
        self._token_count += 1
        return Token(token_type, text, len(text), self.line, self.token_start)

    def _advance(self) -> str:
        """Consume one character and return it."""
        char = self._source[self.current]
        self.current += 1
        return char

    def _peek(self) -> str:
        """Look at the next character without consuming it."""
        if self.current < self._source_len:
            return self._source[self.current]
        return SENTINEL

    @staticmethod
    def _is_identifier_start(char: str) -> bool:
        return char in _LETTERS

    @staticmethod
    def _is_identifier_continue(char: str) -> bool:
        return char in _WORD_CHARS


def tokenize(source: Optional[str], config: Optional[ScannerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        config: Optional scanner configuration

    Returns:
        List of tokens, ending with exactly one EOF token
    """
    return list(Scanner(source, config))


def tokenize_file(path, config: Optional[ScannerConfig] = None, encoding: str = "utf-8") -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        SourceReadError: If the file cannot be read
    """
    from ..source import read_source

    return tokenize(read_source(path, encoding=encoding), config)
