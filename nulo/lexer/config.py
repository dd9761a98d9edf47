"""Scanner configuration."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping

from .tokens import KEYWORD_TYPES, KEYWORDS, TokenType


DEFAULT_WHITESPACE: FrozenSet[str] = frozenset({" ", "\r", "\t"})


@dataclass(frozen=True)
class ScannerConfig:
    """
    Settings a scanner runs with.

    The line feed is never part of ``whitespace``: it is always skipped by
    the scanner and counted as a line break.
    """
    keywords: Mapping[str, TokenType] = field(default_factory=lambda: KEYWORDS)
    whitespace: FrozenSet[str] = DEFAULT_WHITESPACE

    def __post_init__(self):
        if "\n" in self.whitespace:
            raise ValueError("'\\n' is a line break and cannot be configured as whitespace")
        for word, token_type in self.keywords.items():
            if not _is_word(word):
                raise ValueError(f"Keyword {word!r} would never be scanned as a single word")
            if token_type not in KEYWORD_TYPES:
                raise ValueError(f"Keyword {word!r} maps to {token_type!r}, which is not a keyword type")
        object.__setattr__(self, "keywords", MappingProxyType(dict(self.keywords)))

    def __hash__(self):
        return hash((frozenset(self.keywords.items()), self.whitespace))

    def with_keywords(self, extra: Mapping[str, TokenType]) -> "ScannerConfig":
        """Return a copy of this config with ``extra`` merged into the keyword table."""
        merged = dict(self.keywords)
        merged.update(extra)
        return ScannerConfig(keywords=merged, whitespace=self.whitespace)


def _is_word(text: str) -> bool:
    return (text != "" and text.isascii()
            and (text[0].isalpha() or text[0] == "_")
            and all(c.isalnum() or c == "_" for c in text))


DEFAULT_CONFIG = ScannerConfig()
