"""
Error handling around the Nulo lexer.

The scanner itself is total and never raises: every character classifies
into some token. The errors here belong to the code that feeds it, chiefly
loading a source file into memory.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A reportable problem (error, warning, info)."""
    message: str
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    path: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}"
        if self.code:
            result += f" [{self.code}]"
        if self.path:
            result += f"\n  --> {self.path}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class NuloError(Exception):
    """
    Base class for all Nulo errors.

    Carries a Diagnostic for reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        path: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            path=path,
            help_text=help_text,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class SourceReadError(NuloError):
    """Raised when a source file cannot be loaded into memory."""

    def __init__(self, path: str, reason: str, code: str = "S005", help_text: Optional[str] = None):
        super().__init__(
            f"Cannot read source file '{path}': {reason}",
            code=code,
            path=path,
            help_text=help_text,
        )
        self.path = path
        self.reason = reason


ERROR_CODES = {
    "S001": "Source file not found",
    "S002": "Source path is not a regular file",
    "S003": "Permission denied",
    "S004": "Source file is not valid text in the requested encoding",
    "S005": "Source file could not be read",
}


def create_file_not_found_error(path: str) -> SourceReadError:
    """Create an error for a missing source file."""
    return SourceReadError(
        path,
        "no such file",
        code="S001",
        help_text="Check the path, or run from the directory that contains the file.",
    )


def create_not_a_file_error(path: str) -> SourceReadError:
    """Create an error for a path that exists but is not a file."""
    return SourceReadError(path, "not a regular file", code="S002")


def create_permission_error(path: str) -> SourceReadError:
    return SourceReadError(path, "permission denied", code="S003")


def create_decode_error(path: str, encoding: str, exc: UnicodeDecodeError) -> SourceReadError:
    """Create an error for a file whose bytes do not decode."""
    return SourceReadError(
        path,
        f"invalid {encoding} data at byte {exc.start}",
        code="S004",
        help_text="Pass --encoding if the file is not UTF-8.",
    )
