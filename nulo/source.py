"""
Loading Nulo source files into memory.

The scanner works on a complete in-memory string; this module is the only
place that touches the filesystem.
"""

import os
import stat
from pathlib import Path
from typing import Union

from .lexer.errors import (
    SourceReadError, create_decode_error, create_file_not_found_error,
    create_not_a_file_error, create_permission_error,
)
from .utils.logger import get_logger

logger = get_logger(__name__)

# The file the first Nulo driver always read
DEFAULT_SOURCE = "hello.nulo"

SOURCE_SUFFIX = ".nulo"


def read_source(path: Union[str, os.PathLike], encoding: str = "utf-8") -> str:
    """
    Read a whole source file.

    Line endings are left untouched: the scanner skips carriage returns
    itself.

    Args:
        path: Path to the source file
        encoding: Text encoding of the file

    Returns:
        The file contents

    Raises:
        SourceReadError: If the file is missing, not a file, unreadable or
            not valid text in ``encoding``
    """
    path_str = os.fspath(path)
    source_path = Path(path_str)

    try:
        mode = source_path.stat().st_mode
    except FileNotFoundError:
        raise create_file_not_found_error(path_str) from None
    except PermissionError:
        raise create_permission_error(path_str) from None
    except OSError as e:
        raise SourceReadError(path_str, e.strerror or str(e)) from e
    if not stat.S_ISREG(mode):
        raise create_not_a_file_error(path_str)

    if source_path.suffix != SOURCE_SUFFIX:
        logger.info("Reading %s, which does not have a %s suffix", path_str, SOURCE_SUFFIX)

    try:
        with open(source_path, "r", encoding=encoding, newline="") as f:
            source = f.read()
    except PermissionError:
        raise create_permission_error(path_str) from None
    except UnicodeDecodeError as e:
        raise create_decode_error(path_str, encoding, e) from e
    except LookupError:
        raise SourceReadError(path_str, f"unknown encoding '{encoding}'") from None
    except OSError as e:
        raise SourceReadError(path_str, e.strerror or str(e)) from e

    logger.debug("Read %d characters from %s", len(source), path_str)
    return source
