"""Open zone files, transparently decompressing gzip input."""
from __future__ import annotations

import gzip
import os
from typing import TextIO

GZIP_SUFFIX = ".gz"


def open_zone(path: str | os.PathLike[str], encoding: str = "utf-8") -> TextIO:
    """Open a zone file for reading as text.

    Files ending in ``.gz`` are decompressed on the fly. Bytes that do not
    decode are replaced rather than aborting the whole file.

    Args:
        path: Zone file path.
        encoding: Text encoding of the (decompressed) file.

    Returns:
        An open text stream; use it as a context manager.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if os.fspath(path).endswith(GZIP_SUFFIX):
        return gzip.open(path, "rt", encoding=encoding, errors="replace")
    return open(path, "r", encoding=encoding, errors="replace")
