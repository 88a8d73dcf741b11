"""Line-oriented domain extractor for very regular zone files.

Large delegation-only zones (``com.zone``) put one record per line with single
spaces between fields and never use parentheses or quoting, so the owner can
be read off the first field without running the full parser.  Owners in these
files are relative to the zone origin; the configured suffix is appended on
output.
"""
from __future__ import annotations

import gzip
import logging
import os
from collections.abc import Iterable

from .config import FastPathConfig
from .output import ZoneInfo, output_path
from .source import open_zone

logger = logging.getLogger(__name__)


def owner_of(line: str, types: Iterable[str]) -> str | None:
    """Return the lower-cased owner of a line whose type is one of `types`."""
    fields = line.split(" ")
    if len(fields) > 2 and fields[0] and fields[1].lower() in types:
        return fields[0].lower()
    return None


def _flush(out, domains: set[str], suffix: str) -> None:
    for domain in sorted(domains):
        out.write(domain + suffix + "\n")


def extract(path: str | os.PathLike[str], config: FastPathConfig) -> ZoneInfo:
    """Collect delegated owners from `path` and write them next to it.

    The domain set is flushed to the output every `config.chunk_lines` lines
    to bound memory, so the reported count is the sum of the chunk sizes.

    Args:
        path: Zone file, optionally gzip-compressed.
        config: Fast-path settings.

    Returns:
        Zone summary with `config.origin` as its SOA.

    Raises:
        FileNotFoundError: If `path` does not exist.
    """
    types = frozenset(config.types)
    domains: set[str] = set()
    total = 0
    line_count = 0

    with open_zone(path) as stream, gzip.open(output_path(path), "wt", encoding="utf-8") as out:
        for line in stream:
            if line_count >= config.chunk_lines:
                _flush(out, domains, config.suffix)
                total += len(domains)
                logger.debug("%s: flushed %d domains", path, len(domains))
                domains.clear()
                line_count = 0
            owner = owner_of(line.rstrip("\r\n"), types)
            if owner is not None:
                domains.add(owner)
            line_count += 1
        _flush(out, domains, config.suffix)
        total += len(domains)

    return ZoneInfo(soa=config.origin, count=total)
