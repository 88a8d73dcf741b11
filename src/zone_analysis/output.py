"""Per-zone summaries and the files written for them."""
from __future__ import annotations

import gzip
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

from .source import GZIP_SUFFIX

logger = logging.getLogger(__name__)

DOMAINS_SUFFIX = "_domains.gz"
MISSING_SOA = "---"


@dataclass(slots=True)
class ZoneInfo:
    """Summary of one processed zone file.

    Attributes:
        soa (str): Owner of the zone's SOA record ("" if none was seen).
        count (int): Number of distinct owner names written.
    """

    soa: str = ""
    count: int = 0

    @classmethod
    def missing(cls) -> ZoneInfo:
        return cls(soa=MISSING_SOA, count=0)


def output_path(zonefile: str | os.PathLike[str]) -> str:
    """Return the domain list path for a zone file (``x.txt.gz`` -> ``x.txt_domains.gz``)."""
    name = os.fspath(zonefile)
    if name.endswith(GZIP_SUFFIX):
        name = name[: -len(GZIP_SUFFIX)]
    return name + DOMAINS_SUFFIX


def write_domains(path: str | os.PathLike[str], domains: Iterable[str]) -> None:
    """Write a gzip-compressed, sorted list of domains, one per line."""
    with gzip.open(path, "wt", encoding="utf-8") as out:
        for domain in sorted(domains):
            out.write(domain + "\n")


def format_stats_line(zone: ZoneInfo) -> str:
    return "SOA: %20s\tNum.Domains: %d\n" % (zone.soa, zone.count)


def write_stats(path: str | os.PathLike[str], zones: Iterable[ZoneInfo]) -> None:
    """Write one statistics line per zone.

    Args:
        path: Destination file.
        zones: Zone summaries in reporting order.
    """
    written = 0
    with open(path, "w", encoding="utf-8") as f:
        for zone in zones:
            f.write(format_stats_line(zone))
            written += 1
    logger.info("wrote statistics for %d zones to %s", written, path)
