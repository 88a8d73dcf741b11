"""Per-file driver and the worker pool that runs it over a directory."""
from __future__ import annotations

import logging
import os
import zlib
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from . import fastpath
from .config import Config
from .errors import LexicalError, ZoneParseError
from .output import ZoneInfo, output_path, write_domains, write_stats
from .parser import RecordParser
from .records import RecordType
from .source import open_zone

logger = logging.getLogger(__name__)


def collect_domains(stream: TextIO | str, verbose: bool = False) -> tuple[ZoneInfo, set[str]]:
    """Parse a zone and collect its distinct owner names.

    Malformed records are logged and skipped; the scan resumes on the next
    line. A lexical error ends the scan, keeping what was collected so far.

    Args:
        stream: Zone-file text.
        verbose: Log every record at DEBUG level.

    Returns:
        Tuple of (zone summary, owner names without trailing dots).
    """
    parser = RecordParser(stream)
    zone = ZoneInfo()
    domains: set[str] = set()
    skipped = 0
    resync = False

    while True:
        try:
            if resync:
                parser.skip_record()
                resync = False
            record = parser.next_record()
        except LexicalError as exc:
            logger.warning("%s; ignoring the rest of the zone", exc)
            break
        except ZoneParseError as exc:
            logger.debug("record skipped: %s", exc)
            skipped += 1
            resync = True
            continue

        if record is None:
            break
        if verbose:
            logger.debug("a '%s' record for domain/subdomain '%s'", record.rtype.name, record.name)
        if record.rtype is RecordType.SOA:
            zone.soa = record.name
        owner = record.name.rstrip(".")
        if owner:
            domains.add(owner)

    if skipped:
        logger.info("%d malformed records skipped", skipped)
    zone.count = len(domains)
    return zone, domains


def analyze_zone(path: str | os.PathLike[str], config: Config) -> ZoneInfo:
    """Process one zone file and write its domain list next to it.

    Args:
        path: Zone file, optionally gzip-compressed.
        config: Run settings.

    Returns:
        The zone summary; `ZoneInfo.missing()` if the file does not exist.
    """
    if not config.progress:
        logger.info("processing zone %s", path)
    try:
        if config.fast_path.matches(os.path.basename(path)):
            return fastpath.extract(path, config.fast_path)
        with open_zone(path) as stream:
            zone, domains = collect_domains(stream, verbose=config.verbose)
    except FileNotFoundError:
        logger.warning("%s not found; skipping", path)
        return ZoneInfo.missing()

    write_domains(output_path(path), domains)
    return zone


def find_zone_files(config: Config) -> list[Path]:
    """List the zone files to process, in a stable order without duplicates."""
    directory = Path(config.directory)
    found: list[Path] = []
    for pattern in config.patterns:
        found.extend(sorted(directory.glob(pattern)))
    found.extend(directory / name for name in config.extra_zones)
    return list(dict.fromkeys(found))


def analyze_directory(config: Config) -> list[ZoneInfo]:
    """Process every zone file of `config.directory` on a worker pool.

    Each worker owns its parser and domain set; summaries are collected here,
    in the calling thread, as workers finish.

    Args:
        config: Run settings.

    Returns:
        Zone summaries in `find_zone_files` order. Zones that failed with an
        I/O or decompression error are logged and left out.
    """
    files = find_zone_files(config)
    logger.debug("starting %d parallel processing", config.parallel)

    results: dict[Path, ZoneInfo] = {}
    with tqdm(total=len(files), unit="zone", disable=not config.progress) as bar:
        with ThreadPoolExecutor(max_workers=config.parallel) as pool:
            futures = {pool.submit(analyze_zone, path, config): path for path in files}
            for future in as_completed(futures):
                path = futures[future]
                try:
                    results[path] = future.result()
                except (OSError, EOFError, zlib.error) as exc:
                    logger.error("failed to process %s: %s", path, exc)
                bar.update(1)

    return [results[path] for path in files if path in results]


def run(config: Config) -> list[ZoneInfo]:
    """Analyze the configured directory and write its statistics file."""
    zones = analyze_directory(config)
    write_stats(os.path.join(config.directory, config.stats_file), zones)
    return zones
