"""Shared fixtures for the zone_analysis test suite."""

import gzip
from pathlib import Path

import pytest


SOA_ZONE = """\
example.com. 3600 IN SOA ns1.example.com. hostmaster.example.com. (
        2019020101 ; serial
        7200       ; refresh
        3600       ; retry
        1209600    ; expire
        300 )      ; minimum
"""

SOA_DATA = (
    "ns1.example.com.",
    "hostmaster.example.com.",
    "(",
    "2019020101",
    "7200",
    "3600",
    "1209600",
    "300",
    ")",
)

SAMPLE_ZONE = """\
; example.com zone, hand written
example.com. 3600 IN SOA ns1.example.com. hostmaster.example.com. ( 1 7200 3600 1209600 300 )

example.com. 3600 IN NS ns1.example.com.
www.example.com. 300 IN A 192.0.2.10
bad.example.com. 300 IN BOGUS data here
mail.example.com. IN 300 MX 10 mx.example.com. ; primary MX
www.example.com. 300 IN AAAA 2001:db8::1
"""

COM_ZONE = """\
com. 900 IN SOA a.gtld-servers.net. nstld.verisign-grs.com. 1 1800 900 604800 86400
EXAMPLE NS NS1.EXAMPLE
EXAMPLE NS NS2.EXAMPLE
FOO NS NS1.FOO
NS1.EXAMPLE A 192.0.2.1
BAR DS 1 2 3 ABC
"""


def write_gz(path: Path, text: str) -> Path:
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write(text)
    return path


def read_gz_lines(path) -> list:
    with gzip.open(path, "rt", encoding="utf-8") as f:
        return f.read().splitlines()


@pytest.fixture
def soa_zone():
    return SOA_ZONE


@pytest.fixture
def sample_zone():
    return SAMPLE_ZONE


@pytest.fixture
def zone_dir(tmp_path):
    """Directory with two regular zones and a com-style fast-path zone."""
    write_gz(tmp_path / "example.txt.gz", SAMPLE_ZONE)
    write_gz(tmp_path / "other.txt.gz", "other.net. 60 IN A 198.51.100.7\n")
    write_gz(tmp_path / "com.zone.gz", COM_ZONE)
    return tmp_path
