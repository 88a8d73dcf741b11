"""Data structures representing zone-file resource records."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from dnslib import RR
from dnslib.dns import DNSError

from .errors import RecordConversionError

SEPARATOR = "\n"
OPEN_GROUP = "("
CLOSE_GROUP = ")"
COMMENT_START = ";"

TTL_MAX = 2**32 - 1


class RecordClass(enum.IntEnum):
    """DNS class mnemonics (RFC 1035 section 3.2.4)."""

    IN = 1
    CS = 2
    CH = 3
    HS = 4
    ANY = 255


class RecordType(enum.IntEnum):
    """Record type mnemonics recognized in zone files, keyed by type code."""

    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    RP = 17
    AFSDB = 18
    AAAA = 28
    LOC = 29
    SRV = 33
    NAPTR = 35
    DS = 43
    SSHFP = 44
    RRSIG = 46
    DNSKEY = 48
    NSEC3 = 50
    NSEC3PARAM = 51
    SPF = 99


# "*" is the only spelling of ANY that RFC 1035 knows about.
_CLASS_ALIASES: dict[str, RecordClass] = {"*": RecordClass.ANY}


def is_comment(token: str) -> bool:
    return token.startswith(COMMENT_START)


def parse_ttl(token: str) -> int | None:
    """Parse an unsigned 32-bit decimal TTL.

    Args:
        token: Candidate token.

    Returns:
        The TTL in seconds, or None when the token is not a TTL.
    """
    if not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > TTL_MAX:
        return None
    return value


def parse_class(token: str) -> RecordClass | None:
    """Match a class mnemonic, ignoring case."""
    name = token.upper()
    if name in _CLASS_ALIASES:
        return _CLASS_ALIASES[name]
    return RecordClass.__members__.get(name)


def parse_type(token: str) -> RecordType | None:
    """Match a type mnemonic, ignoring case."""
    return RecordType.__members__.get(token.upper())


@dataclass(frozen=True, slots=True)
class Record:
    """Single resource record as written in a zone file.

    Attributes:
        name (str): Owner name, verbatim (relative names are not expanded).
        rtype (RecordType): Record type.
        data (tuple[str, ...]): Data tokens in input order; quoted strings keep
            their quotes and escapes.
        ttl (int | None): Time to live, in seconds, or None when absent.
        rclass (RecordClass | None): Record class, or None when absent.
        comment (str): Comment following the last data token, or "".
    """

    name: str
    rtype: RecordType
    data: tuple[str, ...]
    ttl: int | None = None
    rclass: RecordClass | None = None
    comment: str = ""

    def __str__(self) -> str:
        parts = [self.name]
        if self.ttl is not None:
            parts.append(str(self.ttl))
        if self.rclass is not None:
            parts.append(self.rclass.name)
        parts.append(self.rtype.name)
        parts.extend(self.data)
        if self.comment:
            parts.append(self.comment)
        return " ".join(parts)

    def to_rr(self) -> list[RR]:
        """Build `dnslib.RR` objects from the canonical rendering.

        Returns:
            RRs produced by dnslib's zone parser (normally exactly one).

        Raises:
            RecordConversionError: If dnslib cannot interpret the record data.
        """
        try:
            return RR.fromZone(str(self))
        except (DNSError, ValueError, IndexError, KeyError) as exc:
            raise RecordConversionError(self.name, self.rtype.name, exc) from exc
