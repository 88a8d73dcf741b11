"""Exceptions raised while reading zone files."""
from __future__ import annotations


class ZoneParseError(ValueError):
    """Base class for every tokenizer and assembler failure."""


class LexicalError(ZoneParseError):
    """Input ended inside a quoted string, escape, or parenthesis group.

    Args:
        state: Name of the scanner state that was still open.
    """

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"unexpected end of input (scanner state {state})")


class ClassificationError(ZoneParseError):
    """A token could not be classified as TTL, class, or type."""


class UnknownTypeError(ClassificationError):
    def __init__(self, name: str, token: str) -> None:
        self.name = name
        self.token = token
        super().__init__(f"unknown record type {token!r} for domain name {name}")


class StructuralError(ZoneParseError):
    """A record is missing one of its required parts."""


class MissingDataError(StructuralError):
    def __init__(self, name: str, rtype: str) -> None:
        self.name = name
        self.rtype = rtype
        super().__init__(f"missing data part for domain name: {name}; type: {rtype}")


class IncompleteRecordError(StructuralError):
    """Input ended before the record's type or its data was seen.

    Args:
        name: Owner name of the truncated record.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"incomplete record at end of file for domain name {name}")


class RecordConversionError(ValueError):
    def __init__(self, name: str, rtype: str, cause: Exception) -> None:
        self.name = name
        self.rtype = rtype
        super().__init__(f"cannot convert {rtype} record for {name}: {cause}")
