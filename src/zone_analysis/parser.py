"""Assemble scanner tokens into resource records."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

from .errors import IncompleteRecordError, MissingDataError, UnknownTypeError
from .records import (
    SEPARATOR,
    Record,
    RecordClass,
    RecordType,
    is_comment,
    parse_class,
    parse_ttl,
    parse_type,
)
from .scanner import Scanner

logger = logging.getLogger(__name__)


class RecordParser:
    """Pull records, one per call, from a zone-file token stream.

    The parser keeps no state between records apart from the scanner cursor,
    so after a `ClassificationError` or `StructuralError` the caller may keep
    asking for records. A `LexicalError` means the input itself is broken and
    will be raised again on every further call.

    Args:
        source: A `Scanner`, a text stream, or a string.
    """

    def __init__(self, source: Scanner | TextIO | str) -> None:
        if not isinstance(source, Scanner):
            source = Scanner(source)
        self.scanner = source
        self._at_boundary = True

    def __iter__(self) -> Iterator[Record]:
        return self

    def __next__(self) -> Record:
        record = self.next_record()
        if record is None:
            raise StopIteration
        return record

    def _next_token(self) -> str | None:
        token = self.scanner.next_token()
        self._at_boundary = token is None or token == SEPARATOR
        return token

    def next_record(self) -> Record | None:
        """Read the next record.

        Returns:
            The record, or None when the input holds no further records.

        Raises:
            LexicalError: Propagated from the scanner.
            UnknownTypeError: A token before the type (separators and comments
                included) is not a TTL, class, or type mnemonic.
            MissingDataError: The record separator came before any data.
            IncompleteRecordError: The input ended before the record's type
                or data.
        """
        token = self._next_token()
        while token is not None and (token == SEPARATOR or is_comment(token)):
            token = self._next_token()
        if token is None:
            return None

        name = token
        ttl: int | None = None
        rclass: RecordClass | None = None
        rtype: RecordType | None = None

        while rtype is None:
            token = self._next_token()
            if token is None:
                raise IncompleteRecordError(name)
            if ttl is None:
                ttl = parse_ttl(token)
                if ttl is not None:
                    continue
            if rclass is None:
                rclass = parse_class(token)
                if rclass is not None:
                    continue
            rtype = parse_type(token)
            if rtype is None:
                raise UnknownTypeError(name, token)

        data: list[str] = []
        comment = ""
        while True:
            token = self._next_token()
            if token is None:
                if not data:
                    raise IncompleteRecordError(name)
                break
            if token == SEPARATOR:
                if not data:
                    raise MissingDataError(name, rtype.name)
                break
            if is_comment(token):
                comment = token
                continue
            # only a comment after the last data token is kept
            comment = ""
            data.append(token)

        return Record(
            name=name,
            rtype=rtype,
            data=tuple(data),
            ttl=ttl,
            rclass=rclass,
            comment=comment,
        )

    def skip_record(self) -> None:
        """Discard the rest of the current line after a failed record.

        Does nothing when the failure already ended at a record separator or
        at the end of the input.
        """
        skipped = 0
        while not self._at_boundary:
            self._next_token()
            skipped += 1
        if skipped:
            logger.debug("skipped %d tokens to the next record", skipped)
