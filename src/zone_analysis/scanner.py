"""Character-level tokenizer for zone-file presentation syntax.

The scanner is a nine-state machine with two parallel tracks: one used outside
parentheses and one used inside a parenthesized group.  Inside a group a newline
is ordinary whitespace, which is what lets a record span several lines.

Tokens are plain strings:

* ``"("`` and ``")"`` open and close a group;
* ``"\\n"`` separates records (a newline outside any group);
* tokens starting with ``;`` are comments;
* anything else is a word or a quoted string, kept verbatim including quotes and
  backslashes.
"""
from __future__ import annotations

import enum
import io
from collections.abc import Callable, Iterator
from typing import TextIO

from .errors import LexicalError
from .records import CLOSE_GROUP, COMMENT_START, OPEN_GROUP, SEPARATOR

QUOTE = '"'
ESCAPE = "\\"
NEWLINE = "\n"

DEFAULT_CHUNK_SIZE = 64 * 1024


class ScannerState(enum.Enum):
    DEFAULT = enum.auto()
    STRING = enum.auto()
    STRING_ESCAPE = enum.auto()
    PAREN = enum.auto()
    COMMENT = enum.auto()
    SPACE = enum.auto()
    PAREN_COMMENT = enum.auto()
    PAREN_STRING = enum.auto()
    PAREN_STRING_ESCAPE = enum.auto()


S = ScannerState

# Parallel tracks: each map sends a state to its counterpart on the same track.
_STRING_OF = {S.DEFAULT: S.STRING, S.PAREN: S.PAREN_STRING}
_COMMENT_OF = {S.DEFAULT: S.COMMENT, S.PAREN: S.PAREN_COMMENT}
_ESCAPE_OF = {S.STRING: S.STRING_ESCAPE, S.PAREN_STRING: S.PAREN_STRING_ESCAPE}
_UNESCAPE_OF = {S.STRING_ESCAPE: S.STRING, S.PAREN_STRING_ESCAPE: S.PAREN_STRING}
_TRACK_OF = {
    S.STRING: S.DEFAULT,
    S.COMMENT: S.DEFAULT,
    S.PAREN_STRING: S.PAREN,
    S.PAREN_COMMENT: S.PAREN,
}
# group character that switches a bare-word track to the other one
_GROUP_SWITCH = {S.DEFAULT: (OPEN_GROUP, S.PAREN), S.PAREN: (CLOSE_GROUP, S.DEFAULT)}

# States in which running out of input is not an error.
_EOF_STATES = frozenset({S.DEFAULT, S.SPACE, S.COMMENT})


class Scanner:
    """Split zone-file text into tokens.

    Args:
        source: Text stream, or a string holding the whole input.
        chunk_size: Number of characters read from the stream at a time.

    Attributes:
        state: Current `ScannerState`.
    """

    def __init__(self, source: TextIO | str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        self._src = source
        self._chunk_size = chunk_size
        self._buf = ""
        self._pos = 0
        self._eof = False
        self.state = S.DEFAULT
        self._handlers: dict[ScannerState, Callable[[str, list[str]], str | None]] = {
            S.DEFAULT: self._on_bare,
            S.PAREN: self._on_bare,
            S.STRING: self._on_string,
            S.PAREN_STRING: self._on_string,
            S.STRING_ESCAPE: self._on_escape,
            S.PAREN_STRING_ESCAPE: self._on_escape,
            S.COMMENT: self._on_comment,
            S.PAREN_COMMENT: self._on_comment,
            S.SPACE: self._on_space,
        }

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> str | None:
        """Return the next token.

        Returns:
            The token text, or None once the input is exhausted.

        Raises:
            LexicalError: If the input ends inside a quoted string, an escape,
                a comment within a group, or an open group.  Calling again
                raises again.
        """
        token: list[str] = []
        while True:
            char = self._peek()
            if char is None:
                if self.state not in _EOF_STATES:
                    raise LexicalError(self.state.name)
                if token:
                    return "".join(token)
                return None
            emitted = self._handlers[self.state](char, token)
            if emitted is not None:
                return emitted

    def _peek(self) -> str | None:
        if self._pos >= len(self._buf):
            if self._eof:
                return None
            self._buf = self._src.read(self._chunk_size)
            self._pos = 0
            if not self._buf:
                self._eof = True
                return None
        return self._buf[self._pos]

    def _advance(self) -> None:
        self._pos += 1

    def _on_bare(self, char: str, token: list[str]) -> str | None:
        """DEFAULT and PAREN: words, separators, and the start of everything else."""
        if char.isspace():
            if token:
                return "".join(token)
            self._advance()
            if char == NEWLINE and self.state is S.DEFAULT:
                self.state = S.SPACE
                return SEPARATOR
            return None

        group_char, other_track = _GROUP_SWITCH[self.state]
        if char == group_char:
            if token:
                return "".join(token)
            self._advance()
            self.state = other_track
            return char

        if char == QUOTE or char == COMMENT_START:
            if token:
                return "".join(token)
            self._advance()
            token.append(char)
            if char == QUOTE:
                self.state = _STRING_OF[self.state]
            else:
                self.state = _COMMENT_OF[self.state]
            return None

        self._advance()
        token.append(char)
        return None

    def _on_string(self, char: str, token: list[str]) -> str | None:
        self._advance()
        token.append(char)
        if char == QUOTE:
            self.state = _TRACK_OF[self.state]
            return "".join(token)
        if char == ESCAPE:
            self.state = _ESCAPE_OF[self.state]
        return None

    def _on_escape(self, char: str, token: list[str]) -> str | None:
        # the escaped character is copied as is, whatever it is
        self._advance()
        token.append(char)
        self.state = _UNESCAPE_OF[self.state]
        return None

    def _on_comment(self, char: str, token: list[str]) -> str | None:
        if char == NEWLINE:
            # leave the newline for the bare-word track, which flushes the comment
            self.state = _TRACK_OF[self.state]
            return None
        self._advance()
        token.append(char)
        return None

    def _on_space(self, char: str, token: list[str]) -> str | None:
        if char.isspace():
            self._advance()
        else:
            self.state = S.DEFAULT
        return None
