"""Fixed-size binary records stored in the score files."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, TypeVar, Union

NAME_LENGTH = 11
_ENCODING = "latin-1"

_INDEX_STRUCT = struct.Struct("<i11sxi")
_USER_STRUCT = struct.Struct("<i11sxii")
_MATCH_STRUCT = struct.Struct("<iiii")

_USER_INFO_RE = re.compile(r"\s*([+-]?\d+)\|\s*([+-]?\d+)\|([^\n]{1,11})")


def _encode_name(name: str) -> bytes:
    raw = name.encode(_ENCODING)
    if len(raw) > NAME_LENGTH:
        raise ValueError(f"name longer than {NAME_LENGTH} bytes: {name!r}")
    return raw


def _decode_name(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(_ENCODING)


def _unpack(layout: struct.Struct, data: bytes) -> tuple:
    if len(data) != layout.size:
        raise ValueError(f"expected {layout.size} bytes, got {len(data)}")
    return layout.unpack(data)


@dataclass
class IndexRecord:
    """Index entry: user id, user name and record position in the users file."""

    id: int
    name: str
    pos: int

    SIZE = _INDEX_STRUCT.size

    def pack(self) -> bytes:
        return _INDEX_STRUCT.pack(self.id, _encode_name(self.name), self.pos)

    @classmethod
    def unpack(cls, data: bytes) -> "IndexRecord":
        ident, name, pos = _unpack(_INDEX_STRUCT, data)
        return cls(ident, _decode_name(name), pos)


@dataclass
class UserRecord:
    """Accumulated totals of one user."""

    id: int
    name: str
    score: int
    moves: int

    SIZE = _USER_STRUCT.size

    def pack(self) -> bytes:
        return _USER_STRUCT.pack(self.id, _encode_name(self.name), self.score, self.moves)

    @classmethod
    def unpack(cls, data: bytes) -> "UserRecord":
        ident, name, score, moves = _unpack(_USER_STRUCT, data)
        return cls(ident, _decode_name(name), score, moves)


@dataclass
class MatchRecord:
    """One played game."""

    id: int
    user_id: int
    score: int
    moves: int

    SIZE = _MATCH_STRUCT.size

    def pack(self) -> bytes:
        return _MATCH_STRUCT.pack(self.id, self.user_id, self.score, self.moves)

    @classmethod
    def unpack(cls, data: bytes) -> "MatchRecord":
        return cls(*_unpack(_MATCH_STRUCT, data))


Record = Union[IndexRecord, UserRecord, MatchRecord]
R = TypeVar("R", IndexRecord, UserRecord, MatchRecord)


def iter_records(stream: BinaryIO, record_type: type[R]) -> Iterator[R]:
    """Yield whole records from a binary stream; a trailing partial record is ignored."""
    while True:
        chunk = stream.read(record_type.SIZE)
        if len(chunk) < record_type.SIZE:
            return
        yield record_type.unpack(chunk)


def read_records(path: Union[str, Path], record_type: type[R]) -> list[R]:
    """Read every record of a file."""
    with open(path, "rb") as stream:
        return list(iter_records(stream, record_type))


def parse_user_info(text: str) -> UserRecord:
    """Parse ``score|moves|name`` into a user record with id 0.

    The name keeps at most 11 characters, up to the end of the line.
    """
    match = _USER_INFO_RE.match(text)
    if not match:
        raise ValueError(f"malformed user info: {text!r}")
    score, moves, name = match.groups()
    return UserRecord(id=0, name=name, score=int(score), moves=int(moves))