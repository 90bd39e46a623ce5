from __future__ import annotations

import re
from typing import Iterator, Pattern

from kit.db_entry import DatabaseEntry
from kit.errors import MalformedTreeEntry, TrailingTreeBytes, TruncatedTree
from kit.oid import OID_SIZE, ObjectId

OCTAL: Pattern[bytes] = re.compile(rb"[0-7]+")


class Tree:
    def __init__(self, entries: list[DatabaseEntry] | None = None) -> None:
        self.entries: list[DatabaseEntry] = entries if entries is not None else []
        self._oid: ObjectId | None = None

    @classmethod
    def parse(cls, payload: bytes, declared_length: int | None = None) -> "Tree":
        """
        Reads entries in the order they are stored. ``declared_length`` is
        the size from the object header; every byte up to it has to belong
        to exactly one entry.
        """
        size = len(payload) if declared_length is None else declared_length
        entries: list[DatabaseEntry] = []
        consumed = 0

        while consumed < size:
            null_pos = payload.find(b"\x00", consumed, size)
            if null_pos == -1:
                if size > len(payload):
                    raise TruncatedTree(f"tree ends inside entry at byte {consumed}")
                raise MalformedTreeEntry(f"unterminated entry at byte {consumed}")

            mode_field, sep, name_field = payload[consumed:null_pos].partition(b" ")
            if not sep:
                raise MalformedTreeEntry(f"entry at byte {consumed} has no mode")
            if not OCTAL.fullmatch(mode_field):
                raise MalformedTreeEntry(f"bad mode {mode_field!r} at byte {consumed}")

            try:
                name = name_field.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedTreeEntry(f"bad name {name_field!r}") from e
            if not name or "/" in name:
                raise MalformedTreeEntry(f"bad name {name_field!r}")

            end = null_pos + 1 + OID_SIZE
            if end > len(payload):
                raise TruncatedTree(f"entry {name!r} is missing object id bytes")
            if end > size:
                raise TrailingTreeBytes(
                    f"entry {name!r} ends at byte {end}, past the declared {size}"
                )

            oid = ObjectId.from_bytes(payload[null_pos + 1 : end])
            entries.append(DatabaseEntry(name, oid, int(mode_field, 8)))
            consumed = end

        return cls(entries)

    @property
    def oid(self) -> ObjectId:
        assert self._oid is not None
        return self._oid

    @oid.setter
    def oid(self, value: ObjectId) -> None:
        self._oid = value

    def add_entry(self, entry: DatabaseEntry) -> None:
        self.entries.append(entry)

    def __iter__(self) -> Iterator[DatabaseEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def type(self) -> str:
        return "tree"

    def to_bytes(self) -> bytes:
        ordered = sorted(self.entries, key=DatabaseEntry.sort_key)
        return b"".join(entry.to_bytes() for entry in ordered)
