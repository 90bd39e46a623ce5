from __future__ import annotations

from typing import Any

from kit.errors import InvalidEntryName
from kit.oid import ObjectId


class DatabaseEntry:
    TREE_MODE = 0o40000
    REGULAR_MODE = 0o100644
    GITLINK_MODE = 0o160000

    def __init__(self, name: str, oid: ObjectId, mode: int) -> None:
        if not name or "\x00" in name or "/" in name:
            raise InvalidEntryName(name)

        self.name: str = name
        self.oid: ObjectId = oid
        self.mode: int = mode

    def is_tree(self) -> bool:
        return self.mode == DatabaseEntry.TREE_MODE

    def kind(self) -> str:
        if self.is_tree():
            return "tree"
        if self.mode == DatabaseEntry.GITLINK_MODE:
            return "commit"
        return "blob"

    def sort_key(self) -> bytes:
        return self.name.encode("utf-8")

    def to_bytes(self) -> bytes:
        header = f"{self.mode:o} ".encode("ascii") + self.sort_key() + b"\x00"
        return header + self.oid.raw

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DatabaseEntry):
            return NotImplemented
        return (self.name, self.oid, self.mode) == (other.name, other.oid, other.mode)

    def __repr__(self) -> str:
        return f"DatabaseEntry(name={self.name!r}, oid={self.oid.hex!r}, mode={self.mode:o})"
