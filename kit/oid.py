from __future__ import annotations

import hashlib
import re
from typing import Any, Pattern

from kit.errors import InvalidObjectId

OID_SIZE = 20
HEX_OID: Pattern[str] = re.compile(r"[0-9a-fA-F]{40}")


class ObjectId:
    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        if not isinstance(raw, bytes) or len(raw) != OID_SIZE:
            raise InvalidObjectId(raw)
        object.__setattr__(self, "_raw", raw)

    @classmethod
    def parse(cls, text: str) -> "ObjectId":
        if not isinstance(text, str) or not HEX_OID.fullmatch(text):
            raise InvalidObjectId(text)
        return cls(bytes.fromhex(text))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "ObjectId":
        return cls(bytes(raw))

    @classmethod
    def hash(cls, content: bytes) -> "ObjectId":
        return cls(hashlib.sha1(content).digest())

    @property
    def raw(self) -> bytes:
        return self._raw

    @property
    def hex(self) -> str:
        return self._raw.hex()

    @property
    def fanout(self) -> tuple[str, str]:
        text = self.hex
        return text[:2], text[2:]

    def short(self) -> str:
        return self.hex[:7]

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ObjectId is immutable")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ObjectId):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self.hex

    def __repr__(self) -> str:
        return f"ObjectId({self.hex!r})"
