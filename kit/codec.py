"""
Object envelope framing.

Every stored object is framed as ``b"<kind> <length>\\0<payload>"`` and its
identifier is the SHA-1 of that whole byte string.
"""

from __future__ import annotations

from kit.errors import MalformedHeader, TruncatedOrCorruptObject
from kit.oid import ObjectId

KINDS: tuple[str, ...] = ("blob", "tree", "commit")


def header(kind: str, size: int) -> bytes:
    return f"{kind} {size}".encode("ascii") + b"\x00"


def encode(kind: str, payload: bytes) -> tuple[ObjectId, bytes]:
    envelope = header(kind, len(payload)) + payload
    return ObjectId.hash(envelope), envelope


def unframe(envelope: bytes) -> tuple[str, int, bytes]:
    """
    Splits an envelope into its kind, declared size and everything after the
    header. The body may run past the declared size.
    """
    null_pos = envelope.find(b"\x00")
    if null_pos == -1:
        raise MalformedHeader("object header is not terminated")

    fields = envelope[:null_pos].split(b" ")
    if len(fields) != 2:
        raise MalformedHeader(f"bad object header {envelope[:null_pos]!r}")

    kind_field, size_field = fields
    kind = kind_field.decode("ascii", errors="replace")
    if kind not in KINDS:
        raise MalformedHeader(f"unknown object type {kind!r}")

    # int() would also accept signs, whitespace and underscores
    if not size_field or not size_field.isdigit():
        raise MalformedHeader(f"bad object size {size_field!r}")
    size = int(size_field)

    payload = envelope[null_pos + 1 :]
    if len(payload) < size:
        raise TruncatedOrCorruptObject(
            f"{kind} declares {size} bytes but only {len(payload)} are present"
        )

    return kind, size, payload


def decode(envelope: bytes) -> tuple[str, bytes]:
    kind, size, body = unframe(envelope)
    return kind, body[:size]
