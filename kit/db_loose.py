from __future__ import annotations

import logging
import zlib
from pathlib import Path
from typing import Any

from kit import codec
from kit.errors import CorruptObject, ObjectNotFound
from kit.oid import ObjectId
from kit.temp_file import TempFile

log = logging.getLogger(__name__)


class Raw:
    def __init__(self, ty: str, size: int, data: bytes) -> None:
        self.ty = ty
        self.size = size
        self.data = data

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Raw):
            return NotImplemented
        return (self.ty, self.size, self.data) == (other.ty, other.size, other.data)

    def __repr__(self) -> str:
        return f"Raw(type={self.ty!r}, size={self.size!r}, data={self.data!r})"


class Loose:
    def __init__(self, path: Path) -> None:
        self.path = path

    def object_path(self, oid: ObjectId) -> Path:
        head, tail = oid.fanout
        return self.path / head / tail

    def has(self, oid: ObjectId) -> bool:
        return self.object_path(oid).exists()

    def load_raw(self, oid: ObjectId) -> Raw:
        ty, size, body = self.load_frame(oid)
        return Raw(ty, size, body[:size])

    def load_frame(self, oid: ObjectId) -> tuple[str, int, bytes]:
        return codec.unframe(self.read_envelope(oid))

    def write_object(self, oid: ObjectId, content: bytes) -> None:
        object_path = self.object_path(oid)
        if object_path.exists():
            log.debug(f"object {oid} already stored")
            return

        file = TempFile(object_path.parent, "tmp_obj_")
        try:
            compressor = zlib.compressobj(zlib.Z_DEFAULT_COMPRESSION)
            file.write(compressor.compress(content))
            file.write(compressor.flush())
            file.move(Path(object_path.name))
        except Exception:
            file.discard()
            raise

        log.debug(f"wrote object {oid} ({len(content)} bytes) to {object_path}")

    def read_envelope(self, oid: ObjectId) -> bytes:
        path = self.object_path(oid)

        try:
            with open(path, "rb") as f:
                file_data = f.read()
        except FileNotFoundError:
            raise ObjectNotFound(oid)

        decompressor = zlib.decompressobj()
        try:
            data = decompressor.decompress(file_data) + decompressor.flush()
        except zlib.error as e:
            raise CorruptObject(oid, str(e)) from e

        if not decompressor.eof:
            raise CorruptObject(oid, "compressed stream is truncated")

        log.debug(f"read object {oid} ({len(data)} bytes) from {path}")
        return data
