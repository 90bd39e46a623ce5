from __future__ import annotations

import logging
from pathlib import Path
from typing import MutableMapping, Optional, Type

from kit import codec
from kit.author import Author
from kit.blob import Blob
from kit.commit import Commit
from kit.db_loose import Loose, Raw
from kit.errors import UnexpectedObjectKind
from kit.oid import ObjectId
from kit.tree import Tree

log = logging.getLogger(__name__)

TYPES: MutableMapping[str, Type[Blob | Commit | Tree]] = {
    "blob": Blob,
    "commit": Commit,
    "tree": Tree,
}


class Database:
    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.objects: MutableMapping[ObjectId, Blob | Commit | Tree] = {}
        self.backend = Loose(self.path)

    def has(self, oid: ObjectId) -> bool:
        return self.backend.has(oid)

    def load_raw(self, oid: ObjectId) -> Raw:
        return self.backend.load_raw(oid)

    def write(self, kind: str, payload: bytes) -> ObjectId:
        oid, envelope = codec.encode(kind, payload)
        self.backend.write_object(oid, envelope)
        return oid

    def read(self, oid: ObjectId) -> tuple[str, bytes]:
        raw = self.load_raw(oid)
        return raw.ty, raw.data

    def read_object(self, oid: ObjectId) -> Blob | Commit | Tree:
        ty, size, body = self.backend.load_frame(oid)

        obj: Blob | Commit | Tree
        if ty == "tree":
            # entries are checked against the header size, not the buffer
            obj = Tree.parse(body, declared_length=size)
        else:
            obj = TYPES[ty].parse(body[:size])
        obj.oid = oid
        return obj

    def load(self, oid: ObjectId) -> Blob | Commit | Tree:
        if oid not in self.objects:
            self.objects[oid] = self.read_object(oid)
        return self.objects[oid]

    def load_tree(self, oid: ObjectId) -> Tree:
        obj = self.load(oid)
        if not isinstance(obj, Tree):
            raise UnexpectedObjectKind(oid, "tree", obj.type())
        return obj

    def load_commit(self, oid: ObjectId) -> Commit:
        obj = self.load(oid)
        if not isinstance(obj, Commit):
            raise UnexpectedObjectKind(oid, "commit", obj.type())
        return obj

    def store(self, obj: Blob | Commit | Tree) -> ObjectId:
        obj.oid = self.write(obj.type(), obj.to_bytes())
        log.debug(f"stored {obj.type()} {obj.oid}")
        return obj.oid

    @staticmethod
    def hash_object(obj: Blob | Commit | Tree) -> ObjectId:
        oid, _ = codec.encode(obj.type(), obj.to_bytes())
        return oid

    def compose_commit(
        self,
        tree: ObjectId,
        parent: Optional[ObjectId],
        message: str,
        author: Author,
        committer: Author,
    ) -> ObjectId:
        commit = Commit.compose(tree, parent, message, author, committer)
        return self.store(commit)

    def short_oid(self, oid: ObjectId) -> str:
        return oid.short()

    def object_path(self, oid: ObjectId) -> Path:
        return self.backend.object_path(oid)
