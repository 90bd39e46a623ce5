from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from kit.blob import Blob
from kit.database import Database
from kit.db_entry import DatabaseEntry
from kit.errors import InvalidEntryName, SymlinkCycle
from kit.oid import ObjectId
from kit.tree import Tree
from kit.workspace import Workspace

log = logging.getLogger(__name__)


@dataclass
class Frame:
    path: Path
    name: str
    ancestors: frozenset[Path]
    pending: Iterator[Path]
    tree: Tree = field(default_factory=Tree)


class TreeBuilder:
    """
    Snapshots a directory into tree and blob objects.

    Directories are walked depth first with an explicit stack, so a tree is
    only assembled once every one of its children has an object id. Each
    frame remembers the canonical paths of the directories above it, which
    turns a symlink pointing back up the hierarchy into ``SymlinkCycle``
    instead of an endless walk.
    """

    def __init__(self, database: Database, workspace: Workspace) -> None:
        self.database = database
        self.workspace = workspace

    def build(self, root: Optional[Path] = None) -> ObjectId:
        root = self.workspace.path if root is None else root
        log.debug(f"building tree for {root}")

        frames = [self.open_frame(root, "", frozenset())]

        while True:
            frame = frames[-1]
            child = next(frame.pending, None)

            if child is None:
                oid = self.database.store(frame.tree)
                frames.pop()
                if not frames:
                    return oid
                entry = DatabaseEntry(frame.name, oid, DatabaseEntry.TREE_MODE)
                frames[-1].tree.add_entry(entry)
                continue

            name = self.entry_name(child)
            stat = self.workspace.stat_file(child)

            if self.workspace.is_directory(stat):
                frames.append(self.open_frame(child, name, frame.ancestors))
            elif self.workspace.is_file(stat):
                blob = Blob(self.workspace.read_file(child))
                oid = self.database.store(blob)
                frame.tree.add_entry(DatabaseEntry(name, oid, DatabaseEntry.REGULAR_MODE))
            else:
                log.warning(f"skipping {child}: not a regular file or directory")

    def open_frame(self, path: Path, name: str, ancestors: frozenset[Path]) -> Frame:
        canonical = self.workspace.canonical(path)
        if canonical in ancestors:
            raise SymlinkCycle(path)

        children = self.workspace.list_dir(path)
        return Frame(path, name, ancestors | {canonical}, iter(children))

    def entry_name(self, path: Path) -> str:
        try:
            path.name.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidEntryName(path) from e
        return path.name
