from __future__ import annotations

from kit.cmd_base import Base
from kit.db_entry import DatabaseEntry


def format_entry(entry: DatabaseEntry) -> str:
    return f"{entry.mode:06o} {entry.kind()} {entry.oid}\t{entry.name}"


class LsTree(Base):
    def define_options(self) -> None:
        self.name_only = False
        self.revisions: list[str] = []

        for arg in self.args:
            if arg == "--name-only":
                self.name_only = True
            else:
                self.revisions.append(arg)

    def run(self) -> None:
        self.define_options()

        if len(self.revisions) != 1:
            self.eprintln("usage: kit ls-tree [--name-only] <tree-ish>")
            self.exit(129)

        oid = self.parse_oid(self.revisions[0])
        tree = self.repo.database.load_tree(oid)

        for entry in tree.entries:
            if self.name_only:
                self.println(entry.name)
            else:
                self.println(format_entry(entry))
