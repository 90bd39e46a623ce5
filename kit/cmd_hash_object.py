from __future__ import annotations

from kit.blob import Blob
from kit.cmd_base import Base
from kit.database import Database


class HashObject(Base):
    def define_options(self) -> None:
        self.write = False
        self.paths: list[str] = []

        for arg in self.args:
            if arg in ("-w", "--write"):
                self.write = True
            else:
                self.paths.append(arg)

    def run(self) -> None:
        self.define_options()

        if not self.paths:
            self.eprintln("usage: kit hash-object [-w] <file>...")
            self.exit(129)

        for path in self.paths:
            with open(self.expanded_path(path), "rb") as f:
                blob = Blob(f.read())

            if self.write:
                oid = self.repo.database.store(blob)
            else:
                oid = Database.hash_object(blob)

            self.println(str(oid))
