from __future__ import annotations

from kit.cmd_base import Base
from kit.cmd_ls_tree import format_entry

MODES = ("-p", "-t", "-s", "-e")


class CatFile(Base):
    def define_options(self) -> None:
        self.mode: str | None = None
        self.objects: list[str] = []

        for arg in self.args:
            if arg in MODES:
                self.mode = arg
            else:
                self.objects.append(arg)

    def run(self) -> None:
        self.define_options()

        if self.mode is None or len(self.objects) != 1:
            self.eprintln("usage: kit cat-file (-p | -t | -s | -e) <object>")
            self.exit(129)

        oid = self.parse_oid(self.objects[0])
        database = self.repo.database

        if self.mode == "-e":
            self.exit(0 if database.has(oid) else 1)

        kind, payload = database.read(oid)

        if self.mode == "-t":
            self.println(kind)
        elif self.mode == "-s":
            self.println(str(len(payload)))
        elif kind == "tree":
            for entry in database.load_tree(oid):
                self.println(format_entry(entry))
        else:
            self.write_bytes(payload)
