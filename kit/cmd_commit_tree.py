from __future__ import annotations

from typing import Iterator, NoReturn, Optional

from kit.cmd_base import Base
from kit.write_commit import WriteCommitMixin

USAGE = "usage: kit commit-tree <tree> [-p <parent>] [-m <message>]"


class CommitTree(WriteCommitMixin, Base):
    def define_options(self) -> None:
        self.tree: Optional[str] = None
        self.parent: Optional[str] = None
        self.messages: list[str] = []

        args_iter = iter(self.args)
        for arg in args_iter:
            if arg == "-p":
                self.parent = self.next_value(args_iter)
            elif arg == "-m":
                self.messages.append(self.next_value(args_iter))
            elif arg.startswith("--message="):
                self.messages.append(arg.split("=", 1)[1])
            elif self.tree is None:
                self.tree = arg
            else:
                self.usage()

    def next_value(self, args_iter: Iterator[str]) -> str:
        try:
            return next(args_iter)
        except StopIteration:
            self.usage()

    def usage(self) -> NoReturn:
        self.eprintln(USAGE)
        self.exit(129)

    def run(self) -> None:
        self.define_options()

        if self.tree is None:
            self.usage()

        tree = self.parse_oid(self.tree)
        parent = self.parse_oid(self.parent) if self.parent is not None else None

        oid = self.write_commit(tree, parent, self.read_message())
        self.println(str(oid))

    def read_message(self) -> str:
        if self.messages:
            return "\n\n".join(self.messages)

        message = self.stdin.read()
        if message.endswith("\n"):
            message = message[:-1]
        return message
