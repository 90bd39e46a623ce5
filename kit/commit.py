from __future__ import annotations

from collections import defaultdict
from typing import Optional

from kit.author import Author
from kit.errors import MalformedHeader
from kit.oid import ObjectId


class Commit:
    def __init__(
        self,
        parents: list[ObjectId],
        tree: ObjectId,
        author: Author,
        committer: Author,
        message: str,
    ) -> None:
        self.parents: list[ObjectId] = parents
        self.tree: ObjectId = tree
        self.author: Author = author
        self.committer: Author = committer
        self.message: str = message
        self._oid: ObjectId | None = None

    @classmethod
    def compose(
        cls,
        tree: ObjectId,
        parent: Optional[ObjectId],
        message: str,
        author: Author,
        committer: Author,
    ) -> "Commit":
        return cls([parent] if parent is not None else [], tree, author, committer, message)

    @property
    def parent(self) -> ObjectId | None:
        try:
            return self.parents[0]
        except IndexError:
            return None

    @classmethod
    def parse(cls, data: bytes) -> "Commit":
        text = data.decode("utf-8", errors="surrogateescape")

        headers: dict[str, list[str]] = defaultdict(list)
        pos = 0
        while True:
            nl = text.find("\n", pos)
            if nl == -1:
                raise MalformedHeader("unterminated commit headers")
            line = text[pos:nl]
            pos = nl + 1
            if line == "":
                break

            key, sep, value = line.partition(" ")
            if not sep:
                raise MalformedHeader(f"bad commit header {line!r}")
            headers[key].append(value)

        message = text[pos:]
        if message.endswith("\n"):
            message = message[:-1]

        tree_values = headers.get("tree")
        if not tree_values:
            raise MalformedHeader("commit object missing 'tree' header")

        author = Author.parse(headers.get("author", [""])[0])
        if author is None:
            raise MalformedHeader("commit object has a bad 'author' header")

        committer = Author.parse(headers.get("committer", [""])[0])
        if committer is None:
            raise MalformedHeader("commit object has a bad 'committer' header")

        return cls(
            parents=[ObjectId.parse(p) for p in headers.get("parent", [])],
            tree=ObjectId.parse(tree_values[0]),
            author=author,
            committer=committer,
            message=message,
        )

    @property
    def oid(self) -> ObjectId:
        assert self._oid is not None
        return self._oid

    @oid.setter
    def oid(self, value: ObjectId) -> None:
        self._oid = value

    def title_line(self) -> str:
        lines = self.message.splitlines()
        return lines[0] if lines else ""

    def type(self) -> str:
        return "commit"

    def to_bytes(self) -> bytes:
        lines = [
            f"tree {self.tree}",
        ]

        for parent in self.parents:
            lines += [f"parent {parent}"]

        lines.extend(
            [
                f"author {self.author}",
                f"committer {self.committer}",
                "",
                self.message,
            ]
        )

        text = "\n".join(lines) + "\n"
        return text.encode("utf-8", errors="surrogateescape")
