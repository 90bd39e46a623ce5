from __future__ import annotations

from datetime import datetime
from typing import MutableMapping, Optional

from kit.author import Author
from kit.oid import ObjectId
from kit.repository import Repository

DEFAULT_NAME = "kit"
DEFAULT_EMAIL = "kit@localhost"


class WriteCommitMixin:
    repo: Repository
    env: MutableMapping[str, str]

    def identity(self, role: str) -> Author:
        name = self.env.get(f"GIT_{role}_NAME") or DEFAULT_NAME
        email = self.env.get(f"GIT_{role}_EMAIL") or DEFAULT_EMAIL

        return Author(name, email, datetime.now().astimezone())

    def current_author(self) -> Author:
        return self.identity("AUTHOR")

    def current_committer(self) -> Author:
        return self.identity("COMMITTER")

    def write_commit(
        self, tree: ObjectId, parent: Optional[ObjectId], message: str
    ) -> ObjectId:
        return self.repo.database.compose_commit(
            tree, parent, message, self.current_author(), self.current_committer()
        )
