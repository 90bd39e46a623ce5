from __future__ import annotations

from pathlib import Path

from kit.database import Database
from kit.errors import NotARepository
from kit.tree_builder import TreeBuilder
from kit.workspace import Workspace

GIT_DIR = ".git"


class Repository:
    def __init__(self, git_path: Path) -> None:
        self.git_path: Path = git_path
        self.database: Database = Database(git_path / "objects")
        self.workspace: Workspace = Workspace(git_path.parent)

    @classmethod
    def discover(cls, start: Path) -> "Repository":
        start = start.absolute()
        for candidate in (start, *start.parents):
            git_path = candidate / GIT_DIR
            if (git_path / "objects").is_dir():
                return cls(git_path)
        raise NotARepository(start)

    def tree_builder(self) -> TreeBuilder:
        return TreeBuilder(self.database, self.workspace)
