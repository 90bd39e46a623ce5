import os
import stat
from pathlib import Path
from typing import Optional


class Workspace:
    IGNORE_PREFIX: str = ".git"

    def __init__(self, path: Path) -> None:
        self.path: Path = path

    def list_dir(self, dirname: Optional[Path] = None) -> list[Path]:
        path = self.path if dirname is None else self.path / dirname

        return [
            entry
            for entry in path.iterdir()
            if not entry.name.startswith(Workspace.IGNORE_PREFIX)
        ]

    def read_file(self, path: Path) -> bytes:
        with open(self.path / path, "rb") as f:
            return f.read()

    def stat_file(self, path: Path) -> os.stat_result:
        return (self.path / path).stat()

    def is_directory(self, stat_result: os.stat_result) -> bool:
        return stat.S_ISDIR(stat_result.st_mode)

    def is_file(self, stat_result: os.stat_result) -> bool:
        return stat.S_ISREG(stat_result.st_mode)

    def canonical(self, path: Path) -> Path:
        return (self.path / path).resolve(strict=True)
