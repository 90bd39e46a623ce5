from __future__ import annotations

from pathlib import Path

from kit.cmd_base import Base
from kit.lockfile import Lockfile
from kit.repository import GIT_DIR

DEFAULT_BRANCH = "main"
DEFAULT_CONFIG = "[core]\n\tbare = false\n"


class Init(Base):
    def run(self) -> None:
        if self.args:
            root_path = self.expanded_path(self.args[0]).resolve()
        else:
            root_path = Path(self.dir).absolute().resolve()

        git_path: Path = root_path / GIT_DIR
        existed = (git_path / "objects").is_dir()

        for d in ("objects", "refs/heads"):
            (git_path / d).mkdir(parents=True, exist_ok=True)

        self.write_if_missing(git_path / "config", DEFAULT_CONFIG)
        self.write_if_missing(git_path / "HEAD", f"ref: refs/heads/{DEFAULT_BRANCH}\n")

        if existed:
            self.println(f"Reinitialized existing kit repository in {git_path}")
        else:
            self.println(f"Initialized empty kit repository in {git_path}")

    def write_if_missing(self, path: Path, contents: str) -> None:
        if path.exists():
            return

        lockfile = Lockfile(path)
        lockfile.hold_for_update()
        lockfile.write(contents)
        lockfile.commit()
