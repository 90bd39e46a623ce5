from __future__ import annotations

import shutil
from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generator,
    Mapping,
    Protocol,
    TextIO,
    TypeAlias,
    cast,
)

import pytest

from kit.cmd_base import Base
from kit.command import Command
from kit.database import Database
from kit.repository import Repository
from kit.workspace import Workspace
from tests.cmd_helpers import CapturedStderr

KitCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, CapturedStderr]

WriteFile: TypeAlias = Callable[[str, str | bytes], None]
Mkdir: TypeAlias = Callable[[str], None]

AUTHOR_ENV = {
    "GIT_AUTHOR_NAME": "A. U. Thor",
    "GIT_AUTHOR_EMAIL": "author@example.com",
    "GIT_COMMITTER_NAME": "C. O. Mitter",
    "GIT_COMMITTER_EMAIL": "committer@example.com",
}


class KitCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
        cwd: Path | None = None,
    ) -> "KitCmdResult": ...


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    return tmp_path / "test_repo"


@pytest.fixture(autouse=True)
def setup_and_teardown(repo_path: Path) -> Generator[None, None, None]:
    Command.execute(
        repo_path,
        {},
        ["kit", "init"],
        StringIO(),
        StringIO(),
        StringIO(),
    )
    yield
    shutil.rmtree(repo_path, ignore_errors=True)


@pytest.fixture
def repo(repo_path: Path) -> Repository:
    return Repository(repo_path / ".git")


@pytest.fixture
def database(repo: Repository) -> Database:
    return repo.database


@pytest.fixture
def workspace(repo: Repository) -> Workspace:
    return repo.workspace


@pytest.fixture
def write_file(repo_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str | bytes) -> None:
        path = repo_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        path.write_bytes(contents)

    return _write_file


@pytest.fixture
def mkdir(repo_path: Path) -> Mkdir:
    def _mkdir(name: str) -> None:
        path = repo_path / name
        path.mkdir(parents=True, exist_ok=True)

    return _mkdir


@pytest.fixture
def kit_cmd(repo_path: Path) -> Generator[KitCmd, None, None]:
    to_close = []

    def _kit_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
        cwd: Path | None = None,
    ) -> KitCmdResult:
        full_env = dict(env or {})
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = CapturedStderr()
        to_close.append(stderr)
        cmd = Command.execute(
            cwd or repo_path,
            full_env,
            ["kit"] + list(argv),
            stdin,
            stdout,
            cast(TextIO, stderr),
        )
        return cmd, stdin, stdout, stderr

    yield _kit_cmd

    for s in to_close:
        s.close()
