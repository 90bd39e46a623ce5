from __future__ import annotations

from pathlib import Path
from typing import (
    MutableMapping,
    TextIO,
    Type,
)

from kit.cmd_base import Base
from kit.cmd_cat_file import CatFile
from kit.cmd_commit_tree import CommitTree
from kit.cmd_hash_object import HashObject
from kit.cmd_init import Init
from kit.cmd_ls_tree import LsTree
from kit.cmd_write_tree import WriteTree
from kit.errors import KitError
from kit.setup_logging import setup_logging


class Command:
    class Unknown(KitError):
        pass

    COMMANDS: dict[str, Type[Base]] = {
        "init": Init,
        "hash-object": HashObject,
        "cat-file": CatFile,
        "ls-tree": LsTree,
        "write-tree": WriteTree,
        "commit-tree": CommitTree,
    }

    @staticmethod
    def execute(
        _dir: Path,
        env: MutableMapping[str, str],
        argv: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ) -> Base:
        setup_logging(
            level=env.get("KIT_LOG_LEVEL", "WARNING"),
            log_file=env.get("KIT_LOG_FILE"),
        )

        name = argv[1]
        args = argv[2:]

        if name not in Command.COMMANDS:
            raise Command.Unknown(f"'{name}' is not a kit command")

        cmd_class = Command.COMMANDS[name]
        cmd: Base = cmd_class(_dir, env, args, stdin, stdout, stderr)
        cmd.execute()

        return cmd
