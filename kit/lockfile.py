from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from kit.errors import KitError


class Lockfile:
    class LockDenied(KitError):
        pass

    class StaleLock(KitError):
        pass

    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.lock_path: Path = path.with_name(path.name + ".lock")
        self.lock: BinaryIO | None = None

    def hold_for_update(self) -> bool:
        if self.lock is not None:
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)

        flags: int = os.O_RDWR | os.O_CREAT | os.O_EXCL
        try:
            self.lock = os.fdopen(os.open(self.lock_path, flags, 0o644), "wb+")
        except FileExistsError:
            raise Lockfile.LockDenied(
                f"Unable to create '{self.lock_path}': File exists."
            )
        return True

    def write(self, data: str | bytes) -> None:
        self.raise_on_stale_lock()

        if isinstance(data, str):
            data = data.encode("utf-8")

        assert self.lock is not None
        self.lock.write(data)

    def commit(self) -> None:
        self.raise_on_stale_lock()

        assert self.lock is not None
        self.lock.close()

        os.replace(self.lock_path, self.path)

        self.lock = None

    def raise_on_stale_lock(self) -> None:
        if self.lock is None:
            raise Lockfile.StaleLock(f"Not holding lock on file: {self.lock_path}")
