from __future__ import annotations

import io
import logging
from functools import cached_property
from pathlib import Path
from typing import MutableMapping, NoReturn, TextIO

from kit.errors import KitError
from kit.oid import ObjectId
from kit.repository import Repository

log = logging.getLogger(__name__)

FATAL_STATUS = 128


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None

    @cached_property
    def repo(self) -> Repository:
        return Repository.discover(self.dir)

    def exit(self, status: int = 0) -> NoReturn:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status
        except KitError as e:
            log.debug(f"{self.__class__.__name__} failed", exc_info=True)
            self.eprintln(f"fatal: {e}")
            self.status = FATAL_STATUS
        except OSError as e:
            log.debug(f"{self.__class__.__name__} failed", exc_info=True)
            self.eprintln(f"fatal: {self.describe_os_error(e)}")
            self.status = FATAL_STATUS

        self.stdout.flush()
        self.stderr.flush()

        assert self.status is not None
        return self.status

    def describe_os_error(self, error: OSError) -> str:
        message = error.strerror or str(error)
        if error.filename is None:
            return message
        return f"{message}: '{error.filename}'"

    def parse_oid(self, text: str) -> ObjectId:
        return ObjectId.parse(text)

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def println(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write((string + "\n").encode("utf-8"))
        else:
            self.stdout.write(string + "\n")

    def write_bytes(self, data: bytes) -> None:
        """
        Writes payload bytes as text when they decode as UTF-8, and raw to
        the binary buffer behind stdout otherwise.
        """
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            buffer = getattr(self.stdout, "buffer", None)
            if buffer is None:
                text = data.decode("utf-8", errors="replace")
            else:
                self.stdout.flush()
                buffer.write(data)
                return

        self.stdout.write(text)

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
