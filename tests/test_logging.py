import logging
import os
from pathlib import Path
from typing import Generator

import pytest

from kit.setup_logging import setup_logging
from tests.conftest import KitCmd, WriteFile


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
def test_debug_output_goes_to_the_log_file(
    tmp_path: Path, write_file: WriteFile, kit_cmd: KitCmd
) -> None:
    log_file = tmp_path / "logs" / "kit.log"
    write_file("a.txt", "hi\n")

    kit_cmd(
        "hash-object",
        "-w",
        "a.txt",
        env={"KIT_LOG_LEVEL": "debug", "KIT_LOG_FILE": str(log_file)},
    )

    assert "wrote object 45b983be36b73c0788dc9cbcb76cbb80fc7bb057" in log_file.read_text()


@pytest.mark.usefixtures("restore_root_logger")
def test_repeated_setup_adds_one_handler_per_file(tmp_path: Path) -> None:
    log_file = tmp_path / "kit.log"

    setup_logging("INFO", log_file)
    setup_logging("INFO", log_file)

    file_handlers = [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler)
        and h.baseFilename == str(log_file.resolve())
    ]
    assert len(file_handlers) == 1


@pytest.mark.usefixtures("restore_root_logger")
def test_skipped_special_files_are_reported(
    repo_path: Path, kit_cmd: KitCmd, caplog: pytest.LogCaptureFixture
) -> None:
    os.mkfifo(repo_path / "pipe")

    with caplog.at_level(logging.WARNING, logger="kit.tree_builder"):
        kit_cmd("write-tree")

    assert any("skipping" in r.getMessage() for r in caplog.records)
