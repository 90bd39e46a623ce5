from pathlib import Path

import pytest

from kit.lockfile import Lockfile


def test_it_replaces_the_file_on_commit(tmp_path: Path) -> None:
    path = tmp_path / "HEAD"
    lock = Lockfile(path)
    lock.hold_for_update()
    lock.write("contents\n")

    assert not path.exists()
    lock.commit()

    assert path.read_text() == "contents\n"
    assert not (tmp_path / "HEAD.lock").exists()


def test_a_second_holder_is_denied(tmp_path: Path) -> None:
    Lockfile(tmp_path / "config").hold_for_update()

    with pytest.raises(Lockfile.LockDenied):
        Lockfile(tmp_path / "config").hold_for_update()


def test_writing_without_the_lock_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(Lockfile.StaleLock):
        Lockfile(tmp_path / "config").write(b"x")

