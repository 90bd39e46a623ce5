import pytest

from kit.database import Database
from kit.oid import ObjectId
from tests.cmd_helpers import assert_status, assert_stderr, assert_stdout, read_stdout
from tests.conftest import KitCmd, Mkdir, WriteFile

HI = "45b983be36b73c0788dc9cbcb76cbb80fc7bb057"
EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"


@pytest.fixture
def single_file_tree(write_file: WriteFile, kit_cmd: KitCmd) -> str:
    write_file("a.txt", "hi\n")
    _, _, stdout, _ = kit_cmd("write-tree")
    return read_stdout(stdout).strip()


def test_it_lists_a_single_file_tree(single_file_tree: str, kit_cmd: KitCmd) -> None:
    cmd, _, stdout, _ = kit_cmd("ls-tree", single_file_tree)

    assert_status(cmd, 0)
    assert_stdout(stdout, f"100644 blob {HI}\ta.txt\n")


def test_it_lists_names_only(single_file_tree: str, kit_cmd: KitCmd) -> None:
    _, _, stdout, _ = kit_cmd("ls-tree", "--name-only", single_file_tree)
    assert_stdout(stdout, "a.txt\n")


def test_it_lists_subtrees_with_a_padded_mode(
    write_file: WriteFile, mkdir: Mkdir, kit_cmd: KitCmd
) -> None:
    write_file("z.txt", "hi\n")
    mkdir("empty")

    _, _, stdout, _ = kit_cmd("write-tree")
    _, _, listing, _ = kit_cmd("ls-tree", read_stdout(stdout).strip())

    assert_stdout(
        listing,
        f"040000 tree {EMPTY_TREE}\tempty\n"
        f"100644 blob {HI}\tz.txt\n",
    )


def test_it_lists_entries_in_stored_order(database: Database, kit_cmd: KitCmd) -> None:
    hi = bytes.fromhex(HI)
    tree = database.write("tree", b"100644 b\x00" + hi + b"100644 a\x00" + hi)

    _, _, stdout, _ = kit_cmd("ls-tree", "--name-only", tree.hex)

    assert_stdout(stdout, "b\na\n")


def test_an_empty_tree_lists_nothing(kit_cmd: KitCmd) -> None:
    _, _, stdout, _ = kit_cmd("write-tree")
    cmd, _, listing, _ = kit_cmd("ls-tree", read_stdout(stdout).strip())

    assert_status(cmd, 0)
    assert_stdout(listing, "")


def test_a_blob_is_not_a_tree(database: Database, kit_cmd: KitCmd) -> None:
    blob = database.write("blob", b"hi\n")

    cmd, _, _, stderr = kit_cmd("ls-tree", blob.hex)

    assert_status(cmd, 128)
    assert_stderr(stderr, f"fatal: object {blob} is a blob, not a tree\n")


def test_a_truncated_tree_is_fatal(database: Database, kit_cmd: KitCmd) -> None:
    tree = database.write("tree", b"100644 a.txt\x00" + bytes.fromhex(HI)[:19])

    cmd, _, stdout, stderr = kit_cmd("ls-tree", tree.hex)

    assert_status(cmd, 128)
    assert_stdout(stdout, "")
    assert stderr.read().startswith("fatal: entry 'a.txt' is missing object id bytes")


def test_a_malformed_id_is_rejected(kit_cmd: KitCmd) -> None:
    cmd, _, _, stderr = kit_cmd("ls-tree", "HEAD")

    assert_status(cmd, 128)
    assert_stderr(stderr, "fatal: Not a valid object name HEAD\n")


def test_a_missing_tree_is_fatal(kit_cmd: KitCmd) -> None:
    cmd, *_ = kit_cmd("ls-tree", EMPTY_TREE)
    assert_status(cmd, 128)


def test_a_tree_longer_than_its_header_is_fatal(
    database: Database, kit_cmd: KitCmd
) -> None:
    entry = b"100644 a.txt\x00" + bytes.fromhex(HI)
    envelope = b"tree %d\x00" % (len(entry) - 1) + entry
    oid = ObjectId.hash(envelope)
    database.backend.write_object(oid, envelope)

    cmd, _, stdout, stderr = kit_cmd("ls-tree", oid.hex)

    assert_status(cmd, 128)
    assert_stdout(stdout, "")
    assert stderr.read().startswith("fatal: entry 'a.txt' ends at byte 33")
