from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import click

from kit.cmd_base import Base
from kit.command import Command

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
}


def run_cmd(cmd_name: str, *args: str) -> None:
    argv: list[str] = ["kit", cmd_name, *args]

    cmd: Base = Command.execute(
        Path.cwd(),
        os.environ.copy(),
        argv,
        sys.stdin,
        sys.stdout,
        sys.stderr,
    )

    sys.exit(cmd.status)


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument(
    "path", type=click.Path(file_okay=False, path_type=Path), required=False
)
def init(path: Path | None) -> None:
    """Create an empty kit repository or reinitialize an existing one."""
    run_cmd("init", *(str(path),) if path is not None else ())


@cli.command(name="hash-object")
@click.option("-w", "--write", is_flag=True, help="Write the object into the object database.")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
def hash_object(write: bool, paths: tuple[Path, ...]) -> None:
    """Compute the object ID of files and optionally store them as blobs."""
    run_cmd("hash-object", *(("-w",) if write else ()), *(str(p) for p in paths))


@cli.command(name="cat-file")
@click.option("-p", "mode", flag_value="-p", help="Pretty-print the object's content.")
@click.option("-t", "mode", flag_value="-t", help="Show the object's type.")
@click.option("-s", "mode", flag_value="-s", help="Show the object's size.")
@click.option("-e", "mode", flag_value="-e", help="Exit with zero status if the object exists.")
@click.argument("object_name", metavar="<object>")
def cat_file(mode: Optional[str], object_name: str) -> None:
    """Provide content, type or size information for a stored object."""
    if mode is None:
        raise click.UsageError("one of -p, -t, -s or -e is required")

    run_cmd("cat-file", mode, object_name)


@cli.command(name="ls-tree")
@click.option("--name-only", is_flag=True, help="List only filenames.")
@click.argument("tree_ish", metavar="<tree-ish>")
def ls_tree(name_only: bool, tree_ish: str) -> None:
    """List the contents of a tree object."""
    run_cmd("ls-tree", *(("--name-only",) if name_only else ()), tree_ish)


@cli.command(name="write-tree")
def write_tree() -> None:
    """Create a tree object from the working directory."""
    run_cmd("write-tree")


@cli.command(name="commit-tree")
@click.option(
    "-p",
    "parent",
    metavar="<parent>",
    type=str,
    help="Id of a parent commit object.",
)
@click.option(
    "-m",
    "messages",
    metavar="<message>",
    multiple=True,
    help="A paragraph in the commit log message; read from stdin if omitted.",
)
@click.argument("tree", metavar="<tree>")
def commit_tree(parent: Optional[str], messages: tuple[str, ...], tree: str) -> None:
    """Create a new commit object from a tree."""
    cmd_args: list[str] = [tree]

    if parent is not None:
        cmd_args.extend(["-p", parent])

    for message in messages:
        cmd_args.append(f"--message={message}")

    run_cmd("commit-tree", *cmd_args)


if __name__ == "__main__":
    cli()
