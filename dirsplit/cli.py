"""dirsplit CLI — mark split points and split a directory into sub-directories.

Usage::

    dirsplit add chapter1.jpg chapter2.jpg
    dirsplit split
    dirsplit -C ~/scans split
    dirsplit --version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from dirsplit.core.config import DirSplitConfig
from dirsplit.core.exceptions import DirSplitError, ErrorKind
from dirsplit.workspace import LocalWorkspace

EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.OPEN: 10,
    ErrorKind.WRITE: 11,
    ErrorKind.READ_DIR: 12,
    ErrorKind.READ_MARKERS: 13,
    ErrorKind.MAKE_DIR: 14,
    ErrorKind.MOVE: 15,
    ErrorKind.BAD_FILE: 16,
    ErrorKind.ADD_DIR: 17,
    ErrorKind.CWD: 18,
    ErrorKind.EMPTY_MARKERS: 19,
    ErrorKind.NAME_COLLISION: 20,
    ErrorKind.REMOVE_MARKERS: 21,
}


def _fail(exc: DirSplitError) -> NoReturn:
    click.secho(f"❌ Error: {exc}", fg="red", err=True)
    sys.exit(EXIT_CODES[exc.kind])


@click.group(invoke_without_command=True)
@click.version_option(package_name="dirsplit")
@click.option(
    "-C",
    "--directory",
    type=click.Path(file_okay=False, path_type=Path),
    help="Work in this directory instead of the current one.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log every file operation.")
@click.pass_context
def cli(ctx: click.Context, directory: Path | None, verbose: bool) -> None:
    """dirsplit — split files in a directory into sub directories using added files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {
        "workspace": LocalWorkspace(directory),
        "config": DirSplitConfig.from_env(),
    }
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("files", nargs=-1, required=True)
@click.pass_obj
def add(obj: dict, files: tuple[str, ...]) -> None:
    """Mark split points by adding filenames to the marker list."""
    from dirsplit.markers import add_markers

    try:
        added = add_markers(files, obj["workspace"], obj["config"])
    except DirSplitError as exc:
        _fail(exc)

    click.echo(f"📌 Marked {len(added)} split point(s)")


@cli.command(name="split")
@click.pass_obj
def split_cmd(obj: dict) -> None:
    """Split files using the recorded markers."""
    from dirsplit.splitter import split as _split

    try:
        result = _split(obj["workspace"], obj["config"])
    except DirSplitError as exc:
        _fail(exc)

    click.echo(result.summary())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
