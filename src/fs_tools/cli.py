"""Command-line interface for fs-tools.

This module exposes the filesystem utilities as subcommands.

Commands:
    - abspath: Resolve a path to an absolute directory path
    - is-dir: Check whether a path is an existing directory
    - copy: Copy a file, or a directory and its contents
    - list: List files, optionally recursive or filtered by name
    - write: Write content to a file, creating parent directories
"""

import sys
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    collect_errors_option,
    contains_option,
    content_option,
    json_option,
    mode_option,
    recursive_option,
)
from .core.exceptions import DirectoryCopyError
from .filesystem import (
    copy_directory,
    copy_file,
    get_files,
    get_files_contains,
    get_files_contains_recursive,
    write_or_update_file,
)
from .paths import abs_path, is_dir
from .schemas import FileListing, ListingRequest, WriteRequest

app = typer.Typer(
    name="fs-tools",
    help="Small utilities for copying, listing, and writing local files.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"fs-tools {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    FS-Tools: copy, list, and write files on the local filesystem.
    """
    pass


@app.command("abspath")
def abspath_cmd(
    path: Annotated[str, typer.Argument(help="Path to resolve")],
) -> None:
    """
    Print the absolute directory path for PATH.

    A trailing file name is stripped, so the result always names a directory.
    """
    typer.echo(abs_path(path))


@app.command("is-dir")
def is_dir_cmd(
    path: Annotated[str, typer.Argument(help="Path to check")],
) -> None:
    """
    Check whether PATH is an existing directory. Exits with 1 when it is not.
    """
    if is_dir(path):
        typer.echo("true")
    else:
        typer.echo("false")
        raise typer.Exit(1)


@app.command("copy")
def copy_cmd(
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    destination: Annotated[str, typer.Argument(help="Destination path")],
    collect_errors: Annotated[bool, collect_errors_option()] = False,
) -> None:
    """
    Copy a file, or a directory and all of its contents.

    Examples:
        File: fs-tools copy notes.txt backup/notes.txt
        Directory: fs-tools copy project/ backup/project --collect-errors
    """
    try:
        if is_dir(source):
            copy_directory(source, destination, collect_errors=collect_errors)
        else:
            copy_file(source, destination)
        typer.echo(f"Copied {source} to {destination}")

    except DirectoryCopyError as e:
        typer.echo(f"Error: {e}", err=True)
        for error in e.errors:
            typer.echo(f"  {error}", err=True)
        raise typer.Exit(1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("list")
def list_cmd(
    path: Annotated[str, typer.Argument(help="Directory to list")],
    recursive: Annotated[bool, recursive_option()] = False,
    contains: Annotated[Optional[str], contains_option()] = None,
    as_json: Annotated[bool, json_option()] = False,
) -> None:
    """
    List the files in a directory.

    Examples:
        fs-tools list /data/reports
        fs-tools list /data/reports --recursive --contains 2024
    """
    try:
        request = ListingRequest(path=path, recursive=recursive, contains=contains)

        if request.contains is None:
            files = get_files(request.path, recursive=request.recursive)
        elif request.recursive:
            files = get_files_contains_recursive(request.path, request.contains)
        else:
            files = get_files_contains(request.path, request.contains)

        listing = FileListing(
            path=request.path,
            recursive=request.recursive,
            contains=request.contains,
            files=files,
        )

        if as_json:
            typer.echo(listing.model_dump_json(indent=2))
        elif listing.files:
            typer.echo(f"Found {listing.count} files:")
            for file in listing.files:
                typer.echo(f"  {file}")
        else:
            typer.echo("No files found.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("write")
def write_cmd(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[Optional[str], content_option()] = None,
    mode: Annotated[str, mode_option()] = "644",
) -> None:
    """
    Write content to a file, creating any missing parent directories.

    Examples:
        fs-tools write out/notes.txt --content "hello"
        echo hello | fs-tools write out/notes.txt --mode 600
    """
    try:
        data = content.encode() if content is not None else sys.stdin.buffer.read()
        request = WriteRequest(path=path, content=data, mode=mode)

        write_or_update_file(request.path, request.content, request.mode)
        typer.echo(f"Wrote {len(request.content)} bytes to {request.path}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
