"""Shared CLI parameter definitions.

Each function returns a Typer option that can be used as ``Annotated``
metadata in a command signature, so commands share names and help text:

    @app.command()
    def my_command(
        recursive: Annotated[bool, recursive_option()] = False,
    ):
        pass
"""

from typing import Annotated, Optional

import typer


def recursive_option() -> Annotated[bool, typer.Option]:
    """Recursive listing option."""
    return typer.Option(
        "--recursive", "-r", help="Descend into subdirectories when listing"
    )


def contains_option() -> Annotated[Optional[str], typer.Option]:
    """Name filter option."""
    return typer.Option(
        "--contains", "-c", help="Only list files whose name contains this text"
    )


def json_option() -> Annotated[bool, typer.Option]:
    """JSON output option."""
    return typer.Option("--json", help="Print the result as JSON")


def collect_errors_option() -> Annotated[bool, typer.Option]:
    """Directory copy error policy option."""
    return typer.Option(
        "--collect-errors",
        help="Report every failed entry instead of only the last one",
    )


def content_option() -> Annotated[Optional[str], typer.Option]:
    """File content option."""
    return typer.Option(
        "--content", help="Text to write; read from stdin when omitted"
    )


def mode_option() -> Annotated[str, typer.Option]:
    """Permission mode option."""
    return typer.Option("--mode", "-m", help="Octal permission bits, e.g. 644")
