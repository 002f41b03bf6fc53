"""CLI entry point for inspecting the source NUT test matrix."""

import json
import logging
import ntpath
import os
import posixpath
import sys
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType

import typer

from sourcenuts.test_matrix.catalog import iter_test_cases, load_catalog
from sourcenuts.test_matrix.executables import get_executables
from sourcenuts.test_matrix.models.repo_config import RepoConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
    force=True,
)
logger = logging.getLogger(__name__)

app = typer.Typer()

_FLAVOURS: dict[str, ModuleType] = {
    "native": os.path,
    "posix": posixpath,
    "windows": ntpath,
}


def _load(fixtures: Path | None, separator: str) -> Mapping[str, RepoConfig]:
    """Load the catalog, turning fixture errors into a non-zero exit."""
    flavour = _FLAVOURS.get(separator.lower())
    if flavour is None:
        typer.echo(
            f"Error: Unknown separator style: {separator}. "
            "Must be one of: native, posix, windows",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        return load_catalog(fixtures, flavour=flavour)
    except (FileNotFoundError, LookupError, ValueError) as e:
        logger.error(f"Failed to load test matrix: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def repos(
    fixtures: Path | None = typer.Option(None, help="YAML fixture file to load"),  # noqa: B008
    separator: str = typer.Option(
        "native", help="Path separator style (native, posix, windows)"
    ),
) -> None:
    """Print the normalized repository catalog keyed by git URL."""
    catalog = _load(fixtures, separator)
    output = {
        git_url: repo.model_dump(mode="json", by_alias=True)
        for git_url, repo in catalog.items()
    }
    typer.echo(json.dumps(output, indent=2))


@app.command()
def cases(
    fixtures: Path | None = typer.Option(None, help="YAML fixture file to load"),  # noqa: B008
    separator: str = typer.Option(
        "native", help="Path separator style (native, posix, windows)"
    ),
    include_skipped: bool = typer.Option(
        False, help="Include repositories marked as skipped"
    ),
) -> None:
    """Print every command invocation of the test matrix."""
    catalog = _load(fixtures, separator)
    output = [
        case.model_dump(mode="json")
        for case in iter_test_cases(catalog, include_skipped=include_skipped)
    ]
    logger.info(f"Test matrix has {len(output)} cases")
    typer.echo(json.dumps(output, indent=2))


@app.command()
def executables() -> None:
    """Print the executables and whether they are skipped."""
    output = [executable.model_dump() for executable in get_executables()]
    typer.echo(json.dumps(output, indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
