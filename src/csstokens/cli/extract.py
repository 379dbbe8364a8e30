"""CLI command: csstokens extract -- write the token catalogue as JSON."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from csstokens.errors import ExtractionError
from csstokens.extraction import extract as run_extract
from csstokens.model.tokens import ExtractionResult, SourceFile


def load_css_files(paths: tuple[str, ...]) -> list[SourceFile]:
    """Read each path as UTF-8, keeping the order given on the command line."""
    return [
        SourceFile(filename=path, content=Path(path).read_text(encoding="utf-8"))
        for path in paths
    ]


def run_or_exit(paths: tuple[str, ...]) -> ExtractionResult:
    """Extract from *paths*; print the error and exit 1 on failure."""
    try:
        return run_extract({"css": load_css_files(paths)})
    except ExtractionError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("cssfiles", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write JSON here instead of stdout.",
)
@click.option("--indent", default=2, type=int, show_default=True, help="JSON indentation.")
def extract(cssfiles: tuple[str, ...], output: str | None, indent: int) -> None:
    """Extract token groups, hard-coded values and keyframes from CSS files.

    Files are processed in the order given; references between files are
    resolved across the whole set.
    """
    result = run_or_exit(cssfiles)
    payload = json.dumps(result.to_dict(), indent=indent or None)

    if output is None:
        click.echo(payload)
        return
    Path(output).write_text(payload + "\n", encoding="utf-8")
    click.echo(
        f"Wrote {len(result.token_groups)} token group(s) to {output}",
        err=True,
    )
