"""CLI entry point for api-release-notes."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from api_release_notes.diff.base import DEFAULT_RENAME_THRESHOLD, DiffOptions
from api_release_notes.diff.changeset import compute_change_set
from api_release_notes.diff.components import diff_components
from api_release_notes.parser.errors import DocumentError
from api_release_notes.parser.loader import load_document
from api_release_notes.render.markdown import DEFAULT_TITLE, render_markdown
from api_release_notes.render.report import render_json

ENV_PREFIX = "API_RELEASE_NOTES"
CHANGES_EXIT_CODE = 3


def _load(file_path: Path) -> dict:
    """Load a document, turning load errors into CLI errors."""
    try:
        return load_document(file_path)
    except DocumentError as e:
        raise click.ClickException(str(e)) from e


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group()
def main():
    """API Release Notes: diff two API descriptions and write a change log."""
    pass


@main.command()
@click.argument("previous", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("current", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="Output file path (stdout when omitted), e.g. release-notes.md.")
@click.option("--format", "fmt", default="markdown", type=click.Choice(["markdown", "json"]), help="Output format.")
@click.option("--title", default=DEFAULT_TITLE, show_default=True, envvar=f"{ENV_PREFIX}_TITLE", help="Top-level heading of the release notes.")
@click.option("--renames/--no-renames", default=True, help="Detect renamed paths.")
@click.option("--rename-threshold", default=DEFAULT_RENAME_THRESHOLD, type=float, show_default=True, envvar=f"{ENV_PREFIX}_RENAME_THRESHOLD", help="Minimum path similarity for a rename.")
@click.option("--exact-usage", is_flag=True, default=False, help="Match component pointers by name instead of substring.")
@click.option("--fail-on-changes", is_flag=True, default=False, help=f"Exit with code {CHANGES_EXIT_CODE} when anything changed.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def diff(
    previous: Path,
    current: Path,
    output: Path | None,
    fmt: str,
    title: str,
    renames: bool,
    rename_threshold: float,
    exact_usage: bool,
    fail_on_changes: bool,
    verbose: bool,
):
    """Compare PREVIOUS and CURRENT API descriptions and render the changes."""
    _configure_logging(verbose)

    try:
        options = DiffOptions(
            detect_renames=renames,
            rename_threshold=rename_threshold,
            exact_usage_match=exact_usage,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--rename-threshold") from e

    click.echo(f"Comparing {previous} -> {current}...", err=True)
    change_set = compute_change_set(_load(previous), _load(current), options)

    if fmt == "json":
        result = render_json(change_set)
    else:
        result = render_markdown(change_set, title=title)

    if output is None:
        click.echo(result, nl=False)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result, encoding="utf-8")
        click.echo(f"Release notes saved to {output}", err=True)

    if fail_on_changes and not change_set.is_empty:
        click.get_current_context().exit(CHANGES_EXIT_CODE)


@main.command()
@click.argument("previous", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("current", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def components(previous: Path, current: Path):
    """List components that are new or changed in CURRENT."""
    for name in sorted(diff_components(_load(previous), _load(current))):
        click.echo(name)
