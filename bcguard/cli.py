#!/usr/bin/env python3
"""bcguard CLI: OpenAPI backward-compatibility checks for CI."""
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .changes import ChangeSet, Severity
from .comparator import build_comparator
from .errors import BcGuardError, SpecParseError
from .formatters import BUMP_HINTS, TITLES, get_formatter, recommend_bump
from .git import GitRepository
from .loader import load_document

app = typer.Typer(name="bcguard",
                  help="Check OpenAPI specifications for backward compatibility breaking changes")
console = Console()
COLORS = {Severity.MAJOR: 'white on red', Severity.MINOR: 'black on cyan',
          Severity.PATCH: 'black on white'}
BUMP_COLORS = {'major': 'red', 'minor': 'cyan', 'patch': 'white'}


class OutputFormat(str, Enum):
    rich = "rich"
    json = "json"
    markdown = "markdown"
    github = "github"
    auto = "auto"


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_spec(path: str, label: str) -> str:
    p = Path(path)
    if not p.is_file():
        raise BcGuardError(f"{label} spec file not found: {path}")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SpecParseError.from_cause(e) from e
    except OSError as e:
        raise BcGuardError(f"Failed to read {label.lower()} spec file: {path}") from e


def _file_mode(old: str, new: str) -> ChangeSet:
    console.print("[bold]OpenAPI BC Break Checker - File Mode[/]")
    old_text = _read_spec(old, "Old")
    new_text = _read_spec(new, "New")
    console.print(f"Old: {escape(old)}")
    console.print(f"New: {escape(new)}\n")
    return build_comparator().compare_text(old_text, new_text, load_document)


def _git_mode(old: str, new: str, repo_path: str, file: Optional[str]) -> ChangeSet:
    console.print("[bold]OpenAPI BC Break Checker - Git Mode[/]")
    repo = GitRepository(repo_path)
    if file is None:
        raise BcGuardError(
            "The --file option is required when using git mode. "
            "Specify the path to the OpenAPI spec file within the repository.")
    repo.validate_revision(old)
    repo.validate_revision(new)
    console.print(f"Repository: {escape(repo_path)}")
    console.print(f"Old commit: {escape(old)}")
    console.print(f"New commit: {escape(new)}")
    console.print(f"File: {escape(file)}\n")
    return build_comparator().compare_text(repo.read_file(old, file),
                                           repo.read_file(new, file), load_document)


def _print_rich(changes: ChangeSet):
    if changes.is_empty():
        console.print("[green]No changes detected between the two specifications![/green]")
        return
    console.print(f"Total changes detected: {len(changes)}\n")
    for severity in Severity:
        bucket = getattr(changes, severity.value)
        if not bucket:
            continue
        console.print(f"[{COLORS[severity]}] {TITLES[severity]} ({len(bucket)}) [/]")
        for change in bucket:
            console.print(f"  * {escape(change.message)}", soft_wrap=True)
        console.print()
    bump = recommend_bump(changes)
    headline, reason, example = BUMP_HINTS[bump]
    console.print("[bold]Version Bump Recommendation[/]")
    console.print(f"[bold {BUMP_COLORS[bump]}]{headline}[/]")
    console.print(reason)
    console.print(example)
    console.print("\nAccording to Semantic Versioning (https://semver.org/)")


@app.command()
def check(old: str = typer.Argument(..., help="Old spec path OR old commit ID (with --git)"),
          new: str = typer.Argument(..., help="New spec path OR new commit ID (with --git)"),
          git: Optional[str] = typer.Option(None, "--git", "-g",
                                            help="Git repository path (enables git mode)"),
          file: Optional[str] = typer.Option(None, "--file", "-f",
                                             help="Spec file path inside the repository (git mode)"),
          output: OutputFormat = typer.Option(OutputFormat.rich, "--output", "-o",
                                              envvar="BCGUARD_OUTPUT", case_sensitive=False,
                                              help="Report format"),
          verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """Compare two specs and fail on breaking changes."""
    _setup_logging(verbose)
    formatter = get_formatter(output.value)
    # progress lines would corrupt machine-readable output
    console.quiet = formatter is not None
    try:
        if git is not None:
            changes = _git_mode(old, new, git, file)
        else:
            changes = _file_mode(old, new)
    except BcGuardError as e:
        console.quiet = False
        console.print(f"[bold red]ERROR:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
    console.quiet = False
    if formatter is not None:
        typer.echo(formatter.format(changes))
    else:
        _print_rich(changes)
    if changes.has_major():
        raise typer.Exit(1)


@app.command()
def specs(revision: str = typer.Argument(..., help="Commit ID to inspect"),
          git: str = typer.Option(".", "--git", "-g", help="Git repository path"),
          verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    """List JSON/YAML files at a revision."""
    _setup_logging(verbose)
    try:
        repo = GitRepository(git)
        repo.validate_revision(revision)
        files = repo.find_spec_files(revision)
    except BcGuardError as e:
        console.print(f"[bold red]ERROR:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
    for f in files:
        typer.echo(f)


def main():
    app()


if __name__ == "__main__":
    main()
