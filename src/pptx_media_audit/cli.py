"""Command-line interface for pptx-media-audit."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pptx_media_audit.auditor import DEFAULT_TOP_N, AuditResult, audit_package
from pptx_media_audit.errors import PackageRootError, Severity
from pptx_media_audit.report import export_csv, to_json, write_csv
from pptx_media_audit.selection import KindFilter, MinimumSizeKB, SelectionMode, TopN

console = Console()
error_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _resolve_mode(top: int | None, min_size_kb: int | None) -> SelectionMode:
    if top is not None and min_size_kb is not None:
        raise click.UsageError("--top and --min-size-kb are mutually exclusive.")
    if min_size_kb is not None:
        return MinimumSizeKB(min_size_kb)
    return TopN(top if top is not None else DEFAULT_TOP_N)


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--kind",
    "-k",
    type=click.Choice([k.value for k in KindFilter], case_sensitive=False),
    default=KindFilter.ALL.value,
    help="Media kinds to include.",
)
@click.option(
    "--top",
    "-t",
    type=click.IntRange(min=1),
    default=None,
    help=f"Show the N largest media files (default {DEFAULT_TOP_N}).",
)
@click.option(
    "--min-size-kb",
    "-s",
    type=click.IntRange(min=1),
    default=None,
    help="Show every media file of at least this many KB.",
)
@click.option(
    "--duplicates",
    "-d",
    is_flag=True,
    help="Hash media content and group identical files.",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json", "csv"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the results as CSV to this file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging.",
)
def main(
    path: Path,
    kind: str,
    top: int | None,
    min_size_kb: int | None,
    duplicates: bool,
    output: str,
    export_path: Path | None,
    verbose: bool,
) -> None:
    """Report where each embedded media file of a presentation is used.

    PATH is a .pptx file (or .pptm/.potx/.ppsx) or a directory holding an
    already extracted package.
    """
    setup_logging(verbose)
    mode = _resolve_mode(top, min_size_kb)

    try:
        result = audit_package(
            path,
            kind_filter=KindFilter(kind.lower()),
            mode=mode,
            find_duplicates=duplicates,
        )
    except PackageRootError as exc:
        error_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if output == "json":
        click.echo(to_json(result))
    elif output == "csv":
        write_csv(result, sys.stdout, include_duplicates=duplicates)
    else:
        _output_text(result, duplicates)

    if export_path is not None:
        try:
            export_csv(result, export_path, include_duplicates=duplicates)
        except OSError as exc:
            error_console.print(f"[red]Error:[/red] Cannot write {export_path}: {exc}")
            sys.exit(1)

    sys.exit(0)


def _output_text(result: AuditResult, duplicates: bool) -> None:
    """Output results as a formatted table."""
    if not result.records:
        console.print(f"No matching media found in {result.root}")
    else:
        table = Table(show_header=True, header_style="bold")
        table.add_column("File")
        table.add_column("Kind", style="dim", width=6)
        table.add_column("Size KB", justify="right")
        table.add_column("Slides")
        table.add_column("Other refs")
        table.add_column("Shape hints")
        table.add_column("Orphaned", width=8)
        if duplicates:
            table.add_column("Dup group", width=9)
            table.add_column("Count", justify="right", width=5)

        for record in result.records:
            row = [
                escape(record.file_name),
                record.kind,
                f"{record.size_kb:.2f}",
                record.slides,
                record.other_refs,
                escape(record.shape_hints),
                "[red]yes[/red]" if record.orphaned else "no",
            ]
            if duplicates:
                row.append(record.duplicate_group_id or "")
                row.append(str(record.duplicate_count))
            table.add_row(*row)

        console.print(table)

    for diagnostic in result.diagnostics:
        style = "yellow" if diagnostic.severity == Severity.WARNING else "blue"
        error_console.print(f"[{style}]{diagnostic.severity.value}:[/{style}] {escape(str(diagnostic))}")

    console.print(
        f"\n[bold]Summary:[/bold] {len(result.records)} of {result.total_media} media files shown, "
        f"{result.orphaned_count} orphaned, {result.warning_count} warnings"
    )


if __name__ == "__main__":
    main()
