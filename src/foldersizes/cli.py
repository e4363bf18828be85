"""CLI interface for Foldersizes."""

from __future__ import annotations

import logging
import os

import click

from foldersizes.core.aggregator import Progress, aggregate_sizes
from foldersizes.core.enumerator import enumerate_directories
from foldersizes.core.privileges import is_elevated
from foldersizes.core.report import DEFAULT_FIRST, render_table, select_top, write_report
from foldersizes.settings import Settings
from foldersizes.utils import default_output_name, display_path, format_elapsed, normalize_depth

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(f"{click.style('Error:', fg='red', bold=True)} {message}", err=True)
    click.echo(ctx.get_help())
    ctx.exit(1)


def _on_progress(progress: Progress) -> None:
    counter = click.style(f"[{progress.completed}/{progress.total}]", fg="cyan")
    if progress.record is None:
        size = click.style("skipped", fg="yellow")
    else:
        size = f"{progress.record.size_mb:.2f} MB"
    click.echo(
        f"  {counter} {display_path(progress.path)} — {size} "
        f"(ETA {format_elapsed(progress.eta)})",
        err=True,
    )


def _on_visit(path: str) -> None:
    click.echo(f"  {click.style('·', fg='bright_black')} {display_path(path)}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--path", "-p", "root", default=None, help="Root directory to scan [default: current directory]")
@click.option("--first", "-f", type=click.IntRange(min=0), default=DEFAULT_FIRST, show_default=True,
              help="Number of largest directories to report")
@click.option("--output", "-o", default=None, help="Report file [default: FolderSizes_<timestamp>.log]")
@click.option("--depth", "-d", default="2", show_default=True,
              help="Maximum subdirectory depth ('0' or 'max' for unlimited)")
@click.option("--include-system-folders", is_flag=True, help="Also scan directories flagged as system")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def main(
    ctx: click.Context,
    root: str | None,
    first: int,
    output: str | None,
    depth: str,
    include_system_folders: bool,
    verbose: int,
) -> None:
    """Report the largest directories below a root path."""
    _setup_logging(verbose)

    root = os.path.abspath(root or os.getcwd())
    if not os.path.isdir(root):
        _fail(ctx, f"Path '{root}' does not exist or is not a directory.")
    if not is_elevated():
        _fail(ctx, "This tool must be run with administrator privileges.")

    try:
        max_depth = normalize_depth(depth)
        output = output or default_output_name()

        click.echo(f"\n{click.style('🔍', bold=True)} Enumerating directories in {display_path(root)}...\n", err=True)
        entries = enumerate_directories(
            root,
            max_depth,
            include_system=include_system_folders,
            on_visit=_on_visit if verbose else None,
        )
        log.info("Found %d directories", len(entries))

        click.echo(f"{click.style('📏', bold=True)} Calculating sizes of {len(entries)} directories...\n", err=True)
        records = aggregate_sizes(entries, on_progress=_on_progress)

        table = render_table(select_top(records, first))
        click.echo()
        click.echo(table)
        report_path = write_report(output, table)
    except Exception as exc:
        log.debug("Run failed", exc_info=True)
        _fail(ctx, str(exc))
        return

    click.echo(f"Report saved to {click.style(str(report_path), fg='green', bold=True)}")


def run() -> None:
    """Console entry point; applies saved defaults before parsing options."""
    main(default_map=Settings().default_map())
