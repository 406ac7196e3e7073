"""VSFile CLI - Resolve the files behind Visual Studio solutions and projects."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from vsfile.config import ScanConfig, ScanResult
from vsfile.dotnet.solution import SolutionFile
from vsfile.errors import VSFileError
from vsfile.output import write_output
from vsfile.pipeline import run_scan


@click.group()
def cli() -> None:
    """VSFile - Follow solution and project references down to source files."""
    pass


def _configure_logging(verbose: bool, quiet: bool) -> None:
    from rich.logging import RichHandler

    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _run_with_progress(config: ScanConfig) -> ScanResult:
    """Run the scan with Rich progress display."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        result = run_scan(config, progress_callback=on_phase)

    # Summary table
    stats = result.stats
    table = Table(title="VSFile Scan", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Solutions", str(stats.get("solutions", 0)))
    table.add_row("Projects", str(stats.get("projects", 0)))
    table.add_row("Web sites", str(stats.get("web_sites", 0)))
    table.add_row("Source files", str(stats.get("sources", 0)))
    table.add_row("Skipped", str(stats.get("errors", 0)))

    duration = result.metadata.get("scan_duration_ms", 0)
    table.add_row("Duration", f"{duration:.1f}ms")

    console.print(table)

    timings = result.metadata.get("phase_timings", {})
    if config.verbose and timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)

    return result


@cli.command("scan")
@click.argument("paths", nargs=-1, required=True)
@click.option("-o", "--output", "output_path", default=None, help="Output JSON file path")
@click.option("-r", "--recursive", is_flag=True, help="Expand wildcards in subdirectories too")
@click.option("--skip-invalid", is_flag=True, help="Skip files that fail to load instead of stopping")
@click.option("--verbose", is_flag=True, help="Show debug logging and per-phase timings")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def scan_cmd(
    paths: tuple[str, ...],
    output_path: str | None,
    recursive: bool,
    skip_invalid: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """Resolve solution, project and source files named by PATHS.

    PATHS may contain wildcards in the file name, e.g. 'src/*.sln'.
    """
    _configure_logging(verbose, quiet)

    if output_path is None:
        output_path = "vsfile.json"

    config = ScanConfig(
        paths=list(paths),
        recursive=recursive,
        skip_invalid=skip_invalid,
        output_path=output_path,
        verbose=verbose,
        quiet=quiet,
    )

    try:
        if quiet:
            result = run_scan(config)
        else:
            result = _run_with_progress(config)
    except VSFileError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    write_output(result, output_path)

    if not quiet:
        from rich.console import Console
        Console().print(f"[green]Output written to:[/green] {output_path}")


@cli.command("solution")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def solution_cmd(path: str) -> None:
    """List the project references of a single solution file."""
    from rich.console import Console
    from rich.table import Table

    solution = SolutionFile(str(Path(path)))
    try:
        solution.load()
    except VSFileError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e

    table = Table(
        title=f"{solution.file_name} (format version {solution.format_version})",
        show_edge=False,
    )
    table.add_column("Name", style="bold")
    table.add_column("Path")
    table.add_column("Type")

    for reference in solution.references:
        table.add_row(reference.name, reference.relative_path, reference.type_id)

    Console().print(table)


if __name__ == "__main__":
    cli()
