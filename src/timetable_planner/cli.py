"""CLI entry point for the timetable planner."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from .catalog import Catalog, load_catalog, select_courses
from .config import ConfigLoader, PreferenceConfig
from .exceptions import PlannerError
from .exporters import get_exporter
from .models import SlotTimings
from .scheduler import (
    MAX_TIMETABLES,
    GenerationResult,
    TimetableGenerator,
    describe_slot,
    export_result_json,
)
from .validators import validate_catalog

app = typer.Typer(
    name="timetable-planner",
    help="Generate conflict-free weekly class timetables",
    add_completion=False,
)
console = Console()


class OutputFormat(str, Enum):
    """Output format options."""

    json = "json"
    csv = "csv"
    excel = "excel"


def _configure_logging(verbose: bool) -> None:
    """Send library log records to stderr when verbose."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@app.command()
def generate(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Catalog JSON file with 'courses' and optional 'slots'"),
    ],
    course: Annotated[
        Optional[list[str]],
        typer.Option("-c", "--course", help="Course code to include (repeatable, default: all)"),
    ] = None,
    preferences: Annotated[
        Optional[Path],
        typer.Option("--preferences", help="Theory faculty preferences JSON file"),
    ] = None,
    lab_preferences: Annotated[
        Optional[Path],
        typer.Option("--lab-preferences", help="Lab faculty preferences JSON file"),
    ] = None,
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config", help="Reference configuration directory"),
    ] = None,
    max_timetables: Annotated[
        int,
        typer.Option("--max", help="Maximum number of timetables", min=1),
    ] = MAX_TIMETABLES,
    time_limit: Annotated[
        Optional[float],
        typer.Option("--time-limit", help="Stop searching after this many seconds"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail when a slot has no timing data"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file or directory path"),
    ] = None,
    format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.json,
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Show detailed output"),
    ] = False,
) -> None:
    """Generate every conflict-free timetable for the selected courses."""
    _configure_logging(verbose)

    if not catalog_file.exists():
        console.print(f"[bold red]Error:[/bold red] File not found: {catalog_file}")
        raise typer.Exit(1)

    try:
        with console.status("[bold green]Loading catalog..."):
            config = ConfigLoader(config_dir)
            catalog = load_catalog(catalog_file)
            courses = select_courses(catalog, course)
            slot_timings = _resolve_slot_timings(catalog, config)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    faculty_prefs = config.faculty_preferences
    lab_prefs = config.lab_faculty_preferences
    if preferences:
        faculty_prefs.merge(PreferenceConfig(preferences))
    if lab_preferences:
        lab_prefs.merge(PreferenceConfig(lab_preferences))

    console.print(f"\n[bold]Timetable Generation for:[/bold] {catalog_file.name}")
    console.print(f"  Courses selected: {len(courses)}")

    generator = TimetableGenerator(
        slot_timings,
        max_timetables=max_timetables,
        time_limit=time_limit,
        strict_timings=strict,
    )
    try:
        with console.status("[bold green]Generating timetables..."):
            result = generator.generate(
                courses, faculty_prefs.as_dict(), lab_prefs.as_dict()
            )
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _show_summary(result)
    if verbose and result.timetables:
        _show_timetables(result)

    if output:
        exporter = get_exporter(format.value, slot_timings)
        if format == OutputFormat.csv:
            output_path = output if output.is_dir() else output.parent / output.stem
        else:
            suffix = ".xlsx" if format == OutputFormat.excel else ".json"
            output_path = output if output.suffix else output.with_suffix(suffix)

        with console.status(f"[bold green]Exporting to {format.value}..."):
            exporter.export(result, output_path)
        console.print(f"\n[bold green]✓[/bold green] Exported to: {output_path}")
    else:
        default_output = Path("output/timetables.json")
        with console.status(f"[bold green]Exporting to {default_output}..."):
            export_result_json(result, default_output)
        console.print(f"\n[bold green]✓[/bold green] Timetables exported to: {default_output}")


def _resolve_slot_timings(catalog: Catalog, config: ConfigLoader) -> SlotTimings:
    """Configured slot-timings.json entries override the catalog's."""
    if config.slots.is_default:
        return catalog.slot_timings
    return {**catalog.slot_timings, **config.slots.get_timings()}


def _show_summary(result: GenerationResult) -> None:
    """Print a summary of a generation run."""
    stats = result.statistics
    console.print("\n[bold]Results:[/bold]")
    console.print(f"  Timetables generated: {result.total_timetables}")
    console.print(f"  Total credits: {result.total_credits}")
    console.print(f"  Raw combinations: {stats.total_combinations}")
    console.print(f"  Conflicts pruned: {stats.conflicts_pruned}")

    if result.impossible_courses:
        console.print(
            f"\n[bold red]Courses with no options:[/bold red] "
            f"{', '.join(result.impossible_courses)}"
        )
    if result.missing_slot_timings:
        console.print(
            f"\n[bold yellow]Warning:[/bold yellow] no timing data for "
            f"{', '.join(result.missing_slot_timings)}; overlaps with these slots "
            "are not detected"
        )
    if stats.truncated:
        console.print(
            "\n[bold yellow]Warning:[/bold yellow] result limit reached, "
            "more timetables may exist"
        )
    if stats.interrupted:
        console.print(
            "\n[bold yellow]Warning:[/bold yellow] time limit reached, "
            "more timetables may exist"
        )


def _show_timetables(result: GenerationResult, limit: int = 5) -> None:
    """Show the first timetables in tables."""
    for timetable in result.timetables[:limit]:
        table = Table(title=f"Timetable Option {timetable.id}")
        table.add_column("Course", style="cyan")
        table.add_column("Theory", style="green")
        table.add_column("Lab", style="magenta")

        for sc in timetable.scheduled_courses:
            theory = f"{sc.theory_slot} · {sc.theory_faculty}"
            lab = f"{sc.lab_slot} · {sc.lab_faculty}" if sc.lab_slot else "-"
            table.add_row(sc.course_code, theory, lab)

        console.print(table)

    if result.total_timetables > limit:
        console.print(f"  ... and {result.total_timetables - limit} more")


@app.command()
def validate(
    catalog_file: Annotated[
        Path,
        typer.Argument(help="Catalog JSON file"),
    ],
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config", help="Reference configuration directory"),
    ] = None,
) -> None:
    """Validate a catalog against its slot timings."""
    if not catalog_file.exists():
        console.print(f"[bold red]Error:[/bold red] File not found: {catalog_file}")
        raise typer.Exit(1)

    try:
        catalog = load_catalog(catalog_file)
        slot_timings = _resolve_slot_timings(catalog, ConfigLoader(config_dir))
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    validation = validate_catalog(catalog.courses, slot_timings)

    console.print(f"\n[bold]Validation Results for:[/bold] {catalog_file.name}")

    if validation["valid"]:
        console.print("[bold green]✓ Catalog is valid[/bold green]")
    else:
        console.print("[bold red]✗ Catalog has issues[/bold red]")

    console.print(f"\n  Courses: {len(catalog.courses)}")
    console.print(f"  Slots with timings: {len(slot_timings)}")

    if validation["errors"]:
        console.print(f"\n[bold red]Errors ({len(validation['errors'])}):[/bold red]")
        for error in validation["errors"]:
            console.print(f"  [red]• {error}[/red]")

    if validation["warnings"]:
        console.print(f"\n[bold yellow]Warnings ({len(validation['warnings'])}):[/bold yellow]")
        for warning in validation["warnings"]:
            console.print(f"  [yellow]• {warning}[/yellow]")

    if not validation["valid"]:
        raise typer.Exit(1)


@app.command()
def slots(
    config_dir: Annotated[
        Optional[Path],
        typer.Option("--config", help="Reference configuration directory"),
    ] = None,
) -> None:
    """Show the slot timing table."""
    try:
        config = ConfigLoader(config_dir)
    except PlannerError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)
    timings = config.slots.get_timings()

    title = "Default Slot Grid" if config.slots.is_default else "Slot Timings"
    table = Table(title=title)
    table.add_column("Slot", style="cyan")
    table.add_column("Times", style="green")

    for code in config.slots.get_slot_codes():
        table.add_row(code, describe_slot(code, timings))

    console.print(table)


if __name__ == "__main__":
    app()
