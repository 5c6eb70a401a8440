"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config import PickerConfig, load_config
from ..domain.calendar_grid import CalendarGridBuilder
from ..domain.clock_geometry import ClockGeometryEngine
from ..domain.models import ClockMode, DayCell, Granularity, MonthRelation
from ..domain.year_list import YearListProvider
from ..services.view_state import ViewStateController

app = typer.Typer(
    name="datepicker",
    help="Browse calendar grids, clock dial geometry and scripted picker sessions",
    add_completion=False
)

console = Console()

WEEKDAY_HEADERS = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./datepicker.yaml"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Date/time picker engine tools.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load(config_file: Optional[Path], min_date: Optional[str], max_date: Optional[str]) -> PickerConfig:
    """Load the config and apply command line bound overrides."""
    config = load_config(config_file)
    overrides = {}
    if min_date is not None:
        overrides["min"] = min_date
    if max_date is not None:
        overrides["max"] = max_date
    if overrides:
        config = PickerConfig(**{**config.model_dump(), **overrides})
    return config


def _cell_text(cell: DayCell) -> Text:
    style = ""
    if cell.month_relation is not MonthRelation.CURRENT:
        style = "grey50 italic"
    if cell.is_disabled:
        style = "dim strike"
    if cell.is_today:
        style = f"{style} bold reverse".strip()
    return Text(f"{cell.day:>2}", style=style)


def _parse_mode(mode: str) -> ClockMode:
    try:
        return ClockMode(mode.lower())
    except ValueError:
        console.print(f"[red]Error: unknown mode '{mode}', use 'hour' or 'minute'.[/red]")
        raise typer.Exit(1)


@app.command()
def calendar(
    month: Annotated[Optional[str], typer.Option("--month", "-m", help="Month to show (YYYY-MM). Defaults to the current month.")] = None,
    min_date: Annotated[Optional[str], typer.Option("--min", help="Earliest selectable date (YYYY-MM-DD)")] = None,
    max_date: Annotated[Optional[str], typer.Option("--max", help="Latest selectable date (YYYY-MM-DD)")] = None,
    pad: Annotated[bool, typer.Option("--pad", help="Fill the last week with next-month days.")] = False,
    config_file: ConfigOption = None,
):
    """
    Render the month grid with today and out-of-range days marked.

    Examples:

        datepicker calendar --month 2024-02

        datepicker calendar --month 2024-02 --min 2024-02-10 --max 2024-02-20
    """
    try:
        config = _load(config_file, min_date, max_date)
        tz = config.timezone
        today = pendulum.now(tz)

        if month:
            try:
                view_date = pendulum.from_format(month, "YYYY-MM", tz=tz)
            except Exception as e:
                console.print(f"[red]Error parsing month: {e}[/red]")
                raise typer.Exit(1)
        else:
            view_date = today

        builder = CalendarGridBuilder(pad_trailing=pad or config.pad_trailing_days)
        cells = builder.build(view_date, config.bounds(), today)

        table = Table(
            title=view_date.format("MMMM YYYY"),
            show_header=True,
            header_style="bold cyan"
        )
        for header in WEEKDAY_HEADERS:
            table.add_column(header, justify="right")

        for week in builder.weeks(cells):
            row = [_cell_text(cell) for cell in week]
            row.extend(Text("") for _ in range(7 - len(row)))
            table.add_row(*row)

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def years(
    min_date: Annotated[Optional[str], typer.Option("--min", help="Earliest selectable date (YYYY-MM-DD)")] = None,
    max_date: Annotated[Optional[str], typer.Option("--max", help="Latest selectable date (YYYY-MM-DD)")] = None,
    config_file: ConfigOption = None,
):
    """
    Print the selectable year range.
    """
    try:
        config = _load(config_file, min_date, max_date)
        year_list = YearListProvider().years(config.bounds(), pendulum.now(config.timezone))
        console.print(f"[bold]{year_list[0]}[/bold] - [bold]{year_list[-1]}[/bold] ({len(year_list)} years)")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command("clock-point")
def clock_point(
    x: Annotated[float, typer.Argument(help="Horizontal offset from the dial center")],
    y: Annotated[float, typer.Argument(help="Vertical offset from the dial center (down is positive)")],
    mode: Annotated[str, typer.Option("--mode", help="hour or minute")] = "hour",
    config_file: ConfigOption = None,
):
    """
    Resolve a pointer offset on the dial to an hour or minute.
    """
    try:
        clock_mode = _parse_mode(mode)
        engine = ClockGeometryEngine(load_config(config_file).clock_face())
        value, ring = engine.point_to_time(x, y, clock_mode)
        console.print(f"{clock_mode.value} [bold]{value}[/bold] ({ring.value} ring)")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command("clock-hand")
def clock_hand(
    value: Annotated[int, typer.Argument(help="Hour (0-23) or minute (0-59)")],
    mode: Annotated[str, typer.Option("--mode", help="hour or minute")] = "hour",
    config_file: ConfigOption = None,
):
    """
    Print the hand position for an hour or minute.
    """
    try:
        clock_mode = _parse_mode(mode)
        engine = ClockGeometryEngine(load_config(config_file).clock_face())
        hand_x, hand_y = engine.time_to_point(value, clock_mode)
        console.print(f"x=[bold]{hand_x:.2f}[/bold] y=[bold]{hand_y:.2f}[/bold]")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def pick(
    keys: Annotated[str, typer.Option("--keys", "-k", help="Comma separated key names, e.g. 'Enter,ArrowRight,Enter'")],
    picker_type: Annotated[Optional[Granularity], typer.Option("--type", "-t", help="date, time or datetime")] = None,
    value: Annotated[Optional[str], typer.Option("--value", help="Initial committed value (ISO-8601)")] = None,
    config_file: ConfigOption = None,
):
    """
    Replay key presses against a picker and print the committed value.

    Examples:

        datepicker pick --keys "Enter,ArrowRight,Enter"

        datepicker pick --type time --keys "Enter,ArrowUp,Enter,Enter"
    """
    try:
        config = load_config(config_file)
        controller = ViewStateController(
            picker_type or config.granularity(),
            config.bounds(),
            geometry=ClockGeometryEngine(config.clock_face()),
            grid_builder=CalendarGridBuilder(pad_trailing=config.pad_trailing_days),
            timezone=config.timezone,
            required=config.required,
            placeholder=config.placeholder,
        )
        if value:
            controller.write_value(config.parse_date(value))

        committed: List = []
        controller.events.connect("change", lambda event: committed.append(event.value))

        for key in [k.strip() for k in keys.split(",") if k.strip()]:
            name = "Space" if key.lower() == "space" else key
            handled = controller.handle_keydown(name)
            controller.scheduler.run_pending()
            marker = "" if handled else " [yellow](ignored)[/yellow]"
            console.print(
                f"  {name:<10} -> {controller.view_mode.value:<12} "
                f"{controller.view_date.format('YYYY-MM-DD HH:mm')}{marker}"
            )

        console.print()
        if committed:
            console.print(f"[bold green]✓ Selected:[/bold green] {committed[-1].format('YYYY-MM-DD HH:mm')}")
        else:
            console.print("[yellow]No value committed.[/yellow]")

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]datepicker[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
