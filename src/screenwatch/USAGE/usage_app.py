# USAGE/usage_app.py
import typer
from rich.console import Console
from rich.table import Table
from rich.markup import escape
from rich import box
from datetime import date
from typing import Optional
from pathlib import Path
import dateparser # For natural language parsing

from screenwatch import clock
from screenwatch.io_utils import StoreWriteError
from screenwatch.USAGE.store import UsageStore, USAGE_FILE

console = Console()


def get_usage_store(ctx: typer.Context) -> UsageStore:
    data_dir = ctx.obj["data_dir"] if ctx.obj else Path(".")
    return UsageStore(Path(data_dir) / USAGE_FILE)


def parse_date_arg(date_str: Optional[str]) -> Optional[date]:
    if date_str:
        try:
            # Try ISO format first for explicit parsing
            return date.fromisoformat(date_str)
        except ValueError:
            parsed = dateparser.parse(date_str, settings={"PREFER_DATES_FROM": "past"})
            if parsed:
                return parsed.date()
            console.print(f"[bold red]Error:[/bold red] Could not parse date: '{escape(date_str)}'")
            raise typer.Exit(code=1)
    return None


def log_time(
    ctx: typer.Context,
    minutes: int = typer.Argument(..., min=0, help="Screen time to add for today, in minutes.")
):
    """Log screen time in minutes."""
    today = clock.today().isoformat()
    try:
        entry = get_usage_store(ctx).log_minutes(minutes, today)
    except StoreWriteError as e:
        console.print(f"[bold red]Error:[/bold red] Couldn't save {escape(e.path.name)}: {escape(e.reason)}")
        raise typer.Exit(code=1)
    console.print(f"✅ Logged {minutes} minutes. Total today: {entry.total_minutes} mins")


def show_summary(
    ctx: typer.Context,
    on: Optional[str] = typer.Option(None, "--date", "-d", help="Show another day (e.g., 'yesterday', '2025-01-31').")
):
    """Show today's summary."""
    today = clock.today()
    target = parse_date_arg(on) or today
    day = target.isoformat()
    entry = get_usage_store(ctx).entry_for(day)

    if target == today:
        if entry:
            console.print(f"📊 Today ({entry.date}) you've spent {entry.total_minutes} minutes on your phone.")
        else:
            console.print("📭 No screen time logged for today.")
    else:
        if entry:
            console.print(f"📊 On {entry.date} you spent {entry.total_minutes} minutes on your phone.")
        else:
            console.print(f"📭 No screen time logged for {day}.")


def show_history(
    ctx: typer.Context,
    since: Optional[str] = typer.Option(None, "--since", "-s", help="Only show days from this date on (e.g., 'last week').")
):
    """List every logged day with its total."""
    records = get_usage_store(ctx).load()
    start = parse_date_arg(since)
    if start:
        records = [r for r in records if r.date >= start.isoformat()]

    if not records:
        console.print("📭 No screen time logged yet.")
        return

    table = Table(
        title="[bold deep_sky_blue1]Screen Time History[/bold deep_sky_blue1]",
        show_header=True,
        header_style="bold magenta",
        box=box.ROUNDED,
    )
    table.add_column("Date", style="cyan")
    table.add_column("Minutes", justify="right")
    table.add_column("Hours", justify="right", style="dim")

    total = 0
    for r in records:
        total += r.total_minutes
        hrs, mins = divmod(r.total_minutes, 60)
        table.add_row(escape(r.date), str(r.total_minutes), f"{hrs}h {mins:02}m")

    hrs, mins = divmod(total, 60)
    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{total}[/bold]", f"{hrs}h {mins:02}m")
    console.print(table)
