# SLEEP/sleep_app.py
import logging
import typer
from rich.console import Console
from rich.markup import escape
from pathlib import Path
from plyer import notification

from screenwatch import clock
from screenwatch.io_utils import StoreWriteError
from screenwatch.SLEEP.model import Config
from screenwatch.SLEEP.store import ConfigStore, ConfigParseError, CONFIG_FILE
from screenwatch.SLEEP.window import is_outside_window

logger = logging.getLogger(__name__)
console = Console()


def get_config_store(ctx: typer.Context) -> ConfigStore:
    data_dir = ctx.obj["data_dir"] if ctx.obj else Path(".")
    return ConfigStore(Path(data_dir) / CONFIG_FILE)


def show_bedtime_alert(now: str, config: Config):
    try:
        notification.notify(
            title="🛏️ Time to put the phone down",
            message=f"It's {now}. Healthy screen hours are over ({config.sleep_time} → {config.wake_time}).",
            timeout=10
        )
    except NotImplementedError:
        logger.warning("No desktop notification backend available on this system.")
    except Exception as e:
        # e.g. dbus without a running session bus
        logger.warning("Couldn't show a desktop notification: %s", e, exc_info=logger.isEnabledFor(logging.DEBUG))


def set_config(
    ctx: typer.Context,
    sleep: str = typer.Option(..., "--sleep", help="Bedtime, HH:MM (e.g., 23:00)."),
    wake: str = typer.Option(..., "--wake", help="Wake-up time, HH:MM (e.g., 07:00).")
):
    """Set your sleep and wake time."""
    try:
        get_config_store(ctx).save(Config(sleep_time=sleep, wake_time=wake))
    except StoreWriteError as e:
        console.print(f"[bold red]Error:[/bold red] Couldn't save {escape(e.path.name)}: {escape(e.reason)}")
        raise typer.Exit(code=1)
    console.print(f"🛏️ Sleep time set to: {escape(sleep)}")
    console.print(f"⏰ Wake time set to: {escape(wake)}")


def check_time(
    ctx: typer.Context,
    notify: bool = typer.Option(False, "--notify", "-n", help="Also show a desktop notification when it's past bedtime.")
):
    """Check if it's bedtime or too early."""
    now = clock.now_hhmm()

    try:
        config = get_config_store(ctx).load()
    except ConfigParseError as e:
        logger.debug("Couldn't parse %s: %s", e.path, e.reason)
        console.print("[yellow]⚠️ Couldn't parse config file.[/yellow]")
        return

    if config is None:
        console.print("[yellow]⚠️ No config file found. Use the `set` command first.[/yellow]")
        return

    if is_outside_window(now, config.sleep_time, config.wake_time):
        console.print(
            f"🚫 It's {now} now, that's outside your healthy screen hours "
            f"({escape(config.sleep_time)} → {escape(config.wake_time)})"
        )
        if notify:
            show_bedtime_alert(now, config)
    else:
        console.print(f"✅ You're within your screen time window. It's currently {now}")
