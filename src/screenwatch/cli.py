import typer
from pathlib import Path
from screenwatch.io_utils import setup_logging
from screenwatch.USAGE.usage_app import log_time, show_summary, show_history
from screenwatch.SLEEP.sleep_app import set_config, check_time

app = typer.Typer(
    name="screenwatch",
    help="Track your phone screen time and get sleep alerts.",
    no_args_is_help=True,
)
app.command("log")(log_time)
app.command("summary")(show_summary)
app.command("history")(show_history)
app.command("set")(set_config)
app.command("check")(check_time)


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Path = typer.Option(
        Path("."), "--data-dir",
        exists=True, file_okay=False, dir_okay=True,
        help="Directory holding usage_log.json and config.json."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging.")
):
    setup_logging(verbose)
    ctx.obj = {"data_dir": data_dir}


if __name__ == "__main__":
    app()
