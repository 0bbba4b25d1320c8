"""Main entry point for Pomodoro CLI."""

from __future__ import annotations

import typer
from rich.markup import escape

from pomodoro_cli import __version__
from pomodoro_cli.config import PomodoroConfig, get_config_service
from pomodoro_cli.models.timer.duration import RunSettings
from pomodoro_cli.ui.app import PomodoroApp
from pomodoro_cli.utils.exit_codes import ERROR_CONFIG, ERROR_GENERAL, SUCCESS
from pomodoro_cli.utils.logger import get_logger
from pomodoro_cli.utils.ui.console import get_console

app = typer.Typer(
    name="pomodoro",
    help="A terminal Pomodoro timer alternating work and break sessions",
    add_completion=False,
)

console = get_console()
err_console = get_console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Pomodoro CLI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def build_settings(
    config: PomodoroConfig,
    work: str | None,
    break_: str | None,
    sessions: str | None,
) -> RunSettings | None:
    """Settings from positional arguments, or None to show the setup form."""
    if not work:
        return None
    timer = config.timer
    return RunSettings.from_text(
        work,
        break_,
        sessions,
        work_default=timer.work_minutes,
        break_default=timer.break_minutes,
        sessions_default=timer.sessions,
    )


@app.command()
def run(
    work: str | None = typer.Argument(
        None, help="Work duration, e.g. 25, 30s, 1h15m (skips the setup form)"
    ),
    break_: str | None = typer.Argument(
        None, metavar="BREAK", help="Break duration, e.g. 5, 5m"
    ),
    sessions: str | None = typer.Argument(None, help="Number of work sessions"),
    no_sound: bool = typer.Option(False, "--no-sound", help="Don't play alert sounds"),
    no_notify: bool = typer.Option(
        False, "--no-notify", help="Don't send desktop notifications"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Start a Pomodoro timer.

    With no arguments an interactive form asks for the work length, break
    length and session count. Unparseable values fall back to the defaults.
    """
    logger = get_logger()

    try:
        config = get_config_service().load_config()
    except RuntimeError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(ERROR_CONFIG) from e

    alerts = config.alerts.model_copy(
        update={
            "sound": config.alerts.sound and not no_sound,
            "notifications": config.alerts.notifications and not no_notify,
        }
    )
    config = config.model_copy(update={"alerts": alerts})

    tui = PomodoroApp(
        settings=build_settings(config, work, break_, sessions), config=config
    )
    try:
        tui.run()
    except Exception as e:
        logger.exception("Timer UI failed")
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(ERROR_GENERAL) from e

    raise typer.Exit(tui.return_code or SUCCESS)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
