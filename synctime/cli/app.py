import sys
from typing import Optional

import click
import typer
from click.exceptions import UsageError
from rich.console import Console
from rich.panel import Panel

from synctime import __version__
from synctime.core.config import SyncConfig
from synctime.core.environment import detect_host
from synctime.core.flow import run_sync
from synctime.tools.base import SubprocessRunner
from synctime.tools.worldtime import WorldTimeClient
from .helpers import OutputHelper, get_panel_box, CONSOLE_WIDTH


def _print_version():
    OutputHelper.print_panel(
        f"[bright_blue]synctime[/bright_blue] version [bright_green]{__version__}[/bright_green]",
        title="Version",
        border_style="green"
    )


def _print_main_help():
    lines = []
    lines.append("[bold]Check, compare, and sync the system clock[/bold]")
    lines.append("[dim]WSL2 hosts are checked against a time API, native Linux against chrony or ntpdate[/dim]")
    lines.append("")
    lines.append("[bold cyan]Usage:[/bold cyan]")
    lines.append("  synctime [yellow][OPTIONS][/yellow]")
    lines.append("")
    lines.append("[bold cyan]Options:[/bold cyan]")
    lines.append(f"  [yellow]{'--strict':<18}[/yellow] Exit with 1 when the clock is still out of sync")
    lines.append(f"  [yellow]{'--no-correct':<18}[/yellow] Report and compare only, never correct")
    lines.append(f"  [yellow]{'-v, --version':<18}[/yellow] Show version and exit")
    lines.append(f"  [yellow]{'--help':<18}[/yellow] Show this message and exit")
    lines.append("")
    lines.append("[bold cyan]Environment:[/bold cyan]")
    lines.append(f"  [green]{'SYNCTIME_API_URL':<22}[/green] Time API used on WSL2")
    lines.append(f"  [green]{'SYNCTIME_NTP_SERVER':<22}[/green] Server for ntpdate [dim](pool.ntp.org)[/dim]")
    lines.append(f"  [green]{'SYNCTIME_HTTP_TIMEOUT':<22}[/green] Seconds to wait for the time API")
    lines.append(f"  [green]{'SYNCTIME_NO_SUDO':<22}[/green] Run chronyc/ntpdate without sudo")

    OutputHelper.print_panel(
        "\n".join(lines),
        title="synctime",
        border_style="bright_blue"
    )


def _handle_usage_error(e):
    console = Console(width=CONSOLE_WIDTH, file=sys.stderr)

    error_msg = str(e.format_message()) if hasattr(e, 'format_message') else str(e)
    error_lines = [
        "[bold cyan]Usage:[/bold cyan] synctime [OPTIONS]",
        "",
        f"[red]{error_msg}[/red]",
    ]

    console.print(Panel(
        "\n".join(error_lines),
        title="Error",
        border_style="red",
        box=get_panel_box(),
        width=CONSOLE_WIDTH
    ))


def _custom_usage_error_show(self, output_file=None):
    _handle_usage_error(self)

UsageError.show = _custom_usage_error_show


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    help="Check, compare, and sync the system clock."
)


# =============================================================================
# App Callback
# =============================================================================

@app.callback(invoke_without_command=True)
def cli(
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 when the clock is still out of sync"
    ),
    no_correct: bool = typer.Option(
        False,
        "--no-correct",
        help="Only report and compare; never attempt a correction"
    ),
    show_version: bool = typer.Option(
        False,
        "--version", "-v",
        is_eager=True,
        help="Show version and exit."
    ),
    show_help: bool = typer.Option(
        False,
        "--help",
        is_eager=True,
        expose_value=True,
        help="Show this message and exit."
    )
):
    """
    Check whether the system clock is synchronized and try to correct it.
    """
    if show_help:
        _print_main_help()
        raise typer.Exit()

    if show_version:
        _print_version()
        raise typer.Exit()

    host = detect_host()
    config = SyncConfig.from_environment(host)
    runner = SubprocessRunner(echo=OutputHelper.print_command)
    client = WorldTimeClient(config.api_url, timeout=config.http_timeout)

    report = run_sync(config, runner, client, correct=not no_correct)

    # Exit status mirrors the sync state only on request.
    if strict and not report.in_sync:
        raise typer.Exit(code=1)


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv: Optional[list] = None):
    try:
        rv = app(args=argv, standalone_mode=False)
        exit_code = rv if isinstance(rv, int) else 0
    except click.exceptions.Exit as e:
        exit_code = e.exit_code
    except click.exceptions.UsageError as e:
        _handle_usage_error(e)
        exit_code = 2
    except click.exceptions.Abort:
        print()
        exit_code = 1
    except KeyboardInterrupt:
        print()
        exit_code = 130
    sys.exit(exit_code)


if __name__ == '__main__':
    main()
