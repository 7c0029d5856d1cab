"""Output formatting and display utilities."""
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from synctime.utils.constants import Method, Source
from . import get_panel_box, CONSOLE_WIDTH


# Comparison status name -> (border style, verdict colour)
_STATUS_STYLE = {
    "IN_SYNC": ("green", "bright_green"),
    "OUT_OF_SYNC": ("yellow", "yellow"),
}
_FAILURE_STYLE = ("red", "red")


class OutputHelper:
    """Output formatting and display utilities."""

    # Ensure stdout uses UTF-8 encoding
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')

    _console = Console(width=CONSOLE_WIDTH)

    @staticmethod
    def set_console(console: Console):
        """Redirect all output to another console."""
        OutputHelper._console = console

    @staticmethod
    def print_panel(content: str, title: str = "", border_style: str = "blue"):
        """Print content in a rich panel box."""
        OutputHelper._console.print(Panel(content, title=title, title_align="left", border_style=border_style, box=get_panel_box(), expand=True, width=CONSOLE_WIDTH))

    @staticmethod
    def print_command(argv):
        OutputHelper._console.print(f"[dim]$ {escape(' '.join(argv))}[/dim]")

    @staticmethod
    def print_banner():
        OutputHelper.print_panel(
            "Check, compare, and sync system time (WSL2 and native Linux).",
            title="Time Sync Script (WSL2 & Linux)",
            border_style="bright_blue"
        )

    @staticmethod
    def print_host(host):
        OutputHelper.print_panel(
            f"OS: [bright_cyan]{escape(host.os_name)}[/bright_cyan]\n"
            f"Environment: [bright_cyan]{host.environment.label}[/bright_cyan]",
            title="OS Detection",
            border_style="cyan"
        )

    @staticmethod
    def print_time_settings(status, host, title: str = "Current Time Settings"):
        if status:
            width = max(len(label) for label, _ in status.fields)
            lines = [f"{label:>{width}}: {escape(value)}" for label, value in status.fields]
        else:
            lines = ["[dim]Time settings unavailable (timedatectl not found or failed).[/dim]"]

        if host.environment.is_virtualized:
            lines.append("")
            lines.append(f"[yellow]{escape('[WSL2 Note]')}[/yellow] RTC time is emulated from the Windows host clock.")

        OutputHelper.print_panel("\n".join(lines), title=title, border_style="blue")

    @staticmethod
    def format_comparison(comparison, threshold: int) -> str:
        lines = [f"System UTC Time: {comparison.system_time}"]
        if comparison.reference_time:
            lines.append(f"Reference UTC Time ({comparison.source.value}): {escape(comparison.reference_time)}")
        if comparison.raw_offset is not None and comparison.source is not Source.API:
            label = "Chrony Offset" if comparison.source is Source.CHRONY else "NTP Offset"
            lines.append(f"{label}: {comparison.raw_offset:+.6f} seconds")

        status = comparison.status.name
        _, colour = _STATUS_STYLE.get(status, _FAILURE_STYLE)
        if comparison.error is not None:
            lines.append(f"[{colour}]Error: {escape(comparison.error.message)}[/{colour}]")
        elif status == "OUT_OF_SYNC":
            lines.append(
                f"[{colour}]WARNING: Time difference is significant: {comparison.offset} seconds "
                f"(threshold {threshold}s).[/{colour}]"
            )
        else:
            lines.append(f"[{colour}]Time is in sync (difference: {comparison.offset} seconds).[/{colour}]")
        return "\n".join(lines)

    @staticmethod
    def print_comparison(comparison, threshold: int):
        border, _ = _STATUS_STYLE.get(comparison.status.name, _FAILURE_STYLE)
        OutputHelper.print_panel(
            OutputHelper.format_comparison(comparison, threshold),
            title="Time Comparison",
            border_style=border
        )

    @staticmethod
    def print_no_sync_needed():
        OutputHelper._console.print("[bright_green]No sync needed. Time is accurate.[/bright_green]")

    @staticmethod
    def print_action_needed():
        OutputHelper.print_panel(
            "[bold yellow]Time is out of sync![/bold yellow]",
            title="Action Needed",
            border_style="yellow"
        )

    @staticmethod
    def print_correction_skipped():
        OutputHelper._console.print("[dim]Correction skipped (--no-correct).[/dim]")

    @staticmethod
    def print_correction(correction):
        if correction.instructions:
            lines = [
                "WSL2 detected: Time is controlled by the Windows host.",
                "To sync the Windows host clock:",
            ]
            lines += [f"  {i}. {escape(step)}" for i, step in enumerate(correction.instructions, 1)]
            lines.append("[dim]Note: WSL2 will inherit the corrected time automatically.[/dim]")
            OutputHelper.print_panel("\n".join(lines), title="Attempting Time Sync", border_style="yellow")
            return

        lines = [f"Syncing via [bright_cyan]{correction.method.value}[/bright_cyan]..."]
        if correction.output.strip():
            lines.append(f"[dim]{escape(correction.output.strip())}[/dim]")
        if correction.succeeded:
            if correction.method is Method.CHRONY_MAKESTEP:
                lines.append("[bright_green]Success: chrony sync forced.[/bright_green]")
            else:
                lines.append("[bright_green]Success: ntpdate sync completed.[/bright_green]")
            border = "green"
        else:
            reason = correction.error.message if correction.error else "unknown error"
            lines.append(f"[red]Failed: {escape(reason)}[/red]")
            border = "red"
        OutputHelper.print_panel("\n".join(lines), title="Attempting Time Sync", border_style=border)

    @staticmethod
    def print_residual_warning():
        OutputHelper._console.print(
            "[yellow]Warning: Time may still be incorrect. Follow instructions above.[/yellow]"
        )

    @staticmethod
    def print_finished():
        OutputHelper.print_panel("Done.", title="Script Finished", border_style="bright_blue")
