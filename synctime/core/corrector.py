from dataclasses import dataclass, field
from typing import Optional, Tuple

from synctime.utils.constants import Method
from synctime.utils.exceptions import (
    CorrectionError, CorrectionFailed, ManualActionRequired, ToolError,
)
from synctime.tools.base import CommandRunner, CommandResult
from synctime.tools.chrony import ChronyClient
from synctime.tools.ntpdate import NtpdateClient
from .config import SyncConfig


HOST_INSTRUCTIONS = (
    "Open Windows Command Prompt as Administrator.",
    "Run: w32tm /resync",
    "Restart WSL2 if needed: 'wsl --shutdown' in PowerShell.",
)


@dataclass(frozen=True)
class Correction:
    method: Method
    attempted: bool
    succeeded: bool
    output: str = ""
    instructions: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[CorrectionError] = None


def _from_result(method: Method, result: CommandResult) -> Correction:
    if result.ok:
        return Correction(method, attempted=True, succeeded=True, output=result.output)
    error = CorrectionFailed(f"{method.value} exited with status {result.returncode}")
    return Correction(method, attempted=True, succeeded=False, output=result.output, error=error)


def correct_time(config: SyncConfig, runner: CommandRunner) -> Correction:
    """One-shot remediation; never retried."""
    if config.is_virtualized:
        error = ManualActionRequired(
            "Time is controlled by the Windows host.", HOST_INSTRUCTIONS
        )
        return Correction(
            Method.MANUAL, attempted=False, succeeded=False,
            instructions=HOST_INSTRUCTIONS, error=error,
        )

    chrony = ChronyClient(runner, use_sudo=config.use_sudo)
    if chrony.available():
        method, step = Method.CHRONY_MAKESTEP, chrony.makestep
    else:
        ntpdate = NtpdateClient(runner, config.ntp_server, use_sudo=config.use_sudo)
        method, step = Method.NTPDATE, ntpdate.step

    try:
        result = step()
    except ToolError as e:
        return Correction(method, attempted=True, succeeded=False,
                          error=CorrectionFailed(e.message))
    return _from_result(method, result)
