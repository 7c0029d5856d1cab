"""Adapter for the chrony daemon (`chronyc tracking`, `chronyc makestep`)."""
import re
from dataclasses import dataclass
from typing import Optional

from synctime.utils.constants import CHRONYC
from synctime.utils.exceptions import NotSynchronized, ToolError
from .base import CommandRunner, CommandResult


NOT_SYNCHRONISED = "Not synchronised"

_FIELD_RE = re.compile(r'^\s*([A-Za-z][A-Za-z ()]*?)\s*:\s*(.*?)\s*$')
_SYSTEM_TIME_RE = re.compile(r'([-+]?\d+(?:\.\d+)?)\s+seconds\s+(fast|slow)\s+of\s+NTP\s+time')


@dataclass(frozen=True)
class ChronyTracking:
    reference_id: Optional[str]
    ref_time: Optional[str]
    offset: float
    leap_status: Optional[str]

    @classmethod
    def parse(cls, text: str) -> "ChronyTracking":
        """Parse `chronyc tracking` output.

        Raises NotSynchronized when chrony has no lock or the
        ``System time`` line is missing.
        """
        if NOT_SYNCHRONISED.lower() in text.lower():
            raise NotSynchronized("chrony is not synchronized.")

        fields = {}
        for line in text.splitlines():
            m = _FIELD_RE.match(line)
            if m:
                fields[m.group(1)] = m.group(2)

        system_time = fields.get("System time")
        m = _SYSTEM_TIME_RE.search(system_time or "")
        if not m:
            raise NotSynchronized("chrony tracking report has no System time offset.")

        # "fast" means the local clock is ahead of NTP time.
        offset = float(m.group(1))
        if m.group(2) == "slow":
            offset = -offset

        return cls(
            reference_id=fields.get("Reference ID"),
            ref_time=fields.get("Ref time (UTC)"),
            offset=offset,
            leap_status=fields.get("Leap status"),
        )


class ChronyClient:
    def __init__(self, runner: CommandRunner, use_sudo: bool = True):
        self.runner = runner
        self.use_sudo = use_sudo

    def available(self) -> bool:
        return self.runner.has(CHRONYC)

    def tracking(self) -> ChronyTracking:
        try:
            result = self.runner.run([CHRONYC, "tracking"])
        except ToolError as e:
            raise NotSynchronized(e.message) from e
        if not result.ok and not result.stdout:
            raise NotSynchronized(f"chronyc tracking failed: {result.output.strip() or result.returncode}")
        return ChronyTracking.parse(result.output)

    def makestep(self) -> CommandResult:
        return self.runner.privileged([CHRONYC, "makestep"], self.use_sudo)
