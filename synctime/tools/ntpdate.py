"""Adapter for the one-shot `ntpdate` tool.

Two output dialects are understood:

classic ntpdate::

    server 2606:4700:f1::1, stratum 0, offset 0.000000, delay 0.00000
    server 162.159.200.1, stratum 3, offset -0.001234, delay 0.02580
    19 Oct 12:00:00 ntpdate[4242]: adjust time server 162.159.200.1 offset -0.001234 sec

ntpsec ntpdate::

    2024-01-01 00:00:00.123456 (+0000) -0.001234 +/- 0.012345 pool.ntp.org 162.159.200.1 s3 no-leap

In both, the offset is the correction to apply to the local clock. Classic
output is read from the ``adjust``/``step`` summary line when present, else
from the first ``server`` line with a non-zero stratum; stratum 0 lines are
servers that never answered.
"""
import re
from dataclasses import dataclass

from synctime.utils.constants import NTPDATE
from synctime.utils.exceptions import ServerUnreachable, ToolError
from .base import CommandRunner, CommandResult


NO_SERVER_SUITABLE = "no server suitable"

_SUMMARY_OFFSET_RE = re.compile(r'\b(?:adjust|step) time server \S+ offset ([-+]?\d+(?:\.\d+)?) sec')
_SERVER_LINE_RE = re.compile(r'^\s*server \S+, stratum (\d+), offset ([-+]?\d+(?:\.\d+)?)', re.MULTILINE)
_NTPSEC_OFFSET_RE = re.compile(r'\([+-]\d{4}\)\s+([-+]?\d+(?:\.\d+)?)\s+\+/-')


def _classic_offset(text: str):
    m = _SUMMARY_OFFSET_RE.search(text)
    if m:
        return float(m.group(1))
    for m in _SERVER_LINE_RE.finditer(text):
        if int(m.group(1)) != 0:
            return float(m.group(2))
    return None


@dataclass(frozen=True)
class NtpdateQuery:
    raw_offset: float

    @property
    def offset(self) -> float:
        """Local clock minus reference clock."""
        return -self.raw_offset

    @classmethod
    def parse(cls, text: str) -> "NtpdateQuery":
        if NO_SERVER_SUITABLE in text:
            raise ServerUnreachable("NTP server unreachable.")
        offset = _classic_offset(text)
        if offset is None:
            m = _NTPSEC_OFFSET_RE.search(text)
            if not m:
                raise ServerUnreachable("ntpdate reported no offset.")
            offset = float(m.group(1))
        return cls(offset)


class NtpdateClient:
    def __init__(self, runner: CommandRunner, server: str, use_sudo: bool = True):
        self.runner = runner
        self.server = server
        self.use_sudo = use_sudo

    def query(self) -> NtpdateQuery:
        try:
            result = self.runner.privileged([NTPDATE, "-q", self.server], self.use_sudo)
        except ToolError as e:
            raise ServerUnreachable(e.message) from e
        return NtpdateQuery.parse(result.output)

    def step(self) -> CommandResult:
        return self.runner.privileged([NTPDATE, self.server], self.use_sudo)
