"""Adapter for `timedatectl` status output.

Grammar: one ``Label: value`` pair per line, label right-aligned with
leading spaces. Lines without ``: `` are ignored.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from synctime.utils.constants import TIMEDATECTL, TIMEDATECTL_FIELDS
from synctime.utils.exceptions import ToolError
from .base import CommandRunner


@dataclass(frozen=True)
class TimedatectlStatus:
    fields: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str, wanted=TIMEDATECTL_FIELDS) -> "TimedatectlStatus":
        pairs: List[Tuple[str, str]] = []
        for line in text.splitlines():
            label, sep, value = line.strip().partition(": ")
            if not sep:
                continue
            if label in wanted:
                pairs.append((label, value.strip()))
        return cls(tuple(pairs))

    def get(self, label: str, default: str = None):
        for key, value in self.fields:
            if key == label:
                return value
        return default

    def __bool__(self):
        return bool(self.fields)


def query_time_settings(runner: CommandRunner) -> TimedatectlStatus:
    """Run timedatectl; an absent tool or failed call yields an empty status."""
    if not runner.has(TIMEDATECTL):
        return TimedatectlStatus()
    try:
        result = runner.run([TIMEDATECTL])
    except ToolError:
        return TimedatectlStatus()
    if not result.ok:
        return TimedatectlStatus()
    return TimedatectlStatus.parse(result.stdout)
