"""The whole run: detect, report, compare, correct, verify."""
from dataclasses import dataclass
from typing import Optional

from synctime.tools.base import CommandRunner
from synctime.tools.timedatectl import query_time_settings
from synctime.tools.worldtime import WorldTimeClient
from synctime.cli.helpers.output import OutputHelper
from .config import SyncConfig
from .environment import HostInfo
from .comparator import Comparison, compare_time
from .corrector import Correction, correct_time


@dataclass(frozen=True)
class SyncReport:
    host: HostInfo
    before: Comparison
    correction: Optional[Correction] = None
    after: Optional[Comparison] = None

    @property
    def final(self) -> Comparison:
        return self.after or self.before

    @property
    def in_sync(self) -> bool:
        return self.final.in_sync


def run_sync(config: SyncConfig, runner: CommandRunner,
             client: WorldTimeClient = None, correct: bool = True) -> SyncReport:
    OutputHelper.print_banner()
    OutputHelper.print_host(config.host)

    OutputHelper.print_time_settings(query_time_settings(runner), config.host)
    before = compare_time(config, runner, client)
    OutputHelper.print_comparison(before, config.threshold)

    if not before.needs_correction:
        OutputHelper.print_no_sync_needed()
        OutputHelper.print_finished()
        return SyncReport(config.host, before)

    OutputHelper.print_action_needed()
    if not correct:
        OutputHelper.print_correction_skipped()
        OutputHelper.print_finished()
        return SyncReport(config.host, before)

    correction = correct_time(config, runner)
    OutputHelper.print_correction(correction)

    OutputHelper.print_time_settings(query_time_settings(runner), config.host,
                                     title="Verifying Changes")
    after = compare_time(config, runner, client)
    OutputHelper.print_comparison(after, config.threshold)
    if not after.in_sync:
        OutputHelper.print_residual_warning()

    OutputHelper.print_finished()
    return SyncReport(config.host, before, correction, after)
