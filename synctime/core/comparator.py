"""Offset measurement against the environment's reference source."""
import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from synctime.utils.constants import OFFSET_THRESHOLD, SYSTEM_TIME_FORMAT, Source
from synctime.utils.exceptions import (
    ComparisonError, ReferenceUnavailable, NotSynchronized, ServerUnreachable,
)
from synctime.tools.base import CommandRunner
from synctime.tools.chrony import ChronyClient
from synctime.tools.ntpdate import NtpdateClient
from synctime.tools.worldtime import WorldTimeClient
from .config import SyncConfig


class SyncStatus(enum.Enum):
    IN_SYNC = "in_sync"
    OUT_OF_SYNC = "out_of_sync"
    REFERENCE_UNAVAILABLE = "reference_unavailable"
    NOT_SYNCHRONIZED = "not_synchronized"
    SERVER_UNREACHABLE = "server_unreachable"


_ERROR_STATUS = {
    ReferenceUnavailable: SyncStatus.REFERENCE_UNAVAILABLE,
    NotSynchronized: SyncStatus.NOT_SYNCHRONIZED,
    ServerUnreachable: SyncStatus.SERVER_UNREACHABLE,
}


@dataclass(frozen=True)
class Comparison:
    status: SyncStatus
    source: Source
    system_time: str
    offset: Optional[int] = None
    raw_offset: Optional[float] = None
    reference_time: Optional[str] = None
    error: Optional[ComparisonError] = None

    @property
    def in_sync(self) -> bool:
        return self.status is SyncStatus.IN_SYNC

    @property
    def needs_correction(self) -> bool:
        return not self.in_sync


def classify_offset(offset: int, threshold: int = OFFSET_THRESHOLD) -> SyncStatus:
    if abs(offset) > threshold:
        return SyncStatus.OUT_OF_SYNC
    return SyncStatus.IN_SYNC


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _failed(source: Source, system_time: str, error: ComparisonError) -> Comparison:
    return Comparison(
        status=_ERROR_STATUS.get(type(error), SyncStatus.REFERENCE_UNAVAILABLE),
        source=source,
        system_time=system_time,
        error=error,
    )


def compare_time(config: SyncConfig, runner: CommandRunner,
                 client: WorldTimeClient = None, now: datetime = None) -> Comparison:
    """Measure local-minus-reference offset and classify it.

    Virtualized hosts ask the HTTP time API; native hosts prefer chrony's
    tracking report and fall back to an ntpdate query.
    """
    now = (now or _utc_now()).astimezone(timezone.utc).replace(microsecond=0)
    system_time = now.strftime(SYSTEM_TIME_FORMAT)

    if config.is_virtualized:
        client = client or WorldTimeClient(config.api_url, timeout=config.http_timeout)
        try:
            reference = client.fetch()
        except ReferenceUnavailable as e:
            return _failed(Source.API, system_time, e)
        offset = int((now - reference).total_seconds())
        return Comparison(
            status=classify_offset(offset, config.threshold),
            source=Source.API,
            system_time=system_time,
            offset=offset,
            raw_offset=float(offset),
            reference_time=reference.strftime(SYSTEM_TIME_FORMAT),
        )

    chrony = ChronyClient(runner, use_sudo=config.use_sudo)
    if chrony.available():
        try:
            tracking = chrony.tracking()
        except NotSynchronized as e:
            return _failed(Source.CHRONY, system_time, e)
        offset = round(tracking.offset)
        return Comparison(
            status=classify_offset(offset, config.threshold),
            source=Source.CHRONY,
            system_time=system_time,
            offset=offset,
            raw_offset=tracking.offset,
            reference_time=tracking.ref_time,
        )

    ntpdate = NtpdateClient(runner, config.ntp_server, use_sudo=config.use_sudo)
    try:
        query = ntpdate.query()
    except ServerUnreachable as e:
        return _failed(Source.NTPDATE, system_time, e)
    offset = round(query.offset)
    return Comparison(
        status=classify_offset(offset, config.threshold),
        source=Source.NTPDATE,
        system_time=system_time,
        offset=offset,
        raw_offset=query.offset,
    )
