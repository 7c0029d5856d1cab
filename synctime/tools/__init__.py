from .base import CommandRunner, CommandResult, SubprocessRunner, needs_sudo
from .timedatectl import TimedatectlStatus, query_time_settings
from .chrony import ChronyClient, ChronyTracking
from .ntpdate import NtpdateClient, NtpdateQuery
from .worldtime import WorldTimeClient, parse_api_datetime

__all__ = [
    'CommandRunner', 'CommandResult', 'SubprocessRunner', 'needs_sudo',
    'TimedatectlStatus', 'query_time_settings',
    'ChronyClient', 'ChronyTracking',
    'NtpdateClient', 'NtpdateQuery',
    'WorldTimeClient', 'parse_api_datetime',
]
