from .environment import Environment, HostInfo, detect_environment, detect_host, parse_os_release, os_display_name
from .config import SyncConfig
from .comparator import SyncStatus, Comparison, classify_offset, compare_time
from .corrector import Correction, correct_time, HOST_INSTRUCTIONS
from .flow import SyncReport, run_sync

__all__ = [
    'Environment', 'HostInfo', 'detect_environment', 'detect_host',
    'parse_os_release', 'os_display_name',
    'SyncConfig',
    'SyncStatus', 'Comparison', 'classify_offset', 'compare_time',
    'Correction', 'correct_time', 'HOST_INSTRUCTIONS',
    'SyncReport', 'run_sync',
]
