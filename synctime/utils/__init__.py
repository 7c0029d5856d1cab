from .constants import (
    OFFSET_THRESHOLD, DEFAULT_API_URL, DEFAULT_NTP_SERVER,
    SYSTEM_TIME_FORMAT, TIMEDATECTL_FIELDS,
)
from .exceptions import (
    SynctimeException, ToolError,
    ComparisonError, ReferenceUnavailable, NotSynchronized, ServerUnreachable,
    CorrectionError, ManualActionRequired, CorrectionFailed,
)

__all__ = [
    'OFFSET_THRESHOLD', 'DEFAULT_API_URL', 'DEFAULT_NTP_SERVER',
    'SYSTEM_TIME_FORMAT', 'TIMEDATECTL_FIELDS',
    'SynctimeException', 'ToolError',
    'ComparisonError', 'ReferenceUnavailable', 'NotSynchronized', 'ServerUnreachable',
    'CorrectionError', 'ManualActionRequired', 'CorrectionFailed',
]
