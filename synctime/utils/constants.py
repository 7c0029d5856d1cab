import enum
import os


# Kernel / OS identification
PROC_VERSION_PATH = "/proc/version"
OS_RELEASE_PATHS = ("/etc/os-release", "/usr/lib/os-release")
VIRTUALIZED_MARKER = "microsoft"
DEFAULT_OS_NAME = "Linux"

# Offset classification (seconds)
OFFSET_THRESHOLD = 5

# Reference sources
DEFAULT_API_URL = "http://worldtimeapi.org/api/timezone/Etc/UTC"
DEFAULT_NTP_SERVER = "pool.ntp.org"

# Environment overrides
ENV_API_URL = "SYNCTIME_API_URL"
ENV_NTP_SERVER = "SYNCTIME_NTP_SERVER"
ENV_HTTP_TIMEOUT = "SYNCTIME_HTTP_TIMEOUT"
ENV_NO_SUDO = "SYNCTIME_NO_SUDO"

# External tools
TIMEDATECTL = "timedatectl"
CHRONYC = "chronyc"
NTPDATE = "ntpdate"
SUDO = "sudo"

TIMEDATECTL_FIELDS = (
    "Local time",
    "Universal time",
    "RTC time",
    "Time zone",
    "System clock synchronized",
    "NTP service",
    "RTC in local TZ",
)

SYSTEM_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


class Source(enum.Enum):
    """Reference source a comparison was measured against."""
    API = "API"
    CHRONY = "chrony"
    NTPDATE = "ntpdate"


class Method(enum.Enum):
    """Remediation path taken by the corrector."""
    MANUAL = "manual"
    CHRONY_MAKESTEP = "chronyc makestep"
    NTPDATE = "ntpdate"


def env_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def env_float(name: str):
    """Read an optional float override; unset or malformed values yield None."""
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() not in ("", "0", "false", "no")
