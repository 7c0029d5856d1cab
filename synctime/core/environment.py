"""Host classification: WSL2 (virtualized) vs. native Linux."""
import enum
from dataclasses import dataclass
from typing import Dict, Iterable

from synctime.utils.constants import (
    PROC_VERSION_PATH, OS_RELEASE_PATHS,
    VIRTUALIZED_MARKER, DEFAULT_OS_NAME,
)


class Environment(enum.Enum):
    VIRTUALIZED = "WSL2"
    NATIVE = "Native Linux"

    @property
    def label(self) -> str:
        return self.value

    @property
    def is_virtualized(self) -> bool:
        return self is Environment.VIRTUALIZED


@dataclass(frozen=True)
class HostInfo:
    environment: Environment
    os_name: str = DEFAULT_OS_NAME
    kernel: str = ""


def detect_environment(kernel_text: str) -> Environment:
    if VIRTUALIZED_MARKER in (kernel_text or "").lower():
        return Environment.VIRTUALIZED
    return Environment.NATIVE


def parse_os_release(text: str) -> Dict[str, str]:
    fields = {}
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#") and "=" in line:
            key, value = line.split("=", 1)
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            fields[key.strip()] = value
    return fields


def os_display_name(fields: Dict[str, str]) -> str:
    return fields.get("PRETTY_NAME") or fields.get("NAME") or DEFAULT_OS_NAME


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError:
        return ""


def detect_host(proc_version_path: str = PROC_VERSION_PATH,
                os_release_paths: Iterable[str] = OS_RELEASE_PATHS) -> HostInfo:
    """Classify the running host. Never raises; unreadable files mean native/default name."""
    kernel = _read_text(proc_version_path).strip()
    fields = {}
    for path in os_release_paths:
        text = _read_text(path)
        if text:
            fields = parse_os_release(text)
            break
    return HostInfo(
        environment=detect_environment(kernel),
        os_name=os_display_name(fields),
        kernel=kernel,
    )
