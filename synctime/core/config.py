from dataclasses import dataclass
from typing import Optional

from synctime.utils.constants import (
    OFFSET_THRESHOLD, DEFAULT_API_URL, DEFAULT_NTP_SERVER,
    ENV_API_URL, ENV_NTP_SERVER, ENV_HTTP_TIMEOUT, ENV_NO_SUDO,
    env_str, env_float, env_flag,
)
from synctime.tools.base import needs_sudo
from .environment import HostInfo


@dataclass(frozen=True)
class SyncConfig:
    """Run-wide settings, resolved once at startup and passed to every stage."""
    host: HostInfo
    api_url: str = DEFAULT_API_URL
    ntp_server: str = DEFAULT_NTP_SERVER
    threshold: int = OFFSET_THRESHOLD
    http_timeout: Optional[float] = None
    use_sudo: bool = True

    @property
    def is_virtualized(self) -> bool:
        return self.host.environment.is_virtualized

    @classmethod
    def from_environment(cls, host: HostInfo) -> "SyncConfig":
        return cls(
            host=host,
            api_url=env_str(ENV_API_URL, DEFAULT_API_URL),
            ntp_server=env_str(ENV_NTP_SERVER, DEFAULT_NTP_SERVER),
            http_timeout=env_float(ENV_HTTP_TIMEOUT),
            use_sudo=needs_sudo(env_flag(ENV_NO_SUDO)),
        )
