"""HTTP time API client (WorldTimeAPI-compatible JSON with a ``datetime`` field)."""
import http.client
import json
import urllib.error
import urllib.request
from datetime import datetime, timezone
from typing import Callable, Optional

from synctime.utils.exceptions import ReferenceUnavailable


def parse_api_datetime(body: str) -> datetime:
    """Return the body's ``datetime`` as a UTC datetime truncated to whole seconds."""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ReferenceUnavailable(f"Time API returned invalid JSON: {e}") from e

    raw = data.get("datetime") if isinstance(data, dict) else None
    if not isinstance(raw, str) or not raw:
        raise ReferenceUnavailable("Time API response has no datetime field.")

    # fromisoformat() before 3.11 rejects a trailing "Z"
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise ReferenceUnavailable(f"Unparseable datetime from time API: {raw!r}") from e

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


class WorldTimeClient:
    def __init__(self, url: str, timeout: Optional[float] = None,
                 opener: Callable = urllib.request.urlopen):
        self.url = url
        self.timeout = timeout
        self._opener = opener

    def fetch(self) -> datetime:
        kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            with self._opener(self.url, **kwargs) as resp:
                body = resp.read().decode("utf-8")
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            raise ReferenceUnavailable(
                f"Failed to fetch time from {self.url}. Check internet connection. ({e})"
            ) from e
        return parse_api_datetime(body)
