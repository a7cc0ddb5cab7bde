"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

DEFAULT_BASE_URL = "https://search.maven.org"
DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Where the search index lives and how long to wait for it."""

    base_url: str = DEFAULT_BASE_URL
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``MVN_SEARCH_*`` environment variables."""
        base_url = os.environ.get("MVN_SEARCH_BASE_URL", "").strip() or DEFAULT_BASE_URL
        log_level = os.environ.get("MVN_SEARCH_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL
        return cls(base_url=base_url.rstrip("/"), log_level=log_level.upper())

    def http_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.read_timeout, connect=self.connect_timeout)

    def http_client(self) -> httpx.AsyncClient:
        """Create the shared client. No retries: a failed call is final."""
        return httpx.AsyncClient(
            timeout=self.http_timeout(),
            follow_redirects=True,
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        )
