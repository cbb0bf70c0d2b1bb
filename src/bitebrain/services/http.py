"""
Shared HTTP client for tile servers.

``create_session`` builds a ``requests.Session`` that retries transient
failures (connection resets, timeouts, 429/500/502/503/504) with exponential
backoff, applies a default timeout to every request, and asks for image
responses. ``OfflineMapService`` uses the module-level ``session`` unless it
is handed its own.

Usage::

    from bitebrain.services.http import session

    resp = session.get(tile_url(coord, token))
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: Tile servers rate-limit bursts, so back off harder than a JSON API would.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,  # 0s, 2s, 4s, 8s between retries
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    respect_retry_after_header=True,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_POOL_SIZE = 8
USER_AGENT = "bitebrain/0.1"
TILE_ACCEPT = "image/webp,image/png;q=0.9,image/*;q=0.8"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
    pool_size: int = DEFAULT_POOL_SIZE,
) -> requests.Session:
    """
    Build a ``requests.Session`` with a retrying, pooled adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout for requests that don't pass their own.
        user_agent: ``User-Agent`` header sent with every request.
        pool_size: Connections kept per host; tile downloads hit one host.
    """
    s = requests.Session()
    adapter = HTTPAdapter(
        max_retries=retry or DEFAULT_RETRY,
        pool_connections=pool_size,
        pool_maxsize=pool_size,
    )
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = user_agent
    s.headers["Accept"] = TILE_ACCEPT

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session shared by tile downloads.
session: requests.Session = create_session()
