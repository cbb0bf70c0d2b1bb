"""Tests for the shared tile-server HTTP client."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from bitebrain.services.http import (
    DEFAULT_POOL_SIZE,
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    TILE_ACCEPT,
    USER_AGENT,
    create_session,
    session,
)


def _sent_kwargs(s: requests.Session, **send_kwargs: object) -> dict[str, object]:
    prep = requests.Request("GET", "https://tiles.test/1/0/0.webp").prepare()
    with patch.object(
        requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
    ) as mock_send:
        s.send(prep, **send_kwargs)
        _, kwargs = mock_send.call_args
    return kwargs


class TestDefaultRetry:
    """Retry strategy for tile servers."""

    def test_total_retries(self) -> None:
        assert DEFAULT_RETRY.total == 4
        assert DEFAULT_RETRY.backoff_factor == 2

    def test_retries_on_server_errors_and_rate_limit(self) -> None:
        assert set(DEFAULT_RETRY.status_forcelist) == {429, 500, 502, 503, 504}

    def test_only_reads_are_retried(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed

    def test_status_errors_left_to_caller(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False


class TestCreateSession:
    """Session factory."""

    def test_mounts_retrying_adapters(self) -> None:
        s = create_session()
        for url in ("https://api.mapbox.com", "http://tiles.test"):
            adapter = s.get_adapter(url)
            assert isinstance(adapter, requests.adapters.HTTPAdapter)
            assert adapter.max_retries.total == 4

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=10, backoff_factor=1))
        assert s.get_adapter("https://tiles.test").max_retries.total == 10

    def test_pool_size(self) -> None:
        adapter = create_session(pool_size=3).get_adapter("https://tiles.test")
        assert adapter._pool_maxsize == 3  # noqa: SLF001

    def test_headers(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == USER_AGENT
        assert s.headers["Accept"] == TILE_ACCEPT
        assert USER_AGENT.startswith("bitebrain/")

    def test_custom_user_agent(self) -> None:
        s = create_session(user_agent="lake-mapper/2.0")
        assert s.headers["User-Agent"] == "lake-mapper/2.0"

    def test_default_timeout_injected(self) -> None:
        assert _sent_kwargs(create_session(timeout=42))["timeout"] == 42

    def test_none_timeout_replaced(self) -> None:
        assert _sent_kwargs(create_session(timeout=42), timeout=None)["timeout"] == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        assert _sent_kwargs(create_session(timeout=42), timeout=99)["timeout"] == 99


class TestModuleSession:
    """The shared module-level session."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://api.mapbox.com")
        assert adapter.max_retries.total == 4
        assert adapter._pool_maxsize == DEFAULT_POOL_SIZE  # noqa: SLF001

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 30
        assert _sent_kwargs(session)["timeout"] == DEFAULT_TIMEOUT
