"""Async HTTP transport used by the repository hunt pipeline.

Wraps an ``aiohttp.ClientSession`` with the project's timeout/retry policy and
maps responses onto :class:`FetchResult`. A missing resource is *not* an
error here: 404/410 come back as ``FetchResult(body=None)`` so callers can
fall through to their next candidate. Everything else that is not a 2xx
(connection failures, timeouts, server errors) raises :class:`HttpFetchError`
once retries are exhausted.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

import aiohttp

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = (404, 410)


class HttpFetchError(Exception):
    """Raised when a URL cannot be fetched for reasons other than absence."""

    def __init__(self, url: str, message: str, status: Optional[int] = None):
        super().__init__(f"{message} ({safe_url(url)})")
        self.url = url
        self.status = status


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a fetch; ``body`` is None when the resource does not exist."""
    body: Optional[str]


class HttpTransport:
    """Sequential GET client over a lazily created aiohttp session."""

    def __init__(
        self,
        timeout: Optional[int] = None,
        retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        user_agent: Optional[str] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Total request timeout in seconds.
            retries: Attempts per URL before a fault is raised.
            retry_delay: Base delay in seconds, doubled after every failed attempt.
            user_agent: User-Agent header value.
        """
        self._timeout = aiohttp.ClientTimeout(
            total=timeout if timeout is not None else Constants.REQUEST_TIMEOUT
        )
        self._retries = max(1, retries if retries is not None else Constants.HTTP_RETRY_MAX)
        self._retry_delay = (
            retry_delay if retry_delay is not None else Constants.HTTP_RETRY_BASE_DELAY_SEC
        )
        self._headers = {"User-Agent": user_agent or Constants.USER_AGENT, "Accept": "*/*"}
        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        """Start the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout, headers=self._headers)

    async def stop(self) -> None:
        """Stop the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and return its text body, or None when it does not exist.

        Raises:
            HttpFetchError: on connection errors, timeouts or non-2xx statuses
                other than 404/410, after all retry attempts.
        """
        if self._session is None:
            await self.start()
        assert self._session is not None

        safe_target = safe_url(url)
        last_error: Optional[HttpFetchError] = None

        for attempt in range(self._retries):
            if attempt:
                await asyncio.sleep(self._retry_delay * (2 ** (attempt - 1)))
            with Timer() as t:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request",
                        extra=extra_context(
                            event="http_request",
                            component="http_client",
                            action="GET",
                            target=safe_target,
                            attempt=attempt + 1,
                        ),
                    )
                try:
                    response = await self._session.get(url)
                    try:
                        status = response.status
                        if status in NOT_FOUND_STATUSES:
                            if is_debug_enabled(logger):
                                logger.debug(
                                    "HTTP resource absent",
                                    extra=extra_context(
                                        event="http_response",
                                        component="http_client",
                                        outcome="not_found",
                                        status_code=status,
                                        duration_ms=t.duration_ms(),
                                        target=safe_target,
                                    ),
                                )
                            return FetchResult(body=None)
                        if 200 <= status < 300:
                            body = await response.text()
                            if is_debug_enabled(logger):
                                logger.debug(
                                    "HTTP response ok",
                                    extra=extra_context(
                                        event="http_response",
                                        component="http_client",
                                        outcome="success",
                                        status_code=status,
                                        duration_ms=t.duration_ms(),
                                        target=safe_target,
                                    ),
                                )
                            return FetchResult(body=body)
                        last_error = HttpFetchError(url, f"HTTP {status}", status=status)
                        # Client errors other than absence will not improve on retry
                        if status < 500 and status != 429:
                            break
                    finally:
                        response.release()
                except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                    last_error = HttpFetchError(url, f"request failed: {exc!r}")
                    if is_debug_enabled(logger):
                        logger.debug(
                            "HTTP request exception",
                            extra=extra_context(
                                event="http_exception",
                                component="http_client",
                                action="GET",
                                outcome="request_exception",
                                attempt=attempt + 1,
                                target=safe_target,
                            ),
                        )

        assert last_error is not None
        logger.warning(
            "HTTP fetch failed",
            extra=extra_context(
                event="http_error",
                component="http_client",
                outcome="fault",
                status_code=last_error.status,
                target=safe_target,
            ),
        )
        raise last_error

    async def __aenter__(self) -> "HttpTransport":
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.stop()
