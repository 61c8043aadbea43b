from __future__ import annotations

import asyncio
import logging
import time

import aiohttp
import requests

from urlpinger.checks.results import SENTINEL_STATUS, FailureKind, PingResult

logger = logging.getLogger(__name__)


def classify_failure(exc: BaseException) -> FailureKind:
    # Timeouts first: requests.ConnectTimeout is also a ConnectionError.
    if isinstance(exc, (requests.Timeout, asyncio.TimeoutError)):
        return FailureKind.TIMEOUT
    if isinstance(
        exc,
        (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
            aiohttp.InvalidURL,
        ),
    ):
        return FailureKind.INVALID_URL
    if isinstance(exc, (requests.ConnectionError, aiohttp.ClientConnectionError)):
        return FailureKind.CONNECTION
    if isinstance(exc, ValueError):
        return FailureKind.INVALID_URL
    return FailureKind.PROTOCOL


def get_status(
    url: str, session: requests.Session, timeout_s: float
) -> tuple[int, FailureKind | None]:
    try:
        r = session.get(url, timeout=timeout_s, stream=True)
        # Status line is all we need; drop the body unread.
        r.close()
        return r.status_code, None
    except Exception as e:
        failure = classify_failure(e)
        logger.debug("GET %r failed (%s): %s", url, failure.value, e)
        return SENTINEL_STATUS, failure


async def get_status_async(
    url: str, session: aiohttp.ClientSession, timeout_s: float
) -> tuple[int, FailureKind | None]:
    try:
        async with session.get(
            url, timeout=aiohttp.ClientTimeout(total=timeout_s)
        ) as r:
            return r.status, None
    except Exception as e:
        failure = classify_failure(e)
        logger.debug("GET %r failed (%s): %s", url, failure.value, e)
        return SENTINEL_STATUS, failure


def elapsed_ns(start: int) -> int:
    # Floor at 1ns so a result never reports a zero duration.
    return max(time.perf_counter_ns() - start, 1)


def timed_ping(url: str, session: requests.Session, timeout_s: float) -> PingResult:
    start = time.perf_counter_ns()
    status_code, failure = get_status(url, session, timeout_s)
    return PingResult(
        url=url,
        status_code=status_code,
        duration_ns=elapsed_ns(start),
        failure=failure,
    )


async def timed_ping_async(
    url: str, session: aiohttp.ClientSession, timeout_s: float
) -> PingResult:
    start = time.perf_counter_ns()
    status_code, failure = await get_status_async(url, session, timeout_s)
    return PingResult(
        url=url,
        status_code=status_code,
        duration_ns=elapsed_ns(start),
        failure=failure,
    )
