from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional

import aiohttp
import requests

from urlpinger.checks.http_check import elapsed_ns, timed_ping, timed_ping_async
from urlpinger.checks.results import SENTINEL_STATUS, FailureKind, PingResult
from urlpinger.models import Mode, PingConfig

logger = logging.getLogger(__name__)

Strategy = Callable[[List[str], PingConfig], List[PingResult]]


def _worker_failed(url: str, start_ns: int) -> PingResult:
    return PingResult(
        url=url,
        status_code=SENTINEL_STATUS,
        duration_ns=elapsed_ns(start_ns),
        failure=FailureKind.WORKER,
    )


def ping_sequential(targets: List[str], cfg: PingConfig) -> List[PingResult]:
    results: List[PingResult] = []
    with requests.Session() as session:
        for url in targets:
            results.append(timed_ping(url, session, cfg.timeout_s))
    return results


async def ping_async_coro(targets: List[str], cfg: PingConfig) -> List[PingResult]:
    """
    Run one task per target on the current event loop. At most
    cfg.max_concurrency requests are in flight; timing starts once a task
    holds a slot, so queueing time is not counted as latency.
    """
    start_ns = time.perf_counter_ns()
    limit = asyncio.Semaphore(cfg.max_concurrency)

    async with aiohttp.ClientSession() as session:

        async def _bounded(url: str) -> PingResult:
            async with limit:
                return await timed_ping_async(url, session, cfg.timeout_s)

        outcomes = await asyncio.gather(
            *(_bounded(url) for url in targets), return_exceptions=True
        )

    results: List[PingResult] = []
    for url, outcome in zip(targets, outcomes):
        if isinstance(outcome, BaseException):
            logger.error(
                "Task for %r failed; recording sentinel result",
                url,
                exc_info=outcome,
            )
            results.append(_worker_failed(url, start_ns))
        else:
            results.append(outcome)
    return results


def ping_async(targets: List[str], cfg: PingConfig) -> List[PingResult]:
    return asyncio.run(ping_async_coro(targets, cfg))


def ping_threaded(targets: List[str], cfg: PingConfig) -> List[PingResult]:
    """
    Fan out over a bounded thread pool. Each future is tied to its target's
    index and fills that slot, so output order matches input order.
    """
    if not targets:
        return []

    start_ns = time.perf_counter_ns()
    slots: List[Optional[PingResult]] = [None] * len(targets)
    workers = min(len(targets), cfg.max_concurrency)

    with requests.Session() as session, ThreadPoolExecutor(
        max_workers=workers, thread_name_prefix="urlpinger"
    ) as pool:
        futures = {
            pool.submit(timed_ping, url, session, cfg.timeout_s): i
            for i, url in enumerate(targets)
        }
        for fut in as_completed(futures):
            i = futures[fut]
            try:
                slots[i] = fut.result()
            except Exception:
                logger.exception(
                    "Worker for %r failed; recording sentinel result", targets[i]
                )
                slots[i] = _worker_failed(targets[i], start_ns)

    return [
        r if r is not None else _worker_failed(url, start_ns)
        for url, r in zip(targets, slots)
    ]


STRATEGIES: Dict[Mode, Strategy] = {
    Mode.SYNC: ping_sequential,
    Mode.ASYNC: ping_async,
    Mode.MULTI: ping_threaded,
}
