from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from pydantic import ValidationError

from urlpinger.checks.results import PingResult
from urlpinger.config import settings
from urlpinger.models import Mode, PingConfig
from urlpinger.strategies import STRATEGIES
from urlpinger.targets import parse_targets

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    pass


class Pinger:
    """
    Pings an ordered list of URLs with one execution mode.

    The mode and tuning values are validated here, so a bad selector fails
    before any client session exists or any request is sent.
    """

    def __init__(
        self,
        urls: str | Sequence[str],
        mode: Mode | str | None = None,
        timeout_s: Optional[float] = None,
        max_concurrency: Optional[int] = None,
    ) -> None:
        try:
            self.config = PingConfig(
                mode=settings.DEFAULT_MODE if mode is None else mode,
                timeout_s=(
                    settings.REQUEST_TIMEOUT_SECONDS if timeout_s is None else timeout_s
                ),
                max_concurrency=(
                    settings.MAX_CONCURRENCY
                    if max_concurrency is None
                    else max_concurrency
                ),
            )
        except ValidationError as e:
            raise ConfigError(_describe(e)) from e

        self.urls: List[str] = parse_targets(urls)

    @property
    def mode(self) -> Mode:
        return self.config.mode

    def ping_urls(self) -> List[PingResult]:
        strategy = STRATEGIES[self.config.mode]
        logger.info(
            "Pinging %d URL(s) in %s mode", len(self.urls), self.config.mode.value
        )
        start = time.perf_counter()
        results = strategy(self.urls, self.config)
        logger.debug(
            "Batch of %d finished in %.3fs", len(results), time.perf_counter() - start
        )
        return results


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)
