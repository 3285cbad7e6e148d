"""Waiting for the chart to show data for the newly selected indicator.

The page offers no "loaded" signal, so readiness is detected by polling the
chart's internal state. How long to keep polling depends on the indicator:
the aggregate indices take far longer to compute than single components.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, FrozenSet, Mapping

from nfib_scraper import config
from nfib_scraper.indicators import SLOW_INDICATORS
from nfib_scraper.scraper.errors import ReadinessTimeout

logger = logging.getLogger(__name__)

Probe = Callable[[Any], Awaitable[bool]]


@dataclass(frozen=True)
class TimeoutPolicy:
    """Readiness budget (ms) per set of indicator codes, with a fallback."""

    classes: Mapping[FrozenSet[str], int] = field(default_factory=dict)
    default_ms: int = config.DEFAULT_READY_TIMEOUT_MS

    def timeout_for(self, code: str) -> int:
        for codes, timeout_ms in self.classes.items():
            if code in codes:
                return timeout_ms
        return self.default_ms

    @classmethod
    def default(cls) -> "TimeoutPolicy":
        return cls(
            classes={SLOW_INDICATORS: config.SLOW_READY_TIMEOUT_MS},
            default_ms=config.DEFAULT_READY_TIMEOUT_MS,
        )


class ReadinessWaiter:
    def __init__(
        self,
        probe: Probe,
        policy: TimeoutPolicy | None = None,
        poll_interval_ms: int = config.READY_POLL_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.probe = probe
        self.policy = policy or TimeoutPolicy.default()
        self.poll_interval_ms = poll_interval_ms
        self.clock = clock
        self.sleep = sleep

    async def _probe_within(self, page, deadline: float) -> bool:
        # a hung page must not hold the wait past its deadline; the last probe
        # still gets one poll interval
        budget = max(deadline - self.clock(), self.poll_interval_ms / 1000)
        try:
            return await asyncio.wait_for(self.probe(page), timeout=budget)
        except asyncio.TimeoutError:
            logger.debug("Readiness probe did not answer within %.1fs", budget)
            return False

    async def wait_until_ready(self, page, code: str) -> None:
        timeout_ms = self.policy.timeout_for(code)
        started = self.clock()
        deadline = started + timeout_ms / 1000
        polls = 0
        while True:
            polls += 1
            if await self._probe_within(page, deadline):
                logger.debug(
                    "%s ready after %.1fs (%d polls)", code, self.clock() - started, polls
                )
                return
            if self.clock() >= deadline:
                raise ReadinessTimeout(code, timeout_ms)
            await self.sleep(self.poll_interval_ms / 1000)
