"""
Motivation quote + tips generation, and the periodic ticker that refreshes it.
"""
import asyncio
from datetime import datetime, timezone
from typing import Awaitable, Callable

from app.core.config import settings
from app.core.logger import logger, log_error, log_fallback
from app.models.plan import FALLBACK_MOTIVATION, Motivation
from app.models.schemas import MotivationResult
from app.services import llm_service


def build_motivation_prompt(user_name: str, goal: str, timestamp: str) -> str:
    # The timestamp keeps the model from handing back the same quote every call
    return f"""
Context: Time is {timestamp}.
Task: Generate a JSON object with two keys:
1. "quote": A creative, short, punchy motivational quote for {goal}. (Do not repeat generic quotes).
2. "tips": An array of exactly 3 very specific, actionable habits for {user_name} to do right now.

Make it sound like a tough but loving coach.
"""


async def generate_motivation(user_name: str, goal: str) -> MotivationResult:
    """
    Generate a motivation block. Never raises.

    Any failure (provider, parse, wrong shape) returns the fixed fallback
    block with success=False and degraded=True, so callers can always use
    result.data.
    """
    try:
        timestamp = datetime.now(timezone.utc).isoformat()
        raw = await llm_service.call_json_api(
            None, build_motivation_prompt(user_name, goal, timestamp)
        )
        motivation = Motivation.model_validate(raw)
        return MotivationResult(success=True, data=motivation)
    except Exception as e:
        log_fallback("Motivation generation", e)
        return MotivationResult(success=False, degraded=True, data=FALLBACK_MOTIVATION)


class MotivationTicker:
    """
    Refreshes motivation once immediately, then every `interval` seconds.

    Every refresh runs as its own task, so a slow provider call never delays
    the next one. Results are handed to `on_update` in the order they resolve;
    `latest` holds the last one delivered.
    """

    def __init__(
        self,
        user_name: str,
        goal: str,
        on_update: Callable[[MotivationResult], Awaitable[None]],
        interval: float | None = None,
    ):
        self.user_name = user_name
        self.goal = goal
        self.interval = settings.MOTIVATION_INTERVAL_SECONDS if interval is None else interval
        self.latest: MotivationResult | None = None
        self._on_update = on_update
        self._schedule: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._schedule is not None and not self._schedule.done()

    def start(self) -> None:
        if self.running:
            return
        self._schedule = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the schedule and any refresh still in flight."""
        tasks = list(self._pending)
        if self._schedule is not None:
            tasks.append(self._schedule)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._schedule = None
        self._pending.clear()
        logger.info(f"Motivation ticker stopped for: {self.user_name}")

    async def _run(self) -> None:
        while True:
            task = asyncio.create_task(self._refresh())
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
            await asyncio.sleep(self.interval)

    async def _refresh(self) -> None:
        result = await generate_motivation(self.user_name, self.goal)
        self.latest = result
        try:
            await self._on_update(result)
        except Exception as e:
            log_error("Motivation delivery", e)

    async def __aenter__(self) -> "MotivationTicker":
        self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.stop()
