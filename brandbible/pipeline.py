"""
pipeline.py — Runs the brand bible pipeline programmatically.

Pipeline steps:
  1. Validate the mission (blank → ValidationError, nothing sent)
  2. Director: one structured-generation call → BrandIdentityPlan
  3. Generator: primary logo + every secondary mark, requested concurrently
     and joined fail-fast (one failure fails the run, siblings are cancelled)
  4. Merge plan + images + mission → BrandBible

Progress phrases are published through an optional callback while steps 2–3
are in flight.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Iterable, List, Optional, Sequence, TypeVar

from . import config
from .director import generate_plan, validate_mission
from .generator import generate_image
from .models import BrandBible, BrandIdentityPlan
from .progress import LOADING_MESSAGES, StatusCallback, StatusTicker

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_fail_fast(aws: Iterable[Awaitable[T]]) -> List[T]:
    """
    Wait for every awaitable and return results in input order.

    On the first failure the remaining tasks are cancelled and awaited before
    the exception propagates, so nothing is left running.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class BrandPlanOrchestrator:
    """Mission → BrandBible, via one plan call and N concurrent image calls."""

    def __init__(
        self,
        service,
        status_messages: Sequence[str] = LOADING_MESSAGES,
        status_interval: Optional[float] = None,
    ) -> None:
        self.service = service
        self.status_messages = tuple(status_messages)
        self.status_interval = (
            status_interval if status_interval is not None else config.get_status_interval()
        )

    async def generate_brand_bible(
        self,
        mission: str,
        on_status: Optional[StatusCallback] = None,
    ) -> BrandBible:
        validate_mission(mission)

        start = time.monotonic()
        ticker = StatusTicker(on_status, self.status_messages, self.status_interval)
        async with ticker:
            plan = await generate_plan(self.service, mission)
            primary_logo_url, secondary_mark_urls = await self._generate_assets(plan)

        brand_bible = BrandBible.from_plan(
            plan,
            primary_logo_url=primary_logo_url,
            secondary_mark_urls=secondary_mark_urls,
            mission=mission,
        )
        logger.info("Brand bible ready (%.1fs)", time.monotonic() - start)
        return brand_bible

    async def _generate_assets(self, plan: BrandIdentityPlan):
        jobs = [generate_image(self.service, plan.logo_prompt, label="primary logo")]
        for index, prompt in enumerate(plan.secondary_mark_prompts, start=1):
            jobs.append(generate_image(self.service, prompt, label=f"secondary mark {index}"))

        logger.info("→ Generating %d images concurrently", len(jobs))
        urls = await gather_fail_fast(jobs)
        return urls[0], tuple(urls[1:])
