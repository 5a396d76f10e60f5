from __future__ import annotations

import logging
import random

from fastapi import Request

from app.core.errors import TransientInjectedFailure
from app.core.ids import gen_id


log = logging.getLogger(__name__)


class FailureInjector:
    """
    Simulates a flaky production dependency: each call independently fails with probability `rate`.
    Holds no per-request state.
    """

    def __init__(self, rate: float, *, rng: random.Random | None = None):
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._rng = rng or random.Random()

    def should_fail(self) -> bool:
        return self._rng.random() < self.rate


async def fail_sometimes(request: Request) -> None:
    """
    Dependency for the "prod" booking route. Runs before the submission is even parsed.
    """
    injector: FailureInjector = request.app.state.failure_injector
    if injector.should_fail():
        incident = gen_id("incident")
        log.warning("injected failure on %s (%s)", request.url.path, incident)
        raise TransientInjectedFailure(
            f"Random prod failure: {incident}",
            details=[{"incident": incident, "retryable": True}],
        )
