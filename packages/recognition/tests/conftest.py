"""Shared fixtures for recognition tests."""

import asyncio

import numpy as np
import pytest

from packages.core.clock import ManualClock


@pytest.fixture
def clock():
    """Logical clock driven by the test."""
    return ManualClock()


@pytest.fixture
def rng():
    """Seeded generator for reproducible placeholder output."""
    return np.random.default_rng(42)


@pytest.fixture
def run_attempt(clock):
    """Run one start() to completion, letting every clock timer fire."""

    def _run(session, sample=None):
        async def scenario():
            task = asyncio.create_task(session.start(sample))
            await asyncio.sleep(0)
            clock.run_until_idle()
            return await task

        return asyncio.run(scenario())

    return _run
