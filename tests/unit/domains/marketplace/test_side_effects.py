"""
Unit tests for SideEffectDispatcher.
"""

import asyncio
import logging

import pytest

from surplus.domains.marketplace.application.services.side_effects import SideEffectDispatcher


class TestSideEffectDispatcher:
    @pytest.mark.asyncio
    async def test_runs_dispatched_coroutine(self, dispatcher):
        ran = asyncio.Event()

        async def effect():
            ran.set()

        dispatcher.dispatch(effect(), "set flag")
        await dispatcher.drain()

        assert ran.is_set()
        assert dispatcher.pending == 0
        assert dispatcher.failures == 0

    @pytest.mark.asyncio
    async def test_failure_is_logged_not_raised(self, dispatcher, caplog):
        async def broken():
            raise RuntimeError("notifier down")

        with caplog.at_level(logging.WARNING):
            dispatcher.dispatch(broken(), "notify buyer")
            await dispatcher.drain()

        assert dispatcher.failures == 1
        record = caplog.records[-1]
        assert "notifier down" in record.getMessage()
        assert record.context["side_effect"] == "notify buyer"
        assert record.context["error_type"] == "RuntimeError"

    @pytest.mark.asyncio
    async def test_cancelled_effect_is_not_a_failure(self, dispatcher, caplog):
        async def slow():
            await asyncio.sleep(10)

        task = dispatcher.dispatch(slow(), "slow effect")
        await asyncio.sleep(0)
        task.cancel()

        with caplog.at_level(logging.WARNING):
            await dispatcher.drain()

        assert dispatcher.failures == 0
        assert any("cancelled" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_drain_waits_for_effects_scheduled_while_draining(self):
        dispatcher = SideEffectDispatcher()
        done: list[str] = []

        async def second():
            done.append("second")

        async def first():
            await asyncio.sleep(0)
            done.append("first")
            dispatcher.dispatch(second(), "second")

        dispatcher.dispatch(first(), "first")
        await dispatcher.drain()

        assert done == ["first", "second"]

    @pytest.mark.asyncio
    async def test_caller_is_not_blocked(self, dispatcher):
        gate = asyncio.Event()

        async def waits():
            await gate.wait()

        dispatcher.dispatch(waits(), "blocked")

        assert dispatcher.pending == 1
        gate.set()
        await dispatcher.drain()
        assert dispatcher.pending == 0
