"""Test trailing-edge debounce."""
import asyncio
import pytest
from unittest.mock import MagicMock
from number_humanizer.form import Debouncer


class TestDebouncer:
    @pytest.mark.asyncio
    async def test_fires_after_delay(self):
        fn = MagicMock()
        debouncer = Debouncer(0.01)
        debouncer.schedule(fn, "a")
        assert debouncer.pending
        fn.assert_not_called()

        await asyncio.sleep(0.05)
        fn.assert_called_once_with("a")
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_only_last_call_survives(self):
        fn = MagicMock()
        debouncer = Debouncer(0.02)
        for value in ("1", "12", "123"):
            debouncer.schedule(fn, value)

        await asyncio.sleep(0.08)
        fn.assert_called_once_with("123")

    @pytest.mark.asyncio
    async def test_cancel(self):
        fn = MagicMock()
        debouncer = Debouncer(0.01)
        debouncer.schedule(fn)
        debouncer.cancel()
        assert not debouncer.pending

        await asyncio.sleep(0.05)
        fn.assert_not_called()

    @pytest.mark.asyncio
    async def test_separate_windows_both_fire(self):
        fn = MagicMock()
        debouncer = Debouncer(0.01)
        debouncer.schedule(fn, 1)
        await asyncio.sleep(0.05)
        debouncer.schedule(fn, 2)
        await asyncio.sleep(0.05)
        assert [c.args for c in fn.call_args_list] == [(1,), (2,)]

    def test_schedule_needs_running_loop(self):
        with pytest.raises(RuntimeError):
            Debouncer(0.01).schedule(MagicMock())
