"""Tests for FrameScheduler."""

from game.starfield.scheduler import FrameScheduler


class TestFrameScheduler:
    """Tests for per-frame one-shot callbacks."""

    def test_runs_requested_callback_once(self):
        sched = FrameScheduler()
        calls = []
        sched.request(lambda: calls.append(1))
        assert len(sched) == 1
        assert sched.run_pending() == 1
        assert calls == [1]
        assert sched.run_pending() == 0
        assert calls == [1]

    def test_handles_are_distinct(self):
        sched = FrameScheduler()
        assert sched.request(lambda: None) != sched.request(lambda: None)

    def test_cancel(self):
        sched = FrameScheduler()
        calls = []
        handle = sched.request(lambda: calls.append(1))
        sched.cancel(handle)
        assert len(sched) == 0
        sched.run_pending()
        assert calls == []

    def test_cancel_none_and_unknown_are_noops(self):
        sched = FrameScheduler()
        sched.cancel(None)
        sched.cancel(12345)
        assert len(sched) == 0

    def test_request_during_flush_waits_for_next_frame(self):
        sched = FrameScheduler()
        calls = []

        def loop():
            calls.append(len(calls))
            sched.request(loop)

        sched.request(loop)
        sched.run_pending()
        assert calls == [0]
        sched.run_pending()
        assert calls == [0, 1]

    def test_cancel_later_callback_in_same_frame(self):
        sched = FrameScheduler()
        calls = []
        handles = {}

        def first():
            calls.append("first")
            sched.cancel(handles["second"])

        sched.request(first)
        handles["second"] = sched.request(lambda: calls.append("second"))
        assert sched.run_pending() == 1
        assert calls == ["first"]
