"""Tests for the Debouncer."""
from question_bank.gui.utils.debounce import Debouncer


class TestDebouncer:

    def test_rapid_calls_collapse_to_latest(self, qtbot):
        calls = []
        debouncer = Debouncer(50, calls.append)
        debouncer.call("a")
        debouncer.call("al")
        debouncer.call("alg")
        assert calls == []
        qtbot.waitUntil(lambda: calls == ["alg"], timeout=1000)
        qtbot.wait(100)
        assert calls == ["alg"]

    def test_separate_bursts_fire_separately(self, qtbot):
        calls = []
        debouncer = Debouncer(20, calls.append)
        debouncer.call("first")
        qtbot.waitUntil(lambda: calls == ["first"], timeout=1000)
        debouncer.call("second")
        qtbot.waitUntil(lambda: calls == ["first", "second"], timeout=1000)

    def test_cancel_drops_pending(self, qtbot):
        calls = []
        debouncer = Debouncer(20, calls.append)
        debouncer.call("x")
        assert debouncer.is_pending()
        debouncer.cancel()
        assert not debouncer.is_pending()
        qtbot.wait(80)
        assert calls == []

    def test_flush_runs_immediately(self, qtbot):
        calls = []
        debouncer = Debouncer(10_000, calls.append)
        debouncer.call("now")
        debouncer.flush()
        assert calls == ["now"]
        assert not debouncer.is_pending()

    def test_flush_without_pending_is_noop(self, qtbot):
        calls = []
        Debouncer(10, calls.append).flush()
        assert calls == []

    def test_multiple_arguments(self, qtbot):
        calls = []
        debouncer = Debouncer(10, lambda *args: calls.append(args))
        debouncer.call(1, "two")
        qtbot.waitUntil(lambda: calls == [(1, "two")], timeout=1000)

    def test_interval(self, qtbot):
        assert Debouncer(300, print).interval == 300
