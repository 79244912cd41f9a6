import unittest

from currying.configuration import Settings
from currying.throttle import Throttle, throttle


class FakeTimer:
    created = []

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


class TestThrottle(unittest.TestCase):
    def setUp(self) -> None:
        FakeTimer.created = []
        self.calls = []
        self.throttled = Throttle(self.record, 1.0, timer_factory=FakeTimer)

    def record(self, *args, **kwargs):
        self.calls.append((args, kwargs))

    def test_leading_call_runs_immediately(self) -> None:
        self.assertIsNone(self.throttled("A"))
        self.assertEqual([(("A",), {})], self.calls)
        self.assertEqual(1, len(FakeTimer.created))
        timer = FakeTimer.created[0]
        self.assertTrue(timer.started)
        self.assertTrue(timer.daemon)
        self.assertEqual(1.0, timer.interval)

    def test_last_call_wins(self) -> None:
        self.throttled("A")
        self.throttled("B")
        self.throttled("C", key=1)
        self.assertTrue(self.throttled.pending)
        self.assertEqual([(("A",), {})], self.calls)
        FakeTimer.created[0].fire()
        self.assertEqual([(("A",), {}), (("C",), {"key": 1})], self.calls)
        self.assertFalse(self.throttled.pending)
        # the trailing call opens a new window
        self.assertEqual(2, len(FakeTimer.created))
        self.throttled("D")
        self.assertEqual(2, len(self.calls))

    def test_quiet_window_resets(self) -> None:
        self.throttled("A")
        FakeTimer.created[0].fire()
        self.assertEqual(1, len(FakeTimer.created))
        self.throttled("B")
        self.assertEqual([(("A",), {}), (("B",), {})], self.calls)

    def test_cancel(self) -> None:
        self.throttled("A")
        self.throttled("B")
        self.throttled.cancel()
        self.assertTrue(FakeTimer.created[0].cancelled)
        self.assertFalse(self.throttled.pending)
        self.throttled("C")
        self.assertEqual([(("A",), {}), (("C",), {})], self.calls)

    def test_stale_timer_after_cancel_is_ignored(self) -> None:
        self.throttled("A")
        stale = FakeTimer.created[0]
        self.throttled.cancel()
        self.throttled("B")
        fresh = FakeTimer.created[1]
        # the old callback was already running when cancel() was called
        stale.fire()
        self.throttled("C")
        self.assertEqual([(("A",), {}), (("B",), {})], self.calls)
        self.assertTrue(self.throttled.pending)
        self.throttled.cancel()
        self.assertTrue(fresh.cancelled)
        self.assertFalse(self.throttled.pending)

    def test_stale_timer_does_not_replay(self) -> None:
        self.throttled("A")
        self.throttled("B")
        stale = FakeTimer.created[0]
        self.throttled.cancel()
        stale.fire()
        self.assertEqual([(("A",), {})], self.calls)
        self.assertEqual(1, len(FakeTimer.created))

    def test_trailing_error_is_raised(self) -> None:
        def fail(value):
            if value == "bad":
                raise RuntimeError(value)

        throttled = Throttle(fail, 1.0, timer_factory=FakeTimer)
        throttled("ok")
        throttled("bad")
        with self.assertLogs("Throttle", level="ERROR"):
            with self.assertRaises(RuntimeError):
                FakeTimer.created[-1].fire()

    def test_method_keeps_instance(self) -> None:
        class Counter:
            def __init__(self):
                self.seen = []

            @throttle(1.0, timer_factory=FakeTimer)
            def hit(self, value):
                self.seen.append(value)

        counter = Counter()
        counter.hit(1)
        counter.hit(2)
        counter.hit(3)
        FakeTimer.created[-1].fire()
        self.assertEqual([1, 3], counter.seen)
        self.assertEqual("hit", Counter.hit.__name__)

    def test_from_config(self) -> None:
        throttled = Throttle.from_config(self.record, Settings({"WAIT": 0.5}), timer_factory=FakeTimer)
        self.assertEqual(0.5, throttled.wait)

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            Throttle(self.record, -1)
        with self.assertRaises(TypeError):
            Throttle(self.record, "1")
        with self.assertRaises(TypeError):
            Throttle(None, 1)
