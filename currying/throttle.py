import functools
import logging
import numbers
import threading
import types


class Throttle:
    """
    Run func at most once every `wait` seconds.

    The first call runs straight away. Calls made while waiting only keep
    their arguments, the last one wins, and they are replayed once the wait
    is over, which starts a new wait.
    """

    def __init__(self, func, wait, timer_factory=threading.Timer):
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        if isinstance(wait, bool) or not isinstance(wait, numbers.Real):
            raise TypeError(f"wait must be a number of seconds, got {wait!r}")
        if wait < 0:
            raise ValueError(f"wait must be >= 0, got {wait}")
        functools.update_wrapper(self, func)
        self._func = func
        self._wait = wait
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._waiting = False
        self._last = None
        self._timer = None
        self._generation = 0
        self._logger = logging.getLogger(Throttle.__name__)

    @classmethod
    def from_config(cls, func, settings, **kwargs):
        return cls(func, settings.wait, **kwargs)

    @property
    def wait(self):
        return self._wait

    @property
    def pending(self):
        return self._last is not None

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._waiting:
                self._last = (args, kwargs)
                self._logger.debug("Throttled call to %r, keeping the latest arguments", self._func)
                return
            self._waiting = True
            self._start_timer()
        self._func(*args, **kwargs)

    def cancel(self):
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._last = None
            self._waiting = False

    def _start_timer(self):
        self._generation += 1
        self._timer = self._timer_factory(self._wait, self._timeout, args=(self._generation,))
        self._timer.daemon = True
        self._timer.start()

    def _timeout(self, generation):
        with self._lock:
            # timer was cancelled or replaced after it started
            if generation != self._generation:
                return
            self._waiting = False
            self._timer = None
            if self._last is None:
                return
            args, kwargs = self._last
            self._last = None
            self._waiting = True
            self._start_timer()
        try:
            self._func(*args, **kwargs)
        except Exception:
            self._logger.exception("Trailing call to %r failed", self._func)
            raise


def throttle(wait, timer_factory=threading.Timer):
    def decorator(func):
        return Throttle(func, wait, timer_factory)

    return decorator
