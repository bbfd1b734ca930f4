import threading
import time
from datetime import timedelta

import attr


def to_seconds(interval):
    if isinstance(interval, timedelta):
        return interval.total_seconds()
    return float(interval)


@attr.s(eq=False)
class IntervalGate:
    """Runs an action at most once per ``interval``.

    A call that arrives before the interval has elapsed since the last
    execution is dropped, not deferred. The first call always runs.

    ``interval`` is in the units of ``clock``, seconds for the default
    ``time.monotonic``. A ``timedelta`` is accepted as well.

    One instance is meant to be driven by one caller at a time. Concurrent
    callers on the same gate may both execute within one interval; use
    :class:`LockedIntervalGate` when that matters.

    Gates compare by identity, so they can be used as dict keys.
    """

    interval = attr.ib(converter=to_seconds, on_setattr=attr.setters.frozen)
    clock = attr.ib(default=time.monotonic, repr=False)
    _last_run = attr.ib(default=None, init=False)

    @classmethod
    def from_frequency(cls, hertz, clock=time.monotonic):
        """Gate allowing at most ``hertz`` executions per second."""
        if hertz <= 0:
            raise ValueError("hertz must be > 0")
        return cls(1.0 / hertz, clock=clock)

    @property
    def last_run(self):
        return self._last_run

    def remaining(self):
        """Time left before the next call would run, 0.0 if it would run now."""
        if self._last_run is None:
            return 0.0
        return max(0.0, self.interval - (self.clock() - self._last_run))

    def start_now(self):
        """(Re)starts the interval and returns the previous start, if any."""
        previous = self._last_run
        self._last_run = self.clock()
        return previous

    def run(self, action):
        """Calls ``action()`` if the interval has elapsed.

        Exceptions raised by ``action`` propagate untouched, and the gate is
        not advanced, so the next call may retry straight away.
        """
        self.try_run(action)

    def try_run(self, action):
        """Like :meth:`run`, but returns the time left when ``action`` is skipped.

        Returns ``None`` when ``action`` ran.
        """
        now = self.clock()
        if self._last_run is not None:
            elapsed = now - self._last_run
            if elapsed < self.interval:
                return self.interval - elapsed
        action()
        self._last_run = now
        return None

    def run_dt(self, action):
        """Calls ``action(elapsed)`` with the time since the previous run.

        The first call only starts the gate, since there is no previous run
        to measure from.
        """
        now = self.clock()
        if self._last_run is None:
            self._last_run = now
            return
        elapsed = now - self._last_run
        if elapsed >= self.interval:
            action(elapsed)
            self._last_run = now


@attr.s(eq=False)
class LockedIntervalGate(IntervalGate):
    """IntervalGate that may be shared between threads.

    The lock is held while the action runs, so an action must not call back
    into the same gate.
    """

    _lock = attr.ib(factory=threading.Lock, init=False, repr=False)

    def remaining(self):
        with self._lock:
            return super().remaining()

    def start_now(self):
        with self._lock:
            return super().start_now()

    def try_run(self, action):
        with self._lock:
            return super().try_run(action)

    def run_dt(self, action):
        with self._lock:
            super().run_dt(action)
