import logging
import time

import attr

logger = logging.getLogger(__name__)


def log_elapsed(elapsed):
    logger.debug("Finished in %.6fs", elapsed)


@attr.s(eq=False)
class Timer:
    """Reports the time spent inside a ``with`` block.

    ``on_exit(elapsed)`` is called once when the block exits, also when it
    raises. The exception is never suppressed.

    A timer made with :meth:`start` and never entered in a ``with`` block
    only reports when :meth:`stop` is called.
    """

    on_exit = attr.ib(default=log_elapsed)
    clock = attr.ib(default=time.monotonic, repr=False)
    started = attr.ib(default=None, init=False)
    _done = attr.ib(default=False, init=False, repr=False)

    @classmethod
    def start(cls, on_exit=log_elapsed, clock=time.monotonic):
        """Starts timing now. Call :meth:`stop` unless the timer is used in ``with``."""
        timer = cls(on_exit, clock=clock)
        timer.started = clock()
        return timer

    @property
    def elapsed(self):
        if self.started is None:
            return 0.0
        return self.clock() - self.started

    def stop(self):
        if self._done:
            return
        self._done = True
        self.on_exit(self.elapsed)

    def __enter__(self):
        if self.started is None:
            self.started = self.clock()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()
        return False
