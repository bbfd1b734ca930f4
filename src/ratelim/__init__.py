"""Time-gated invocation throttle.

Runs an action at most once per interval and drops the calls in between::

    gate = IntervalGate(0.5)
    for _ in range(5):
        gate.run(lambda: print("Watering plants..."))
        time.sleep(0.2)
"""

from ratelim.rate_limiter.rate_limiter import IntervalGate, LockedIntervalGate
from ratelim.timer.timer import Timer

__all__ = ["IntervalGate", "LockedIntervalGate", "Timer"]
