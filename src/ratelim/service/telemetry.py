import json
import logging
import time

import attr

from ratelim import load_env
from ratelim.rate_limiter.rate_limiter import IntervalGate

logger = logging.getLogger(__name__)


@attr.s
class TelemetryMessage:
    name = attr.ib()
    data = attr.ib()

    def to_json(self):
        return json.dumps(attr.asdict(self))


class TelemetryPublisher:
    """Publishes changes of one data point, at most once per interval.

    Changes arriving faster than the interval are dropped. A failed publish
    leaves the gate where it was, so the next change is sent. Create one
    publisher per data point.
    """

    def __init__(self, client, channel, name, interval=None, formatter=None, clock=time.monotonic):
        self.client = client
        self.channel = channel
        self.name = name
        if interval is None:
            interval = load_env.get("publish_interval")
        self.formatter = formatter
        self.gate = IntervalGate(interval, clock=clock)

    @property
    def topic(self):
        return self.channel + ":outbound"

    def publish(self, value):
        payload = self.formatter(value) if self.formatter else value
        logger.info("%s : %s", self.name, payload)
        message = TelemetryMessage(self.name, payload)
        self.client.publish(self.topic, message.to_json(), qos=0)

    def handle_change(self, value):
        self.gate.run(lambda: self.publish(value))

    def listener(self):
        """Callback for attribute and message listener APIs."""
        return lambda _self, name, value: self.handle_change(value)
