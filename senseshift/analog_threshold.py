"""Binary sensor driven by an analog source, with hysteresis."""

from __future__ import annotations

import logging
from typing import Any

from senseshift.sensor import Sensor

logger = logging.getLogger(__name__)


class AnalogThresholdSensor(Sensor):
    """On once the source reaches ``threshold_upper``; off again once it falls below ``threshold_lower``.

    Without ``threshold_lower`` a single threshold is used for both directions.
    """

    def __init__(
        self,
        source: Sensor,
        threshold_upper: Any = 0.5,
        threshold_lower: Any = None,
        attach_callbacks: bool = False,
    ) -> None:
        super().__init__(False)
        self.source = source
        self.threshold_upper = threshold_upper
        self.threshold_lower = threshold_upper if threshold_lower is None else threshold_lower
        self.attach_callbacks = attach_callbacks

    def init(self) -> None:
        self.source.init()
        if self.attach_callbacks:
            self.source.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            logger.error(
                "[sensor.analog_threshold] tick() called when attach_callbacks is true, "
                "state is recalculated twice"
            )
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Compare the source against the threshold that applies to the current state."""
        sensor_value = self.source.get_value()
        threshold = self.threshold_lower if self.get_value() else self.threshold_upper
        self.publish_state(sensor_value >= threshold)