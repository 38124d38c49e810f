"""Sensors: raw sources, and sensors with calibration, filters and callbacks."""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Callable
from typing import Any

from senseshift.calibration import Calibrated
from senseshift.component import Initializable
from senseshift.filters import Filtered
from senseshift.helpers import CallbackManager

logger = logging.getLogger(__name__)


class SimpleSensor(Initializable):
    """A hardware-like source of values, e.g. a potentiometer."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the sensor for reading."""

    @abstractmethod
    def get_value(self) -> Any:
        """Read the current value."""


class Sensor(Calibrated, Filtered, SimpleSensor):
    """Holds a published state, passed through calibration and filters, and notifies subscribers."""

    def __init__(self, value: Any = 0.0) -> None:
        super().__init__()
        self._callbacks = CallbackManager()
        self._raw_callbacks = CallbackManager()
        self._raw_value = value
        self._value = self._apply_filters(value)

    def add_value_callback(self, callback: Callable[[Any], Any]) -> None:
        """Subscribe to filtered values."""
        self._callbacks.add(callback)

    def add_raw_value_callback(self, callback: Callable[[Any], Any]) -> None:
        """Subscribe to raw values."""
        self._raw_callbacks.add(callback)

    def init(self) -> None:
        pass

    def tick(self) -> None:
        pass

    def publish_state(self, raw_value: Any) -> None:
        """Store ``raw_value``, then compute and store its filtered value, notifying subscribers of each."""
        self._raw_value = raw_value
        self._raw_callbacks.call(raw_value)

        self._value = self._apply_filters(raw_value)
        self._callbacks.call(self._value)

    def get_value(self) -> Any:
        return self._value

    def get_raw_value(self) -> Any:
        return self._raw_value

    def _apply_filters(self, value: Any) -> Any:
        if self.calibrator is not None:
            if self.is_calibrating():
                self.calibrator.update(value)
            value = self.calibrator.calibrate(value)
        for filter_ in self.filters:
            value = filter_.filter(None, value)
        return value


FloatSensor = Sensor
BinarySensor = Sensor


class SimpleSensorDecorator(Sensor):
    """A sensor whose state is read from a simple source on every tick."""

    def __init__(self, source: SimpleSensor, value: Any = 0.0) -> None:
        super().__init__(value)
        self.source = source

    def init(self) -> None:
        self.source.init()

    def tick(self) -> None:
        self.update_value()

    def update_value(self) -> Any:
        """Read the source, publish it and return the filtered value."""
        raw_value = self.read_raw_value()
        self.publish_state(raw_value)
        logger.debug("[decorator.simple] raw_value=%s, value=%s", raw_value, self.get_value())
        return self.get_value()

    def read_raw_value(self) -> Any:
        return self.source.get_value()