"""Calibrators that map raw sensor readings onto an output range."""

from __future__ import annotations

from abc import ABC, abstractmethod

from senseshift.helpers import remap


class Calibrator(ABC):
    """Learns from input values and calibrates new ones."""

    @abstractmethod
    def reset(self) -> None:
        """Forget what was learned."""

    @abstractmethod
    def update(self, value) -> None:
        """Learn from a new input value."""

    @abstractmethod
    def calibrate(self, value):
        """Return the calibrated form of ``value``."""


class Calibrated:
    """Mixin holding an optional calibrator and whether it is learning."""

    def __init__(self) -> None:
        super().__init__()
        self.calibrator: Calibrator | None = None
        self._calibrating = False

    def clear_calibrator(self) -> None:
        self.calibrator = None

    def start_calibration(self) -> None:
        self._calibrating = True

    def stop_calibration(self) -> None:
        self._calibrating = False

    def reset_calibration(self) -> None:
        """Reset the calibrator, if there is one."""
        if self.calibrator is not None:
            self.calibrator.reset()

    def is_calibrating(self) -> bool:
        return self._calibrating


def _clamp(value, low, high):
    return max(low, min(value, high))


class MinMaxCalibrator(Calibrator):
    """Stretches the observed minimum..maximum onto the output range."""

    def __init__(self, output_min=0.0, output_max=1.0) -> None:
        self.output_min = output_min
        self.output_max = output_max
        self.reset()

    def reset(self) -> None:
        self._value_min = self.output_max
        self._value_max = self.output_min

    def update(self, value) -> None:
        if value < self._value_min:
            self._value_min = value
        if value > self._value_max:
            self._value_max = value

    def calibrate(self, value):
        # No calibration data yet: answer with the middle of the output range.
        if self._value_min > self._value_max:
            return (self.output_min + self.output_max) / 2.0
        if value <= self._value_min:
            return self.output_min
        if value >= self._value_max:
            return self.output_max
        output = remap(value, self._value_min, self._value_max, self.output_min, self.output_max)
        return _clamp(output, self.output_min, self.output_max)


def _deviation_from_center(value, center, sensor_max, max_deviation, output_min, output_max):
    """Map ``value`` to sensor units, clamp its deviation from ``center`` and map it back."""
    mapped = int(remap(value, output_min, output_max, 0, sensor_max))
    limit = int(max_deviation)
    deviation = _clamp(int(mapped - center), -limit, limit)
    return remap(deviation, -limit, limit, output_min, output_max)


def _center(total, like):
    center = total / 2.0
    return int(center) if isinstance(like, int) else center


class CenterPointDeviationCalibrator(Calibrator):
    """Reports deviation from the centre of the observed range, limited to what the driver supports."""

    def __init__(self, sensor_max, driver_max_deviation, output_min=0.0, output_max=1.0) -> None:
        self.sensor_max = sensor_max
        self.driver_max_deviation = driver_max_deviation
        self.output_min = output_min
        self.output_max = output_max
        self.reset()

    def reset(self) -> None:
        self._range_min = self.sensor_max
        self._range_max = 0

    def update(self, value) -> None:
        if value < self._range_min:
            self._range_min = remap(value, self.output_min, self.output_max, 0, self.sensor_max)
        if value > self._range_max:
            self._range_max = remap(value, self.output_min, self.output_max, 0, self.sensor_max)

    def calibrate(self, value):
        center = _center(self._range_min + self._range_max, self.sensor_max)
        return _deviation_from_center(
            value, center, self.sensor_max, self.driver_max_deviation, self.output_min, self.output_max
        )


class FixedCenterPointDeviationCalibrator(Calibrator):
    """Reports deviation from the fixed centre of the sensor range; learns nothing."""

    def __init__(self, sensor_max, driver_max_deviation, output_min=0.0, output_max=1.0) -> None:
        self.sensor_max = sensor_max
        self.driver_max_deviation = driver_max_deviation
        self.output_min = output_min
        self.output_max = output_max

    def reset(self) -> None:
        pass

    def update(self, value) -> None:
        pass

    def calibrate(self, value):
        center = _center(self.sensor_max, self.sensor_max)
        return _deviation_from_center(
            value, center, self.sensor_max, self.driver_max_deviation, self.output_min, self.output_max
        )