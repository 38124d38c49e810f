"""Hand descriptions and binary gestures computed from finger curl sensors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from senseshift.sensor import Sensor

logger = logging.getLogger(__name__)


class HandSide(IntEnum):
    """Which hand a device is worn on."""

    LEFT = 0
    RIGHT = 1


class Finger(IntEnum):
    """The fingers of a hand, thumb first."""

    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    LITTLE = 4


@dataclass
class GrabFingers:
    """The curl sensors a grab gesture is computed from."""

    index: Sensor
    middle: Sensor
    ring: Sensor
    pinky: Sensor


@dataclass
class PinchFingers:
    """The curl sensors a pinch gesture is computed from."""

    thumb: Sensor
    index: Sensor


class _FingerGesture(Sensor):
    """A binary sensor that is on when every watched finger is curled past a threshold."""

    _tag = "gesture"

    def __init__(self, threshold: float, attach_callbacks: bool) -> None:
        super().__init__(False)
        self.threshold = threshold
        self.attach_callbacks = attach_callbacks

    def _finger_sensors(self) -> tuple[Sensor, ...]:
        raise NotImplementedError

    def init(self) -> None:
        for finger in self._finger_sensors():
            finger.init()
            if self.attach_callbacks:
                finger.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            logger.error(
                "[%s] tick() called when attach_callbacks is true, state is recalculated twice",
                self._tag,
            )
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Publish whether every finger is curled beyond the threshold."""
        self.publish_state(
            all(finger.get_value() > self.threshold for finger in self._finger_sensors())
        )


class GrabGesture(_FingerGesture):
    """On when the index, middle, ring and pinky fingers are all curled past the threshold."""

    _tag = "gesture.grab"

    def __init__(
        self, fingers: GrabFingers, threshold: float = 0.5, attach_callbacks: bool = False
    ) -> None:
        self.fingers = fingers
        super().__init__(threshold, attach_callbacks)

    def _finger_sensors(self) -> tuple[Sensor, ...]:
        fingers = self.fingers
        return (fingers.index, fingers.middle, fingers.ring, fingers.pinky)

    def init(self) -> None:
        super().init()

    def tick(self) -> None:
        super().tick()

    def recalculate_state(self) -> None:
        super().recalculate_state()


class PinchGesture(_FingerGesture):
    """On when both the thumb and the index finger are curled past the threshold."""

    _tag = "gesture.pinch"

    def __init__(
        self, fingers: PinchFingers, threshold: float = 0.5, attach_callbacks: bool = False
    ) -> None:
        self.fingers = fingers
        super().__init__(threshold, attach_callbacks)

    def _finger_sensors(self) -> tuple[Sensor, ...]:
        return (self.fingers.thumb, self.fingers.index)

    def init(self) -> None:
        super().init()

    def tick(self) -> None:
        super().tick()

    def recalculate_state(self) -> None:
        super().recalculate_state()