"""Total finger curl as the average of its joints."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from senseshift.sensor import Sensor

logger = logging.getLogger(__name__)


class TotalCurl(Sensor):
    """The mean value of several joint sensors.

    With ``attach_callbacks`` the total is recalculated whenever any joint publishes,
    which means once per joint per update; otherwise only on ``tick()``.
    """

    def __init__(self, joints: Iterable[Sensor], attach_callbacks: bool = False) -> None:
        super().__init__(0.0)
        self.joints = list(joints)
        self.attach_callbacks = attach_callbacks

    def init(self) -> None:
        for joint in self.joints:
            joint.init()
            if self.attach_callbacks:
                joint.add_value_callback(lambda _value: self.recalculate_state())

    def tick(self) -> None:
        if self.attach_callbacks:
            logger.error(
                "[total_curl] tick() called when attach_callbacks is true, state is recalculated twice"
            )
        self.recalculate_state()

    def recalculate_state(self) -> None:
        """Publish the average of the joints; with no joints nothing is published."""
        if self.joints:
            total = sum(float(joint.get_value()) for joint in self.joints)
            self.publish_state(total / len(self.joints))