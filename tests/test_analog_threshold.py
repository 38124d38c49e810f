from senseshift.analog_threshold import AnalogThresholdSensor
from senseshift.sensor import Sensor, SimpleSensor, SimpleSensorDecorator


class ValueSensor(SimpleSensor):
    def __init__(self, value=0):
        self.value = value
        self.setup_counter = 0

    def init(self):
        self.setup_counter += 1

    def get_value(self):
        return self.value


def test_sensor_analog_threshold_with_callbacks():
    inner = ValueSensor()
    source = SimpleSensorDecorator(inner)
    sensor = AnalogThresholdSensor(source, 120, 80, True)

    assert inner.setup_counter == 0
    sensor.init()
    assert inner.setup_counter == 1

    inner.value = 100
    source.tick()
    assert sensor.get_value() is False

    inner.value = 130
    source.tick()
    assert sensor.get_value() is True

    # Between the thresholds: stays on due to hysteresis.
    inner.value = 90
    source.tick()
    assert sensor.get_value() is True

    inner.value = 70
    source.tick()
    assert sensor.get_value() is False


def test_threshold_tick_without_callbacks():
    source = Sensor()
    sensor = AnalogThresholdSensor(source, 120, 80)
    sensor.init()

    source.publish_state(130)
    assert sensor.get_value() is False  # not recalculated until tick
    sensor.tick()
    assert sensor.get_value() is True

    source.publish_state(90)
    sensor.tick()
    assert sensor.get_value() is True

    source.publish_state(70)
    sensor.tick()
    assert sensor.get_value() is False


def test_single_default_threshold():
    source = Sensor()
    sensor = AnalogThresholdSensor(source)

    source.publish_state(0.5)
    sensor.tick()
    assert sensor.get_value() is True

    source.publish_state(0.49)
    sensor.tick()
    assert sensor.get_value() is False


def test_threshold_value_callbacks_fire():
    source = Sensor()
    sensor = AnalogThresholdSensor(source, 0.3, attach_callbacks=True)
    seen = []
    sensor.add_value_callback(seen.append)
    sensor.init()

    source.publish_state(0.1)
    source.publish_state(0.9)

    assert seen == [False, True]