# senseshift

Building blocks for haptic and hand-tracking devices: sensors with filter
chains and calibration, hysteresis thresholds, hand gestures, total finger
curl, periodic update tasks and a few numeric helpers. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `senseshift.helpers`: `lerp`, `remap`, `remap_simple`,
  `lookup_table_interpolate_linear`, `version_code` and `CallbackManager`.
  Integer arguments to `remap` and `remap_simple` divide with truncation
  toward zero; an empty or inverted input range given to `remap` is logged
  and yields the middle of the output range.
- `senseshift.component`: the abstract `Initializable` and `Output` base
  classes, plus `init_not_null` and `tick_not_null`, which skip `None`.
- `senseshift.events`: `Event` (a frozen dataclass holding `event_name`),
  the abstract `EventListener` and `EventDispatcher`, and the event names
  `EVENT_BATTERY_LEVEL`, `EVENT_CONNECTED` and `EVENT_DISCONNECTED`.
- `senseshift.calibration`: the `Calibrator` interface, the `Calibrated`
  mixin, `MinMaxCalibrator`, `CenterPointDeviationCalibrator` and
  `FixedCenterPointDeviationCalibrator`.
- `senseshift.filters`: the `Filter` interface, the `Filtered` mixin and
  `AddFilter`, `SubtractFilter`, `MultiplyFilter`, `VoltageDividerFilter`,
  `ClampFilter` (also as `MinMaxFilter` and `RangeFilter`), `LambdaFilter`,
  `SlidingWindowMovingAverageFilter`, `ExponentialMovingAverageFilter`,
  `SinglePointDeadzoneFilter` (also as `CenterDeadzoneFilter`),
  `LookupTableInterpolationFilter` and `AnalogInvertFilter`.
- `senseshift.sensor`: `SimpleSensor` (an abstract raw source), `Sensor`
  (published state passed through the calibrator, then the filters, with
  value and raw-value callbacks; also as `FloatSensor` and `BinarySensor`)
  and `SimpleSensorDecorator`, which reads a `SimpleSensor` on every
  `tick()`.
- `senseshift.analog_threshold`: `AnalogThresholdSensor`, a binary sensor
  with separate upper and lower thresholds (hysteresis).
- `senseshift.gestures`: `HandSide`, `Finger`, `GrabFingers`,
  `PinchFingers`, `GrabGesture` and `PinchGesture`.
- `senseshift.total_curl`: `TotalCurl`, the average of several joint
  sensors.
- `senseshift.task`: `TaskConfig`, the abstract `Task` and
  `ComponentUpdateTask`. `begin()` starts `run()` on a daemon thread and
  `stop()` asks it to finish and waits for it. `ComponentUpdateTask` calls
  the component's `init()` on `begin()`, then its `tick()` every
  `update_delay` milliseconds. The `stack_depth`, `priority` and `core_id`
  fields of `TaskConfig` are kept as information only.

Gestures, `TotalCurl` and `AnalogThresholdSensor` take `attach_callbacks`:
when true, they subscribe to their source sensors in `init()` and
recalculate whenever a source publishes; otherwise they recalculate only on
`tick()`.

## Example

```python
from senseshift.filters import MultiplyFilter, AddFilter
from senseshift.sensor import SimpleSensor, SimpleSensorDecorator
from senseshift.analog_threshold import AnalogThresholdSensor


class Knob(SimpleSensor):
    def __init__(self):
        self.value = 0

    def init(self):
        pass

    def get_value(self):
        return self.value


knob = Knob()
sensor = SimpleSensorDecorator(knob)
sensor.add_filters([MultiplyFilter(2), AddFilter(1)])
sensor.init()

knob.value = 16
sensor.tick()
print(sensor.get_value())  # 33

button = AnalogThresholdSensor(sensor, 120, 80, True)
button.init()
knob.value = 70
sensor.tick()
print(button.get_value())  # True (141 >= 120)
```

## What the package does not do

The package talks to no hardware. It has no analog, digital or multiplexed
pin readers, no PWM, servo or other concrete `Output` classes, no Bluetooth,
serial or Wi-Fi transports, and no haptic body, plane or protocol decoding.
To use it with a device, subclass `SimpleSensor` and `Output` for the
readings and actuators you have.