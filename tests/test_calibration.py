import pytest

from senseshift.calibration import (
    Calibrated,
    Calibrator,
    CenterPointDeviationCalibrator,
    FixedCenterPointDeviationCalibrator,
    MinMaxCalibrator,
)


class CountingCalibrator(Calibrator):
    def __init__(self):
        self.resets = 0

    def reset(self):
        self.resets += 1

    def update(self, value):
        pass

    def calibrate(self, value):
        return value


def test_calibrator_is_abstract():
    with pytest.raises(TypeError):
        Calibrator()


def test_calibrated_toggles_calibration():
    holder = Calibrated()
    assert holder.is_calibrating() is False
    holder.start_calibration()
    assert holder.is_calibrating() is True
    holder.stop_calibration()
    assert holder.is_calibrating() is False


def test_calibrated_reset_reaches_calibrator_and_clear_removes_it():
    holder = Calibrated()
    holder.reset_calibration()
    calibrator = CountingCalibrator()
    holder.calibrator = calibrator
    holder.reset_calibration()
    holder.reset_calibration()
    assert calibrator.resets == 2
    holder.clear_calibrator()
    assert holder.calibrator is None
    holder.reset_calibration()
    assert calibrator.resets == 2


def test_minmax_without_data_returns_middle():
    calibrator = MinMaxCalibrator(0.0, 1.0)
    assert calibrator.calibrate(0.9) == pytest.approx(0.5)


def test_minmax_stretches_observed_range():
    calibrator = MinMaxCalibrator(0.0, 1.0)
    calibrator.update(0.2)
    calibrator.update(0.8)
    assert calibrator.calibrate(0.2) == 0.0
    assert calibrator.calibrate(0.1) == 0.0
    assert calibrator.calibrate(0.8) == 1.0
    assert calibrator.calibrate(0.95) == 1.0
    samples = [calibrator.calibrate(0.2 + step * 0.05) for step in range(13)]
    assert samples == sorted(samples)
    assert all(0.0 <= sample <= 1.0 for sample in samples)


def test_minmax_reset_forgets_range():
    calibrator = MinMaxCalibrator(0.0, 1.0)
    calibrator.update(0.2)
    calibrator.update(0.8)
    calibrator.reset()
    assert calibrator.calibrate(0.8) == pytest.approx(0.5)


def test_fixed_center_endpoints_and_center():
    calibrator = FixedCenterPointDeviationCalibrator(100.0, 50.0)
    assert calibrator.calibrate(0.5) == pytest.approx(0.5)
    assert calibrator.calibrate(1.0) == pytest.approx(1.0)
    assert calibrator.calibrate(0.0) == pytest.approx(0.0)


def test_fixed_center_clamps_deviation():
    calibrator = FixedCenterPointDeviationCalibrator(100.0, 10.0)
    assert calibrator.calibrate(1.0) == pytest.approx(1.0)
    assert calibrator.calibrate(0.9) == pytest.approx(1.0)
    assert calibrator.calibrate(0.0) == pytest.approx(0.0)


def test_fixed_center_ignores_updates():
    calibrator = FixedCenterPointDeviationCalibrator(100.0, 50.0)
    before = [calibrator.calibrate(step / 10) for step in range(11)]
    calibrator.update(0.0)
    calibrator.update(1.0)
    calibrator.reset()
    assert [calibrator.calibrate(step / 10) for step in range(11)] == before


def test_center_point_matches_fixed_before_learning():
    learning = CenterPointDeviationCalibrator(100.0, 50.0)
    fixed = FixedCenterPointDeviationCalibrator(100.0, 50.0)
    for step in range(11):
        assert learning.calibrate(step / 10) == pytest.approx(fixed.calibrate(step / 10))


def test_center_point_shifts_center_after_update_and_reset_restores():
    learning = CenterPointDeviationCalibrator(100.0, 50.0)
    fixed = FixedCenterPointDeviationCalibrator(100.0, 50.0)
    learning.update(0.0)
    assert learning.calibrate(0.25) == pytest.approx(0.75)
    assert learning.calibrate(0.25) > fixed.calibrate(0.25)
    learning.reset()
    assert learning.calibrate(0.25) == pytest.approx(fixed.calibrate(0.25))