"""Sensors, filters, calibration, gestures and update tasks for haptic and hand-tracking devices."""

__version__ = "0.1.0"