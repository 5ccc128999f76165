"""
hapticpulse: timed vibration pulses for gamepad motors.

Usage from Python:
    from hapticpulse import HapticPulse, VibrationMotor, short_vibration

    feedback = HapticPulse(0, VibrationMotor.LARGE)
    await feedback.play_pulse(2)              # returns immediately
    await feedback.play_pulse(2, blocking=True)  # waits for the stop
    await feedback.play_preset(short_vibration)

Usage from CLI:
    python -m hapticpulse --duration 0.5
    python -m hapticpulse --preset long --motor small
"""

from hapticpulse.controller import FULL_INTENSITY, STOPPED, HapticPulse, Pulse
from hapticpulse.enums import PulseStatus, VibrationMotor
from hapticpulse.models import PulseResult
from hapticpulse.presets import PRESETS, get_preset, long_vibration, short_vibration

__all__ = [
    "FULL_INTENSITY",
    "STOPPED",
    "HapticPulse",
    "Pulse",
    "PulseResult",
    "PulseStatus",
    "VibrationMotor",
    "PRESETS",
    "get_preset",
    "long_vibration",
    "short_vibration",
]
