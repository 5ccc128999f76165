"""Gamepad rumble backend using pygame's joystick API."""

import logging
from typing import Any, Hashable, Mapping, Optional

from hapticpulse.backends.base import HapticBackend
from hapticpulse.enums import VibrationMotor

logger = logging.getLogger("hapticpulse.backends.pygame")

# Rumble channel per motor: pygame drives a low- and a high-frequency motor
_MOTOR_CHANNELS: dict[str, int] = {
    VibrationMotor.LARGE.value: 0,
    VibrationMotor.SMALL.value: 1,
}


def _channel(motor_ref: Hashable) -> Optional[int]:
    return _MOTOR_CHANNELS.get(str(motor_ref).lower())


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


class PygameBackend(HapticBackend):
    """Drive gamepad rumble motors through pygame.

    Input refs are joystick indices. pygame only exposes a combined
    rumble(low, high, duration) call, so both motor intensities are kept
    here and re-sent together whenever either changes.
    """

    def __init__(self, joysticks: Mapping[int, Any]):
        self.joysticks = dict(joysticks)
        self._levels: dict[int, list[Optional[float]]] = {
            index: [None, None] for index in self.joysticks
        }

    def supports_device(self, input_ref: Hashable) -> bool:
        return input_ref in self.joysticks

    def supports_motor(self, input_ref: Hashable, motor_ref: Hashable) -> bool:
        return self.supports_device(input_ref) and _channel(motor_ref) is not None

    def get_motor(self, input_ref: Hashable, motor_ref: Hashable) -> Optional[float]:
        channel = _channel(motor_ref)
        if channel is None or input_ref not in self._levels:
            return None
        return self._levels[input_ref][channel]  # type: ignore[index]

    def set_motor(self, input_ref: Hashable, motor_ref: Hashable, value: float) -> None:
        channel = _channel(motor_ref)
        if channel is None or input_ref not in self.joysticks:
            logger.debug(f"Ignoring set_motor on unsupported motor {input_ref}/{motor_ref}")
            return

        levels = self._levels[input_ref]  # type: ignore[index]
        levels[channel] = _clamp(value)
        low, high = (level or 0.0 for level in levels)
        joystick = self.joysticks[input_ref]  # type: ignore[index]

        if low == 0.0 and high == 0.0:
            joystick.stop_rumble()
            return

        # Duration 0 plays until the next rumble/stop_rumble call
        if not joystick.rumble(low, high, 0):
            logger.debug(f"Joystick {input_ref} rejected rumble(low={low}, high={high})")

    def describe(self) -> dict[str, Any]:
        names = {index: joystick.get_name() for index, joystick in self.joysticks.items()}
        return {"backend": type(self).__name__, "joysticks": names}

    @classmethod
    def from_env(cls) -> Optional["PygameBackend"]:
        """Open every connected joystick. Returns None without pygame or gamepads."""
        try:
            import pygame
        except ImportError:
            logger.debug("pygame not installed, gamepad backend unavailable")
            return None

        try:
            pygame.init()
            pygame.joystick.init()
            count = pygame.joystick.get_count()
            if count == 0:
                logger.debug("No joystick connected")
                return None

            joysticks = {}
            for index in range(count):
                joystick = pygame.joystick.Joystick(index)
                joystick.init()
                if hasattr(joystick, "rumble"):
                    joysticks[index] = joystick
        except Exception as e:
            logger.warning(f"pygame joystick initialisation failed: {e}")
            return None

        if not joysticks:
            return None
        return cls(joysticks)
