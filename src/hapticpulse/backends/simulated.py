"""In-memory haptic backend with a recorded motor history."""

import logging
from typing import Hashable, Iterable, Mapping, Optional

from hapticpulse.backends.base import HapticBackend

logger = logging.getLogger("hapticpulse.backends.simulated")


class SimulatedBackend(HapticBackend):
    """Motor table kept in memory.

    With devices=None every device and motor is supported. Otherwise
    devices maps each supported input ref to the motor refs it exposes;
    an empty mapping supports nothing.
    """

    def __init__(self, devices: Optional[Mapping[Hashable, Iterable[Hashable]]] = None):
        self.devices: Optional[dict[Hashable, set[Hashable]]] = (
            None if devices is None else {ref: set(motors) for ref, motors in devices.items()}
        )
        self.motors: dict[tuple[Hashable, Hashable], float] = {}
        self.history: list[tuple[Hashable, Hashable, float]] = []

    def supports_device(self, input_ref: Hashable) -> bool:
        return self.devices is None or input_ref in self.devices

    def supports_motor(self, input_ref: Hashable, motor_ref: Hashable) -> bool:
        if self.devices is None:
            return True
        return motor_ref in self.devices.get(input_ref, ())

    def get_motor(self, input_ref: Hashable, motor_ref: Hashable) -> Optional[float]:
        return self.motors.get((input_ref, motor_ref))

    def set_motor(self, input_ref: Hashable, motor_ref: Hashable, value: float) -> None:
        if not self.supports_motor(input_ref, motor_ref):
            logger.debug(f"Ignoring set_motor on unsupported motor {input_ref}/{motor_ref}")
            return
        self.motors[(input_ref, motor_ref)] = value
        self.history.append((input_ref, motor_ref, value))

    def last_value(self) -> Optional[float]:
        return self.history[-1][2] if self.history else None

    @classmethod
    def from_env(cls) -> "SimulatedBackend":
        """Simulated backend supporting every device and motor."""
        return cls()
