"""
Haptic Enums

Type-safe enumerations for motor selectors and pulse lifecycle states.
"""

from enum import Enum


class VibrationMotor(str, Enum):
    """
    Conventional motor selectors within an input device.

    Any hashable value can be used as a motor reference; these are the
    names gamepad backends understand.
    """

    LARGE = "large"  # Low-frequency rumble motor (left grip)
    SMALL = "small"  # High-frequency rumble motor (right grip)
    LEFT_TRIGGER = "left_trigger"
    RIGHT_TRIGGER = "right_trigger"
    LEFT_HAND = "left_hand"  # VR controllers
    RIGHT_HAND = "right_hand"

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


class PulseStatus(str, Enum):
    """
    Status of a pulse in its lifecycle.

    State transitions:
    ACTIVE -> COMPLETED (scheduled stop fired)
           -> SUPERSEDED (a newer pulse on the same controller cancelled it)
    """

    ACTIVE = "active"  # Motor running, stop scheduled
    COMPLETED = "completed"  # Stop fired
    SUPERSEDED = "superseded"  # Cancelled by a newer pulse

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value
