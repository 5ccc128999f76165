"""Base class for haptic backends."""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional


class HapticBackend(ABC):
    """Abstract base class for vibration motor services.

    Implementations must:
    - Answer capability queries without side effects
    - Return None from get_motor() for motors that were never set
    - Be constructable from the environment via from_env()
    """

    @abstractmethod
    def supports_device(self, input_ref: Hashable) -> bool:
        """True if the input device supports haptic feedback."""
        ...

    @abstractmethod
    def supports_motor(self, input_ref: Hashable, motor_ref: Hashable) -> bool:
        """True if the motor is available on the input device."""
        ...

    @abstractmethod
    def get_motor(self, input_ref: Hashable, motor_ref: Hashable) -> Optional[float]:
        """Last intensity set on the motor, or None if never set."""
        ...

    @abstractmethod
    def set_motor(self, input_ref: Hashable, motor_ref: Hashable, value: float) -> None:
        """Set motor intensity (0.0 = stopped, 1.0 = full)."""
        ...

    @classmethod
    @abstractmethod
    def from_env(cls) -> Optional["HapticBackend"]:
        """Create backend from the environment.

        Returns None if the backend cannot be used here.
        """
        ...

    def describe(self) -> dict[str, Any]:
        """Short description for logs and the command line."""
        return {"backend": type(self).__name__}
