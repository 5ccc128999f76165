"""
Pulse result model.

Serializable snapshot of a pulse, returned by Pulse.result().
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from .enums import PulseStatus


class PulseResult(BaseModel):
    """
    Snapshot of a single pulse.

    Attributes:
        input_ref: Input device the pulse was played on
        motor_ref: Motor within that device
        duration: Requested duration in seconds
        status: Lifecycle status at the time of the snapshot
        started_at: Scheduler clock when the motor was activated
        finished_at: Scheduler clock when the pulse completed or was superseded
    """

    input_ref: Any = Field(..., description="Input device reference")
    motor_ref: Any = Field(..., description="Motor reference within the device")
    duration: float = Field(..., ge=0, description="Requested duration in seconds")
    status: PulseStatus = Field(..., description="Pulse lifecycle status")
    started_at: float = Field(..., description="Scheduler clock at activation")
    finished_at: Optional[float] = Field(None, description="Scheduler clock at completion")

    @property
    def elapsed(self) -> Optional[float]:
        """Seconds the motor was driven by this pulse, or None while active."""
        if self.finished_at is None:
            return None
        return self.finished_at - self.started_at
