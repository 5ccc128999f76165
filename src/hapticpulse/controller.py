"""
Haptic Pulse Controller - Timed vibration pulses on a single motor.

A HapticPulse wraps one motor of one input device. It answers capability
queries, reads and stops the motor, and plays timed pulses: the motor is
driven at full intensity and a stop is scheduled after the pulse duration.
Starting a new pulse cancels the stop of the previous one, so overlapping
pulses extend the vibration instead of cutting it short.

Usage:
    feedback = HapticPulse(0, VibrationMotor.LARGE)

    # Run the motor for 2 seconds without waiting
    await feedback.play_pulse(2)

    # Wait for the pulse to finish
    await feedback.play_pulse(2, blocking=True)

    # Named presets
    await feedback.play_preset(short_vibration)
"""

import asyncio
import logging
import math
from numbers import Real
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Hashable, Optional

from hapticpulse.backends import HapticBackend, SimulatedBackend, get_default_backend
from hapticpulse.enums import PulseStatus
from hapticpulse.models import PulseResult
from hapticpulse.scheduler import AsyncioScheduler, Scheduler

if TYPE_CHECKING:
    Preset = Callable[["HapticPulse", bool], Awaitable[Optional["Pulse"]]]

FULL_INTENSITY = 1.0
STOPPED = 0.0

logger = logging.getLogger("hapticpulse.controller")


def validate_duration(duration: Any) -> float:
    """
    Check a pulse duration and return it as a float.

    Args:
        duration: Seconds the motor should run

    Returns:
        The duration as a float

    Raises:
        ValueError: If duration is not a finite, non-negative number
    """
    if isinstance(duration, bool) or not isinstance(duration, Real):
        raise ValueError(f"Pulse duration must be a number, got {type(duration).__name__}")

    value = float(duration)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Pulse duration must be finite and >= 0, got {duration!r}")
    return value


class Pulse:
    """
    Handle for one timed activation of a motor.

    A pulse starts ACTIVE and ends exactly once, either COMPLETED when its
    scheduled stop fires or SUPERSEDED when a newer pulse cancels it.
    Callers can await wait() to block until then.
    """

    def __init__(self, input_ref: Hashable, motor_ref: Hashable, duration: float, started_at: float):
        self.input_ref = input_ref
        self.motor_ref = motor_ref
        self.duration = duration
        self.started_at = started_at
        self.finished_at: Optional[float] = None
        self.status = PulseStatus.ACTIVE
        self.handle: Any = None
        self._finished = asyncio.Event()

    @property
    def done(self) -> bool:
        return self.status is not PulseStatus.ACTIVE

    def _finish(self, status: PulseStatus, at: float) -> None:
        if self.done:
            return
        self.status = status
        self.finished_at = at
        self._finished.set()

    async def wait(self) -> PulseStatus:
        """Wait until the pulse completes or is superseded. Returns the final status."""
        await self._finished.wait()
        return self.status

    def result(self) -> PulseResult:
        return PulseResult(
            input_ref=self.input_ref,
            motor_ref=self.motor_ref,
            duration=self.duration,
            status=self.status,
            started_at=self.started_at,
            finished_at=self.finished_at,
        )

    def __repr__(self) -> str:
        return f"<Pulse(duration={self.duration}, status={self.status})>"


class HapticPulse:
    """
    Timed pulse controller for one vibration motor.

    The controller owns at most one pending pulse. stop() silences the motor
    but leaves that pulse's scheduled stop in place; only starting a new pulse
    cancels it.
    """

    def __init__(
        self,
        input_ref: Hashable,
        motor_ref: Hashable,
        backend: Optional[HapticBackend] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        """
        Initialize the controller.

        Args:
            input_ref: Input device reference (e.g. gamepad index)
            motor_ref: Motor within that device (e.g. VibrationMotor.LARGE)
            backend: Haptic service to drive. Defaults to the shared
                     get_default_backend(); when nothing is available every
                     operation is a no-op.
            scheduler: Delayed-callback scheduler (default: AsyncioScheduler)
        """
        if backend is None:
            backend = get_default_backend()
            if backend is None:
                logger.info("No haptic backend available, vibration unsupported")
                backend = SimulatedBackend(devices={})

        self.input_ref = input_ref
        self.motor_ref = motor_ref
        self.backend = backend
        self.scheduler = scheduler or AsyncioScheduler()
        self._pending: Optional[Pulse] = None

    @property
    def pending(self) -> Optional[Pulse]:
        """The pulse whose stop is still scheduled, if any."""
        if self._pending is not None and self._pending.done:
            return None
        return self._pending

    def is_vibration_supported(self) -> bool:
        return self.backend.supports_device(self.input_ref)

    def is_motor_supported(self) -> bool:
        return self.backend.supports_motor(self.input_ref, self.motor_ref)

    def get_intensity(self) -> Optional[float]:
        """Current motor intensity, or None if it has never been set."""
        return self.backend.get_motor(self.input_ref, self.motor_ref)

    def stop(self) -> None:
        """Stop the motor. Does not cancel the pending pulse's scheduled stop."""
        self._set_motor(STOPPED)

    def _set_motor(self, power: float) -> None:
        self.backend.set_motor(self.input_ref, self.motor_ref, power)

    def _cancel_pending(self) -> None:
        pulse = self.pending
        if pulse is None:
            return

        try:
            self.scheduler.cancel(pulse.handle)
        except Exception as e:
            logger.debug(f"Ignoring failed cancellation of {pulse}: {e}")

        pulse._finish(PulseStatus.SUPERSEDED, self.scheduler.now())
        logger.debug(f"{self!r}: superseded pulse of {pulse.duration}s")

    def _on_pulse_elapsed(self, pulse: Pulse) -> None:
        # Stale stop of a superseded pulse whose cancellation failed
        if pulse.done:
            return
        self.stop()
        pulse._finish(PulseStatus.COMPLETED, self.scheduler.now())
        logger.debug(f"{self!r}: pulse of {pulse.duration}s completed")

    def start_pulse(self, duration: float) -> Optional[Pulse]:
        """
        Drive the motor at full intensity and schedule its stop.

        Args:
            duration: Seconds before the motor stops (finite, >= 0)

        Returns:
            The new Pulse, or None if vibration or the motor is unsupported

        Raises:
            ValueError: If duration is negative, infinite, NaN or not a number
        """
        duration = validate_duration(duration)

        if not self.is_vibration_supported() or not self.is_motor_supported():
            logger.debug(f"{self!r}: haptics unsupported, pulse skipped")
            return None

        # Schedule the stop first: if scheduling fails the motor is never started
        pulse = Pulse(self.input_ref, self.motor_ref, duration, self.scheduler.now())
        pulse.handle = self.scheduler.call_later(duration, lambda: self._on_pulse_elapsed(pulse))

        self._cancel_pending()
        self._set_motor(FULL_INTENSITY)
        self._pending = pulse

        logger.debug(f"{self!r}: pulse of {duration}s started")
        return pulse

    async def play_pulse(self, duration: float, blocking: bool = False) -> Optional[Pulse]:
        """
        Play a timed pulse, optionally waiting for it to finish.

        Args:
            duration: Seconds before the motor stops (finite, >= 0)
            blocking: If True, return only after the pulse completed or was
                      superseded by a newer pulse

        Returns:
            The Pulse (check .status after a blocking call), or None if
            vibration or the motor is unsupported
        """
        pulse = self.start_pulse(duration)
        if pulse is not None and blocking:
            await pulse.wait()
        return pulse

    async def play_preset(self, preset: "Preset", blocking: bool = False) -> Optional[Pulse]:
        """
        Play a preset such as short_vibration or long_vibration.

        The preset decides the pulse parameters and calls play_pulse().
        """
        return await preset(self, blocking)

    def __repr__(self) -> str:
        return f"<HapticPulse(input_ref={self.input_ref!r}, motor_ref={str(self.motor_ref)!r})>"
