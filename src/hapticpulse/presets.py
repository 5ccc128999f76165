"""
Haptic presets.

A preset is an async callable taking (controller, blocking) that plays a
fixed pulse. Pass one to HapticPulse.play_preset() or call it directly.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from hapticpulse.controller import HapticPulse, Preset, Pulse

SHORT_DURATION = 0.025
LONG_DURATION = 1.0


async def short_vibration(controller: "HapticPulse", blocking: bool = False) -> Optional["Pulse"]:
    """A 25ms tap."""
    return await controller.play_pulse(SHORT_DURATION, blocking)


async def long_vibration(controller: "HapticPulse", blocking: bool = False) -> Optional["Pulse"]:
    """A one second buzz."""
    return await controller.play_pulse(LONG_DURATION, blocking)


PRESETS: dict[str, "Preset"] = {
    "short": short_vibration,
    "long": long_vibration,
}


def get_preset(name: str) -> "Preset":
    """
    Look up a preset by name.

    Raises:
        KeyError: If no preset has that name
    """
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown preset '{name}'. Available: {', '.join(sorted(PRESETS))}") from None
