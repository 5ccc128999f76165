"""Haptic backend registry."""

import logging
import os

from hapticpulse.backends.base import HapticBackend
from hapticpulse.backends.pygame_gamepad import PygameBackend
from hapticpulse.backends.simulated import SimulatedBackend

logger = logging.getLogger("hapticpulse.backends")

# Registry of available backends
_BACKENDS: list[tuple[str, type[HapticBackend]]] = [
    ("pygame", PygameBackend),
    ("simulated", SimulatedBackend),
]

# Backends probed during auto-detection (real hardware only)
_AUTO_DETECT: tuple[str, ...] = ("pygame",)


def get_backend(name: str | None = None) -> HapticBackend | None:
    """Get a haptic backend by name, or auto-detect from environment.

    Args:
        name: Backend name (e.g., "pygame", "simulated"). If None, use
              the HAPTIC_BACKEND env var or probe hardware backends.

    Returns:
        Configured HapticBackend instance, or None if no backend available.
    """
    # Explicit override
    name = name or os.environ.get("HAPTIC_BACKEND")

    if name:
        for backend_name, backend_cls in _BACKENDS:
            if backend_name == name:
                return backend_cls.from_env()
        logger.warning(f"Unknown haptic backend: {name}")
        return None

    # Auto-detect: try each hardware backend in order
    for backend_name, backend_cls in _BACKENDS:
        if backend_name not in _AUTO_DETECT:
            continue
        backend = backend_cls.from_env()
        if backend is not None:
            logger.debug(f"Auto-detected haptic backend: {backend_name}")
            return backend

    return None


# Shared backend for controllers created without one
_default_backend: HapticBackend | None = None


def get_default_backend() -> HapticBackend | None:
    """
    Get the process-wide backend used by controllers (singleton pattern).

    All default controllers share one instance, so motors on the same
    gamepad see each other's levels. A backend is cached once found;
    while none is available every call probes again.

    Returns:
        The shared HapticBackend, or None if no backend available.
    """
    global _default_backend
    if _default_backend is None:
        _default_backend = get_backend()
    return _default_backend


def reset_default_backend() -> None:
    """Forget the shared backend. Useful for testing or after hotplug."""
    global _default_backend
    _default_backend = None


def available_backends() -> list[str]:
    """Names accepted by get_backend()."""
    return [backend_name for backend_name, _ in _BACKENDS]


__all__ = [
    "HapticBackend",
    "PygameBackend",
    "SimulatedBackend",
    "available_backends",
    "get_backend",
    "get_default_backend",
    "reset_default_backend",
]
