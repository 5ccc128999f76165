"""CLI entry point for playing haptic pulses.

Usage:
    python -m hapticpulse --duration 0.5
    python -m hapticpulse --preset long --input 1 --motor small
    python -m hapticpulse --check
    HAPTIC_BACKEND=simulated python -m hapticpulse --duration 1
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from hapticpulse.backends import available_backends, get_backend
from hapticpulse.controller import HapticPulse
from hapticpulse.presets import PRESETS, get_preset
from hapticpulse.utils.config import get_config
from hapticpulse.utils.logging import LOG_LEVELS, setup_logging


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="hapticpulse",
        description="Play a timed vibration pulse on a gamepad motor.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--duration", type=float, default=None, help="Pulse duration in seconds")
    mode.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Named preset")
    mode.add_argument(
        "--check",
        action="store_true",
        help="Only report whether the device and motor support vibration",
    )
    parser.add_argument(
        "--input",
        type=int,
        default=config.input_ref,
        help=f"Input device index (default: {config.input_ref})",
    )
    parser.add_argument(
        "--motor",
        default=config.motor,
        help=f"Motor selector (default: {config.motor})",
    )
    parser.add_argument(
        "--backend",
        choices=available_backends(),
        default=config.backend,
        help="Haptic backend (default: auto-detect)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    return parser


async def run(args: argparse.Namespace) -> int:
    """Play the requested pulse and wait for it to finish."""
    logger = logging.getLogger("hapticpulse.main")

    backend = get_backend(args.backend)
    if backend is None:
        print("No haptic backend available.", file=sys.stderr)
        return 1
    logger.info(f"Backend: {backend.describe()}")

    controller = HapticPulse(args.input, args.motor, backend=backend)

    if args.check:
        device = controller.is_vibration_supported()
        motor = controller.is_motor_supported()
        print(f"vibration supported: {device}")
        print(f"motor supported: {motor}")
        return 0 if device and motor else 1

    try:
        if args.preset:
            pulse = await controller.play_preset(get_preset(args.preset), blocking=True)
        else:
            duration = args.duration if args.duration is not None else 1.0
            pulse = await controller.play_pulse(duration, blocking=True)
    except asyncio.CancelledError:
        # Interrupted mid-pulse: don't leave the motor running
        if controller.is_motor_supported():
            controller.stop()
        raise

    if pulse is None:
        print(f"Vibration not supported on input {args.input} motor {args.motor}.", file=sys.stderr)
        return 1

    result = pulse.result()
    logger.info(f"Pulse {result.status}: {result.duration}s on input {args.input} motor {args.motor}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and play a pulse."""
    args = build_parser().parse_args(argv)
    try:
        setup_logging(log_level=args.log_level, log_file=get_config().log_file, console=True)
        return asyncio.run(run(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
