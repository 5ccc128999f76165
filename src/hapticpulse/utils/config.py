"""
Configuration Management for hapticpulse

Loads configuration from environment variables with sensible defaults.
Handles path expansion for the optional log file.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file from project root (if it exists)
# This should run once when the module is imported
_project_root = Path(
    __file__
).parent.parent.parent.parent  # hapticpulse/utils -> src/hapticpulse/utils -> src -> project root
_env_path = _project_root / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def expand_path(path: str) -> str:
    """
    Expand user home directory (~) and environment variables in a path.

    Args:
        path: Path string potentially containing ~ or $VAR

    Returns:
        Fully expanded absolute path
    """
    return str(Path(os.path.expandvars(os.path.expanduser(path))).resolve())


class HapticConfig:
    """
    Central configuration for hapticpulse.

    Loads settings from environment variables with fallback defaults.
    """

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Backend selection (None = auto-detect)
        self.backend: Optional[str] = os.getenv("HAPTIC_BACKEND") or None

        # Defaults for the command line
        self.input_ref: int = int(os.getenv("HAPTIC_INPUT", "0"))
        self.motor: str = os.getenv("HAPTIC_MOTOR", "large").lower()

        # Logging
        self.log_level: str = os.getenv("HAPTIC_LOG_LEVEL", "INFO").upper()
        log_file_env = os.getenv("HAPTIC_LOG_FILE")
        self.log_file: Optional[str] = expand_path(log_file_env) if log_file_env else None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"<HapticConfig(\n"
            f"  backend={self.backend},\n"
            f"  input_ref={self.input_ref},\n"
            f"  motor={self.motor},\n"
            f"  log_level={self.log_level},\n"
            f"  log_file={self.log_file}\n"
            f")>"
        )


# Global configuration instance
_config: Optional[HapticConfig] = None


def get_config() -> HapticConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        The global HapticConfig instance

    Example:
        >>> from hapticpulse.utils.config import get_config
        >>> config = get_config()
        >>> print(config.motor)
        large
    """
    global _config
    if _config is None:
        _config = HapticConfig()
    return _config


def reload_config() -> HapticConfig:
    """
    Force reload of configuration from environment variables.

    Useful for testing or when environment changes at runtime.

    Returns:
        Newly created HapticConfig instance
    """
    global _config
    _config = HapticConfig()
    return _config
