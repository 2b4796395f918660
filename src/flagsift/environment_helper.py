"""Environment variable operations for flagsift."""

import os
import sys

TRUTHY_ENV_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when FLAGSIFT_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug output is requested via FLAGSIFT_DEBUG."""
        return os.environ.get("FLAGSIFT_DEBUG", "").lower() in TRUTHY_ENV_VALUES

    @staticmethod
    def get_config_override() -> str | None:
        """Get the explicit config file path from FLAGSIFT_CONFIG, if set."""
        value = os.environ.get("FLAGSIFT_CONFIG", "")
        if not value.strip():
            return None
        return value
