"""Path operations for flagsift."""

import os
from pathlib import Path

CONFIG_FILE_NAME = "flagsift.conf"


class PathHelper:
    """Utility class for path operations."""

    @staticmethod
    def get_config_path() -> Path | None:
        """Get the path to the config file in the standard locations."""
        # Check XDG_CONFIG_HOME first (standard location)
        if xdg_config_home := os.getenv("XDG_CONFIG_HOME"):
            config_path = Path(xdg_config_home) / CONFIG_FILE_NAME
            if config_path.is_file():
                return config_path

        # Fall back to HOME/.config/flagsift.conf
        home = os.getenv("HOME")
        if home:
            config_path = Path(home) / ".config" / CONFIG_FILE_NAME
            if config_path.is_file():
                return config_path

        return None
