"""Configuration management functionality for flagsift."""

from pathlib import Path

from .argument_classifier import ArgumentClassifier
from .environment_helper import EnvironmentHelper, debug_log
from .exceptions import ConfigNotFoundError, InvalidConfigError
from .flag_defaults import DEFAULT_FLAG_REGISTRY
from .path_helper import PathHelper
from .types import FlagRegistry

MAX_CONFIG_SIZE = 1024 * 1024


class ConfigManager:
    """Manages loading the flag registry seed from a config file."""

    @staticmethod
    def find_config_file() -> Path | None:
        """
        Find the flagsift.conf config file path.

        Raises:
            ConfigNotFoundError: If FLAGSIFT_CONFIG names a missing file
        """
        override = EnvironmentHelper.get_config_override()
        if override:
            config_path = Path(override)
            if not config_path.is_file():
                raise ConfigNotFoundError(override)
            return config_path

        return PathHelper.get_config_path()

    @staticmethod
    def default_registry() -> FlagRegistry:
        """Return a fresh copy of the built-in flag defaults."""
        return dict(DEFAULT_FLAG_REGISTRY)

    @staticmethod
    def load_registry() -> FlagRegistry:
        """Load the registry from the config file, or fall back to defaults."""
        config_file = ConfigManager.find_config_file()
        if config_file is None:
            debug_log("no config file found, using built-in flag defaults")
            return ConfigManager.default_registry()

        debug_log(f"loading flag defaults from {config_file}")
        return ConfigManager.load_config(config_file)

    @staticmethod
    def load_config(config_file: Path) -> FlagRegistry:
        """
        Load flag names and their default values from a config file.

        Args:
            config_file: Path to the configuration file

        Returns:
            FlagRegistry mapping each declared flag to its default

        Raises:
            InvalidConfigError: If config file has invalid format or content
        """
        registry: FlagRegistry = {}

        try:
            file_size = config_file.stat().st_size
            if file_size > MAX_CONFIG_SIZE:
                raise InvalidConfigError(
                    str(config_file),
                    message=f"Config file too large ({file_size} bytes)",
                )

            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), registry
                    )
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Failed to read config: {e}"
            ) from e

        return registry

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, registry: FlagRegistry
    ) -> None:
        """Process a single ``-name[=value]`` configuration line."""
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith("#"):
            return

        name, value_text = ArgumentClassifier.split_flag(line)
        name = name.strip()

        if not ConfigManager._is_valid_flag_name(name):
            raise InvalidConfigError(
                config_file, line_num, f"Invalid flag name: '{name}'"
            )
        if name in registry:
            raise InvalidConfigError(
                config_file, line_num, f"Duplicate flag name: '{name}'"
            )

        if value_text is None:
            registry[name] = False
            return

        value = ArgumentClassifier.resolve_flag_value(value_text.strip())
        if value is None:
            raise InvalidConfigError(
                config_file,
                line_num,
                f"Invalid default for '{name}': '{value_text.strip()}'",
            )
        registry[name] = value

    @staticmethod
    def _is_valid_flag_name(name: str) -> bool:
        """Check that a name is one the classifier can ever match."""
        return ArgumentClassifier.is_flag_token(name) and not any(
            ch.isspace() for ch in name
        )
