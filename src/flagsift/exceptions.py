"""Custom exceptions for flagsift."""


class FlagsiftError(Exception):
    """Base exception for flagsift errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigNotFoundError(FlagsiftError):
    """Raised when an explicitly requested config file cannot be found."""

    def __init__(self, path: str | None = None):
        message = f"Config file not found{': ' + path if path else ''}"
        super().__init__(message)
        self.path = path


class InvalidConfigError(FlagsiftError):
    """Raised when config file has invalid format or content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num
