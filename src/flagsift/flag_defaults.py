"""Built-in flag registry defaults for flagsift."""

from .types import FlagRegistry

DEFAULT_FLAG_REGISTRY: FlagRegistry = {
    "-a": False,
    "-b": False,
    "-c": False,
    "-d": False,
}

SELF_CHECK_FLAG = "-test"
