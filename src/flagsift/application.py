#!/usr/bin/env python3
"""Main application orchestrator for flagsift."""

import logging
import sys
from typing import Optional

from .argument_classifier import ArgumentClassifier
from .classification_result import ClassificationResult
from .config_manager import ConfigManager
from .environment_helper import debug_log
from .exceptions import FlagsiftError
from .self_check import is_self_check_requested, run_self_checks
from .types import ExitCode, TokenList

UNEXPECTED_ERROR_EXIT_CODE = 2


def format_flag_value(value: bool) -> str:
    return "true" if value else "false"


def render_report(argv: TokenList, result: ClassificationResult) -> list[str]:
    """Render the raw tokens and their classification as report lines."""
    lines = [f"argc: {len(argv)}"]
    lines.extend(f"arg: {arg}" for arg in argv)
    lines.extend(f"positional: {arg}" for arg in result.positionals)
    lines.extend(
        f"flag: {name}={format_flag_value(value)}"
        for name, value in result.flags.items()
    )
    return lines


class Application:
    """Main application orchestrator."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        classifier: Optional[ArgumentClassifier] = None,
    ):
        self.config_manager = config_manager or ConfigManager()
        self.classifier = classifier or ArgumentClassifier()

    def run(self, argv: TokenList) -> ExitCode:
        """Run the application with the full invocation argv."""
        if is_self_check_requested(argv):
            run = run_self_checks()
            debug_log(f"self-check: {run.checks} checks, {len(run.failures)} failed")
            return run.exit_code

        registry = self.config_manager.load_registry()
        debug_log(f"recognized flags: {sorted(registry)}")

        result = self.classifier.parse(argv, registry)
        debug_log(
            f"classified {len(argv)} tokens: {len(result.positionals)} positional, "
            f"{result.flag_count} flag, escaped={result.escaped}"
        )

        for line in render_report(argv, result):
            print(line)
        return 0


def main() -> ExitCode:
    """Main entry point."""
    try:
        app = Application()
        return app.run(sys.argv)
    except FlagsiftError as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        return UNEXPECTED_ERROR_EXIT_CODE
