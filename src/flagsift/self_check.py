"""Built-in self-check run for flagsift (``flagsift -test``)."""

import logging

from .argument_classifier import ArgumentClassifier
from .flag_defaults import SELF_CHECK_FLAG
from .types import ExitCode, TokenList


class CheckRun:
    """Accumulates the outcome of independent checks."""

    def __init__(self):
        self.checks = 0
        self.failures: list[str] = []

    def check_that(self, expr: bool, description: str) -> bool:
        """
        Record one check.

        A failed check is logged and marks the whole run as failed; later
        checks still run.
        """
        self.checks += 1
        if not expr:
            self.failures.append(description)
            logging.error(f"check failed: {description}")
            return False
        return True

    @property
    def passed(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> ExitCode:
        return 0 if self.passed else 1


def is_self_check_requested(argv: TokenList) -> bool:
    """Check if the first argument after the program name requests a self-check."""
    return len(argv) >= 2 and argv[1] == SELF_CHECK_FLAG


def run_self_checks(run: CheckRun | None = None) -> CheckRun:
    """Exercise the classifier against fixed scenarios."""
    run = run or CheckRun()

    registry = {"-a": False, "-b": False}
    positionals = ArgumentClassifier.classify(
        ["myexe", "-b", "--", "-a", "2"], registry
    )
    run.check_that(positionals == ["myexe", "-a", "2"], "escape marker positionals")
    run.check_that(registry == {"-a": False, "-b": True}, "flags before escape marker")

    registry = {"-a": True, "-b": True, "-c": False, "-d": False}
    positionals = ArgumentClassifier.classify(
        ["myexe", "-a=0", "-b=false", "-c=1", "-d=true"], registry
    )
    run.check_that(positionals == ["myexe"], "assigned flags are not positionals")
    run.check_that(
        registry == {"-a": False, "-b": False, "-c": True, "-d": True},
        "assigned flag values",
    )

    registry = {"-a": False}
    ArgumentClassifier.classify(["-a", "-a=false", "-a"], registry)
    run.check_that(registry["-a"] is True, "last flag occurrence wins")

    registry = {"-a": False}
    positionals = ArgumentClassifier.classify(["-z"], registry)
    run.check_that(positionals == [], "unknown flag is not positional")
    run.check_that(registry == {"-a": False}, "unknown flag is not recorded")

    registry = {"-a": True}
    ArgumentClassifier.classify(["-a=maybe"], registry)
    run.check_that(registry["-a"] is True, "unrecognized value keeps prior value")

    run.check_that(
        ArgumentClassifier.classify(["x", "-a", "y"]) == ["x", "y"],
        "positional order is preserved",
    )
    run.check_that(
        ArgumentClassifier.classify(["", "--", "--"]) == ["", "--"],
        "empty token and repeated escape marker are positional",
    )
    run.check_that(ArgumentClassifier.classify([]) == [], "empty input")

    return run
