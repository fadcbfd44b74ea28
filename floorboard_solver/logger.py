# floorboard_solver/logger.py
# Lightweight logging utilities for the solver.
# info/warn can be silenced (--quiet); debug lines (annealing progress, batch
# chunking) only show with verbose on. Errors always go to stderr.

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable


@dataclass
class Logger:
    enabled: bool = True
    verbose: bool = False
    prefix: str = "[FLOOR]"

    def debug(self, msg: str) -> None:
        if self.enabled and self.verbose:
            print(f"{self.prefix} {msg}", file=sys.stdout, flush=True)

    def info(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} {msg}", file=sys.stdout, flush=True)

    def warn(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} WARNING: {msg}", file=sys.stderr)

    def error(self, msg: str) -> None:
        print(f"{self.prefix} ERROR: {msg}", file=sys.stderr)

    def warn_issues(self, issues: Iterable) -> None:
        """Print WARN-level ValidationIssues (errors are raised elsewhere)."""
        for issue in issues:
            if issue.level.upper() == "WARN":
                self.warn(f"{issue.field or 'input'}: {issue.message}")


# Global default logger
LOGGER = Logger(enabled=True)


def set_enabled(flag: bool) -> None:
    LOGGER.enabled = bool(flag)


def set_verbose(flag: bool) -> None:
    LOGGER.verbose = bool(flag)


def get_logger() -> Logger:
    return LOGGER
