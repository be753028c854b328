# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, runtime state)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

from ..config import CatalogSettings
from ..controller import CatalogController
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import section as core_section
from ..logging import warn as core_warn

PACKAGE_LOGGER: Final[str] = "component_catalog"

EXIT_CATALOG_ERROR: Final[int] = 1
EXIT_CONFIG_ERROR: Final[int] = 2


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_CATALOG_ERROR) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences.

        Args:
            message: Text describing the warning condition.
        """

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences.

        Args:
            message: Text describing the successful state.
        """

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences.

        Args:
            message: Text describing the current state.
        """

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def section(self, title: str) -> None:
        """Render a section header honouring colour preferences.

        Args:
            title: Heading displayed above the following output.
        """

        core_section(title, use_color=self.use_color)


@dataclass(slots=True)
class CLIState:
    """Runtime objects shared by every command of one CLI invocation."""

    settings: CatalogSettings
    controller: CatalogController
    logger: CLILogger
    console: Console


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance for user-facing messages.
    """

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color)


def configure_debug_logging(console: Console) -> None:
    """Route package log records at ``DEBUG`` level through ``console``."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.setLevel(logging.DEBUG)


__all__ = [
    "EXIT_CATALOG_ERROR",
    "EXIT_CONFIG_ERROR",
    "CLIError",
    "CLILogger",
    "CLIState",
    "build_cli_logger",
    "configure_debug_logging",
]
