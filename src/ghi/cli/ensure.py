"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar

import click

from ghi.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def fail(error_message: str) -> None:
        """Output styled error and exit unconditionally.

        Args:
            error_message: Error message to display.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: Always (with exit code 1)
        """
        user_output(click.style("Error: ", fg="red") + error_message)
        raise SystemExit(1)

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            Ensure.fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`,
        allowing the type checker to understand the value cannot be None after
        this call.

        Args:
            value: Value to check for None
            error_message: Error message to display if value is None.
                          "Error: " prefix will be added automatically in red.

        Returns:
            The value unchanged if not None (with narrowed type T)

        Raises:
            SystemExit: If value is None (with exit code 1)

        Example:
            >>> login = Ensure.not_none(ctx.issues.get_current_username(), "Not logged in")
        """
        if value is None:
            Ensure.fail(error_message)
        assert value is not None
        return value
