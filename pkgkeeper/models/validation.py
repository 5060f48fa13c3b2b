"""Validation outcome model."""

from __future__ import annotations

from typing import NamedTuple, Optional


class ValidationResult(NamedTuple):
    """Outcome of a single validation step.

    Attributes:
        is_success: Whether the step accepted its input.
        error_message: Human-readable reason, set only on failure.
    """

    is_success: bool
    error_message: Optional[str] = None

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful result."""
        return cls(is_success=True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        """Create a failed result carrying a message.

        Args:
            message: Why validation failed.

        Returns:
            Failed ValidationResult.
        """
        return cls(is_success=False, error_message=message)
