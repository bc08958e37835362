# =============================================================================
# launcher/exceptions.py - Launcher Errors
# =============================================================================
# Errors raised while preparing the launch configuration.
# Following the principle: "Errors should tell HOW to fix, not just WHAT failed."
#
# Failures of the server itself (bad module path, port already bound) are not
# wrapped here; they surface as uvicorn's own exit status.
# =============================================================================

from typing import Any


class LauncherError(Exception):
    """
    Base error for the startup bootstrapper.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "LAUNCHER_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class InvalidPortError(LauncherError):
    """Raised when PORT is set but is not a usable TCP port."""

    def __init__(self, value: str, error: str):
        super().__init__(
            message=f"Invalid PORT value: {value!r}",
            code="INVALID_PORT",
            suggestion="Set PORT to an integer between 1 and 65535, or unset it to use 8080",
            details={"value": value, "error": error},
        )
