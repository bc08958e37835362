# =============================================================================
# agent/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and a suggestion for how to fix them.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class AgentException(Exception):
    """
    Base exception for the agent server.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "AGENT_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration Exceptions
# =============================================================================

class MissingCredentialError(AgentException):
    """Raised when an endpoint needs the Gemini key and none is configured."""

    def __init__(self):
        super().__init__(
            message="Gemini API key is not configured",
            code="MISSING_CREDENTIAL",
            status_code=503,
            suggestion="Set GEMINI_API_KEY (or GOOGLE_API_KEY) and restart the server",
        )


class ConfigurationError(AgentException):
    """Raised at startup when required external dependencies are not configured."""

    def __init__(self, missing: list[str], environment: str):
        super().__init__(
            message=f"Missing required configuration: {', '.join(missing)}",
            code="CONFIGURATION_ERROR",
            status_code=500,
            suggestion="Provide the missing variables (or their secret references) and redeploy",
            details={"missing": missing, "environment": environment},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def agent_exception_handler(
    request: Request,
    exc: AgentException
) -> JSONResponse:
    """
    Convert AgentException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
