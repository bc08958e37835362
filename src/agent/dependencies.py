# =============================================================================
# agent/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for settings and the Gemini credential.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from agent.config import Settings, get_settings
from agent.exceptions import MissingCredentialError


SettingsDep = Annotated[Settings, Depends(get_settings)]


def require_api_key(settings: SettingsDep) -> str:
    """
    Return the Gemini API key, or fail the request if it is missing.

    This is the first point where a missing credential is detected.

    Raises:
        MissingCredentialError: If GEMINI_API_KEY is empty
    """
    if not settings.has_api_key:
        raise MissingCredentialError()
    return settings.GEMINI_API_KEY


# Type alias for dependency injection
ApiKeyDep = Annotated[str, Depends(require_api_key)]
