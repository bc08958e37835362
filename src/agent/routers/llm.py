# =============================================================================
# agent/routers/llm.py - LLM Configuration Endpoint
# =============================================================================
# Reports which model the agent talks to. Requires the Gemini credential, so
# this is where a missing key becomes a user-visible error.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from agent.dependencies import ApiKeyDep, SettingsDep

router = APIRouter()


class LLMInfoResponse(BaseModel):
    """LLM provider and model in use."""
    provider: str
    model: str
    credential: str


@router.get("/llm", response_model=LLMInfoResponse)
async def llm_info(settings: SettingsDep, api_key: ApiKeyDep):
    """Return the configured LLM provider and model."""
    return LLMInfoResponse(
        provider="gemini",
        model=settings.GEMINI_MODEL,
        credential="configured",
    )
