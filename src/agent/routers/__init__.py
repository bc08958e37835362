# =============================================================================
# agent/routers/ - API Endpoint Definitions
# =============================================================================
# - health.py: Health, liveness and readiness probes
# - llm.py: LLM configuration (requires the Gemini credential)
# =============================================================================
