# =============================================================================
# agent/ - Backend Server Application
# =============================================================================
# The FastAPI application started by the launcher (agent.app:app):
# - app.py: App entry point, lifespan, middleware, error handlers
# - config.py: Server settings loaded from environment variables
# - exceptions.py: Structured API errors
# - dependencies.py: Shared FastAPI dependencies (credential lookup)
# - routers/: API endpoints
# =============================================================================

__version__ = "1.0.0"
