# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the agent backend:
# - test_launcher_config.py: Environment resolution (credential, path, port)
# - test_launcher_server.py: Server handoff and the start-backend entry point
# - test_agent_app.py: Server endpoints, credential checks, startup validation
#
# Run tests with: poetry run pytest
# =============================================================================
