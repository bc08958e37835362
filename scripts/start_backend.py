#!/usr/bin/env python3
# =============================================================================
# scripts/start_backend.py - Backend Server Entry Point
# =============================================================================
# Container entry command. Normalizes the environment and starts uvicorn
# serving agent.app:app on 0.0.0.0:$PORT (default 8080).
#
# Usage:
#   # From the project root
#   poetry run python scripts/start_backend.py
#
#   # Override the port
#   PORT=9090 poetry run python scripts/start_backend.py
#
# Environment:
#   - GEMINI_API_KEY (or GOOGLE_API_KEY) for the LLM credential
#   - PORT to change the listen port
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from launcher.server import main


if __name__ == "__main__":
    main()
