# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up a development environment before any imports
# - Strips launcher/server variables so the host environment can't leak in
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# agent.app reads settings at import time

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")

import pytest

from agent.config import get_settings


LAUNCHER_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "PYTHONPATH", "PORT", "DEBUG")
SERVER_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "DATABASE_URI", "REDIS_URL", "GEMINI_MODEL")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Monkeypatch with every launcher variable removed from the environment."""
    for name in LAUNCHER_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def server_env(monkeypatch, tmp_path):
    """
    Monkeypatch for server tests.

    Removes server variables, forces development mode, runs in an empty
    directory so a developer .env is not read, and resets the cached
    settings before and after the test.
    """
    for name in SERVER_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
