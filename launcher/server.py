# =============================================================================
# launcher/server.py - Server Handoff
# =============================================================================
# Applies a LaunchConfig to the running process and hands control to uvicorn.
#
# The handoff is one-way: uvicorn.run() owns the main thread until the server
# exits. There is no retry and no fallback port. If uvicorn cannot import the
# app or bind the port it exits non-zero, and that status becomes ours.
#
# Usage:
#   poetry run start-backend
#   poetry run python scripts/start_backend.py
# =============================================================================

import logging
import os
import sys

import uvicorn

from launcher.config import LaunchConfig, load_settings, resolve_launch_config
from launcher.exceptions import LauncherError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def extend_sys_path(config: LaunchConfig) -> None:
    """
    Make the search path importable in this interpreter.

    PYTHONPATH is only read at interpreter startup, so entries added by the
    launcher are appended to sys.path as well.
    """
    for entry in config.search_path_entries:
        if entry not in sys.path:
            sys.path.append(entry)


def serve(config: LaunchConfig) -> None:
    """
    Start the backend server and block until it exits.

    Args:
        config: Resolved launch configuration

    The environment overrides are written before uvicorn starts so the app
    (and any worker processes it spawns) see the same values.
    """
    os.environ.update(config.environment_overrides())
    extend_sys_path(config)

    logger.info(f"Starting {config.app} on {config.host}:{config.port}")

    uvicorn.run(
        config.app,
        host=config.host,
        port=config.port,
        log_level=config.log_level,
    )


def _print_banner(config: LaunchConfig) -> None:
    print("=" * 60)
    print("Agent Backend")
    print("=" * 60)
    print(f"  App: {config.app}")
    print(f"  Listening on: {config.host}:{config.port}")
    print(f"  GEMINI_API_KEY: {'configured' if config.has_api_key else 'NOT SET'}")
    print(f"  PYTHONPATH: {config.search_path}")
    print("=" * 60)
    sys.stdout.flush()


def main() -> None:
    """Resolve the environment and start the backend server."""
    try:
        settings = load_settings()
        logging.basicConfig(
            level=logging.DEBUG if settings.DEBUG else logging.INFO,
            format=LOG_FORMAT
        )
        config = resolve_launch_config(settings=settings)
    except LauncherError as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error(str(e))
        sys.exit(1)

    _print_banner(config)
    serve(config)


if __name__ == "__main__":
    main()
