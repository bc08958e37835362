# =============================================================================
# launcher/ - Backend Startup Bootstrapper
# =============================================================================
# This package prepares the process environment and starts the backend server:
# - config.py: Reads the environment and builds an immutable LaunchConfig
# - server.py: Hands the process over to uvicorn
# - exceptions.py: Errors raised before the server is started
#
# The launcher never validates the credential itself; that is left to the
# server application (src/agent/).
# =============================================================================

from launcher.config import (
    APP_ENTRY_POINT,
    BIND_HOST,
    DEFAULT_PORT,
    LaunchConfig,
    LauncherSettings,
    resolve_launch_config,
)
from launcher.exceptions import InvalidPortError, LauncherError
from launcher.server import extend_sys_path, main, serve

__all__ = [
    # Config
    "APP_ENTRY_POINT",
    "BIND_HOST",
    "DEFAULT_PORT",
    "LaunchConfig",
    "LauncherSettings",
    "resolve_launch_config",
    # Errors
    "InvalidPortError",
    "LauncherError",
    # Server
    "extend_sys_path",
    "main",
    "serve",
]
