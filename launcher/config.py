# =============================================================================
# launcher/config.py - Launch Configuration
# =============================================================================
# Reads the process environment once and turns it into an immutable
# LaunchConfig that the server handoff consumes.
#
# Resolution steps (in order):
# 1. Credential fallback: GOOGLE_API_KEY stands in for an unset GEMINI_API_KEY
# 2. Search path: <cwd>/src is appended to PYTHONPATH
# 3. Port: PORT if set, otherwise 8080
#
# Usage:
#   from launcher.config import resolve_launch_config
#   config = resolve_launch_config()
#   print(config.port)
# =============================================================================

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from launcher.exceptions import InvalidPortError, LauncherError

# Fixed application entry point started by the handoff
APP_ENTRY_POINT = "agent.app:app"

# Listen on all interfaces so the container platform can route traffic
BIND_HOST = "0.0.0.0"

DEFAULT_PORT = 8080

# Subdirectory of the working directory holding the server packages
SOURCE_SUBDIR = "src"


class LauncherSettings(BaseSettings):
    """
    Raw environment input for the launcher.

    Empty variables are treated as unset, so `PORT=` behaves like no PORT
    and `GEMINI_API_KEY=` lets the alternate credential through.
    """

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    GEMINI_API_KEY: str = Field(
        default="",
        description="Primary Gemini API key read by the server"
    )

    GOOGLE_API_KEY: str = Field(
        default="",
        description="Alternate name for the same credential"
    )

    # -------------------------------------------------------------------------
    # Process Settings
    # -------------------------------------------------------------------------

    PYTHONPATH: str = Field(
        default="",
        description="Existing module search path, preserved and extended"
    )

    # Kept as a string so a bad value produces InvalidPortError, not a
    # generic validation failure
    PORT: str | None = Field(
        default=None,
        description="Listen port override (default 8080)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging for the launcher and uvicorn"
    )

    model_config = SettingsConfigDict(
        # The process environment is the only input; no .env file
        env_file=None,
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )


class LaunchConfig(BaseModel):
    """
    Immutable result of environment resolution.

    Built once at startup and passed to serve(). The credential may be empty:
    detecting a missing key is the server's job, not the launcher's.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    source_dir: Path
    search_path: str
    host: str = BIND_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    app: str = APP_ENTRY_POINT
    log_level: str = "info"

    @property
    def has_api_key(self) -> bool:
        """Check if a credential was supplied under either name."""
        return bool(self.api_key)

    @property
    def search_path_entries(self) -> list[str]:
        """Split the search path into its non-empty entries."""
        return [entry for entry in self.search_path.split(os.pathsep) if entry]

    def environment_overrides(self) -> dict[str, str]:
        """
        Variables the handoff writes into the process environment.

        PYTHONPATH is always written. GEMINI_API_KEY is only written when a
        credential exists, so an empty environment never gains a key.
        Everything else passes through unmodified.
        """
        overrides = {"PYTHONPATH": self.search_path}
        if self.api_key:
            overrides["GEMINI_API_KEY"] = self.api_key
        return overrides


def _parse_port(raw: str | None) -> int:
    """Resolve PORT to an integer, falling back to the default."""
    if raw is None:
        return DEFAULT_PORT

    try:
        port = int(raw.strip())
    except ValueError:
        raise InvalidPortError(raw, "not an integer")

    if not 1 <= port <= 65535:
        raise InvalidPortError(raw, "out of range")

    return port


def _extend_search_path(existing: str, source_dir: Path) -> str:
    """Append source_dir to an existing path list without dropping entries."""
    entries = [existing] if existing else []
    entries.append(str(source_dir))
    return os.pathsep.join(entries)


def load_settings() -> LauncherSettings:
    """
    Read LauncherSettings from the current process environment.

    Raises:
        LauncherError: If a variable cannot be parsed (e.g. DEBUG=maybe)
    """
    try:
        return LauncherSettings()
    except ValidationError as e:
        raise LauncherError(
            message="Invalid launcher environment",
            code="INVALID_ENVIRONMENT",
            suggestion="Check DEBUG and PORT for typos",
            details={"errors": str(e)},
        )


def resolve_launch_config(
    settings: LauncherSettings | None = None,
    cwd: Path | None = None,
) -> LaunchConfig:
    """
    Build the LaunchConfig from environment settings.

    Args:
        settings: Parsed environment (read from os.environ if omitted)
        cwd: Working directory the src/ entry is relative to (default: os.getcwd())

    Returns:
        LaunchConfig ready for serve()

    Raises:
        InvalidPortError: If PORT is set but not a valid port number
        LauncherError: If the environment cannot be parsed

    Example:
        # GOOGLE_API_KEY=abc123, no GEMINI_API_KEY, no PORT
        config = resolve_launch_config()
        config.api_key  # "abc123"
        config.port     # 8080
    """
    if settings is None:
        settings = load_settings()
    if cwd is None:
        cwd = Path(os.getcwd())

    # 1. Credential fallback
    api_key = settings.GEMINI_API_KEY or settings.GOOGLE_API_KEY

    # 2. Search path extension
    source_dir = cwd / SOURCE_SUBDIR
    search_path = _extend_search_path(settings.PYTHONPATH, source_dir)

    # 3. Port resolution
    port = _parse_port(settings.PORT)

    return LaunchConfig(
        api_key=api_key,
        source_dir=source_dir,
        search_path=search_path,
        port=port,
        log_level="debug" if settings.DEBUG else "info",
    )
