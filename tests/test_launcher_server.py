# =============================================================================
# tests/test_launcher_server.py - Server Handoff Tests
# =============================================================================
# This module contains tests for:
# - serve(): environment overrides, sys.path extension, uvicorn invocation
# - main(): banner, exit status on launcher errors, uvicorn failures
#
# uvicorn.run is mocked; no server is started.
# =============================================================================

import logging
import os
import sys
from unittest.mock import patch

import pytest

from launcher.config import resolve_launch_config
from launcher.server import extend_sys_path, main, serve


@pytest.fixture
def isolated_process(monkeypatch):
    """Restore os.environ and sys.path after the test."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    with patch.dict(os.environ):
        yield


# =============================================================================
# serve() Tests
# =============================================================================

class TestServe:
    """Test the uvicorn handoff."""

    def test_runs_app_on_all_interfaces(self, clean_env, tmp_path, isolated_process):
        """uvicorn.run gets the fixed app, 0.0.0.0 and the resolved port."""
        clean_env.setenv("PORT", "3000")
        config = resolve_launch_config(cwd=tmp_path)

        with patch("launcher.server.uvicorn.run") as mock_run:
            serve(config)

        mock_run.assert_called_once_with(
            "agent.app:app",
            host="0.0.0.0",
            port=3000,
            log_level="info",
        )

    def test_environment_applied_before_run(self, clean_env, tmp_path, isolated_process):
        """The server sees the fallback credential and extended PYTHONPATH."""
        clean_env.setenv("GOOGLE_API_KEY", "abc123")
        clean_env.setenv("PYTHONPATH", "/opt/lib")
        config = resolve_launch_config(cwd=tmp_path)
        seen = {}

        def fake_run(*args, **kwargs):
            seen["GEMINI_API_KEY"] = os.environ.get("GEMINI_API_KEY")
            seen["PYTHONPATH"] = os.environ.get("PYTHONPATH")
            seen["in_sys_path"] = str(tmp_path / "src") in sys.path

        with patch("launcher.server.uvicorn.run", side_effect=fake_run):
            serve(config)

        assert seen["GEMINI_API_KEY"] == "abc123"
        assert seen["PYTHONPATH"] == f"/opt/lib{os.pathsep}{tmp_path / 'src'}"
        assert seen["in_sys_path"] is True

    def test_missing_credential_not_written(self, clean_env, tmp_path, isolated_process):
        """Without any credential GEMINI_API_KEY stays absent."""
        config = resolve_launch_config(cwd=tmp_path)

        with patch("launcher.server.uvicorn.run"):
            serve(config)

        assert "GEMINI_API_KEY" not in os.environ

    def test_other_variables_pass_through(self, clean_env, tmp_path, isolated_process):
        """Unrelated variables such as DATABASE_URI are untouched."""
        clean_env.setenv("DATABASE_URI", "postgresql://db/app")
        config = resolve_launch_config(cwd=tmp_path)

        with patch("launcher.server.uvicorn.run"):
            serve(config)

        assert os.environ["DATABASE_URI"] == "postgresql://db/app"


class TestExtendSysPath:
    """Test in-process search path extension."""

    def test_appends_missing_entries_once(self, clean_env, tmp_path, isolated_process):
        """Entries are appended to the end and not duplicated."""
        config = resolve_launch_config(cwd=tmp_path)

        extend_sys_path(config)
        extend_sys_path(config)

        entry = str(tmp_path / "src")
        assert sys.path[-1] == entry
        assert sys.path.count(entry) == 1


# =============================================================================
# main() Tests
# =============================================================================

class TestMain:
    """Test the start-backend entry point."""

    def test_starts_server(self, clean_env, tmp_path, isolated_process, capsys):
        """A valid environment prints the banner and serves."""
        clean_env.chdir(tmp_path)
        clean_env.setenv("GOOGLE_API_KEY", "abc123")

        with patch("launcher.server.uvicorn.run") as mock_run:
            main()

        assert mock_run.call_args.kwargs["port"] == 8080
        output = capsys.readouterr().out
        assert "0.0.0.0:8080" in output
        assert "GEMINI_API_KEY: configured" in output
        assert "abc123" not in output

    def test_banner_reports_missing_credential(self, clean_env, tmp_path, isolated_process, capsys):
        """The banner says NOT SET but startup continues."""
        clean_env.chdir(tmp_path)

        with patch("launcher.server.uvicorn.run") as mock_run:
            main()

        mock_run.assert_called_once()
        assert "GEMINI_API_KEY: NOT SET" in capsys.readouterr().out

    def test_invalid_port_exits_nonzero(self, clean_env, tmp_path, isolated_process):
        """A bad PORT stops before uvicorn with exit status 1."""
        clean_env.chdir(tmp_path)
        clean_env.setenv("PORT", "not-a-port")

        with patch("launcher.server.uvicorn.run") as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_run.assert_not_called()

    def test_server_failure_propagates(self, clean_env, tmp_path, isolated_process):
        """uvicorn's own exit status (e.g. port in use) is not swallowed or retried."""
        clean_env.chdir(tmp_path)

        with patch("launcher.server.uvicorn.run", side_effect=SystemExit(1)) as mock_run:
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        mock_run.assert_called_once()

    def test_debug_applies_to_launcher_and_uvicorn(self, clean_env, tmp_path, isolated_process):
        """DEBUG is parsed once; any truthy form enables debug logging for both."""
        clean_env.chdir(tmp_path)
        clean_env.setenv("DEBUG", "y")

        with patch("launcher.server.logging.basicConfig") as mock_basic_config:
            with patch("launcher.server.uvicorn.run") as mock_run:
                main()

        assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG
        assert mock_run.call_args.kwargs["log_level"] == "debug"

    def test_default_logging_level(self, clean_env, tmp_path, isolated_process):
        clean_env.chdir(tmp_path)

        with patch("launcher.server.logging.basicConfig") as mock_basic_config:
            with patch("launcher.server.uvicorn.run") as mock_run:
                main()

        assert mock_basic_config.call_args.kwargs["level"] == logging.INFO
        assert mock_run.call_args.kwargs["log_level"] == "info"
