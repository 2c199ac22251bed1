"""Unit tests for the PunycodeMCPServer class.

This test suite covers:
- Initialization and configuration loading
- Test vector manager setup
- Tool, prompt and resource registration
- Resource implementations
- Server start/stop lifecycle
"""

import asyncio
import os
import signal
import tempfile
from unittest.mock import AsyncMock, patch

import pytest
from fastmcp import FastMCP

from punycode_mcp_server.server import PunycodeMCPServer

DEFAULT_TEST_CONFIG = """
server:
  host: "127.0.0.1"
  port: 3000

logging:
  level: "debug"

features:
  label_details: true
  self_test: true
  vector_resources: true
"""


@pytest.fixture
def temp_config():
    """Create a temporary config file for tests."""
    config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    config.write(DEFAULT_TEST_CONFIG)
    config.close()
    yield config.name
    os.unlink(config.name)


@pytest.fixture
def server(temp_config):
    """Create test server."""
    return PunycodeMCPServer(config_path=temp_config)


class TestPunycodeMCPServerInitialization:
    """Test suite for PunycodeMCPServer initialization."""

    @pytest.mark.server
    @pytest.mark.unit
    def test_initialization_with_valid_config(self, server, temp_config):
        """Test that server initializes successfully with valid config."""
        assert server.config_path == temp_config
        assert isinstance(server.server, FastMCP)
        assert hasattr(server, "logger")
        assert server.config["features"]["self_test"] is True

    @pytest.mark.server
    @pytest.mark.unit
    def test_missing_config_uses_defaults(self):
        """Test that a missing config file gives an empty config."""
        server = PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")

        assert server.config == {}
        assert server.vector_manager is not None

    @pytest.mark.server
    @pytest.mark.unit
    def test_invalid_yaml_uses_defaults(self):
        """Test that malformed YAML gives an empty config."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.write("features: [unclosed\n")
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config == {}
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_empty_config_file(self):
        """Test that an empty config file gives an empty config."""
        config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
        config.close()

        try:
            server = PunycodeMCPServer(config_path=config.name)
            assert server.config == {}
        finally:
            os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_bundled_vectors_loaded(self, server):
        """Test that the default vector directory is the bundled one."""
        assert server.vector_manager.get_sources() == ["domains", "rfc3492"]

    @pytest.mark.server
    @pytest.mark.unit
    def test_custom_vector_directory(self):
        """Test that vectors.directory in the config is honoured."""
        with tempfile.TemporaryDirectory() as vector_dir:
            config = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
            config.write(f"vectors:\n  directory: '{vector_dir}'\n")
            config.close()
            try:
                server = PunycodeMCPServer(config_path=config.name)
                assert server.vector_manager.vector_dir == vector_dir
                assert server.vector_manager.get_all_vectors() == []
            finally:
                os.unlink(config.name)

    @pytest.mark.server
    @pytest.mark.unit
    def test_log_level(self, server):
        """Test the log level is read from config and upper-cased."""
        assert server.log_level == "DEBUG"


class TestPunycodeMCPServerRegistration:
    """Test suite for component registration."""

    @pytest.mark.server
    @pytest.mark.unit
    def test_vector_resources_follow_feature_flag(self, temp_config):
        """Test that vector resources are only registered when enabled."""
        with patch.object(PunycodeMCPServer, "register_vector_resources") as mock_register:
            PunycodeMCPServer(config_path=temp_config)
            mock_register.assert_called_once()

        with patch.object(PunycodeMCPServer, "register_vector_resources") as mock_register:
            PunycodeMCPServer(config_path="/nonexistent/path/config.yaml")
            mock_register.assert_not_called()

    @pytest.mark.server
    @pytest.mark.unit
    def test_all_registrations_called(self, temp_config):
        """Test that tools, prompts and codec resources are registered."""
        with patch.object(PunycodeMCPServer, "register_tools") as tools, patch.object(
            PunycodeMCPServer, "register_tools_prompts"
        ) as prompts, patch.object(PunycodeMCPServer, "register_codec_resources") as resources:
            PunycodeMCPServer(config_path=temp_config)

        tools.assert_called_once()
        prompts.assert_called_once()
        resources.assert_called_once()


class TestPunycodeMCPServerResources:
    """Test suite for resource implementations."""

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_parameters(self, server):
        """Test the codec parameter resource."""
        parameters = await server._get_parameters_impl()

        assert parameters["base"] == 36
        assert parameters["initial_bias"] == 72
        assert parameters["prefix"] == "xn--"
        assert parameters["label_length"] == {"min": 1, "max": 63}

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_all_vectors(self, server):
        """Test the vector listing resource."""
        result = await server._get_vectors_impl()

        assert result["count"] == 26
        assert result["sources"] == ["domains", "rfc3492"]

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_vectors_by_source(self, server):
        """Test the per-source vector resource."""
        result = await server._get_vectors_by_source_impl("domains")

        assert result["source"] == "domains"
        assert result["count"] == 9

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_vectors_by_unknown_source(self, server):
        """Test the per-source resource for an unknown source."""
        result = await server._get_vectors_by_source_impl("nope")

        assert "error" in result
        assert result["available_sources"] == ["domains", "rfc3492"]


class TestPunycodeMCPServerLifecycle:
    """Test suite for server start/stop."""

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_start_uses_config(self, server):
        """Test that start() takes host and port from the config."""
        with patch.object(server, "setup_signal_handlers"), patch.object(
            server.server, "run_async", new_callable=AsyncMock
        ) as mock_run:
            await server.start()

        mock_run.assert_called_once_with(
            transport="http", host="127.0.0.1", port=3000, log_level="DEBUG"
        )

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_start_arguments_override_config(self, server):
        """Test that explicit host and port win over the config."""
        with patch.object(server, "setup_signal_handlers"), patch.object(
            server.server, "run_async", new_callable=AsyncMock
        ) as mock_run:
            await server.start(host="::1", port=9999)

        mock_run.assert_called_once_with(
            transport="http", host="::1", port=9999, log_level="DEBUG"
        )

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_start_error_stops_and_raises(self, server):
        """Test that a startup error stops the server and propagates."""
        with patch.object(server, "setup_signal_handlers"), patch.object(
            server.server, "run_async", new_callable=AsyncMock, side_effect=OSError("in use")
        ), patch.object(server, "stop", new_callable=AsyncMock) as mock_stop:
            with pytest.raises(OSError):
                await server.start()

        mock_stop.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_signal_handler_calls_stop(self, server):
        """Test that signal handler calls stop."""
        with patch.object(server, "stop", new_callable=AsyncMock) as mock_stop:
            await server._signal_handler(signal.SIGINT)
            mock_stop.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_stop_graceful_shutdown(self, server):
        """Test that stop() completes without pending tasks."""
        await server.stop()

    @pytest.mark.asyncio
    @pytest.mark.server
    async def test_stop_cancels_pending_tasks(self, server):
        """Test that stop() cancels tasks still running on the loop."""
        task = asyncio.create_task(asyncio.sleep(60))
        await asyncio.sleep(0)

        await server.stop()

        assert task.cancelled()
