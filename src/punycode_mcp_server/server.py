"""
Punycode MCP Server - An MCP server for converting internationalized domain names.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from punycode_mcp_server.prompt_mixins import PromptRegistrationMixin
from punycode_mcp_server.resource_mixins import ResourceRegistrationMixin
from punycode_mcp_server.server_mixins import ServerLifecycleMixin
from punycode_mcp_server.tool_mixins import ToolRegistrationMixin
from punycode_mcp_server.vectors import VectorManager

logger = get_logger(__name__)


class PunycodeMCPServer(
    ToolRegistrationMixin,
    PromptRegistrationMixin,
    ResourceRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for Punycode conversions.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers encode/decode tools
    - PromptRegistrationMixin: Registers prompts
    - ResourceRegistrationMixin: Registers codec parameter and test vector resources
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = "config/config.yaml") -> None:
        """Initialize the Punycode MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.logger = get_logger(__name__)
        try:
            with open(self.config_path, encoding="utf-8") as f:
                self.config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", self.config_path)
            self.config = {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            self.config = {}

        self.server = FastMCP(
            name="Punycode MCP Server",
            instructions=(
                "An MCP server that converts internationalized domain names to and "
                "from their punycode (xn--) ASCII form."
            ),
        )

        # Load test vectors before registering resources
        self.initialize_vectors()

        # Register all server components (tools, prompts, resources)
        # These must be called after self.server and self.config are initialized
        self._register_all_components()

    def initialize_vectors(self) -> None:
        """Initialize the test vector manager."""
        vector_dir = self.config.get("vectors", {}).get("directory")
        self.vector_manager = VectorManager(vector_dir)
        self.logger.info(
            "Loaded %d test vectors from %s",
            len(self.vector_manager.get_all_vectors()),
            self.vector_manager.vector_dir,
        )

    def _register_all_components(self) -> None:
        """Register all tools, prompts, and resources with the server.

        This method coordinates registration across all mixins.
        Must be called after self.server and self.config are initialized.
        """
        self.register_tools()
        self.register_tools_prompts()
        self.register_codec_resources()
        # Register vector resources if enabled in config
        if self.config.get("features", {}).get("vector_resources", False):
            self.register_vector_resources()


async def main(config_path: str = "config/config.yaml") -> None:
    """Main entry point for the Punycode MCP server."""
    server = PunycodeMCPServer(config_path)
    try:
        await server.start()
    except KeyboardInterrupt:
        await server.stop()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        await server.stop()
        sys.exit(1)


def run_server() -> None:
    """Run the server with proper asyncio event loop handling."""
    loop = None
    try:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
            asyncio.set_event_loop(loop)
        else:
            loop = asyncio.new_event_loop()
            asyncio.set_event_loop(loop)

        loop.run_until_complete(main())
    except KeyboardInterrupt:
        if loop is not None:
            loop.run_until_complete(asyncio.sleep(0))
    finally:
        if loop is not None:
            loop.close()


if __name__ == "__main__":
    run_server()
