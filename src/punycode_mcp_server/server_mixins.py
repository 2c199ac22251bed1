"""
Server Lifecycle Mixin classes for PunycodeMCPServer to separate concerns.
"""

import asyncio
import signal
import sys
from typing import Any


def _shutdown_signals() -> tuple[int, ...]:
    if sys.platform == "win32":
        return (signal.SIGINT, signal.SIGBREAK)
    return (signal.SIGINT, signal.SIGTERM)


class ServerLifecycleMixin:
    """Mixin for server lifecycle management (signals, startup, shutdown).

    Note: This mixin assumes the class has 'server' (FastMCP), 'config' (dict)
    and 'logger' attributes available when lifecycle methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary
    logger: Any  # Logger instance

    def setup_signal_handlers(self) -> None:
        """Set up signal handlers for graceful shutdown."""
        for sig in _shutdown_signals():
            try:
                asyncio.get_running_loop().add_signal_handler(
                    sig, lambda s=sig: asyncio.create_task(self._signal_handler(s))
                )
            except NotImplementedError:
                signal.signal(
                    sig, lambda s, f: asyncio.create_task(self._signal_handler(s))
                )

    async def _signal_handler(self, sig: int) -> None:
        """Handle shutdown signals.

        Args:
            sig: Signal number that triggered the handler
        """
        sig_name = signal.Signals(sig).name
        self.logger.info("Received shutdown signal %s", sig_name)
        await self.stop()

    async def start(self, host: str | None = None, port: int | None = None) -> None:
        """Start the MCP server using HTTP transport.

        Args:
            host: The host to bind to. Defaults to ``server.host`` from the
                config, then "0.0.0.0" (all interfaces)
            port: The port to listen on. Defaults to ``server.port`` from the
                config, then 3000
        """
        server_cfg = self.config.get("server", {})
        host = host or server_cfg.get("host", "0.0.0.0")
        port = port or int(server_cfg.get("port", 3000))

        self.setup_signal_handlers()
        try:
            self.logger.info("Starting Punycode MCP Server on %s:%d", host, port)
            await self.server.run_async(
                transport="http", host=host, port=port, log_level=self.log_level
            )
        except (OSError, RuntimeError) as e:
            self.logger.error("Error starting server: %s", e)
            await self.stop()
            raise
        except KeyboardInterrupt:
            self.logger.info("Received keyboard interrupt")
            await self.stop()

    @property
    def log_level(self) -> str:
        return str(self.config.get("logging", {}).get("level", "INFO")).upper()

    async def stop(self) -> None:
        """Cancel outstanding tasks and release the shutdown signals."""
        self.logger.info("Shutting down Punycode MCP Server...")
        current = asyncio.current_task()
        pending = [t for t in asyncio.all_tasks() if t is not current and not t.done()]
        for task in pending:
            task.cancel()
        if pending:
            self.logger.debug("Cancelling %d pending tasks", len(pending))
            _, still_running = await asyncio.wait(pending, timeout=5.0)
            if still_running:
                self.logger.warning("%d tasks did not stop in time", len(still_running))

        loop = asyncio.get_running_loop()
        for sig in _shutdown_signals():
            try:
                loop.remove_signal_handler(sig)
            except NotImplementedError:
                signal.signal(sig, signal.SIG_DFL)
        self.logger.info("Punycode MCP Server stopped")
