"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from punycode_mcp_server.tools import (
    punycode_decode_impl,
    punycode_encode_impl,
    punycode_label_details_impl,
    punycode_self_test_impl,
)
from punycode_mcp_server.typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP), 'config' (dict)
    and 'vector_manager' attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary
    vector_manager: Any  # VectorManager instance

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Use this tool to convert the specified internationalized domain name (IDN) "
                "into punycode format."
            ),
            tags=set(("idn", "punycode", "converter", "encode")),
            enabled=True,
        )
        async def punycode_encode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await punycode_encode_impl(domain)

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Use this tool to convert a punycode (xn--) domain name back into "
                "its Unicode form."
            ),
            tags=set(("idn", "punycode", "converter", "decode")),
            enabled=True,
        )
        async def punycode_decode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding punycode domain `{domain}`.")
            return await punycode_decode_impl(domain)

        @self.server.tool(
            name="punycode_label_details",
            description=(
                "Use this tool to show the code points of a single domain label, which of "
                "them are basic (ASCII) and how the label is encoded."
            ),
            tags=set(("idn", "punycode", "label", "diagnostics")),
            enabled=self.config.get("features", {}).get("label_details", False),
        )
        async def punycode_label_details(label: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Inspecting label `{label}`.")
            return await punycode_label_details_impl(label)

        @self.server.tool(
            name="punycode_self_test",
            description=(
                "Run the bundled RFC 3492 and domain test vectors through the "
                "encoder and decoder and report any mismatch."
            ),
            tags=set(("punycode", "self-test", "diagnostics")),
            enabled=self.config.get("features", {}).get("self_test", False),
        )
        async def punycode_self_test(ctx: Context) -> ToolResult:
            await ctx.info("Running punycode test vectors.")
            return await punycode_self_test_impl(self.vector_manager)
