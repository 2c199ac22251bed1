"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools_prompts() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools_prompts(self) -> None:
        """Register prompts for tools with the server."""

        @self.server.prompt(
            name="punycode_encode",
            description="Return the punycode version of an internationalized domain name (IDN).",
            tags=set(("idn", "punycode", "converter", "encode")),
            enabled=True,
        )
        def punycode_encode(domain: str) -> str:
            """Convert IDN domain name to punycode."""
            return (
                f"Convert the domain {domain} to punycode format using the punycode"
                " encode tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="punycode_decode",
            description="Return the Unicode version of a punycode (xn--) domain name.",
            tags=set(("idn", "punycode", "converter", "decode")),
            enabled=True,
        )
        def punycode_decode(domain: str) -> str:
            """Convert a punycode domain name to Unicode."""
            return (
                f"Convert the punycode domain {domain} back to Unicode using the"
                " punycode decode tool provided by the Punycode MCP Server."
            )

        @self.server.prompt(
            name="explain_label",
            description="Explain how a single domain label is encoded to punycode.",
            tags=set(("idn", "punycode", "label", "diagnostics")),
            enabled=self.config.get("features", {}).get("label_details", False),
        )
        def explain_label(label: str) -> str:
            """Explain the encoding of a single label."""
            return (
                f"Use the punycode label details tool to break down the label {label}."
                " Explain which code points are copied as basic characters and how the"
                " remaining ones are described by the trailing digits."
            )
