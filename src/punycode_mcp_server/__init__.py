"""
Punycode MCP Server - RFC 3492 label codec and an MCP server around it.
"""

from punycode_mcp_server.domain import from_punycode, to_punycode
from punycode_mcp_server.exceptions import (
    DeltaOverflow,
    InvalidCharacter,
    InvalidDigit,
    InvalidLength,
    PunycodeError,
)
from punycode_mcp_server.punycode import decode_label, decode_label_text, encode_label
from punycode_mcp_server.server import PunycodeMCPServer, run_server

__all__ = [
    "encode_label",
    "decode_label",
    "decode_label_text",
    "to_punycode",
    "from_punycode",
    "PunycodeError",
    "InvalidLength",
    "InvalidCharacter",
    "InvalidDigit",
    "DeltaOverflow",
    "PunycodeMCPServer",
    "run_server",
]
