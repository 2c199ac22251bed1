from punycode_mcp_server.domain import DECODE, ENCODE, convert_labels
from punycode_mcp_server.exceptions import PunycodeError, handle_codec_error
from punycode_mcp_server.punycode import PUNYCODE, encode_label, is_basic
from punycode_mcp_server.typedefs import ToolResult


async def _convert_domain_impl(domain: str, direction: str, output_key: str) -> ToolResult:
    try:
        labels = convert_labels(domain, direction)
    except PunycodeError as e:
        return ToolResult(
            success=False,
            error=handle_codec_error(e),
            details={"domain": domain, "label": e.label},
        )
    converted = ".".join(label["output"] for label in labels)
    return ToolResult(
        success=True,
        output={"domain": domain, output_key: converted},
        details={"labels": labels},
    )


async def punycode_encode_impl(domain: str) -> ToolResult:
    """Convert a Unicode (IDN) domain name into punycode ASCII format.

    Args:
        domain (str): The domain name to convert to punycode.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    return await _convert_domain_impl(domain.strip(), ENCODE, "punycode")


async def punycode_decode_impl(domain: str) -> ToolResult:
    """Convert a punycode ASCII domain name back into Unicode.

    Args:
        domain (str): The punycode domain name to decode.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    return await _convert_domain_impl(domain.strip(), DECODE, "unicode")


async def punycode_label_details_impl(label: str) -> ToolResult:
    """Break a single label down into the parts the encoder works with.

    Args:
        label (str): One label, without dots.

    Returns:
        ToolResult: Code points, basic and non-basic split and encoded form.
    """
    label = label.strip()
    if not label or "." in label:
        return ToolResult(success=False, error="Expected a single non-empty label without dots")

    codepoints = [ord(c) for c in label]
    basic = [cp for cp in codepoints if is_basic(cp)]
    non_basic = sorted({cp for cp in codepoints if not is_basic(cp)})
    try:
        encoded = encode_label(codepoints)
    except PunycodeError as e:
        return ToolResult(success=False, error=handle_codec_error(e))

    digits = ""
    if non_basic:
        body = encoded[len(PUNYCODE.prefix):]
        digits = body[body.rfind(PUNYCODE.delimiter) + 1:] if basic else body

    return ToolResult(
        success=True,
        output={"label": label, "punycode": encoded},
        details={
            "codepoints": [f"U+{cp:04X}" for cp in codepoints],
            "basic": "".join(chr(cp) for cp in basic),
            "non_basic": [f"U+{cp:04X}" for cp in non_basic],
            "digits": digits,
            "length": len(encoded),
        },
    )
