"""Domain name level Punycode conversion.

Splits a full domain name on dots, converts every non-empty label with the
label codec and joins the result back together. Empty labels (a trailing dot,
consecutive dots) pass through unchanged. The first label that fails to
convert aborts the whole conversion.
"""

from __future__ import annotations

from typing import Callable

from fastmcp.utilities.logging import get_logger

from .exceptions import PunycodeError
from .punycode import decode_label_text, encode_label
from .typedefs import LabelConversion

logger = get_logger(__name__)

LABEL_SEPARATOR = "."

ENCODE = "encode"
DECODE = "decode"


def _convert(domain: str, convert: Callable[[str], str]) -> list[LabelConversion]:
    conversions: list[LabelConversion] = []
    for label in domain.split(LABEL_SEPARATOR):
        if not label:
            conversions.append({"input": label, "output": label, "transformed": False})
            continue
        try:
            converted = convert(label)
        except PunycodeError as e:
            if e.label is None:
                e.label = label
            logger.debug("Conversion of label %r failed: %s", label, e.message)
            raise
        conversions.append(
            {"input": label, "output": converted, "transformed": converted != label}
        )
    return conversions


def convert_labels(domain: str, direction: str) -> list[LabelConversion]:
    """Convert every label of ``domain`` and report each one.

    Args:
        domain (str): The domain name to convert.
        direction (str): Either ``"encode"`` or ``"decode"``.

    Returns:
        list[LabelConversion]: One entry per dot separated label.

    Raises:
        PunycodeError: For the first label that cannot be converted.
        ValueError: If ``direction`` is not recognised.
    """
    if direction == ENCODE:
        return _convert(domain, encode_label)
    if direction == DECODE:
        return _convert(domain, decode_label_text)
    raise ValueError(f"Unknown conversion direction: {direction}")


def to_punycode(domain: str) -> str:
    """Convert a Unicode domain name into its ASCII form."""
    conversions = convert_labels(domain, ENCODE)
    return LABEL_SEPARATOR.join(c["output"] for c in conversions)


def from_punycode(domain: str) -> str:
    """Convert an ASCII domain name back into Unicode."""
    conversions = convert_labels(domain, DECODE)
    return LABEL_SEPARATOR.join(c["output"] for c in conversions)
