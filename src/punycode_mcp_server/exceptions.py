"""Exception types and error processing for Punycode conversions.

This module provides the exception hierarchy raised by the label codec and a
helper that turns those exceptions into short, user-facing messages for the
Model Context Protocol (MCP) tool layer.

The module serves three main purposes:
1. Define typed exceptions for each way a single label conversion can fail
2. Carry the offending label along with the failure when it is known
3. Map codec and unexpected exceptions to human-readable messages

Note: every codec error is final for the label being processed. There is no
partial output and nothing to retry, since the computation is deterministic.
"""


class PunycodeError(ValueError):
    """Base exception for Punycode label conversion errors."""

    def __init__(self, message: str, label: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.label = label

    def __str__(self) -> str:
        if self.label is None:
            return self.message
        return f"{self.message} (label {self.label!r})"


class InvalidLength(PunycodeError):
    """Encoded label is shorter than 1 or longer than 63 characters."""


class InvalidCharacter(PunycodeError):
    """Digit stream holds a character outside the base-36 alphabet or is malformed."""


# The digit alphabet is the only character set the decoder checks.
InvalidDigit = InvalidCharacter


class DeltaOverflow(PunycodeError):
    """Encoder delta accumulator wrapped past its 32-bit maximum."""


def handle_codec_error(error: Exception) -> str:
    """Convert codec related exceptions to descriptive error messages."""
    err_str = f"Unexpected error: {str(error)}"
    if isinstance(error, InvalidLength):
        err_str = f"Invalid label length: {str(error)}"
    if isinstance(error, InvalidCharacter):
        err_str = f"Invalid punycode digit: {str(error)}"
    if isinstance(error, DeltaOverflow):
        err_str = f"Label too long to encode: {str(error)}"
    return err_str
