"""Punycode label codec (RFC 3492).

This module implements the Bootstring instance used for internationalized
domain names: a reversible mapping between one Unicode label and its
ASCII-only form. It operates on a single label at a time; splitting a full
domain name on dots is handled by :mod:`punycode_mcp_server.domain`.

Encoding copies the basic (ASCII) code points, appends a delimiter, then
emits one generalized variable-length integer per non-basic code point that
describes where it is inserted and how far its value is from the previous
one. Decoding reverses that. Both directions share the bias adaptation
function and must call it with identical arguments to stay in step.

Every function here is pure and keeps all working state local to the call,
so the codec can be used from any number of threads without locking.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import DeltaOverflow, InvalidCharacter, InvalidLength

MAX_DELTA = 0xFFFFFFFF  # delta is an unsigned 32-bit accumulator
MAX_CODE_POINT = 0x10FFFF
MIN_LABEL_LENGTH = 1
MAX_LABEL_LENGTH = 63


@dataclass(frozen=True)
class BootstringParams:
    """Parameter set of a Bootstring encoding.

    Attributes:
        base (int): Number of digit values (alphabet size).
        tmin (int): Lower clamp of the digit threshold.
        tmax (int): Upper clamp of the digit threshold.
        skew (int): Bias adaptation skew.
        damp (int): Damping factor applied to the very first delta.
        initial_bias (int): Bias before the first value is processed.
        initial_n (int): Smallest non-basic code point.
        prefix (str): ASCII tag that marks a transformed label.
        delimiter (str): Separator between basic code points and digits.
    """

    base: int = 36
    tmin: int = 1
    tmax: int = 26
    skew: int = 38
    damp: int = 700
    initial_bias: int = 72
    initial_n: int = 128
    prefix: str = "xn--"
    delimiter: str = "-"


PUNYCODE = BootstringParams()


def is_basic(cp: int) -> bool:
    return cp < 0x80


def to_lower(cp: int) -> int:
    # Only meaningful for ASCII letters.
    return cp | 0x20


def encode_digit(d: int) -> str:
    """Map a digit value 0..35 to ``a``..``z`` then ``0``..``9``."""
    if not 0 <= d < PUNYCODE.base:
        raise InvalidCharacter(f"Digit value {d} outside 0..{PUNYCODE.base - 1}")
    if d < 26:
        return chr(d + 97)
    return chr(d + 22)


def decode_to_value(c: str) -> int:
    """Map one digit character back to its value, ignoring ASCII case.

    Raises:
        InvalidCharacter: If ``c`` is not in ``[a-zA-Z0-9]``.
    """
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    if "A" <= c <= "Z":
        return ord(c) - ord("A")
    if "0" <= c <= "9":
        return ord(c) - ord("0") + 26
    raise InvalidCharacter(f"Unexpected character {c!r} in digit stream")


def calculate_threshold(k: int, bias: int) -> int:
    """Digit threshold for position ``k``, clamped to ``[tmin, tmax]``."""
    if k <= bias + PUNYCODE.tmin:
        return PUNYCODE.tmin
    if k >= bias + PUNYCODE.tmax:
        return PUNYCODE.tmax
    return k - bias


def adapt(delta: int, n_points: int, is_first: bool) -> int:
    """Recompute the bias after a value has been emitted or consumed.

    Args:
        delta (int): The value just processed.
        n_points (int): Number of code points in the output so far.
        is_first (bool): True only for the very first value of a label.

    Returns:
        int: The new bias.
    """
    # scale back, then increase delta
    delta //= PUNYCODE.damp if is_first else 2
    delta += delta // n_points

    s = PUNYCODE.base - PUNYCODE.tmin
    t = (s * PUNYCODE.tmax) // 2

    k = 0
    while delta > t:
        delta //= s
        k += PUNYCODE.base

    return k + ((PUNYCODE.base - PUNYCODE.tmin + 1) * delta) // (delta + PUNYCODE.skew)


def encode_int(bias: int, delta: int) -> str:
    """Encode ``delta`` as a generalized variable-length integer."""
    digits = []
    k = PUNYCODE.base
    q = delta
    while True:
        t = calculate_threshold(k, bias)
        if q < t:
            digits.append(encode_digit(q))
            break
        digits.append(encode_digit(t + (q - t) % (PUNYCODE.base - t)))
        q = (q - t) // (PUNYCODE.base - t)
        k += PUNYCODE.base
    return "".join(digits)


def decode_int(bias: int, digits: str, pos: int) -> tuple[int, int]:
    """Decode one generalized variable-length integer from ``digits[pos:]``.

    Returns:
        tuple[int, int]: The decoded value and the position after its last digit.

    Raises:
        InvalidCharacter: On a character outside the digit alphabet, or when
            the stream ends before the integer is terminated.
    """
    value = 0
    w = 1
    k = PUNYCODE.base
    while True:
        if pos >= len(digits):
            raise InvalidCharacter("Truncated digit stream")
        d = decode_to_value(digits[pos])
        pos += 1
        value += d * w
        t = calculate_threshold(k, bias)
        if d < t:
            return value, pos
        w *= PUNYCODE.base - t
        k += PUNYCODE.base


def encode_part(codepoints: Sequence[int]) -> str:
    """Encode one label given as code points.

    Basic code points are copied (lower-cased) in front of the delimiter. A
    label without non-basic code points is returned as is, without the tag.

    Raises:
        DeltaOverflow: If the delta accumulator exceeds 32 bits.
    """
    output: list[str] = []
    non_basic: list[int] = []
    for cp in codepoints:
        if is_basic(cp):
            output.append(chr(to_lower(cp)))
        else:
            non_basic.append(cp)

    if not non_basic:
        return "".join(output)

    b = h = len(output)
    if b > 0:
        output.append(PUNYCODE.delimiter)

    n = PUNYCODE.initial_n
    bias = PUNYCODE.initial_bias
    delta = 0

    # Descending, so the next smallest value is always at the end.
    pending = sorted(set(non_basic), reverse=True)

    length = len(codepoints)
    while h < length:
        m = pending.pop()
        delta += (m - n) * (h + 1)
        if delta > MAX_DELTA:
            raise DeltaOverflow("delta overflow")
        n = m

        for cp in codepoints:
            if cp < n:
                delta += 1
                if delta > MAX_DELTA:
                    raise DeltaOverflow("delta overflow")
            elif cp == n:
                output.append(encode_int(bias, delta))
                bias = adapt(delta, h + 1, b == h)
                delta = 0
                h += 1

        delta += 1
        n += 1

    return PUNYCODE.prefix + "".join(output)


def begins_with_prefix(text: str) -> bool:
    """Check for the ``xn--`` tag, ignoring ASCII case only."""
    prefix = PUNYCODE.prefix
    if len(text) < len(prefix):
        return False
    return all((c.lower() if "A" <= c <= "Z" else c) == p for c, p in zip(text, prefix))


def decode_part(text: str) -> list[int]:
    """Decode one ASCII label into code points.

    Labels without the tag are returned unchanged.

    Raises:
        InvalidLength: If ``text`` is not 1 to 63 characters long.
        InvalidCharacter: If the digit stream is malformed or yields a surrogate
            or a value past U+10FFFF.
    """
    if not MIN_LABEL_LENGTH <= len(text) <= MAX_LABEL_LENGTH:
        raise InvalidLength(
            f"The size of the part must be between {MIN_LABEL_LENGTH} and "
            f"{MAX_LABEL_LENGTH} inclusive, got {len(text)}"
        )
    if not begins_with_prefix(text):
        return [ord(c) for c in text]

    body = text[len(PUNYCODE.prefix):]
    split = body.rfind(PUNYCODE.delimiter)
    if split >= 0:
        output = [ord(c) for c in body[:split]]
        digits = body[split + 1:]
    else:
        output = []
        digits = body

    n = PUNYCODE.initial_n
    bias = PUNYCODE.initial_bias
    i = 0
    pos = 0
    while pos < len(digits):
        original_i = i
        delta, pos = decode_int(bias, digits, pos)
        i += delta

        x = len(output) + 1
        bias = adapt(i - original_i, x, original_i == 0)
        n += i // x
        i %= x
        if n > MAX_CODE_POINT:
            raise InvalidCharacter(f"Decoded code point {n:#x} is outside Unicode")
        if 0xD800 <= n <= 0xDFFF:
            raise InvalidCharacter(f"Decoded code point {n:#x} is a surrogate")

        output.insert(i, n)
        i += 1
    return output


def _codepoints(label: str | Sequence[int]) -> list[int]:
    if isinstance(label, str):
        return [ord(c) for c in label]
    codepoints = list(label)
    for cp in codepoints:
        if not 0 <= cp <= MAX_CODE_POINT:
            raise InvalidCharacter(f"Code point {cp!r} is outside Unicode")
    return codepoints


def encode_label(label: str | Sequence[int]) -> str:
    """Encode a single label into its ASCII form.

    Args:
        label (str | Sequence[int]): The label as text or as code points.

    Returns:
        str: The ASCII label, tagged with ``xn--`` if it had non-basic code points.
    """
    return encode_part(_codepoints(label))


def decode_label(text: str) -> list[int]:
    """Decode a single ASCII label into its code points."""
    return decode_part(text)


def decode_label_text(text: str) -> str:
    """Decode a single ASCII label into text."""
    return "".join(chr(cp) for cp in decode_part(text))
