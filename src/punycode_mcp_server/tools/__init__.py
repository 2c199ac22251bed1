"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    punycode_decode_impl,
    punycode_encode_impl,
    punycode_label_details_impl,
)
from .self_test import punycode_self_test_impl

__all__ = [
    "punycode_encode_impl",
    "punycode_decode_impl",
    "punycode_label_details_impl",
    "punycode_self_test_impl",
]
