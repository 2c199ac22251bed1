"""Type definitions for Punycode conversion results.

This module provides the dataclasses and TypedDict classes that define the
structured result types used throughout the Punycode Model Context Protocol
(MCP) server. These type definitions keep tool output, per-label reports and
test-vector outcomes in one consistent shape.

The types defined here are used to:
- Structure tool results returned to MCP clients
- Report the outcome of a single label conversion
- Record the outcome of a test-vector check run

Note: TypedDict classes are used for the per-label and per-vector records so
they serialize directly into tool output while still being type checked.
"""

from dataclasses import dataclass, field
from typing import Any, TypedDict


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[str] | dict[str, Any] | list[dict[str, Any]] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)


class LabelConversion(TypedDict):
    """A TypedDict describing how one label of a domain name was converted.

    Attributes:
        input (str): The label as it was given.
        output (str): The converted label.
        transformed (bool): False when the label passed through unchanged.
    """

    input: str
    output: str
    transformed: bool


class TestVector(TypedDict):
    """A TypedDict holding one Unicode/ASCII domain pair from a fixture file.

    Attributes:
        source (str): Name of the fixture file the vector was loaded from.
        unicode (str): The Unicode form (the fixture's ``in`` field).
        ascii (str): The expected ASCII form (the fixture's ``out`` field).
    """

    source: str
    unicode: str
    ascii: str


class VectorResult(TypedDict):
    """A TypedDict with the outcome of checking one test vector.

    Attributes:
        name (str): The Unicode form of the vector, used as identifier.
        passed (bool): Whether both directions matched.
        encoded (str | None): What the encoder produced.
        decoded (str | None): What the decoder produced.
        error (str | None): Error message if a conversion raised.
    """

    name: str
    passed: bool
    encoded: str | None
    decoded: str | None
    error: str | None


@dataclass
class VectorReport:
    """Stores the result of running every loaded test vector."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    results: list[VectorResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.failed == 0
