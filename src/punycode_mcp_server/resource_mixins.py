"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from dataclasses import asdict
from typing import Any

from punycode_mcp_server.punycode import MAX_LABEL_LENGTH, MIN_LABEL_LENGTH, PUNYCODE


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP), 'config' (dict),
    and 'vector_manager' attributes available when registration methods are called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary
    vector_manager: Any  # VectorManager instance

    def register_codec_resources(self) -> None:
        """Register the codec parameter set as a resource."""

        @self.server.resource(
            uri="resource://punycode/parameters",
            name="punycode_parameters",
            description="The Bootstring parameters used by this punycode implementation.",
        )
        async def get_punycode_parameters() -> dict[str, Any]:
            return await self._get_parameters_impl()

    def register_vector_resources(self) -> None:
        """Register the loaded test vectors as MCP resources."""

        @self.server.resource(
            uri="resource://punycode/vectors",
            name="punycode_test_vectors",
            description="All Unicode/ASCII test vectors loaded by the server",
        )
        async def get_vectors() -> dict[str, Any]:
            return await self._get_vectors_impl()

        @self.server.resource(
            uri="resource://punycode/vectors/{source}",
            name="punycode_test_vectors_by_source",
            description="Test vectors loaded from one fixture file",
        )
        async def get_vectors_by_source(source: str) -> dict[str, Any]:
            return await self._get_vectors_by_source_impl(source)

    async def _get_parameters_impl(self) -> dict[str, Any]:
        """Implementation to describe the codec parameters."""
        parameters = asdict(PUNYCODE)
        parameters["label_length"] = {"min": MIN_LABEL_LENGTH, "max": MAX_LABEL_LENGTH}
        return parameters

    async def _get_vectors_impl(self) -> dict[str, Any]:
        """Implementation to list all loaded vectors."""
        vectors = self.vector_manager.get_all_vectors()
        return {
            "sources": self.vector_manager.get_sources(),
            "vectors": vectors,
            "count": len(vectors),
        }

    async def _get_vectors_by_source_impl(self, source: str) -> dict[str, Any]:
        """Implementation to list the vectors of one fixture file."""
        vectors = self.vector_manager.get_vectors_by_source(source)
        if not vectors:
            return {
                "error": f"No test vectors loaded from '{source}'",
                "available_sources": self.vector_manager.get_sources(),
            }
        return {"source": source, "vectors": vectors, "count": len(vectors)}
