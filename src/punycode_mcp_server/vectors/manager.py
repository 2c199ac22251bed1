"""Test vector manager for the Punycode MCP Server."""

import glob
import json
import os
from typing import Any

import yaml
from fastmcp.utilities.logging import get_logger

from ..domain import from_punycode, to_punycode
from ..exceptions import PunycodeError, handle_codec_error
from ..typedefs import TestVector, VectorReport, VectorResult

logger = get_logger(__name__)


def equal_nocase(lhs: str, rhs: str) -> bool:
    """Compare two strings, folding ASCII letters only."""
    if len(lhs) != len(rhs):
        return False
    for left, right in zip(lhs, rhs):
        n = ord(left) | 0x20 if "A" <= left <= "Z" else ord(left)
        m = ord(right) | 0x20 if "A" <= right <= "Z" else ord(right)
        if n != m:
            return False
    return True


class VectorManager:
    """Manages Unicode/ASCII test vector fixtures."""

    def __init__(self, vector_dir: str | None = None) -> None:
        """Initialize the vector manager.

        Args:
            vector_dir: Directory containing fixture files.
                   If None, defaults to the package's data directory.
        """
        if vector_dir is None:
            vector_dir = os.path.join(os.path.dirname(__file__), "data")

        self.vector_dir = vector_dir
        self.vectors = self._load_all_vectors()

    def _load_file(self, file_path: str) -> Any:
        with open(file_path, encoding="utf-8") as f:
            if file_path.endswith(".json"):
                return json.load(f)
            return yaml.safe_load(f)

    def _load_all_vectors(self) -> list[TestVector]:
        """Load all fixture files from the directory.

        Each file holds ``{"tests": [{"in": ..., "out": ...}, ...]}``.

        Returns:
            List of vectors in file name order
        """
        vectors: list[TestVector] = []

        # Look for both JSON and YAML files
        files = glob.glob(os.path.join(self.vector_dir, "*.json"))
        files.extend(glob.glob(os.path.join(self.vector_dir, "*.yaml")))
        files.extend(glob.glob(os.path.join(self.vector_dir, "*.yml")))

        for file_path in sorted(files):
            source = os.path.splitext(os.path.basename(file_path))[0]
            try:
                data = self._load_file(file_path)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("Error loading test vectors %s: %s", file_path, e)
                continue

            if not isinstance(data, dict) or not isinstance(data.get("tests"), list):
                logger.warning("No 'tests' list in %s, skipping", file_path)
                continue

            for entry in data["tests"]:
                if not isinstance(entry, dict) or "in" not in entry or "out" not in entry:
                    logger.warning("Skipping malformed test vector in %s: %r", file_path, entry)
                    continue
                vectors.append(
                    {"source": source, "unicode": str(entry["in"]), "ascii": str(entry["out"])}
                )

        return vectors

    def get_all_vectors(self) -> list[TestVector]:
        """Get all loaded vectors.

        Returns:
            List of all vectors
        """
        return self.vectors

    def get_vectors_by_source(self, source: str) -> list[TestVector]:
        """Get all vectors loaded from one fixture file.

        Args:
            source: Fixture file name without extension

        Returns:
            List of vectors from that file
        """
        return [vector for vector in self.vectors if vector["source"] == source]

    def get_sources(self) -> list[str]:
        """Get the names of all fixture files that provided vectors."""
        return sorted({vector["source"] for vector in self.vectors})

    def check_vector(self, vector: TestVector) -> VectorResult:
        """Encode and decode one vector and compare both directions."""
        encoded = decoded = None
        try:
            encoded = to_punycode(vector["unicode"])
            decoded = from_punycode(vector["ascii"])
        except PunycodeError as e:
            return {
                "name": vector["unicode"],
                "passed": False,
                "encoded": encoded,
                "decoded": decoded,
                "error": handle_codec_error(e),
            }

        passed = encoded == vector["ascii"] and equal_nocase(decoded, vector["unicode"])
        return {
            "name": vector["unicode"],
            "passed": passed,
            "encoded": encoded,
            "decoded": decoded,
            "error": None,
        }

    def run_checks(self) -> VectorReport:
        """Check every loaded vector.

        Returns:
            Report with one result per vector
        """
        report = VectorReport()
        for vector in self.vectors:
            result = self.check_vector(vector)
            report.results.append(result)
            report.total += 1
            if result["passed"]:
                report.passed += 1
            else:
                report.failed += 1
                logger.info(
                    "Vector %r failed: expected %r, encoded %r",
                    vector["unicode"],
                    vector["ascii"],
                    result["encoded"],
                )
        return report
