"""Command line interface for converting domain names to and from punycode."""

import argparse
import sys

from fastmcp.utilities.logging import get_logger

from punycode_mcp_server.domain import from_punycode, to_punycode
from punycode_mcp_server.exceptions import PunycodeError, handle_codec_error
from punycode_mcp_server.vectors import VectorManager

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="punycode", description="Convert domain names to and from punycode (RFC 3492)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode = subparsers.add_parser("encode", help="Convert Unicode domain names to punycode")
    encode.add_argument("domains", nargs="+", help="Domain names, e.g. bücher.example")

    decode = subparsers.add_parser("decode", help="Convert punycode domain names to Unicode")
    decode.add_argument("domains", nargs="+", help="Domain names, e.g. xn--bcher-kva.example")

    check = subparsers.add_parser("check", help="Run test vector fixtures")
    check.add_argument(
        "--vectors", default=None, help="Directory with JSON/YAML fixtures (default: bundled)"
    )
    check.add_argument("-v", "--verbose", action="store_true", help="Print every vector")
    return parser


def _convert(domains: list[str], convert) -> int:
    status = 0
    for domain in domains:
        try:
            print(convert(domain))
        except PunycodeError as e:
            print(f"{domain}: {handle_codec_error(e)}", file=sys.stderr)
            status = 1
    return status


def _check(vector_dir: str | None, verbose: bool) -> int:
    manager = VectorManager(vector_dir)
    report = manager.run_checks()
    if report.total == 0:
        print(f"No test vectors found in {manager.vector_dir}", file=sys.stderr)
        return 1
    for result in report.results:
        if verbose or not result["passed"]:
            state = "ok" if result["passed"] else "FAIL"
            detail = result["error"] or f"{result['encoded']} / {result['decoded']}"
            print(f"{state:4} {result['name']}: {detail}")
    print(f"Passed {report.passed} of {report.total}, failed {report.failed}")
    return 0 if report.success else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger.debug("Running %s", args.command)
    if args.command == "encode":
        return _convert(args.domains, to_punycode)
    if args.command == "decode":
        return _convert(args.domains, from_punycode)
    return _check(args.vectors, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
