"""Command line interface for OpenAPI documentation generation."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .errors import GeneratorError
from .generator import DEFAULT_FORMAT, DEFAULT_INDENT, run_generation
from .host import ServerlessConfigProvider


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="serverless-openapi-generator",
        description="Generate OpenAPI v3 documentation from a Serverless service",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate OpenAPI v3 Documentation")
    generate.add_argument(
        "-c",
        "--config",
        default="serverless.yml",
        help="Serverless service file [default: serverless.yml]",
    )
    generate.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file location [default: openapi.yml|openapi.json]",
    )
    generate.add_argument(
        "-f",
        "--format",
        default=DEFAULT_FORMAT,
        help="OpenAPI file format (yaml|json) [default: yaml]",
    )
    generate.add_argument(
        "-i",
        "--indent",
        type=int,
        default=DEFAULT_INDENT,
        help="File indentation in spaces, 2-9 for YAML [default: 2]",
    )
    generate.add_argument(
        "--strict-routes",
        action="store_true",
        help="Fail when two functions document the same path and method",
    )
    generate.add_argument("-v", "--verbose", action="store_true", help="Log every added route")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        provider = ServerlessConfigProvider.from_file(Path(args.config))
        run_generation(
            provider=provider,
            output=args.output,
            output_format=args.format,
            indent=args.indent,
            allow_route_overrides=not args.strict_routes,
        )
    except GeneratorError as exc:
        parser.error(str(exc))
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
