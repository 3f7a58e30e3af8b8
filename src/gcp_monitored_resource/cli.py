#!/usr/bin/env python3
# src/gcp_monitored_resource/cli.py
"""
CLI entry point: resolve the monitored resource once and print it as JSON.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace

from . import get_default_resource
from .config import ResolverSettings
from .errors import MonitoredResourceError


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if debug else logging.WARNING

    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", stream=sys.stderr
    )


def build_settings(args: argparse.Namespace) -> ResolverSettings:
    """Apply command line overrides on top of the environment settings."""
    settings = ResolverSettings.from_env()
    overrides = {}
    if args.metadata_host:
        overrides["metadata_host"] = args.metadata_host
    if args.timeout is not None:
        overrides["metadata_timeout"] = args.timeout
    if args.namespace_file:
        overrides["namespace_path"] = args.namespace_file
    return replace(settings, **overrides)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcp-monitored-resource",
        description="Print the monitored resource descriptor for the current Google Cloud environment",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--indent", action="store_true", help="Pretty-print the JSON output")
    parser.add_argument("--metadata-host", help="Metadata server host (default: $GCE_METADATA_HOST)")
    parser.add_argument("--timeout", type=float, help="Metadata server timeout in seconds")
    parser.add_argument("--namespace-file", help="Path of the Kubernetes namespace file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = create_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        resource = asyncio.run(get_default_resource(settings=build_settings(args)))
    except MonitoredResourceError as e:
        print(f"Error: {e.to_message()}", file=sys.stderr)
        return 1

    sys.stdout.write(resource.to_json(indent=args.indent).decode() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
