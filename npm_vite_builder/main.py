#!/usr/bin/env python3
"""
npm Vite Builder - build an npm package's HTML pages with Vite.

Reads ./npm_vite_build.json, downloads the package tarball from the npm
registry, extracts it, and runs ``vite build`` over every HTML file it ships.

Usage:
    npm-vite-build
    npm-vite-build --config ./other.json --verbose

Config:
    {"package": "left-pad", "version": "", "outDir": "dist",
     "externalizeBareImports": true}
"""

import argparse
import asyncio
import logging
import sys

from npm_vite_builder.build import NpmViteBuilder
from npm_vite_builder.config import load_config
from npm_vite_builder.utils.constants import CONFIG_FILENAME, DEFAULT_REGISTRY_URL
from npm_vite_builder.utils.log import (
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_traceback,
)


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='npm-vite-build',
        description='Download an npm package and build its HTML pages with Vite',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s
    %(prog)s --config ./site.json
    %(prog)s --registry https://registry.npmmirror.com -v
        """
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        default=CONFIG_FILENAME,
        help=f'Path to the JSON config file (default: ./{CONFIG_FILENAME})'
    )

    parser.add_argument(
        '--registry', '-r',
        type=str,
        default=DEFAULT_REGISTRY_URL,
        help=f'npm registry base URL (default: {DEFAULT_REGISTRY_URL})'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress log output except warnings and errors'
    )

    return parser.parse_args(argv)


def print_summary(result) -> None:
    """
    Print the build summary.

    Args:
        result: BuildResult object
    """
    print_success(f"Done. Output in: {result.out_dir}")
    print_status(f"   Package built: {result.package}@{result.version}", "green")
    print_status(
        f"   Entries: {len(result.entries)}, files extracted: {result.files_extracted}, "
        f"duration: {result.duration_seconds:.1f}s",
        "green"
    )


async def main(argv=None) -> int:
    """
    Main entry point for the builder.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level)

    try:
        config = load_config(args.config)

        builder = NpmViteBuilder(config, registry_url=args.registry)
        result = await builder.build()

        print_summary(result)
        return 0

    except Exception as e:
        print_error(f"Error: {e}")
        print_traceback()
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print_error("Build interrupted by user")
        sys.exit(1)


if __name__ == '__main__':
    run()
