#!/usr/bin/env python3
"""
Print the numbered catalog report to the terminal.

Usage:
    python cli.py                      # every section with the default arguments
    python cli.py --section 3 --section 9
    python cli.py --data-file /path/to/brickset.json
    python cli.py --json               # sections (or the error) as JSON
"""

import argparse
import json
import logging
import sys

from config.settings import Settings, configure_logging
from core.container import configure_container
from core.exceptions import BricksetError
from services.catalog_report_service import CatalogReportService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Brickset catalog queries and print the results")
    parser.add_argument("--data-file", help="JSON array file to load (bare names resolve in the data directory)")
    parser.add_argument("--data-dir", help="Directory holding the data file")
    parser.add_argument(
        "--section",
        type=int,
        action="append",
        help="Report section number to print (repeatable; default: all)"
    )
    parser.add_argument("--json", action="store_true", help="Print the report as a JSON array of sections")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = Settings()
    if args.data_file:
        settings.brickset_file = args.data_file
    if args.data_dir:
        settings.data_dir = args.data_dir
    if args.debug:
        settings.debug = True
    configure_logging(settings)

    try:
        container = configure_container(settings)
        service = container.resolve(CatalogReportService)
        if args.json:
            sections = service.build_report(settings, args.section)
            print(json.dumps([section.to_dict() for section in sections], indent=2, ensure_ascii=False))
        else:
            service.print_report(settings, args.section)
    except BricksetError as e:
        logger.error(f"Report failed: {e}")
        if args.json:
            print(json.dumps({"error": e.to_dict()}, indent=2, ensure_ascii=False), file=sys.stderr)
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
