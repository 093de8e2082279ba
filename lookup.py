#!/usr/bin/env python3
"""
Command line MAC address lookup.

Prints the same JSON payload as the /search_mac endpoint.

    python lookup.py aa-bb-cc-dd-ee-ff
    python lookup.py aabb.ccdd.eeff --database /srv/network_inventory.db
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from config import settings, parse_skip_ports
from models import SearchResponse
from inventory_search import LookupFailure, search_mac

logger = logging.getLogger(__name__)


async def run_lookup(mac: str, db_path: str, skip_ports: List[str]) -> SearchResponse:
    try:
        records = await search_mac(mac, db_path, skip_ports)
    except LookupFailure as e:
        return SearchResponse(success=False, message=e.message)
    return SearchResponse(success=True, result=records)


def build_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        description="Find the switch ports a MAC address was learned on"
    )
    arg_parser.add_argument("mac", help="MAC address, any separator style")
    arg_parser.add_argument(
        "-d", "--database",
        default=settings.database_path,
        help=f"SQLite inventory database (default: {settings.database_path})"
    )
    arg_parser.add_argument(
        "-s", "--skip-ports",
        default=settings.skip_ports,
        help=f"Comma separated port name fragments to hide (default: {settings.skip_ports})"
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging on stderr"
    )
    return arg_parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    response = asyncio.run(run_lookup(args.mac, args.database, parse_skip_ports(args.skip_ports)))
    print(json.dumps(response.payload(), indent=2))
    return 0 if response.success else 1


if __name__ == "__main__":
    sys.exit(main())
