"""
MAC address lookup against the network_inventory table.

The table is filled by the switch collector; this module only reads it.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import aiosqlite

from mac_format import format_mac_address
from models import InventoryRecord, as_text

logger = logging.getLogger(__name__)

# Aggregated links (port-channels / LAGs) learn every MAC behind them
DEFAULT_SKIP_PORTS = ("Po", "Port-Channel", "lag")

SEARCH_SQL = "SELECT * FROM network_inventory WHERE mac_address = ?"


class LookupFailure(Exception):
    """Base class for every reason a lookup returns no records"""
    message = "Lookup failed."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InputMissing(LookupFailure):
    message = "MAC address is required."


class InvalidMacFormat(LookupFailure):
    message = "Invalid MAC address format."


class NotFound(LookupFailure):
    message = "MAC address not found."


class StorageUnavailable(LookupFailure):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Database connection failed: {detail}")


class QueryExecutionFailed(LookupFailure):
    message = "Error executing query."


def is_skipped_port(port_name, skip_ports: Iterable[str]) -> bool:
    """True when any exclusion pattern is a (case sensitive) substring of the port"""
    port_name = as_text(port_name)
    if not port_name:
        return False
    return any(pattern in port_name for pattern in skip_ports)


def _read_only_uri(db_path: str) -> str:
    return Path(db_path).resolve().as_uri() + "?mode=ro"


async def fetch_records(mac_address: str, db_path: str) -> List[dict]:
    """Run the exact-match query for an already normalized MAC address"""
    try:
        db = await aiosqlite.connect(_read_only_uri(db_path), uri=True)
    except aiosqlite.Error as e:
        logger.error(f"Failed to open database {db_path}: {e}", exc_info=True)
        raise StorageUnavailable(str(e)) from e

    try:
        db.row_factory = aiosqlite.Row
        cursor = await db.execute(SEARCH_SQL, (mac_address,))
        rows = await cursor.fetchall()
        return [dict(row) for row in rows]
    except aiosqlite.Error as e:
        logger.error(f"Query for {mac_address} failed: {e}")
        raise QueryExecutionFailed() from e
    finally:
        await db.close()


async def search_mac(
    raw_mac: Optional[str],
    db_path: str,
    skip_ports: Sequence[str] = DEFAULT_SKIP_PORTS,
) -> List[InventoryRecord]:
    """
    Find the switch ports a MAC address was learned on.

    Raises a LookupFailure subclass instead of returning an empty list, so
    callers can tell "not found" apart from bad input or a broken store.
    """
    if not raw_mac:
        raise InputMissing()

    mac_address = format_mac_address(raw_mac)
    if mac_address is None:
        logger.info(f"Rejected malformed MAC address input: {raw_mac!r}")
        raise InvalidMacFormat()

    rows = await fetch_records(mac_address, db_path)
    records = [
        InventoryRecord.from_row(row)
        for row in rows
        if not is_skipped_port(row.get('port_name'), skip_ports)
    ]
    logger.debug(f"{mac_address}: {len(rows)} rows, {len(records)} after port filter")

    if not records:
        raise NotFound()
    return records
