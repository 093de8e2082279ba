import os
import sqlite3

import pytest

# Keep test runs from writing log files into the working directory
os.environ.setdefault("LOG_FILE", "")

INVENTORY_SCHEMA = """
    CREATE TABLE network_inventory (
        switch_name TEXT,
        switch_ip TEXT,
        vendor TEXT,
        mac_address TEXT,
        port_name TEXT,
        access TEXT,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP,
        UNIQUE(switch_name, mac_address, port_name)
    )
"""

INVENTORY_ROWS = [
    ("sw-access-01", "10.0.0.11", "Cisco", "AA:BB:CC:DD:EE:FF", "Gi1/0/1", "1",
     "2025-01-10 08:00:00", "2025-03-01 12:30:00"),
    ("sw-core-01", "10.0.0.1", "Cisco", "AA:BB:CC:DD:EE:FF", "Port-Channel1", "0",
     "2025-01-10 08:00:00", "2025-03-01 12:30:00"),
    ("sw-core-02", "10.0.0.2", "Cisco", "AA:BB:CC:DD:EE:FF", "Po12", "0",
     "2025-01-10 08:00:00", "2025-03-01 12:30:00"),
    ("sw-dist-01", "10.0.0.5", "Aruba", "AA:BB:CC:DD:EE:FF", "lag3", "0",
     "2025-01-10 08:00:00", "2025-03-01 12:30:00"),
    ("sw-access-02", "10.0.0.12", "ProCurve", "00:11:22:33:44:55", "24", "0",
     "2025-02-01 09:15:00", "2025-02-02 09:15:00"),
    ("sw-access-03", "10.0.0.13", "Aruba", "11:22:33:44:55:66", "LAG1", "1",
     "2025-02-01 09:15:00", "2025-02-02 09:15:00"),
    ("sw-core-01", "10.0.0.1", "Cisco", "66:77:88:99:AA:BB", "Po1", "0",
     "2025-02-01 09:15:00", "2025-02-02 09:15:00"),
]


@pytest.fixture
def inventory_db(tmp_path):
    """Path to a populated network_inventory database"""
    db_path = tmp_path / "network_inventory.db"
    con = sqlite3.connect(db_path)
    with con:
        con.execute(INVENTORY_SCHEMA)
        con.executemany(
            "INSERT INTO network_inventory VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            INVENTORY_ROWS,
        )
    con.close()
    return str(db_path)


@pytest.fixture
def missing_db(tmp_path):
    return str(tmp_path / "does_not_exist.db")


@pytest.fixture
def wrong_schema_db(tmp_path):
    """A valid SQLite file without the network_inventory table"""
    db_path = tmp_path / "other.db"
    con = sqlite3.connect(db_path)
    with con:
        con.execute("CREATE TABLE lldp_neighbors (local_device TEXT)")
    con.close()
    return str(db_path)


@pytest.fixture
def numeric_columns_db(tmp_path):
    """network_inventory with INTEGER columns, as some collectors declare them"""
    db_path = tmp_path / "numeric.db"
    con = sqlite3.connect(db_path)
    with con:
        con.execute("""
            CREATE TABLE network_inventory (
                switch_name TEXT,
                switch_ip TEXT,
                vendor TEXT,
                mac_address TEXT,
                port_name INTEGER,
                access INTEGER,
                created_at INTEGER,
                updated_at INTEGER
            )
        """)
        con.executemany(
            "INSERT INTO network_inventory VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                ("sw-access-04", "10.0.0.14", "ProCurve", "AA:BB:CC:DD:EE:FF", "24", 1,
                 1700000000, 1700003600),
                ("sw-core-01", "10.0.0.1", "Cisco", "AA:BB:CC:DD:EE:FF", "Po7", 0,
                 1700000000, 1700003600),
            ],
        )
    con.close()
    return str(db_path)
