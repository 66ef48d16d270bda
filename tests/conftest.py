"""Pytest fixtures and helpers for mysql_canal tests."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

# Repo root (parent of tests/)
REPO_ROOT = Path(__file__).resolve().parent.parent

FULL_TOML = """
addr = "10.0.0.5:3306"
user = "canal"
password = "secret"
charset = "utf8mb4"
server_id = 2001
flavor = "mariadb"
heartbeat_period = "5s"
read_timeout = "200ms"
include_table_regex = [".*\\\\.canal"]
exclude_table_regex = ["mysql\\\\..*"]
discard_no_meta_row_event = true
use_decimal = true
parse_time = true
timestamp_string_location = "UTC"
semi_sync_enabled = true
max_reconnect_attempts = 5

[dump]
mysqldump = "/usr/bin/mysqldump"
tables = ["t1", "t2"]
table_db = "mydb"
dbs = []
ignore_tables = ["mydb.audit"]
where = "id > 100"
discard_err = true
skip_master_data = true
set_gtid_purged = "auto"
max_allowed_packet_mb = 64
protocol = "tcp"
extra_options = ["--single-transaction", "--quick"]
"""


@pytest.fixture
def full_toml() -> str:
    """A document that sets every recognized key."""
    return FULL_TOML


@pytest.fixture(autouse=True)
def reset_canal_logger():
    """Undo handler setup done by CanalLogger so tests do not share streams."""
    yield
    root = logging.getLogger("mysql_canal")
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    root.propagate = True
    root.setLevel(logging.NOTSET)
