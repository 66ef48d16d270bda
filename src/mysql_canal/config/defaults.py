"""
Default configuration for the canal client.

The default connects to a local MySQL server as root and takes a
mysqldump snapshot before streaming. The server id is drawn at random
from [1001, 2001), which is fine for a single client but does not
guarantee uniqueness when several clients replicate from the same server.
Callers running more than one client should set server_id explicitly or
pass random.SystemRandom() as rng.
"""

import logging
import random
import time

from mysql_canal.config.models import CanalConfig, DumpConfig
from mysql_canal.constants import (
    DEFAULT_ADDR,
    DEFAULT_CHARSET,
    DEFAULT_DUMP_EXECUTION_PATH,
    DEFAULT_FLAVOR,
    DEFAULT_GTID_PURGED,
    DEFAULT_PASSWORD,
    DEFAULT_USER,
    SERVER_ID_BASE,
    SERVER_ID_SPAN,
)

logger = logging.getLogger("mysql_canal.config")


def random_server_id(rng=None) -> int:
    """
    Draw a server id in [SERVER_ID_BASE, SERVER_ID_BASE + SERVER_ID_SPAN).

    Args:
        rng: Object with a randrange method. Defaults to a random.Random
            seeded with the current time in whole seconds.
    """
    if rng is None:
        rng = random.Random(int(time.time()))
    return rng.randrange(SERVER_ID_SPAN) + SERVER_ID_BASE


def make_default(rng=None) -> CanalConfig:
    """
    Build a ready-to-use configuration without any input document.

    Timeouts, table filters, reconnect attempts and semi-sync stay unset so
    the replication client applies its own defaults.

    Args:
        rng: Random source for the server id, see random_server_id

    Returns:
        CanalConfig instance
    """
    server_id = random_server_id(rng)
    logger.debug(
        f"Generated default configuration with server_id {server_id}",
        extra={"server_id": server_id},
    )

    return CanalConfig(
        address=DEFAULT_ADDR,
        user=DEFAULT_USER,
        password=DEFAULT_PASSWORD,
        charset=DEFAULT_CHARSET,
        server_id=server_id,
        flavor=DEFAULT_FLAVOR,
        dump=DumpConfig(
            tool_path=DEFAULT_DUMP_EXECUTION_PATH,
            discard_error_output=True,
            skip_master_data=False,
            gtid_purged_mode=DEFAULT_GTID_PURGED,
        ),
    )
