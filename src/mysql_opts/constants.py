"""
Process-wide defaults for MySQL connection options.

All values are immutable; nothing in the package mutates them.
"""

import sys
from datetime import timedelta

# Default pool bounds as (min, max)
DEFAULT_POOL_MIN = 10
DEFAULT_POOL_MAX = 100

# Each connection will cache up to this number of statements by default.
DEFAULT_STMT_CACHE_SIZE = 32

DEFAULT_PORT = 3306
DEFAULT_HOST = "127.0.0.1"

# ``0`` means a connection above the pool's lower bound is dropped immediately.
DEFAULT_INACTIVE_CONNECTION_TTL = timedelta(0)

# Unused while ``inactive_connection_ttl`` is ``0``.
DEFAULT_TTL_CHECK_INTERVAL = timedelta(seconds=30)

# Smallest accepted ``ttl_check_interval``; anything below falls back to the default.
MIN_TTL_CHECK_INTERVAL = timedelta(seconds=1)

# Socket connections are not preferred on Windows (named pipes only).
DEFAULT_PREFER_SOCKET = not sys.platform.startswith("win")

URL_SCHEME = "mysql"

# Environment variables consulted by ``config.opts_from_env``, in order.
URL_ENV_VARS = ("DATABASE_URL", "MYSQL_URL")
