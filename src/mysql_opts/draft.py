"""
Mutable options draft.

A ``MysqlOpts`` is created with defaults, mutated only while a URL is parsed
or a builder is configured, then copied into an immutable ``Opts``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta

from .capabilities import DEFAULT_CAPABILITIES, CapabilityFlags, effective_capabilities
from .compression import Compression
from .constants import DEFAULT_PREFER_SOCKET, DEFAULT_STMT_CACHE_SIZE
from .local_infile import LocalInfileHandler
from .pool import PoolOpts
from .ssl import SslOpts


@dataclass
class MysqlOpts:
    """
    All scalar and composite connection options before publication.

    Attributes:
        user: User name
        password: Password
        db_name: Database name
        tcp_keepalive: TCP keep alive time in milliseconds
        tcp_nodelay: Disable Nagle's algorithm (``TCP_NODELAY``)
        local_infile_handler: Handler for ``LOAD DATA LOCAL INFILE`` requests
        pool_opts: Connection pool options
        conn_ttl: Close a connection once idle for this long (``None`` uses ``wait_timeout``)
        init: Commands executed on each new connection
        stmt_cache_size: Prepared statements cached per connection (``0`` disables the cache)
        ssl_opts: TLS settings; when set, TLS is required
        prefer_socket: Reconnect through the server's socket after a TCP connection to loopback
        socket: Path to a unix socket (named pipe on Windows)
        compression: Compression level requested from the server
        capabilities: Base capability bits plus manual adjustments
    """

    user: str | None = None
    password: str | None = None
    db_name: str | None = None
    tcp_keepalive: int | None = None
    tcp_nodelay: bool = True
    local_infile_handler: LocalInfileHandler | None = None
    pool_opts: PoolOpts = field(default_factory=PoolOpts)
    conn_ttl: timedelta | None = None
    init: tuple[str, ...] = ()
    stmt_cache_size: int = DEFAULT_STMT_CACHE_SIZE
    ssl_opts: SslOpts | None = None
    prefer_socket: bool = DEFAULT_PREFER_SOCKET
    socket: str | None = None
    compression: Compression | None = None
    capabilities: CapabilityFlags = DEFAULT_CAPABILITIES

    def add_capability(self, flag: CapabilityFlags) -> None:
        self.capabilities |= flag

    def remove_capability(self, flag: CapabilityFlags) -> None:
        self.capabilities &= ~flag

    def effective_capabilities(self) -> CapabilityFlags:
        """Stored bits plus the bits implied by db name, SSL and compression."""
        return effective_capabilities(
            self.capabilities,
            db_set=self.db_name is not None,
            ssl_set=self.ssl_opts is not None,
            compression_set=self.compression is not None,
        )

    def copy(self) -> MysqlOpts:
        # Fields are immutable or shared by reference
        return dataclasses.replace(self)


__all__ = ["MysqlOpts"]
