"""
Fluent builder for ``Opts``.

Example::

    opts = (
        OptsBuilder()
        .ip_or_hostname("db.internal")
        .tcp_port(3307)
        .user("app")
        .db_name("inventory")
        .build()
    )

    # Derive new options from existing ones
    opts2 = OptsBuilder.from_opts(opts).stmt_cache_size(128).build()
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta
from typing import Self

from . import address as addr
from .address import HostPort
from .capabilities import CapabilityFlags
from .compression import Compression
from .constants import DEFAULT_STMT_CACHE_SIZE
from .draft import MysqlOpts
from .local_infile import LocalInfileHandler
from .opts import InnerOpts, Opts
from .pool import PoolOpts
from .ssl import SslOpts


class OptsBuilder:
    """
    Programmatic alternative to URL parsing.

    Setters never raise; absent values fall back to defaults where noted.
    Pool bounds are not checked here, construct ``PoolConstraints`` explicitly.
    """

    def __init__(self) -> None:
        default_address = HostPort()
        self._opts = MysqlOpts()
        self._ip_or_hostname = addr.get_ip_or_hostname(default_address)
        self._tcp_port = addr.get_tcp_port(default_address)

    @classmethod
    def from_opts(cls, opts: Opts | str) -> OptsBuilder:
        """
        Create a builder seeded with existing options (or a connection URL).

        Raises:
            UrlError: If ``opts`` is a URL that fails to parse
        """
        opts = Opts.parse(opts)
        builder = cls()
        builder._opts = opts.draft()
        builder._ip_or_hostname = opts.ip_or_hostname
        builder._tcp_port = opts.tcp_port
        return builder

    def ip_or_hostname(self, ip_or_hostname: str) -> Self:
        """Server IP or hostname. See ``Opts.ip_or_hostname``."""
        self._ip_or_hostname = ip_or_hostname
        return self

    def tcp_port(self, tcp_port: int) -> Self:
        """See ``Opts.tcp_port``."""
        self._tcp_port = tcp_port
        return self

    def user(self, user: str | None) -> Self:
        self._opts.user = user
        return self

    def password(self, password: str | None) -> Self:
        self._opts.password = password
        return self

    def db_name(self, db_name: str | None) -> Self:
        self._opts.db_name = db_name
        return self

    def init(self, init: Iterable[str]) -> Self:
        """Commands to run on each new connection. See ``Opts.init``."""
        self._opts.init = tuple(init)
        return self

    def tcp_keepalive(self, tcp_keepalive: int | None) -> Self:
        self._opts.tcp_keepalive = tcp_keepalive
        return self

    def tcp_nodelay(self, nodelay: bool) -> Self:
        self._opts.tcp_nodelay = nodelay
        return self

    def local_infile_handler(self, handler: LocalInfileHandler | None) -> Self:
        self._opts.local_infile_handler = handler
        return self

    def pool_opts(self, pool_opts: PoolOpts | None) -> Self:
        """Pool options; ``None`` resets to the defaults."""
        self._opts.pool_opts = pool_opts if pool_opts is not None else PoolOpts()
        return self

    def conn_ttl(self, conn_ttl: timedelta | None) -> Self:
        self._opts.conn_ttl = conn_ttl
        return self

    def stmt_cache_size(self, cache_size: int | None) -> Self:
        """Statement cache size; ``None`` resets to the default (32)."""
        self._opts.stmt_cache_size = cache_size if cache_size is not None else DEFAULT_STMT_CACHE_SIZE
        return self

    def ssl_opts(self, ssl_opts: SslOpts | None) -> Self:
        self._opts.ssl_opts = ssl_opts
        return self

    def prefer_socket(self, prefer_socket: bool | None) -> Self:
        """Socket preference; ``None`` means ``True``."""
        self._opts.prefer_socket = prefer_socket if prefer_socket is not None else True
        return self

    def socket(self, socket: str | None) -> Self:
        self._opts.socket = socket
        return self

    def compression(self, compression: Compression | None) -> Self:
        self._opts.compression = compression
        return self

    def add_capability(self, flag: CapabilityFlags) -> Self:
        """OR ``flag`` into the stored capability set."""
        self._opts.add_capability(flag)
        return self

    def remove_capability(self, flag: CapabilityFlags) -> Self:
        """
        Clear ``flag`` from the stored capability set.

        CONNECT_WITH_DB, SSL and COMPRESS are re-asserted on read while their
        field is set, so removing them only has an effect while it is unset.
        """
        self._opts.remove_capability(flag)
        return self

    def build(self) -> Opts:
        """Publish the configured options. The builder may be reused afterwards."""
        address = HostPort(self._ip_or_hostname, self._tcp_port)
        return Opts(InnerOpts(mysql_opts=self._opts, address=address))


__all__ = ["OptsBuilder"]
