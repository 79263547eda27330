"""
Server address model.

An address is either an explicit host/port pair (builder path) or the parsed
connection URL (URL path). Both variants answer the same queries; dispatch
is a ``match`` over the two variants.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
from dataclasses import dataclass
from typing import TypeAlias
from urllib.parse import SplitResult

from .constants import DEFAULT_HOST, DEFAULT_PORT

logger = logging.getLogger(__name__)

SocketAddr: TypeAlias = tuple[str, int] | tuple[str, int, int, int]


@dataclass(frozen=True)
class HostPort:
    """Explicit host (IP literal or hostname) and TCP port."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass(frozen=True)
class UrlAddress:
    """Address taken from a parsed ``mysql://`` URL."""

    url: SplitResult


Address: TypeAlias = HostPort | UrlAddress


def _ip_literal(host: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address | None:
    try:
        return ipaddress.ip_address(host)
    except ValueError:
        return None


def _url_host_str(url: SplitResult) -> str | None:
    host = url.hostname
    if host is None:
        return None
    # hostname strips the brackets of IPv6 literals
    if ":" in host:
        return f"[{host}]"
    return host


def _url_port(url: SplitResult) -> int | None:
    try:
        return url.port
    except ValueError:
        return None


def get_ip_or_hostname(address: Address) -> str:
    """Return the server IP or hostname (defaults to ``127.0.0.1`` for a hostless URL)."""
    match address:
        case HostPort(host=host):
            return host
        case UrlAddress(url=url):
            return _url_host_str(url) or DEFAULT_HOST
    raise TypeError(f"Unsupported address type: {type(address).__name__}")


def get_tcp_port(address: Address) -> int:
    """Return the server TCP port (defaults to ``3306`` for a URL without one)."""
    match address:
        case HostPort(port=port):
            return port
        case UrlAddress(url=url):
            port = _url_port(url)
            return port if port is not None else DEFAULT_PORT
    raise TypeError(f"Unsupported address type: {type(address).__name__}")


def is_loopback(address: Address) -> bool:
    """
    Check whether the address refers to the local host.

    IP literals are tested against the loopback ranges; otherwise only the
    literal ``localhost`` counts.
    """
    match address:
        case HostPort(host=host):
            ip = _ip_literal(host)
            if ip is not None:
                return ip.is_loopback
            return host == "localhost"
        case UrlAddress(url=url):
            host = url.hostname
            if not host:
                return False
            ip = _ip_literal(host)
            if ip is not None:
                return ip.is_loopback
            return host == "localhost"
    raise TypeError(f"Unsupported address type: {type(address).__name__}")


def to_socket_addrs(address: Address) -> list[SocketAddr]:
    """
    Resolve the address to socket addresses.

    May block on DNS. URL addresses fall back to the default port.

    Raises:
        OSError: If the host cannot be resolved
    """
    match address:
        case HostPort(host=host, port=port):
            pass
        case UrlAddress(url=url):
            host = url.hostname or DEFAULT_HOST
            url_port = _url_port(url)
            port = url_port if url_port is not None else DEFAULT_PORT
        case _:
            raise TypeError(f"Unsupported address type: {type(address).__name__}")

    infos = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
    addrs: list[SocketAddr] = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        if sockaddr not in addrs:
            addrs.append(sockaddr)
    logger.debug("Resolved %s:%s to %s", host, port, addrs)
    return addrs


__all__ = [
    "Address",
    "HostPort",
    "SocketAddr",
    "UrlAddress",
    "get_ip_or_hostname",
    "get_tcp_port",
    "is_loopback",
    "to_socket_addrs",
]
