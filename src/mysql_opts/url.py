"""
Connection URL parser.

Decomposes ``mysql://[user[:pass]@]host[:port][/dbname][?param=value&...]``
into an options draft and a URL-backed address. Query parameters are
dispatched through ``URL_PARAMETERS``; any other key is an error.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from urllib.parse import SplitResult, parse_qsl, unquote, urlsplit

from .address import UrlAddress
from .compression import Compression
from .constants import DEFAULT_POOL_MAX, DEFAULT_POOL_MIN, DEFAULT_PORT, URL_SCHEME
from .draft import MysqlOpts
from .exceptions import (
    InvalidParamValueError,
    InvalidPoolConstraintsError,
    InvalidUrlError,
    UnknownParameterError,
    UnsupportedSchemeError,
    UrlParseError,
)
from .pool import PoolConstraints

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"\+?[0-9]+")
# Significant digits in U64_MAX
_MAX_DIGITS = 20

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_MAX_TIMEDELTA_SECONDS = timedelta.max.days * 86400 + timedelta.max.seconds

# Named compression presets; single digits are handled separately.
COMPRESSION_PRESETS: dict[str, Callable[[], Compression]] = {
    "fast": Compression.fast,
    "on": Compression.default,
    "true": Compression.default,
    "best": Compression.best,
}


@dataclass
class _ParseState:
    """Draft plus the pool bounds, which are only combined after every parameter."""

    opts: MysqlOpts
    pool_min: int = DEFAULT_POOL_MIN
    pool_max: int = DEFAULT_POOL_MAX


def _parse_unsigned(param: str, value: str, limit: int = U64_MAX) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise InvalidParamValueError(param, value)
    digits = value.lstrip("+").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidParamValueError(param, value)
    number = int(digits)
    if number > limit:
        raise InvalidParamValueError(param, value)
    return number


def _parse_bool(param: str, value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise InvalidParamValueError(param, value)


def _parse_seconds(param: str, value: str) -> timedelta:
    seconds = _parse_unsigned(param, value)
    if seconds > _MAX_TIMEDELTA_SECONDS:
        logger.debug("Clamping %s=%s to %s", param, value, timedelta.max)
        return timedelta.max
    return timedelta(seconds=seconds)


def parse_compression(value: str) -> Compression:
    """
    Parse the ``compression`` parameter.

    ``fast`` is level 1, ``on``/``true`` the default level, ``best`` level 9
    and a single digit ``0``-``9`` that exact level.

    Raises:
        InvalidParamValueError: For any other value
    """
    preset = COMPRESSION_PRESETS.get(value)
    if preset is not None:
        return preset()
    if len(value) == 1 and "0" <= value <= "9":
        return Compression(int(value))
    raise InvalidParamValueError("compression", value)


def _set_pool_min(state: _ParseState, value: str) -> None:
    state.pool_min = _parse_unsigned("pool_min", value)


def _set_pool_max(state: _ParseState, value: str) -> None:
    state.pool_max = _parse_unsigned("pool_max", value)


def _set_inactive_connection_ttl(state: _ParseState, value: str) -> None:
    ttl = _parse_seconds("inactive_connection_ttl", value)
    state.opts.pool_opts = state.opts.pool_opts.with_inactive_connection_ttl(ttl)


def _set_ttl_check_interval(state: _ParseState, value: str) -> None:
    interval = _parse_seconds("ttl_check_interval", value)
    state.opts.pool_opts = state.opts.pool_opts.with_ttl_check_interval(interval)


def _set_conn_ttl(state: _ParseState, value: str) -> None:
    state.opts.conn_ttl = _parse_seconds("conn_ttl", value)


def _set_tcp_keepalive(state: _ParseState, value: str) -> None:
    state.opts.tcp_keepalive = _parse_unsigned("tcp_keepalive", value, U32_MAX)


def _set_tcp_nodelay(state: _ParseState, value: str) -> None:
    state.opts.tcp_nodelay = _parse_bool("tcp_nodelay", value)


def _set_stmt_cache_size(state: _ParseState, value: str) -> None:
    state.opts.stmt_cache_size = _parse_unsigned("stmt_cache_size", value)


def _set_prefer_socket(state: _ParseState, value: str) -> None:
    state.opts.prefer_socket = _parse_bool("prefer_socket", value)


def _set_socket(state: _ParseState, value: str) -> None:
    state.opts.socket = value


def _set_compression(state: _ParseState, value: str) -> None:
    state.opts.compression = parse_compression(value)


# Recognized query parameters. Keys are matched exactly.
URL_PARAMETERS: dict[str, Callable[[_ParseState, str], None]] = {
    "pool_min": _set_pool_min,
    "pool_max": _set_pool_max,
    "inactive_connection_ttl": _set_inactive_connection_ttl,
    "ttl_check_interval": _set_ttl_check_interval,
    "conn_ttl": _set_conn_ttl,
    "tcp_keepalive": _set_tcp_keepalive,
    "tcp_nodelay": _set_tcp_nodelay,
    "stmt_cache_size": _set_stmt_cache_size,
    "prefer_socket": _set_prefer_socket,
    "socket": _set_socket,
    "compression": _set_compression,
}


def _decode(component: str) -> str:
    return unquote(component, encoding="utf-8", errors="replace")


def _user_from_url(url: SplitResult) -> str | None:
    user = url.username
    return _decode(user) if user else None


def _password_from_url(url: SplitResult) -> str | None:
    password = url.password
    return _decode(password) if password else None


def _db_name_from_url(url: SplitResult) -> str | None:
    if not url.path.startswith("/"):
        return None
    first_segment = url.path[1:].split("/", 1)[0]
    return _decode(first_segment) if first_segment else None


def _split(url: str) -> SplitResult:
    try:
        split = urlsplit(url)
    except ValueError as e:
        raise UrlParseError(f"Failed to parse connection URL: {e}") from e

    if split.scheme != URL_SCHEME:
        raise UnsupportedSchemeError(split.scheme)
    if not split.netloc or not split.hostname:
        raise InvalidUrlError()

    try:
        port = split.port
    except ValueError as e:
        raise UrlParseError(f"Failed to parse connection URL: {e}") from e

    # Socket address resolution relies on the URL carrying an explicit port.
    if port is None:
        split = split._replace(netloc=f"{split.netloc.rstrip(':')}:{DEFAULT_PORT}")
    return split


def parse_url(url: str) -> tuple[MysqlOpts, UrlAddress]:
    """
    Parse a connection URL into an options draft and its address.

    Args:
        url: ``mysql://`` connection URL

    Returns:
        The populated draft and the URL-backed address (port always explicit)

    Raises:
        UnsupportedSchemeError: If the scheme is not ``mysql``
        InvalidUrlError: If the URL has no host
        UrlParseError: If the URL is malformed
        UnknownParameterError: If a query key is not recognized
        InvalidParamValueError: If a query value does not parse
        InvalidPoolConstraintsError: If ``pool_min > pool_max``
    """
    split = _split(url)

    state = _ParseState(
        opts=MysqlOpts(
            user=_user_from_url(split),
            password=_password_from_url(split),
            db_name=_db_name_from_url(split),
        )
    )

    for key, value in parse_qsl(split.query, keep_blank_values=True):
        handler = URL_PARAMETERS.get(key)
        if handler is None:
            logger.debug("Rejecting unknown URL parameter %r", key)
            raise UnknownParameterError(key)
        try:
            handler(state, value)
        except InvalidParamValueError:
            logger.debug("Rejecting value %r for URL parameter %r", value, key)
            raise

    constraints = PoolConstraints.new(state.pool_min, state.pool_max)
    if constraints is None:
        raise InvalidPoolConstraintsError(state.pool_min, state.pool_max)
    state.opts.pool_opts = state.opts.pool_opts.with_constraints(constraints)

    address = UrlAddress(split)
    logger.debug(
        "Parsed connection URL: host=%s port=%s db=%s",
        split.hostname,
        split.port,
        state.opts.db_name,
    )
    return state.opts, address


__all__ = ["COMPRESSION_PRESETS", "URL_PARAMETERS", "parse_compression", "parse_url"]
