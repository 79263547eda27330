"""
mysql_opts - Connection options resolution for MySQL clients.

Turns a ``mysql://`` connection URL or a fluent builder into one immutable,
validated ``Opts`` object consumed by the connection layer.

Supports:
- URL parsing with strict query-parameter validation
- Programmatic construction through ``OptsBuilder``
- Pool, SSL and compression sub-options
- Capability flag derivation for the handshake
- Loading the URL from the environment
"""

from .address import Address, HostPort, UrlAddress
from .builder import OptsBuilder
from .capabilities import DEFAULT_CAPABILITIES, CapabilityFlags, effective_capabilities
from .compression import Compression
from .config import opts_from_env, url_from_env
from .constants import (
    DEFAULT_INACTIVE_CONNECTION_TTL,
    DEFAULT_PORT,
    DEFAULT_STMT_CACHE_SIZE,
    DEFAULT_TTL_CHECK_INTERVAL,
)
from .exceptions import (
    ConfigurationError,
    InvalidParamValueError,
    InvalidPoolConstraintsError,
    InvalidUrlError,
    MySQLOptsError,
    UnknownParameterError,
    UnsupportedSchemeError,
    UrlError,
    UrlParseError,
)
from .local_infile import LocalInfileHandler
from .opts import Opts
from .pool import DEFAULT_POOL_CONSTRAINTS, PoolConstraints, PoolOpts
from .ssl import SslOpts

__version__ = "0.1.0"
__all__ = [
    # Options
    "Opts",
    "OptsBuilder",
    "opts_from_env",
    "url_from_env",
    # Sub-options
    "PoolConstraints",
    "PoolOpts",
    "SslOpts",
    "Compression",
    "LocalInfileHandler",
    # Address
    "Address",
    "HostPort",
    "UrlAddress",
    # Capabilities
    "CapabilityFlags",
    "DEFAULT_CAPABILITIES",
    "effective_capabilities",
    # Defaults
    "DEFAULT_POOL_CONSTRAINTS",
    "DEFAULT_STMT_CACHE_SIZE",
    "DEFAULT_PORT",
    "DEFAULT_INACTIVE_CONNECTION_TTL",
    "DEFAULT_TTL_CHECK_INTERVAL",
    # Exceptions
    "MySQLOptsError",
    "ConfigurationError",
    "UrlError",
    "UrlParseError",
    "UnsupportedSchemeError",
    "InvalidUrlError",
    "UnknownParameterError",
    "InvalidParamValueError",
    "InvalidPoolConstraintsError",
]
