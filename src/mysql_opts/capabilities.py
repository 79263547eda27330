"""
MySQL client capability flags.

The stored capability set of an options draft is adjusted only through
explicit add/remove calls. Three bits (CONNECT_WITH_DB, SSL, COMPRESS) are
derived from field state on every read by :func:`effective_capabilities`
and are never cached.
"""

from enum import IntFlag


class CapabilityFlags(IntFlag):
    """
    Client capability bits offered during the handshake.

    Values match the ``CLIENT_*`` constants of the MySQL client/server protocol.
    """

    CLIENT_LONG_PASSWORD = 0x0000_0001
    CLIENT_FOUND_ROWS = 0x0000_0002
    CLIENT_LONG_FLAG = 0x0000_0004
    CLIENT_CONNECT_WITH_DB = 0x0000_0008
    CLIENT_NO_SCHEMA = 0x0000_0010
    CLIENT_COMPRESS = 0x0000_0020
    CLIENT_ODBC = 0x0000_0040
    CLIENT_LOCAL_FILES = 0x0000_0080
    CLIENT_IGNORE_SPACE = 0x0000_0100
    CLIENT_PROTOCOL_41 = 0x0000_0200
    CLIENT_INTERACTIVE = 0x0000_0400
    CLIENT_SSL = 0x0000_0800
    CLIENT_IGNORE_SIGPIPE = 0x0000_1000
    CLIENT_TRANSACTIONS = 0x0000_2000
    CLIENT_RESERVED = 0x0000_4000
    CLIENT_SECURE_CONNECTION = 0x0000_8000
    CLIENT_MULTI_STATEMENTS = 0x0001_0000
    CLIENT_MULTI_RESULTS = 0x0002_0000
    CLIENT_PS_MULTI_RESULTS = 0x0004_0000
    CLIENT_PLUGIN_AUTH = 0x0008_0000
    CLIENT_CONNECT_ATTRS = 0x0010_0000
    CLIENT_PLUGIN_AUTH_LENENC_CLIENT_DATA = 0x0020_0000
    CLIENT_CAN_HANDLE_EXPIRED_PASSWORDS = 0x0040_0000
    CLIENT_SESSION_TRACK = 0x0080_0000
    CLIENT_DEPRECATE_EOF = 0x0100_0000
    CLIENT_OPTIONAL_RESULTSET_METADATA = 0x0200_0000
    CLIENT_ZSTD_COMPRESSION_ALGORITHM = 0x0400_0000
    CLIENT_QUERY_ATTRIBUTES = 0x0800_0000
    MULTI_FACTOR_AUTHENTICATION = 0x1000_0000
    CLIENT_PROGRESS_OBSOLETE = 0x2000_0000
    CLIENT_SSL_VERIFY_SERVER_CERT = 0x4000_0000
    CLIENT_REMEMBER_OPTIONS = 0x8000_0000

    def names(self) -> list[str]:
        """Names of the individual bits set in this value, lowest bit first."""
        return [flag.name for flag in CapabilityFlags if flag.name and flag in self]


DEFAULT_CAPABILITIES = (
    CapabilityFlags.CLIENT_PROTOCOL_41
    | CapabilityFlags.CLIENT_SECURE_CONNECTION
    | CapabilityFlags.CLIENT_LONG_PASSWORD
    | CapabilityFlags.CLIENT_TRANSACTIONS
    | CapabilityFlags.CLIENT_LOCAL_FILES
    | CapabilityFlags.CLIENT_MULTI_STATEMENTS
    | CapabilityFlags.CLIENT_MULTI_RESULTS
    | CapabilityFlags.CLIENT_PS_MULTI_RESULTS
    | CapabilityFlags.CLIENT_DEPRECATE_EOF
    | CapabilityFlags.CLIENT_PLUGIN_AUTH
)


def effective_capabilities(
    stored: CapabilityFlags,
    db_set: bool,
    ssl_set: bool,
    compression_set: bool,
) -> CapabilityFlags:
    """
    Compute the capability set to offer the server.

    The conditional bits are OR-ed in from field state, so a prior
    ``remove_capability`` cannot clear them while the field stays set.

    Args:
        stored: Base bits plus manual adjustments
        db_set: A database name is configured
        ssl_set: SSL options are configured
        compression_set: A compression level is configured

    Returns:
        The effective capability flags
    """
    out = CapabilityFlags(stored)
    if db_set:
        out |= CapabilityFlags.CLIENT_CONNECT_WITH_DB
    if ssl_set:
        out |= CapabilityFlags.CLIENT_SSL
    if compression_set:
        out |= CapabilityFlags.CLIENT_COMPRESS
    return out
