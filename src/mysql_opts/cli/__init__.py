"""
mysql-opts command line interface.

Provides:
- inspect: Show the options a connection URL resolves to
- capabilities: List the capability flags offered to the server
- resolve: Resolve the server address to socket addresses
"""

from .commands import cli

__all__ = ["cli"]
