"""
Handler interface for ``LOAD DATA LOCAL INFILE`` requests.

Options only hold a reference to a handler; the connection layer invokes it.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class LocalInfileHandler(ABC):
    """
    Abstract handler for local infile requests.

    Implementations stream the content of the file the server asked for.
    """

    @abstractmethod
    def handle(self, file_name: bytes) -> AsyncIterator[bytes]:
        """
        Produce the content of ``file_name`` as a stream of chunks.

        Args:
            file_name: File name as sent by the server

        Returns:
            Async iterator over the file content
        """
        ...


__all__ = ["LocalInfileHandler"]
