from abc import ABC, abstractmethod
from typing import Optional

class RawKvClient(ABC):
    """Non-transactional access to the raw keyspace. Each call is applied on its own."""

    @abstractmethod
    def get(self, key: bytes) -> Optional[bytes]:
        pass

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        pass

    @abstractmethod
    def delete(self, key: bytes) -> None:
        pass

    @abstractmethod
    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        """Up to ``limit`` pairs in ``[start, end)`` in ascending key order."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass
