from abc import ABC, abstractmethod
from typing import Iterable, Optional

class LocalStore(ABC):
    """Ordered byte store backing the local drivers."""

    @abstractmethod
    def get(self, key: bytes) -> Optional[bytes]:
        pass

    @abstractmethod
    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        pass

    @abstractmethod
    def write(self, puts: dict[bytes, bytes], deletes: Iterable[bytes]) -> None:
        """Apply all puts and deletes atomically."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def put(self, key: bytes, value: bytes) -> None:
        self.write({key: value}, ())

    def delete(self, key: bytes) -> None:
        self.write({}, (key,))
