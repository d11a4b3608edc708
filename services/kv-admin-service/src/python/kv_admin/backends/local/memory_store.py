import threading
from bisect import bisect_left, insort
from typing import Iterable, Optional
from .local_store import LocalStore

class MemoryStore(LocalStore):
    """In-process ordered store.

    Keys are kept in a sorted list next to a dict of values; one re-entrant
    lock guards both.
    """

    def __init__(self):
        self.__lock = threading.RLock()
        self.__keys: list[bytes] = []
        self.__values: dict[bytes, bytes] = {}

    def get(self, key: bytes) -> Optional[bytes]:
        with self.__lock:
            return self.__values.get(key)

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        results: list[tuple[bytes, bytes]] = []
        with self.__lock:
            index: int = bisect_left(self.__keys, start)
            while index < len(self.__keys) and len(results) < limit:
                key = self.__keys[index]
                if end is not None and key >= end:
                    break
                results.append((key, self.__values[key]))
                index += 1
        return results

    def write(self, puts: dict[bytes, bytes], deletes: Iterable[bytes]) -> None:
        with self.__lock:
            for key, value in puts.items():
                if key not in self.__values:
                    insort(self.__keys, key)
                self.__values[key] = value
            for key in deletes:
                if key in self.__values:
                    del self.__values[key]
                    self.__keys.pop(bisect_left(self.__keys, key))

    def close(self) -> None:
        # Data lives as long as the process
        pass

    def __len__(self) -> int:
        with self.__lock:
            return len(self.__keys)
