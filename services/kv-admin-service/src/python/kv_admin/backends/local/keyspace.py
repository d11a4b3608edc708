from typing import Optional

class Keyspace:
    """One-byte tag that keeps the raw and transactional keys of a store apart."""

    def __init__(self, tag: bytes):
        self.__tag = tag
        self.__upper_bound = bytes([tag[0] + 1])

    def wrap(self, key: bytes) -> bytes:
        return self.__tag + key

    def unwrap(self, key: bytes) -> bytes:
        return key[len(self.__tag):]

    def wrap_range(self, start: bytes, end: Optional[bytes]) -> tuple[bytes, bytes]:
        return self.wrap(start), self.__upper_bound if end is None else self.wrap(end)

RAW_KEYSPACE = Keyspace(b"r")
TXN_KEYSPACE = Keyspace(b"x")
