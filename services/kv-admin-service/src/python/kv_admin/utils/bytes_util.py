from typing import Optional

class BytesUtil:

    @staticmethod
    def to_bytes(plain_str: str) -> bytes:
        return plain_str.encode("utf-8")

    @staticmethod
    def to_str(raw_bytes: bytes) -> str:
        return raw_bytes.decode("utf-8", errors="replace")

    @staticmethod
    def to_nullable_bytes(plain_str: Optional[str]) -> Optional[bytes]:
        if plain_str is None:
            return None
        return BytesUtil.to_bytes(plain_str)

    @staticmethod
    def successor(key: bytes) -> Optional[bytes]:
        """Smallest byte string greater than every key that starts with ``key``.

        Trailing 0xFF bytes cannot be incremented, so they are dropped before the
        last remaining byte is incremented. Returns None when no such bound exists
        (empty key or all 0xFF), meaning the range runs to the end of the keyspace.
        """
        stripped: bytes = key.rstrip(b"\xff")
        if not stripped:
            return None
        return stripped[:-1] + bytes([stripped[-1] + 1])

    @staticmethod
    def next_key(key: bytes) -> bytes:
        # Smallest key strictly greater than the given one
        return key + b"\x00"
