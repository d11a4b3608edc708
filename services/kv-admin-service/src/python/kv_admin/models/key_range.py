from typing import Optional
from pydantic import BaseModel

class KeyRange(BaseModel):
    """Namespaced byte range, start inclusive. An end of None runs to the end of the keyspace."""
    start: bytes
    end: Optional[bytes] = None

    def contains(self, key: bytes) -> bool:
        if key < self.start:
            return False
        return self.end is None or key < self.end
