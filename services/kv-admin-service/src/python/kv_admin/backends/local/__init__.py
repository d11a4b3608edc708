# Local drivers subpackage

from .local_backend import LocalBackend
from .local_store import LocalStore
from .memory_store import MemoryStore
from .rocksdb_store import RocksDbStore

__all__ = [
    "LocalBackend",
    "LocalStore",
    "MemoryStore",
    "RocksDbStore",
]
