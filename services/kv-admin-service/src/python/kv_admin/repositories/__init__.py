from .base_kv_repository import BaseKvRepository
from .key_namespacer import KeyNamespacer
from .raw_kv_repository import RawKvRepository
from .txn_kv_repository import TxnKvRepository, TxnSession

__all__ = [
    "BaseKvRepository",
    "KeyNamespacer",
    "RawKvRepository",
    "TxnKvRepository",
    "TxnSession"
]
