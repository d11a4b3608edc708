from .exceptions import BackendConnectError, BackendError, ClientClosedError, TransactionClosedError, TransactionConflictError
from .kv_backend import KvBackend
from .kv_backend_factory import KvBackendFactory
from .kv_transaction import KvTransaction
from .raw_kv_client import RawKvClient
from .txn_kv_client import TxnKvClient

__all__ = [
    "BackendConnectError",
    "BackendError",
    "ClientClosedError",
    "KvBackend",
    "KvBackendFactory",
    "KvTransaction",
    "RawKvClient",
    "TransactionClosedError",
    "TransactionConflictError",
    "TxnKvClient"
]
