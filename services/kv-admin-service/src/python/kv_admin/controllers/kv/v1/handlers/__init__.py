from .create_key_handler import CreateKeyHandler
from .delete_all_keys_handler import DeleteAllKeysHandler
from .delete_key_handler import DeleteKeyHandler
from .delete_keys_handler import DeleteKeysHandler
from .execute_batch_handler import ExecuteBatchHandler
from .execute_transaction_handler import ExecuteTransactionHandler
from .get_key_handler import GetKeyHandler
from .get_stats_handler import GetStatsHandler
from .scan_keys_handler import ScanKeysHandler
from .update_key_handler import UpdateKeyHandler

__all__ = [
    "CreateKeyHandler",
    "DeleteAllKeysHandler",
    "DeleteKeyHandler",
    "DeleteKeysHandler",
    "ExecuteBatchHandler",
    "ExecuteTransactionHandler",
    "GetKeyHandler",
    "GetStatsHandler",
    "ScanKeysHandler",
    "UpdateKeyHandler"
]
