from .batch_operation import BatchOperation
from .create_key_request import CreateKeyRequest
from .delete_all_keys_request import DeleteAllKeysRequest
from .delete_all_keys_response import DeleteAllKeysResponse
from .delete_key_request import DeleteKeyRequest
from .delete_key_response import DeleteKeyResponse
from .delete_keys_request import DeleteKeysRequest
from .delete_keys_response import DeleteKeysResponse
from .execute_batch_request import ExecuteBatchRequest
from .execute_batch_response import ExecuteBatchResponse
from .execute_transaction_request import ExecuteTransactionRequest
from .execute_transaction_response import ExecuteTransactionResponse
from .get_key_request import GetKeyRequest
from .get_stats_request import GetStatsRequest
from .get_stats_response import GetStatsResponse, ModeStatsDetails, OverallStatsDetails
from .key_value_details import KeyValueDetails
from .operation_result_details import OperationResultDetails
from .scan_keys_request import ScanKeysRequest
from .scan_keys_response import ScanKeysResponse
from .transaction_operation import TransactionOperation
from .update_key_request import UpdateKeyRequest

__all__ = [
    "BatchOperation",
    "CreateKeyRequest",
    "DeleteAllKeysRequest",
    "DeleteAllKeysResponse",
    "DeleteKeyRequest",
    "DeleteKeyResponse",
    "DeleteKeysRequest",
    "DeleteKeysResponse",
    "ExecuteBatchRequest",
    "ExecuteBatchResponse",
    "ExecuteTransactionRequest",
    "ExecuteTransactionResponse",
    "GetKeyRequest",
    "GetStatsRequest",
    "GetStatsResponse",
    "KeyValueDetails",
    "ModeStatsDetails",
    "OperationResultDetails",
    "OverallStatsDetails",
    "ScanKeysRequest",
    "ScanKeysResponse",
    "TransactionOperation",
    "UpdateKeyRequest"
]
