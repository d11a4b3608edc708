from managed_exceptions.managed_exception import ErrorDetails, ManagedException
from managed_exceptions.arguments.invalid_argument_exception import InvalidArgumentException
from managed_exceptions.keys.key_already_exists_exception import KeyAlreadyExistsException
from managed_exceptions.keys.key_not_found_exception import KeyNotFoundException
from managed_exceptions.backend.backend_operation_exception import BackendOperationException
from managed_exceptions.backend.client_unavailable_exception import ClientUnavailableException
from managed_exceptions.backend.cluster_connect_exception import ClusterConnectException
from managed_exceptions.backend.scan_failed_exception import ScanFailedException
from managed_exceptions.backend.sweep_failed_exception import SweepFailedException
from managed_exceptions.backend.transaction_failed_exception import TransactionFailedException
from managed_exceptions.internal.internal_error_exception import InternalErrorException

__all__ = [
    "ErrorDetails",
    "ManagedException",
    "InvalidArgumentException",
    "KeyAlreadyExistsException",
    "KeyNotFoundException",
    "BackendOperationException",
    "ClientUnavailableException",
    "ClusterConnectException",
    "ScanFailedException",
    "SweepFailedException",
    "TransactionFailedException",
    "InternalErrorException"
]
