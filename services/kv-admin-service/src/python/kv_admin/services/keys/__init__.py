from .create_key_service import CreateKeyService
from .delete_all_keys_service import DeleteAllKeysService
from .delete_key_service import DeleteKeyService
from .delete_keys_service import DeleteKeysService
from .get_key_service import GetKeyService
from .range_scanner import RangeScanner
from .scan_keys_service import ScanKeysService
from .update_key_service import UpdateKeyService

__all__ = [
    "CreateKeyService",
    "DeleteAllKeysService",
    "DeleteKeyService",
    "DeleteKeysService",
    "GetKeyService",
    "RangeScanner",
    "ScanKeysService",
    "UpdateKeyService"
]
