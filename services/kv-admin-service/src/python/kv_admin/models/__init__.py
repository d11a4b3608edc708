from .batch_results import BatchResults
from .cluster_status import ClusterStatus
from .delete_keys_results import DeleteKeysResults
from .key_range import KeyRange
from .kv_entry import KvEntry
from .kv_mode import KvMode
from .kv_operation import KvOperation
from .kv_stats import KvStats, ModeStats
from .operation_kind import OperationKind
from .operation_result import OperationResult
from .page_results import PageResults

__all__ = [
    "BatchResults",
    "ClusterStatus",
    "DeleteKeysResults",
    "KeyRange",
    "KvEntry",
    "KvMode",
    "KvOperation",
    "KvStats",
    "ModeStats",
    "OperationKind",
    "OperationResult",
    "PageResults"
]
