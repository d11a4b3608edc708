from .execute_batch_service import ExecuteBatchService

__all__ = [
    "ExecuteBatchService"
]
