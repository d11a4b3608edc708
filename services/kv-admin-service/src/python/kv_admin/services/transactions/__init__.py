from .execute_transaction_service import ExecuteTransactionService

__all__ = [
    "ExecuteTransactionService"
]
