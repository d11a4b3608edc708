import logging
from injector import inject, singleton
from managed_exceptions import InvalidArgumentException, KeyNotFoundException, ManagedException, TransactionFailedException
from kv_admin.models import KvOperation, OperationKind
from kv_admin.repositories import TxnKvRepository, TxnSession
from kv_admin.utils import BytesUtil

@singleton
class ExecuteTransactionService:
    """Applies all operations in one transaction, or none of them."""

    @inject
    def __init__(self, txn_kv_repository: TxnKvRepository):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__txn_kv_repository = txn_kv_repository

    def execute_transaction(self, operations: list[KvOperation]) -> int:
        if not operations:
            raise InvalidArgumentException("No operations provided")

        # Any exception leaving the session rolls the transaction back
        with self.__txn_kv_repository.transaction() as session:
            for index, operation in enumerate(operations):
                self.__stage(session, index, operation)

            # Commit
            try:
                session.commit()
            except Exception as e:
                raise TransactionFailedException("Failed to commit transaction") from e

        self.__logger.info(f"Committed transaction of {len(operations)} operations")
        return len(operations)

    def __stage(self, session: TxnSession, index: int, operation: KvOperation) -> None:
        key: str = BytesUtil.to_str(operation.key)
        try:
            if operation.kind == OperationKind.PUT:
                if not operation.value:
                    raise InvalidArgumentException(
                        f"Value is required for put operation at index {index}",
                        {"index": str(index), "key": key}
                    )
                session.set(operation.key, operation.value)
                return

            # Delete requires the key to exist, staged writes included
            if session.get(operation.key) is None:
                raise KeyNotFoundException(key, f"Key not found: {key}")
            session.delete(operation.key)
        except ManagedException:
            raise
        except Exception as e:
            raise TransactionFailedException(f"Failed to {operation.kind} key {key}", key) from e
