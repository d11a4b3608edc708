import logging
from typing import Optional
from injector import inject, singleton
from managed_exceptions import ClientUnavailableException, InvalidArgumentException, KeyNotFoundException, ManagedException
from kv_admin.models import BatchResults, KvMode, KvOperation, OperationKind, OperationResult
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.utils import BytesUtil

@singleton
class ExecuteBatchService:
    """Runs mixed-mode operations one after another, each on its own.

    A failing operation is recorded in its result and never stops or undoes the
    others. Results keep the order of the submitted operations.
    """

    @inject
    def __init__(self,
                 raw_kv_repository: RawKvRepository,
                 txn_kv_repository: TxnKvRepository):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__raw_kv_repository = raw_kv_repository
        self.__txn_kv_repository = txn_kv_repository

    def execute_batch(self, operations: list[KvOperation]) -> BatchResults:
        results: list[OperationResult] = [self.__execute_operation(operation) for operation in operations]
        success_count: int = sum(1 for result in results if result.success)
        return BatchResults(
            results=results,
            success_count=success_count,
            failure_count=len(results) - success_count
        )

    def __execute_operation(self, operation: KvOperation) -> OperationResult:
        error: Optional[str] = None
        try:
            if operation.kind == OperationKind.PUT:
                self.__put(operation)
            else:
                self.__delete(operation)
        except ManagedException as e:
            error = f"{e}: {e.cause_message}" if e.cause_message else str(e)
        except Exception as e:
            self.__logger.warning(f"Unexpected failure of batch operation {operation.kind} on {operation.key!r}", exc_info=True)
            error = str(e) or e.__class__.__name__

        return OperationResult(
            key=operation.key,
            mode=operation.mode,
            operation=operation.kind,
            success=error is None,
            error=error
        )

    def __put(self, operation: KvOperation) -> None:
        if not operation.value:
            raise InvalidArgumentException("Value is required for put operation")

        if operation.mode == KvMode.TXN:
            self.__txn_kv_repository.upsert(operation.key, operation.value)
        else:
            self.__raw_kv_repository.upsert(operation.key, operation.value)

    def __delete(self, operation: KvOperation) -> None:
        # Read first, a failed read counts as a missing key
        repository = self.__txn_kv_repository if operation.mode == KvMode.TXN else self.__raw_kv_repository
        try:
            exists: bool = repository.read(operation.key) is not None
        except ClientUnavailableException:
            raise
        except ManagedException:
            self.__logger.warning(f"Failed to read {operation.key!r} before delete", exc_info=True)
            exists = False
        if not exists:
            raise KeyNotFoundException(BytesUtil.to_str(operation.key))

        if operation.mode == KvMode.TXN:
            # Deleted by someone else since the read
            if not self.__txn_kv_repository.delete(operation.key):
                raise KeyNotFoundException(BytesUtil.to_str(operation.key))
        else:
            self.__raw_kv_repository.delete(operation.key)
