from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import ExecuteTransactionRequest, ExecuteTransactionResponse
from kv_admin.models import KvMode, KvOperation
from kv_admin.services.transactions import ExecuteTransactionService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class ExecuteTransactionHandler(RequestHandler[ExecuteTransactionRequest, ExecuteTransactionResponse]):

    @inject
    def __init__(self,
                 execute_transaction_service: ExecuteTransactionService):
        super().__init__(success_message="Transaction committed successfully")
        self.__execute_transaction_service = execute_transaction_service

    def _on_validate(self, request: ExecuteTransactionRequest):
        # Validate request
        pass

    def _on_invoke(self, request: ExecuteTransactionRequest) -> ExecuteTransactionResponse:
        # Execute transaction
        operation_count: int = self.__execute_transaction_service.execute_transaction([
            KvOperation(
                mode=KvMode.TXN,
                kind=operation.operation,
                key=BytesUtil.to_bytes(operation.key),
                value=BytesUtil.to_nullable_bytes(operation.value)
            ) for operation in request.operations
        ])

        # Return response
        return ExecuteTransactionResponse(operation_count=operation_count)
