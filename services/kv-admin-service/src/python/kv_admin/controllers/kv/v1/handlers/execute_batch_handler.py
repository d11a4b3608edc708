from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import ExecuteBatchRequest, ExecuteBatchResponse, OperationResultDetails
from kv_admin.models import KvOperation
from kv_admin.services.batches import ExecuteBatchService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class ExecuteBatchHandler(RequestHandler[ExecuteBatchRequest, ExecuteBatchResponse]):

    @inject
    def __init__(self,
                 execute_batch_service: ExecuteBatchService):
        super().__init__(success_message="Batch operation completed")
        self.__execute_batch_service = execute_batch_service

    def _on_validate(self, request: ExecuteBatchRequest):
        # Validate request
        pass

    def _on_invoke(self, request: ExecuteBatchRequest) -> ExecuteBatchResponse:
        # Execute batch
        batch_results = self.__execute_batch_service.execute_batch([
            KvOperation(
                mode=operation.type,
                kind=operation.operation,
                key=BytesUtil.to_bytes(operation.key),
                value=BytesUtil.to_nullable_bytes(operation.value)
            ) for operation in request.operations
        ])

        # Return response
        return ExecuteBatchResponse(
            results=[
                OperationResultDetails(
                    key=BytesUtil.to_str(result.key),
                    type=result.mode,
                    operation=result.operation,
                    success=result.success,
                    error=result.error
                ) for result in batch_results.results
            ],
            success_count=batch_results.success_count,
            failure_count=batch_results.failure_count
        )
