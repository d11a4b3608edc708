from pydantic import BaseModel
from .operation_result_details import OperationResultDetails

class ExecuteBatchResponse(BaseModel):
    results: list[OperationResultDetails]
    success_count: int
    failure_count: int
