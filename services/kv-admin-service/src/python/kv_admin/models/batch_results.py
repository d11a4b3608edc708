from pydantic import BaseModel
from .operation_result import OperationResult

class BatchResults(BaseModel):
    results: list[OperationResult]
    success_count: int
    failure_count: int
