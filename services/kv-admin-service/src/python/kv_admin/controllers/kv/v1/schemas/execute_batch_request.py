from pydantic import BaseModel, Field
from .batch_operation import BatchOperation

class ExecuteBatchRequest(BaseModel):
    operations: list[BatchOperation] = Field(min_length=1)
