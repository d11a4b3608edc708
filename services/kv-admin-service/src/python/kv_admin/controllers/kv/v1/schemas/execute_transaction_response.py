from pydantic import BaseModel

class ExecuteTransactionResponse(BaseModel):
    operation_count: int
