from typing import Optional
from pydantic import BaseModel, Field
from kv_admin.models import OperationKind

class TransactionOperation(BaseModel):
    operation: OperationKind
    key: str = Field(min_length=1)
    value: Optional[str] = None
