from typing import Optional
from pydantic import BaseModel
from kv_admin.models import KvMode, OperationKind

class OperationResultDetails(BaseModel):
    key: str
    type: KvMode
    operation: OperationKind
    success: bool
    error: Optional[str] = None
