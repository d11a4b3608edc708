from typing import Optional
from pydantic import BaseModel
from .kv_mode import KvMode
from .operation_kind import OperationKind

class OperationResult(BaseModel):
    key: bytes
    mode: KvMode
    operation: OperationKind
    success: bool
    error: Optional[str] = None
