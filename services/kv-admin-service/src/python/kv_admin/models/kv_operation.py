from typing import Optional
from pydantic import BaseModel
from .kv_mode import KvMode
from .operation_kind import OperationKind

class KvOperation(BaseModel):
    mode: KvMode = KvMode.RAW
    kind: OperationKind
    key: bytes
    value: Optional[bytes] = None
