from pydantic import BaseModel
from kv_admin.models import KvMode

class DeleteAllKeysResponse(BaseModel):
    type: KvMode
    deleted_count: int
