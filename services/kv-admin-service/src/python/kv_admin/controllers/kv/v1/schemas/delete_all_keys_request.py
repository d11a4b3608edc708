from pydantic import BaseModel
from kv_admin.models import KvMode

class DeleteAllKeysRequest(BaseModel):
    type: KvMode = KvMode.RAW
