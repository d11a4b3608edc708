from pydantic import BaseModel, Field
from kv_admin.models import KvMode

class DeleteKeysRequest(BaseModel):
    keys: list[str] = Field(min_length=1)
    type: KvMode = KvMode.RAW
