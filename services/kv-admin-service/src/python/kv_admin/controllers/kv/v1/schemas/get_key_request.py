from pydantic import BaseModel, Field
from kv_admin.models import KvMode

class GetKeyRequest(BaseModel):
    key: str = Field(min_length=1)
    type: KvMode = KvMode.RAW
