from pydantic import BaseModel, Field
from kv_admin.models import KvMode

class CreateKeyRequest(BaseModel):
    key: str = Field(min_length=1)
    value: str
    type: KvMode = KvMode.RAW
