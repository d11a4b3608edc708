from pydantic import BaseModel

class KvEntry(BaseModel):
    key: bytes
    value: bytes
