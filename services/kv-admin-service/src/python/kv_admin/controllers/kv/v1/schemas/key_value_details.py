from pydantic import BaseModel

class KeyValueDetails(BaseModel):
    key: str
    value: str
