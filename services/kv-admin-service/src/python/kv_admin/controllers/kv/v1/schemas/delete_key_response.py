from pydantic import BaseModel

class DeleteKeyResponse(BaseModel):
    key: str
