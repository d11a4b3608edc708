from pydantic import BaseModel

class DeleteKeysResponse(BaseModel):
    deleted_count: int
    not_found_count: int
