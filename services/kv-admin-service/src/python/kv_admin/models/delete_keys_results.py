from pydantic import BaseModel

class DeleteKeysResults(BaseModel):
    deleted_count: int
    not_found_count: int
