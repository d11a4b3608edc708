from pydantic import BaseModel
from .key_value_details import KeyValueDetails

class ScanKeysResponse(BaseModel):
    entries: list[KeyValueDetails]
    total: int
    page: int
    limit: int
    total_pages: int
    total_is_estimate: bool
