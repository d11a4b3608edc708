from pydantic import BaseModel
from .kv_entry import KvEntry

class PageResults(BaseModel):
    entries: list[KvEntry]
    total: int
    page: int
    limit: int
    total_pages: int
    total_is_estimate: bool
