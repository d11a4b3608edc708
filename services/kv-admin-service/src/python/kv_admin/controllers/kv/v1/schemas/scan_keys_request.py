from pydantic import BaseModel
from kv_admin.constants import DEFAULT_PAGE_SIZE
from kv_admin.models import KvMode

class ScanKeysRequest(BaseModel):
    prefix: str = ""
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    type: KvMode = KvMode.RAW
