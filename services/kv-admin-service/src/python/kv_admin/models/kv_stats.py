from pydantic import BaseModel

class ModeStats(BaseModel):
    sample_keys: int
    sample_is_estimate: bool
    connected: bool

class KvStats(BaseModel):
    raw: ModeStats
    txn: ModeStats
    connected: bool
    api_version: str
    driver: str
