from pydantic import BaseModel

class ModeStatsDetails(BaseModel):
    sample_keys: int
    sample_is_estimate: bool
    connected: bool

class OverallStatsDetails(BaseModel):
    connected: bool
    api_version: str
    driver: str

class GetStatsResponse(BaseModel):
    rawkv: ModeStatsDetails
    txn: ModeStatsDetails
    overall: OverallStatsDetails
