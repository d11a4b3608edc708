from pydantic import BaseModel

class GetStatsRequest(BaseModel):
    pass
