from pydantic import BaseModel

class GetClusterStatusRequest(BaseModel):
    pass
