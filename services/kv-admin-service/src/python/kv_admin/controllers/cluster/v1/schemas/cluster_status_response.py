from pydantic import BaseModel

class ClusterStatusResponse(BaseModel):
    cluster_status: str
    connected: bool
    endpoints: list[str]
    driver: str
