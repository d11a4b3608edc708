from pydantic import BaseModel

class ClusterStatus(BaseModel):
    cluster_status: str
    connected: bool
    endpoints: list[str]
    driver: str
