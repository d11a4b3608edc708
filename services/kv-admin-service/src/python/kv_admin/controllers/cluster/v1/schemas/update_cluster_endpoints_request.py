from pydantic import BaseModel, Field

class UpdateClusterEndpointsRequest(BaseModel):
    # Comma separated host:port list
    endpoints: str = Field(min_length=1)
