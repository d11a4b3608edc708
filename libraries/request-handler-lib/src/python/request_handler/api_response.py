from typing import Any, Optional
from pydantic import BaseModel

class ApiResponse(BaseModel):
    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None
    diagnostic_code: Optional[str] = None
    diagnostic_details: Optional[dict[str, str]] = None
