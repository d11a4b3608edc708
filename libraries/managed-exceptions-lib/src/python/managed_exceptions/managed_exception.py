from http import HTTPStatus
from typing import Optional
from pydantic import BaseModel, Field

class ErrorDetails(BaseModel):
    status_code: HTTPStatus
    diagnostic_code: str
    diagnostic_details: dict[str, str] = Field(default_factory=dict)
    message: str

class ManagedException(Exception):
    def __init__(self, error: ErrorDetails):
        self.status_code = error.status_code
        self.diagnostic_code = error.diagnostic_code
        self.diagnostic_details = error.diagnostic_details
        super().__init__(error.message)

    @property
    def cause_message(self) -> Optional[str]:
        # Raw error of the underlying backend call, when raised with "from"
        if self.__cause__ is None:
            return None
        return str(self.__cause__) or self.__cause__.__class__.__name__
