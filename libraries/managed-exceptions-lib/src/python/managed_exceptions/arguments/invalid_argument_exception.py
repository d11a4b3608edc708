from http import HTTPStatus
from typing import Optional
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class InvalidArgumentException(ManagedException):
    def __init__(self, message: str, diagnostic_details: Optional[dict[str, str]] = None):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.BAD_REQUEST,
            diagnostic_code="00400",
            diagnostic_details=diagnostic_details or {},
            message=message
        ))
