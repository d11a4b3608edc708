from http import HTTPStatus
from typing import Optional
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class KeyNotFoundException(ManagedException):
    def __init__(self, key: Optional[str] = None, message: str = "Key not found"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.NOT_FOUND,
            diagnostic_code="00404",
            diagnostic_details={"key": key} if key is not None else {},
            message=message
        ))
