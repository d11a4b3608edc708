from http import HTTPStatus
from typing import Optional
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class KeyAlreadyExistsException(ManagedException):
    def __init__(self, key: Optional[str] = None, message: str = "Key already exists"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.CONFLICT,
            diagnostic_code="00409",
            diagnostic_details={"key": key} if key is not None else {},
            message=message
        ))
