from http import HTTPStatus
from typing import Optional
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class TransactionFailedException(ManagedException):
    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            diagnostic_code="20502",
            diagnostic_details={"key": key} if key is not None else {},
            message=message
        ))
