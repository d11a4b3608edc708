from http import HTTPStatus
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class ScanFailedException(ManagedException):
    def __init__(self, mode: str, message: str = "Failed to scan keys"):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            diagnostic_code="20501",
            diagnostic_details={"mode": mode},
            message=message
        ))
