from http import HTTPStatus
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class BackendOperationException(ManagedException):
    def __init__(self, mode: str, operation: str):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            diagnostic_code="20500",
            diagnostic_details={"mode": mode, "operation": operation},
            message=f"Failed to {operation} key in {mode}"
        ))
