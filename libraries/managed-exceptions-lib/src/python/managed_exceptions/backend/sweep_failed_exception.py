from http import HTTPStatus
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class SweepFailedException(ManagedException):
    """A bulk sweep stopped part-way. Chunks deleted before the failure stay deleted."""

    def __init__(self, mode: str, deleted_count: int, message: str):
        self.deleted_count = deleted_count
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            diagnostic_code="20505",
            diagnostic_details={"mode": mode, "deleted_count": str(deleted_count)},
            message=message
        ))
