from http import HTTPStatus
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class ClientUnavailableException(ManagedException):
    """No live client exists for the requested mode. Retryable once the cluster is reconfigured."""

    def __init__(self, mode: str):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            diagnostic_code="20503",
            diagnostic_details={"mode": mode},
            message=f"{mode} client not initialized"
        ))
