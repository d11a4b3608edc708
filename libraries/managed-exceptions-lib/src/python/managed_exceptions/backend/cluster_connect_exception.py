from http import HTTPStatus
from managed_exceptions.managed_exception import ErrorDetails, ManagedException

class ClusterConnectException(ManagedException):
    """A reconfiguration could not open new clients. The previous clients stay active."""

    def __init__(self, endpoints: list[str], reason: str):
        super().__init__(ErrorDetails(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            diagnostic_code="20504",
            diagnostic_details={"endpoints": ",".join(endpoints), "reason": reason},
            message="Failed to connect to cluster with provided endpoints"
        ))
