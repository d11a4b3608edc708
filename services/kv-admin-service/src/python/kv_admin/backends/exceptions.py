class BackendError(Exception):
    """Base exception for all backend driver errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class BackendConnectError(BackendError):
    """A client could not be opened against the given endpoints."""

    def __init__(self, endpoints: list[str], reason: str):
        self.endpoints = endpoints
        self.reason = reason
        super().__init__(f"Failed to connect to {','.join(endpoints)}: {reason}")


class ClientClosedError(BackendError):

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"{mode} client is closed")


class TransactionConflictError(BackendError):
    """Raised on commit when another transaction wrote one of our keys first."""

    def __init__(self, key: bytes):
        self.key = key
        super().__init__(f"Write conflict on key {key!r}")


class TransactionClosedError(BackendError):

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Transaction is already {state}")
