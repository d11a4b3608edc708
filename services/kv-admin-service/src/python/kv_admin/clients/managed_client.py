import logging
import threading
from typing import Callable, Generic, TypeVar
from kv_admin.models import KvMode

TClient = TypeVar("TClient")

class ManagedClient(Generic[TClient]):
    """Client handle plus the leases taken on it.

    Once retired, the handle is closed by the given closer as soon as its last
    lease is released.
    """

    def __init__(self, mode: KvMode, client: TClient, closer: Callable[["ManagedClient"], None]):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__lock = threading.Lock()
        self.__leases: int = 0
        self.__retired: bool = False
        self.__closed: bool = False
        self.__closer = closer
        self.mode = mode
        self.client = client

    def acquire(self) -> TClient:
        with self.__lock:
            self.__leases += 1
        return self.client

    def release(self) -> None:
        with self.__lock:
            self.__leases -= 1
            should_close = self.__should_close()
        if should_close:
            self.__closer(self)

    def retire(self) -> None:
        with self.__lock:
            self.__retired = True
            should_close = self.__should_close()
        if should_close:
            self.__closer(self)

    def close(self) -> None:
        self.__logger.info(f"Closing retired {self.mode} client")
        try:
            self.client.close()
        except Exception:
            self.__logger.warning(f"Failed to close {self.mode} client", exc_info=True)

    @property
    def leases(self) -> int:
        with self.__lock:
            return self.__leases

    def __should_close(self) -> bool:
        if not self.__retired or self.__leases > 0 or self.__closed:
            return False
        self.__closed = True
        return True
