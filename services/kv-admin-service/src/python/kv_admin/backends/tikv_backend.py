import logging
from typing import Optional
from tikv_client import RawClient, TransactionClient
from .exceptions import BackendConnectError, TransactionClosedError
from .kv_backend import KvBackend
from .kv_transaction import KvTransaction
from .raw_kv_client import RawKvClient
from .txn_kv_client import TxnKvClient

class TikvRawKvClient(RawKvClient):

    def __init__(self, client: RawClient):
        self.__client = client

    def get(self, key: bytes) -> Optional[bytes]:
        return self.__client.get(key)

    def put(self, key: bytes, value: bytes) -> None:
        self.__client.put(key, value)

    def delete(self, key: bytes) -> None:
        self.__client.delete(key)

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        pairs = self.__client.scan(start, end=end, limit=limit, include_start=True, include_end=False)
        return [(key, value) for key, value in pairs]

    def close(self) -> None:
        # The native client releases its connections when collected
        self.__client = None


class TikvTransaction(KvTransaction):
    """Optimistic TiKV transaction.

    Nothing reaches the cluster before ``commit``, so a rollback only drops
    the transaction handle.
    """

    def __init__(self, transaction):
        self.__transaction = transaction

    def get(self, key: bytes) -> Optional[bytes]:
        return self.__active().get(key)

    def set(self, key: bytes, value: bytes) -> None:
        self.__active().put(key, value)

    def delete(self, key: bytes) -> None:
        self.__active().delete(key)

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        pairs = self.__active().scan(start, end=end, limit=limit, include_start=True, include_end=False)
        return [(key, value) for key, value in pairs]

    def commit(self) -> None:
        transaction = self.__active()
        self.__transaction = None
        transaction.commit()

    def rollback(self) -> None:
        self.__transaction = None

    def __active(self):
        if self.__transaction is None:
            raise TransactionClosedError("finished")
        return self.__transaction


class TikvTxnKvClient(TxnKvClient):

    def __init__(self, client: TransactionClient):
        self.__client = client

    def begin(self) -> KvTransaction:
        return TikvTransaction(self.__client.begin(pessimistic=False))

    def close(self) -> None:
        self.__client = None


class TikvBackend(KvBackend):
    """Driver for a real TiKV cluster, reached through its PD endpoints."""

    def __init__(self):
        self.__logger = logging.getLogger(self.__class__.__name__)

    @property
    def driver_name(self) -> str:
        return "tikv"

    def open_raw_client(self, endpoints: list[str]) -> RawKvClient:
        self.__logger.info(f"Connecting raw client to PD endpoints {endpoints}")
        try:
            return TikvRawKvClient(RawClient.connect(endpoints))
        except Exception as e:
            raise BackendConnectError(endpoints, str(e)) from e

    def open_txn_client(self, endpoints: list[str]) -> TxnKvClient:
        self.__logger.info(f"Connecting transaction client to PD endpoints {endpoints}")
        try:
            return TikvTxnKvClient(TransactionClient.connect(endpoints))
        except Exception as e:
            raise BackendConnectError(endpoints, str(e)) from e
