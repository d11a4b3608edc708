from abc import ABC, abstractmethod
from .kv_transaction import KvTransaction

class TxnKvClient(ABC):

    @abstractmethod
    def begin(self) -> KvTransaction:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
