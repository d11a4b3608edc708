from pathlib import Path
from time import time
from typing import Iterable, Optional
from prometheus_client import Counter, Histogram
from rocksdict import Rdict, Options, WriteBatch
from .local_store import LocalStore

ROCKSDB_EXE_COUNTER = Counter("kva_rocksdb_exe_total", "Total number of RocksDB operations executed", ["store", "operation"])
ROCKSDB_EXE_DURATION_HISTOGRAM = Histogram("kva_rocksdb_exe_duration_seconds", "Duration of RocksDB operations in seconds", ["store", "operation"])

class RocksDbStore(LocalStore):

    def __init__(self, location: str, create_if_missing: bool = True):
        self.__name: str = Path(location).name
        if create_if_missing:
            Path(location).parent.mkdir(parents=True, exist_ok=True)
        options = Options(raw_mode=True)
        options.create_if_missing(create_if_missing)
        self.__db: Rdict = Rdict(location, options=options)

    def get(self, key: bytes) -> Optional[bytes]:
        start_time: float = time()
        ROCKSDB_EXE_COUNTER.labels(store=self.__name, operation="get").inc()
        try:
            return self.__db.get(key)
        finally:
            duration: float = time() - start_time
            ROCKSDB_EXE_DURATION_HISTOGRAM.labels(store=self.__name, operation="get").observe(duration)

    def scan(self, start: bytes, end: Optional[bytes], limit: int) -> list[tuple[bytes, bytes]]:
        start_time: float = time()
        ROCKSDB_EXE_COUNTER.labels(store=self.__name, operation="scan").inc()
        try:
            results: list[tuple[bytes, bytes]] = []
            if limit <= 0:
                return results
            for key, value in self.__db.items(from_key=start):
                if end is not None and key >= end:
                    break
                results.append((key, value))
                if len(results) >= limit:
                    break
            return results
        finally:
            duration: float = time() - start_time
            ROCKSDB_EXE_DURATION_HISTOGRAM.labels(store=self.__name, operation="scan").observe(duration)

    def write(self, puts: dict[bytes, bytes], deletes: Iterable[bytes]) -> None:
        start_time: float = time()
        ROCKSDB_EXE_COUNTER.labels(store=self.__name, operation="write").inc()
        try:
            batch = WriteBatch(raw_mode=True)
            for key, value in puts.items():
                batch.put(key, value)
            for key in deletes:
                batch.delete(key)
            self.__db.write(batch)
        finally:
            duration: float = time() - start_time
            ROCKSDB_EXE_DURATION_HISTOGRAM.labels(store=self.__name, operation="write").observe(duration)

    def close(self) -> None:
        self.__db.close()
