from abc import ABC
from contextlib import contextmanager
from time import time
from typing import Iterator
from prometheus_client import Counter, Histogram
from kv_admin.models import KvEntry, KvMode
from .key_namespacer import KeyNamespacer

KV_EXE_COUNTER = Counter("kva_kv_exe_total", "Total number of KV operations executed", ["mode", "operation"])
KV_EXE_ERROR_COUNTER = Counter("kva_kv_exe_error_total", "Total number of KV operations that failed", ["mode", "operation"])
KV_EXE_DURATION_HISTOGRAM = Histogram("kva_kv_exe_duration_seconds", "Duration of KV operations in seconds", ["mode", "operation"])

class BaseKvRepository(ABC):

    def __init__(self, mode: KvMode, key_namespacer: KeyNamespacer):
        self.__mode = mode
        self._key_namespacer = key_namespacer

    @property
    def mode(self) -> KvMode:
        return self.__mode

    @contextmanager
    def _track(self, operation: str) -> Iterator[None]:
        start_time: float = time()
        KV_EXE_COUNTER.labels(mode=self.__mode, operation=operation).inc()
        try:
            yield
        except Exception:
            KV_EXE_ERROR_COUNTER.labels(mode=self.__mode, operation=operation).inc()
            raise
        finally:
            duration: float = time() - start_time
            KV_EXE_DURATION_HISTOGRAM.labels(mode=self.__mode, operation=operation).observe(duration)

    def _to_entries(self, pairs: list[tuple[bytes, bytes]]) -> list[KvEntry]:
        # Keys outside the managed namespace are never returned
        return [
            KvEntry(key=self._key_namespacer.unwrap(key), value=value)
            for key, value in pairs
            if self._key_namespacer.is_managed(key)
        ]
