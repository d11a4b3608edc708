import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional
from injector import inject, singleton
from managed_exceptions import ClientUnavailableException, ClusterConnectException
from prometheus_client import Counter, Gauge
from kv_admin.backends import KvBackend, RawKvClient, TxnKvClient
from kv_admin.configs import KvAdminConfig
from kv_admin.models import KvMode
from .endpoint_registry import EndpointRegistry
from .managed_client import ManagedClient

CLIENT_CONNECTED_GAUGE = Gauge("kva_client_connected", "Whether a client is available for the mode", ["mode"])
CLIENT_LEASE_COUNTER = Counter("kva_client_lease_total", "Total number of client leases taken", ["mode"])
CLUSTER_RECONFIGURE_COUNTER = Counter("kva_cluster_reconfigure_total", "Total number of cluster reconfigurations", ["result"])

@singleton
class ClientManager:
    """Owns the raw and transactional client handles.

    Handles are replaced as a pair by ``reconfigure`` and leased by callers via
    ``raw_client()``/``txn_client()``. A replaced handle keeps serving its
    in-flight leases and is closed in the background after the last one ends.

    Each connect attempt runs on its own daemon thread, so an attempt that
    hangs past the timeout never holds up later reconfigurations or closes.
    """

    @inject
    def __init__(self,
                 backend: KvBackend,
                 endpoint_registry: EndpointRegistry,
                 config: KvAdminConfig):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__backend = backend
        self.__endpoint_registry = endpoint_registry
        self.__connect_timeout: float = config.cluster_connect_timeout_seconds
        self.__lock = threading.Lock()
        self.__reconfigure_lock = threading.Lock()
        self.__raw: Optional[ManagedClient[RawKvClient]] = None
        self.__txn: Optional[ManagedClient[TxnKvClient]] = None
        self.__close_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="kv-client-close")

    @property
    def driver_name(self) -> str:
        return self.__backend.driver_name

    def initialize(self) -> bool:
        # Startup connect; the service still starts when the cluster is unreachable
        endpoints: list[str] = self.__endpoint_registry.get_endpoints()
        try:
            self.reconfigure(endpoints)
            return True
        except ClusterConnectException as e:
            self.__logger.warning(f"Failed to initialize clients for {endpoints}: {e.cause_message}")
            return False

    def reconfigure(self, endpoints: list[str]) -> list[str]:
        with self.__reconfigure_lock:
            # Open new clients, the current ones stay in effect on failure
            raw_client, txn_client = self.__open_clients(endpoints)

            # Swap
            with self.__lock:
                previous_raw, previous_txn = self.__raw, self.__txn
                self.__raw = ManagedClient(KvMode.RAW, raw_client, self.__close_async)
                self.__txn = ManagedClient(KvMode.TXN, txn_client, self.__close_async)
                self.__endpoint_registry.set_endpoints(endpoints)

            # Retire previous clients
            for previous in (previous_raw, previous_txn):
                if previous is not None:
                    previous.retire()

            CLIENT_CONNECTED_GAUGE.labels(mode=KvMode.RAW).set(1)
            CLIENT_CONNECTED_GAUGE.labels(mode=KvMode.TXN).set(1)
            CLUSTER_RECONFIGURE_COUNTER.labels(result="success").inc()
            self.__logger.info(f"Clients connected to {endpoints}")
            return list(endpoints)

    def get_endpoints(self) -> list[str]:
        return self.__endpoint_registry.get_endpoints()

    def is_connected(self) -> bool:
        with self.__lock:
            return self.__raw is not None and self.__txn is not None

    def is_available(self, mode: KvMode) -> bool:
        with self.__lock:
            return (self.__raw if mode == KvMode.RAW else self.__txn) is not None

    @contextmanager
    def raw_client(self) -> Iterator[RawKvClient]:
        managed: ManagedClient[RawKvClient] = self.__lease(KvMode.RAW)
        try:
            yield managed.client
        finally:
            managed.release()

    @contextmanager
    def txn_client(self) -> Iterator[TxnKvClient]:
        managed: ManagedClient[TxnKvClient] = self.__lease(KvMode.TXN)
        try:
            yield managed.client
        finally:
            managed.release()

    def close(self) -> None:
        with self.__reconfigure_lock:
            with self.__lock:
                previous_raw, previous_txn = self.__raw, self.__txn
                self.__raw = None
                self.__txn = None
            for previous in (previous_raw, previous_txn):
                if previous is not None:
                    previous.retire()
            CLIENT_CONNECTED_GAUGE.labels(mode=KvMode.RAW).set(0)
            CLIENT_CONNECTED_GAUGE.labels(mode=KvMode.TXN).set(0)
            self.__close_executor.shutdown(wait=True)
            self.__logger.info("Clients closed")

    def __lease(self, mode: KvMode) -> ManagedClient:
        with self.__lock:
            managed: Optional[ManagedClient] = self.__raw if mode == KvMode.RAW else self.__txn
            if managed is None:
                raise ClientUnavailableException(mode)
            managed.acquire()
        CLIENT_LEASE_COUNTER.labels(mode=mode).inc()
        return managed

    def __open_clients(self, endpoints: list[str]) -> tuple[RawKvClient, TxnKvClient]:
        raw_future: Future = self.__start_open(self.__backend.open_raw_client, endpoints)
        txn_future: Future = self.__start_open(self.__backend.open_txn_client, endpoints)
        _, not_done = wait([raw_future, txn_future], timeout=self.__connect_timeout)

        cause: Optional[BaseException] = None
        if not_done:
            reason = f"connection timed out after {self.__connect_timeout}s"
        else:
            cause = raw_future.exception() or txn_future.exception()
            if cause is None:
                return raw_future.result(), txn_future.result()
            reason = str(cause) or cause.__class__.__name__

        # Close whatever did open, including clients that finish opening after the timeout
        for future in (raw_future, txn_future):
            future.add_done_callback(self.__discard_opened)

        CLUSTER_RECONFIGURE_COUNTER.labels(result="failure").inc()
        self.__logger.error(f"Failed to connect to {endpoints}: {reason}")
        raise ClusterConnectException(endpoints, reason) from cause

    def __start_open(self, open_client: Callable[[list[str]], Any], endpoints: list[str]) -> Future:
        future: Future = Future()

        def run():
            if not future.set_running_or_notify_cancel():
                return
            try:
                future.set_result(open_client(endpoints))
            except Exception as e:
                future.set_exception(e)

        threading.Thread(target=run, name="kv-client-connect", daemon=True).start()
        return future

    def __discard_opened(self, future: Future) -> None:
        if future.cancelled() or future.exception() is not None:
            return
        try:
            future.result().close()
        except Exception:
            self.__logger.warning("Failed to close discarded client", exc_info=True)

    def __close_async(self, managed: ManagedClient) -> None:
        try:
            self.__close_executor.submit(managed.close)
        except RuntimeError:
            # Executor already shut down
            managed.close()
