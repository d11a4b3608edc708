import threading
import time
from typing import Callable

import pytest
from injector import Injector

from kv_admin.backends import BackendConnectError, KvBackend, RawKvClient, TxnKvClient
from kv_admin.backends.local import LocalBackend
from kv_admin.clients import ClientManager
from kv_admin.configs import KvAdminConfig

CONFIG_YAML = """
kv_admin:
  server:
    max_threads: 4
  cluster:
    endpoints:
      - "127.0.0.1:2379"
    connect_timeout_seconds: 0.5
  backend:
    driver: "memory"
  keys:
    namespace_prefix: "tikv_web_"
  scan:
    max_scan_keys: 50
  stats:
    sample_limit: 10
"""


class FlakyBackend(KvBackend):
    """Memory backend whose connects fail or hang for chosen endpoint hosts.

    - ``unreachable:*`` fails both clients
    - ``half-open:*`` opens the raw client but fails the transactional one
    - ``slow:*`` blocks the transactional connect until ``release_slow`` is set
    """

    def __init__(self, backend: KvBackend) -> None:
        self.backend = backend
        self.opened_raw: list[RawKvClient] = []
        self.opened_txn: list[TxnKvClient] = []
        self.release_slow = threading.Event()

    @property
    def driver_name(self) -> str:
        return self.backend.driver_name

    def open_raw_client(self, endpoints: list[str]) -> RawKvClient:
        if endpoints[0].startswith("unreachable"):
            raise BackendConnectError(endpoints, "connection refused")
        client = self.backend.open_raw_client(endpoints)
        self.opened_raw.append(client)
        return client

    def open_txn_client(self, endpoints: list[str]) -> TxnKvClient:
        if endpoints[0].startswith(("unreachable", "half-open")):
            raise BackendConnectError(endpoints, "connection refused")
        if endpoints[0].startswith("slow"):
            self.release_slow.wait(timeout=5)
        client = self.backend.open_txn_client(endpoints)
        self.opened_txn.append(client)
        return client


def _wait_until(condition: Callable[[], bool], timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


@pytest.fixture
def wait_until():
    return _wait_until


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("TIKV_PD_ENDPOINTS", raising=False)
    monkeypatch.delenv("KV_ADMIN_BACKEND_DRIVER", raising=False)
    monkeypatch.delenv("KV_ADMIN_CONFIG_FILE", raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


@pytest.fixture
def config(config_file):
    return KvAdminConfig(str(config_file))


@pytest.fixture
def backend():
    return FlakyBackend(LocalBackend.memory())


@pytest.fixture
def injector(config, backend):
    def configure_bindings(binder):
        binder.bind(KvAdminConfig, to=config)
        binder.bind(KvBackend, to=backend)

    injector = Injector([configure_bindings])
    client_manager = injector.get(ClientManager)
    client_manager.initialize()
    yield injector
    backend.release_slow.set()
    client_manager.close()
