import pytest
from injector import Injector

from managed_exceptions import ClientUnavailableException, ClusterConnectException
from kv_admin.backends import ClientClosedError, KvBackend
from kv_admin.clients import ClientManager
from kv_admin.configs import KvAdminConfig


def test_initialize_connects_both_clients(injector):
    client_manager = injector.get(ClientManager)
    assert client_manager.is_connected()
    assert client_manager.get_endpoints() == ["127.0.0.1:2379"]
    assert client_manager.driver_name == "memory"


def test_reconfigure_with_unreachable_endpoints_keeps_previous_clients(injector):
    client_manager = injector.get(ClientManager)
    with client_manager.raw_client() as raw:
        raw.put(b"k", b"v")

    with pytest.raises(ClusterConnectException) as e:
        client_manager.reconfigure(["unreachable:2379"])

    assert e.value.status_code == 503
    assert e.value.cause_message is not None
    assert client_manager.get_endpoints() == ["127.0.0.1:2379"]
    assert client_manager.is_connected()
    with client_manager.raw_client() as raw:
        assert raw.get(b"k") == b"v"


def test_reconfigure_closes_handles_of_a_partial_open(injector, backend):
    client_manager = injector.get(ClientManager)
    with pytest.raises(ClusterConnectException):
        client_manager.reconfigure(["half-open:2379"])

    orphan = backend.opened_raw[-1]
    with pytest.raises(ClientClosedError):
        orphan.get(b"k")
    assert client_manager.get_endpoints() == ["127.0.0.1:2379"]


def test_reconfigure_times_out_and_closes_late_handles(injector, backend, wait_until):
    client_manager = injector.get(ClientManager)
    with pytest.raises(ClusterConnectException) as e:
        client_manager.reconfigure(["slow:2379"])
    assert "timed out" in e.value.diagnostic_details["reason"]
    assert client_manager.get_endpoints() == ["127.0.0.1:2379"]

    # The late connect completes after the failure and is discarded
    opened_before = len(backend.opened_txn)
    backend.release_slow.set()
    assert wait_until(lambda: len(backend.opened_txn) > opened_before)
    late_client = backend.opened_txn[-1]

    def is_closed() -> bool:
        try:
            late_client.begin()
            return False
        except ClientClosedError:
            return True

    assert wait_until(is_closed)


def test_reconfigure_swaps_clients(injector):
    client_manager = injector.get(ClientManager)
    with client_manager.raw_client() as raw:
        raw.put(b"k", b"v")

    assert client_manager.reconfigure(["127.0.0.1:2380"]) == ["127.0.0.1:2380"]
    assert client_manager.get_endpoints() == ["127.0.0.1:2380"]
    with client_manager.raw_client() as raw:
        assert raw.get(b"k") is None


def test_retired_client_serves_its_lease_then_closes(injector):
    client_manager = injector.get(ClientManager)
    with client_manager.raw_client() as old_raw:
        client_manager.reconfigure(["127.0.0.1:2380"])
        old_raw.put(b"k", b"v")
        assert old_raw.get(b"k") == b"v"

    # Drain the background closer
    client_manager.close()
    with pytest.raises(ClientClosedError):
        old_raw.get(b"k")


def test_lease_without_clients_raises(config, backend, monkeypatch):
    monkeypatch.setattr(config, "cluster_endpoints", ["unreachable:2379"])

    def configure_bindings(binder):
        binder.bind(KvAdminConfig, to=config)
        binder.bind(KvBackend, to=backend)

    client_manager = Injector([configure_bindings]).get(ClientManager)
    assert client_manager.initialize() is False
    assert client_manager.is_connected() is False

    with pytest.raises(ClientUnavailableException) as e:
        with client_manager.raw_client():
            pass
    assert str(e.value) == "rawkv client not initialized"

    with pytest.raises(ClientUnavailableException) as e:
        with client_manager.txn_client():
            pass
    assert str(e.value) == "txn client not initialized"
    client_manager.close()


def test_hanging_connects_do_not_block_later_reconfigure(injector, backend, wait_until):
    client_manager = injector.get(ClientManager)
    initial_raw = backend.opened_raw[0]

    for _ in range(9):
        with pytest.raises(ClusterConnectException):
            client_manager.reconfigure(["slow:2379"])

    # Every hung attempt is still blocked while a reachable cluster is configured
    assert client_manager.reconfigure(["127.0.0.1:2380"]) == ["127.0.0.1:2380"]
    assert client_manager.get_endpoints() == ["127.0.0.1:2380"]

    def is_closed() -> bool:
        try:
            initial_raw.get(b"k")
            return False
        except ClientClosedError:
            return True

    assert wait_until(is_closed)
