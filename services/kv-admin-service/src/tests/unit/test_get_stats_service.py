import pytest

from managed_exceptions import ClusterConnectException, InvalidArgumentException
from kv_admin.clients import ClientManager
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.services.cluster import GetClusterStatusService, UpdateClusterEndpointsService
from kv_admin.services.stats import GetStatsService


def test_stats_sample_each_mode(injector):
    for index in range(3):
        injector.get(RawKvRepository).upsert(f"r{index}".encode(), b"v")
    # Sample limit is 10 in the test config
    for index in range(12):
        injector.get(TxnKvRepository).upsert(f"t{index:02d}".encode(), b"v")

    stats = injector.get(GetStatsService).get_stats()
    assert stats.raw.sample_keys == 3
    assert stats.raw.sample_is_estimate is False
    assert stats.txn.sample_keys == 10
    assert stats.txn.sample_is_estimate is True
    assert stats.connected is True
    assert stats.api_version == "v2"
    assert stats.driver == "memory"


def test_stats_sample_filling_the_limit_is_exact(injector):
    for index in range(10):
        injector.get(RawKvRepository).upsert(f"r{index:02d}".encode(), b"v")

    stats = injector.get(GetStatsService).get_stats()
    assert stats.raw.sample_keys == 10
    assert stats.raw.sample_is_estimate is False


def test_stats_when_disconnected(injector):
    injector.get(ClientManager).close()
    stats = injector.get(GetStatsService).get_stats()
    assert stats.connected is False
    assert stats.raw.connected is False
    assert stats.raw.sample_keys == 0


def test_cluster_status(injector):
    status = injector.get(GetClusterStatusService).get_cluster_status()
    assert status.cluster_status == "connected"
    assert status.connected is True
    assert status.endpoints == ["127.0.0.1:2379"]


def test_update_cluster_endpoints(injector):
    status = injector.get(UpdateClusterEndpointsService).update_cluster_endpoints("pd-a:2379, pd-b:2379")
    assert status.endpoints == ["pd-a:2379", "pd-b:2379"]
    assert status.connected is True


def test_update_cluster_endpoints_failures_keep_state(injector):
    update_cluster_endpoints_service = injector.get(UpdateClusterEndpointsService)
    with pytest.raises(InvalidArgumentException):
        update_cluster_endpoints_service.update_cluster_endpoints("no-port")
    with pytest.raises(ClusterConnectException):
        update_cluster_endpoints_service.update_cluster_endpoints("unreachable:2379")

    status = injector.get(GetClusterStatusService).get_cluster_status()
    assert status.endpoints == ["127.0.0.1:2379"]
    assert status.connected is True
