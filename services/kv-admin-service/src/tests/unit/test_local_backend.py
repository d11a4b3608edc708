import pytest

from kv_admin.backends import ClientClosedError, TransactionClosedError, TransactionConflictError
from kv_admin.backends.local import LocalBackend

ENDPOINTS = ["127.0.0.1:2379"]


@pytest.fixture(params=["memory", "rocksdb"])
def local_backend(request, tmp_path):
    if request.param == "memory":
        return LocalBackend.memory()
    return LocalBackend.rocksdb(str(tmp_path / "data"))


def test_raw_and_txn_keyspaces_are_disjoint(local_backend):
    raw = local_backend.open_raw_client(ENDPOINTS)
    txn_client = local_backend.open_txn_client(ENDPOINTS)

    raw.put(b"k", b"raw")
    txn = txn_client.begin()
    assert txn.get(b"k") is None
    txn.set(b"k", b"txn")
    txn.commit()

    assert raw.get(b"k") == b"raw"
    assert txn_client.begin().get(b"k") == b"txn"
    raw.close()
    txn_client.close()


def test_transaction_reads_its_own_writes(local_backend):
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    setup = txn_client.begin()
    setup.set(b"a", b"1")
    setup.set(b"b", b"2")
    setup.commit()

    txn = txn_client.begin()
    txn.set(b"c", b"3")
    txn.delete(b"a")
    assert txn.get(b"c") == b"3"
    assert txn.get(b"a") is None
    assert txn.scan(b"", None, 10) == [(b"b", b"2"), (b"c", b"3")]
    txn.rollback()

    reader = txn_client.begin()
    assert reader.scan(b"", None, 10) == [(b"a", b"1"), (b"b", b"2")]
    txn_client.close()


def test_transaction_scan_fills_limit_despite_staged_deletes(local_backend):
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    setup = txn_client.begin()
    for index in range(10):
        setup.set(f"k{index}".encode(), b"v")
    setup.commit()

    txn = txn_client.begin()
    txn.delete(b"k0")
    txn.delete(b"k1")
    assert [key for key, _ in txn.scan(b"", None, 3)] == [b"k2", b"k3", b"k4"]
    txn_client.close()


def test_iterate_spans_many_batches(local_backend):
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    setup = txn_client.begin()
    for index in range(600):
        setup.set(f"k{index:04d}".encode(), b"v")
    setup.commit()

    keys = [key for key, _ in txn_client.begin().iterate(b"k", b"l")]
    assert len(keys) == 600
    assert keys == sorted(keys)
    txn_client.close()


def test_concurrent_writers_conflict(local_backend):
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    first = txn_client.begin()
    second = txn_client.begin()
    first.set(b"k", b"1")
    second.set(b"k", b"2")
    first.commit()

    with pytest.raises(TransactionConflictError):
        second.commit()
    assert txn_client.begin().get(b"k") == b"1"
    txn_client.close()


def test_finished_transaction_cannot_be_reused(local_backend):
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    txn = txn_client.begin()
    txn.commit()
    txn.rollback()
    with pytest.raises(TransactionClosedError):
        txn.set(b"k", b"v")
    txn_client.close()


def test_closed_client_rejects_calls(local_backend):
    raw = local_backend.open_raw_client(ENDPOINTS)
    raw.close()
    with pytest.raises(ClientClosedError):
        raw.get(b"k")


def test_memory_cluster_survives_reopen():
    local_backend = LocalBackend.memory()
    raw = local_backend.open_raw_client(ENDPOINTS)
    raw.put(b"k", b"v")
    raw.close()

    reopened = local_backend.open_raw_client(ENDPOINTS)
    assert reopened.get(b"k") == b"v"
    assert local_backend.open_raw_client(["other:2379"]).get(b"k") is None


def test_rocksdb_cluster_reopens_after_last_client(tmp_path):
    local_backend = LocalBackend.rocksdb(str(tmp_path / "data"))
    raw = local_backend.open_raw_client(ENDPOINTS)
    txn_client = local_backend.open_txn_client(ENDPOINTS)
    raw.put(b"k", b"v")
    raw.close()
    txn_client.close()

    reopened = local_backend.open_raw_client(ENDPOINTS)
    assert reopened.get(b"k") == b"v"
    reopened.close()
