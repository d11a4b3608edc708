import pytest

from managed_exceptions import SweepFailedException
from kv_admin.backends import TransactionConflictError
from kv_admin.backends.local.local_transaction import LocalTransaction
from kv_admin.clients import ClientManager
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.services.keys import DeleteAllKeysService, RangeScanner, ScanKeysService


def test_raw_sweep_deletes_every_key_across_batches(injector):
    raw_kv_repository = injector.get(RawKvRepository)
    for index in range(2500):
        raw_kv_repository.upsert(f"key_{index:05d}".encode(), b"v")

    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.RAW) == 2500
    assert injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 1, 10).total == 0


def test_txn_sweep_deletes_every_key_across_chunks(injector):
    txn_kv_repository = injector.get(TxnKvRepository)
    for index in range(450):
        txn_kv_repository.upsert(f"key_{index:05d}".encode(), b"v")

    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.TXN) == 450
    assert injector.get(ScanKeysService).scan_keys(KvMode.TXN, b"", 1, 10).total == 0


def test_txn_sweep_of_exact_chunk_multiple(injector):
    txn_kv_repository = injector.get(TxnKvRepository)
    for index in range(400):
        txn_kv_repository.upsert(f"key_{index:05d}".encode(), b"v")

    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.TXN) == 400


def test_sweep_leaves_other_mode_and_foreign_keys(injector):
    injector.get(RawKvRepository).upsert(b"raw", b"v")
    injector.get(TxnKvRepository).upsert(b"txn", b"v")
    with injector.get(ClientManager).raw_client() as raw:
        raw.put(b"foreign", b"v")

    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.RAW) == 1
    assert injector.get(TxnKvRepository).read(b"txn") == b"v"
    with injector.get(ClientManager).raw_client() as raw:
        assert raw.get(b"foreign") == b"v"


def test_sweep_failure_reports_progress(injector, monkeypatch):
    raw_kv_repository = injector.get(RawKvRepository)
    for index in range(5):
        raw_kv_repository.upsert(f"key_{index}".encode(), b"v")

    original_delete = RawKvRepository.delete
    calls = []

    def failing_delete(self, key):
        calls.append(key)
        if len(calls) == 3:
            raise RuntimeError("store unavailable")
        original_delete(self, key)

    monkeypatch.setattr(RawKvRepository, "delete", failing_delete)
    with pytest.raises(SweepFailedException) as e:
        injector.get(DeleteAllKeysService).delete_all_keys(KvMode.RAW)

    assert e.value.deleted_count == 2
    assert e.value.diagnostic_details["deleted_count"] == "2"
    assert raw_kv_repository.read(b"key_0") is None
    assert raw_kv_repository.read(b"key_2") == b"v"


def test_sweep_of_empty_keyspace(injector):
    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.RAW) == 0
    assert injector.get(DeleteAllKeysService).delete_all_keys(KvMode.TXN) == 0


def test_txn_sweep_failure_keeps_committed_chunks(injector, monkeypatch):
    txn_kv_repository = injector.get(TxnKvRepository)
    for index in range(450):
        txn_kv_repository.upsert(f"key_{index:05d}".encode(), b"v")

    original_commit = LocalTransaction.commit
    commits = []

    def failing_commit(self):
        commits.append(self)
        if len(commits) == 2:
            raise TransactionConflictError(b"tikv_web_key_00200")
        original_commit(self)

    monkeypatch.setattr(LocalTransaction, "commit", failing_commit)
    with pytest.raises(SweepFailedException) as e:
        injector.get(DeleteAllKeysService).delete_all_keys(KvMode.TXN)

    assert e.value.deleted_count == 200
    monkeypatch.setattr(LocalTransaction, "commit", original_commit)
    remaining = injector.get(RangeScanner).scan_prefix(KvMode.TXN, b"", 1000)
    assert len(remaining) == 250
    assert remaining[0].key == b"key_00200"
