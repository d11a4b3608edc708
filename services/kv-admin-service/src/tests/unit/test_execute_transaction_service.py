import pytest

from managed_exceptions import InvalidArgumentException, KeyNotFoundException, TransactionFailedException
from kv_admin.backends import BackendError, TransactionConflictError
from kv_admin.backends.local.local_transaction import LocalTransaction
from kv_admin.backends.local.local_txn_kv_client import LocalTxnKvClient
from kv_admin.models import KvMode, KvOperation, OperationKind
from kv_admin.repositories import TxnKvRepository
from kv_admin.services.transactions import ExecuteTransactionService


def put(key, value):
    return KvOperation(mode=KvMode.TXN, kind=OperationKind.PUT, key=key, value=value)


def delete(key):
    return KvOperation(mode=KvMode.TXN, kind=OperationKind.DELETE, key=key)


def test_all_operations_commit_together(injector):
    txn_kv_repository = injector.get(TxnKvRepository)
    txn_kv_repository.upsert(b"old", b"v")

    count = injector.get(ExecuteTransactionService).execute_transaction([
        put(b"a", b"1"),
        put(b"b", b"2"),
        delete(b"old"),
    ])

    assert count == 3
    assert txn_kv_repository.read(b"a") == b"1"
    assert txn_kv_repository.read(b"b") == b"2"
    assert txn_kv_repository.read(b"old") is None


def test_missing_delete_rolls_back_everything(injector):
    with pytest.raises(KeyNotFoundException) as e:
        injector.get(ExecuteTransactionService).execute_transaction([
            put(b"k1", b"v"),
            delete(b"k2"),
        ])

    assert e.value.diagnostic_details == {"key": "k2"}
    assert injector.get(TxnKvRepository).read(b"k1") is None


def test_delete_sees_earlier_put(injector):
    injector.get(ExecuteTransactionService).execute_transaction([
        put(b"k", b"v"),
        delete(b"k"),
    ])
    assert injector.get(TxnKvRepository).read(b"k") is None


def test_put_without_value_rolls_back(injector):
    with pytest.raises(InvalidArgumentException):
        injector.get(ExecuteTransactionService).execute_transaction([
            put(b"k1", b"v"),
            put(b"k2", None),
        ])
    assert injector.get(TxnKvRepository).read(b"k1") is None


def test_empty_transaction_is_rejected(injector):
    with pytest.raises(InvalidArgumentException):
        injector.get(ExecuteTransactionService).execute_transaction([])


def test_commit_conflict_fails_transaction(injector, monkeypatch):
    def conflicting_commit(self):
        raise TransactionConflictError(b"tikv_web_k")

    monkeypatch.setattr(LocalTransaction, "commit", conflicting_commit)

    with pytest.raises(TransactionFailedException) as e:
        injector.get(ExecuteTransactionService).execute_transaction([put(b"k", b"v")])
    assert e.value.status_code == 500
    assert "Write conflict" in e.value.cause_message
    assert injector.get(TxnKvRepository).read(b"k") is None


def test_begin_failure_fails_transaction(injector, monkeypatch):
    def failing_begin(self):
        raise BackendError("PD unreachable")

    monkeypatch.setattr(LocalTxnKvClient, "begin", failing_begin)

    with pytest.raises(TransactionFailedException) as e:
        injector.get(ExecuteTransactionService).execute_transaction([put(b"k", b"v")])
    assert e.value.status_code == 500
    assert str(e.value) == "Failed to begin transaction"
    assert e.value.cause_message == "PD unreachable"
