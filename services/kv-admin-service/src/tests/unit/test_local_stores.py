import pytest

from kv_admin.backends.local import MemoryStore, RocksDbStore


@pytest.fixture(params=["memory", "rocksdb"])
def store(request, tmp_path):
    if request.param == "memory":
        store = MemoryStore()
    else:
        store = RocksDbStore(str(tmp_path / "db" / "cluster"))
    yield store
    store.close()


def test_put_get_delete(store):
    store.put(b"a", b"1")
    assert store.get(b"a") == b"1"
    store.delete(b"a")
    assert store.get(b"a") is None


def test_scan_is_ordered_and_bounded(store):
    store.write({b"c": b"3", b"a": b"1", b"b": b"2", b"d": b"4"}, ())
    assert store.scan(b"a", b"d", 10) == [(b"a", b"1"), (b"b", b"2"), (b"c", b"3")]
    assert store.scan(b"b", None, 2) == [(b"b", b"2"), (b"c", b"3")]
    assert store.scan(b"e", None, 10) == []


def test_write_applies_puts_and_deletes(store):
    store.write({b"a": b"1", b"b": b"2"}, ())
    store.write({b"c": b"3"}, (b"a", b"missing"))
    assert store.scan(b"", None, 10) == [(b"b", b"2"), (b"c", b"3")]


def test_rocksdb_store_persists_across_reopen(tmp_path):
    location = str(tmp_path / "db" / "cluster")
    store = RocksDbStore(location)
    store.put(b"k", b"v")
    store.close()

    reopened = RocksDbStore(location)
    try:
        assert reopened.get(b"k") == b"v"
    finally:
        reopened.close()
