import pytest

from managed_exceptions import InvalidArgumentException
from kv_admin.clients import ClientManager
from kv_admin.models import KvMode
from kv_admin.repositories import RawKvRepository, TxnKvRepository
from kv_admin.services.keys import ScanKeysService


def put_keys(injector, mode, keys):
    repository = injector.get(TxnKvRepository) if mode == KvMode.TXN else injector.get(RawKvRepository)
    for key in keys:
        repository.upsert(key, b"value-" + key)


@pytest.mark.parametrize("mode", [KvMode.RAW, KvMode.TXN])
def test_scan_returns_prefix_keys_in_order(injector, mode):
    put_keys(injector, mode, [b"user:3", b"user:1", b"order:1", b"user:2", b"users"])

    results = injector.get(ScanKeysService).scan_keys(mode, b"user:", 1, 10)
    assert [entry.key for entry in results.entries] == [b"user:1", b"user:2", b"user:3"]
    assert [entry.value for entry in results.entries] == [b"value-user:1", b"value-user:2", b"value-user:3"]
    assert results.total == 3
    assert results.total_pages == 1
    assert results.total_is_estimate is False


@pytest.mark.parametrize("mode", [KvMode.RAW, KvMode.TXN])
def test_pages_cover_every_key_once(injector, mode):
    keys = [f"key_{index:02d}".encode() for index in range(23)]
    put_keys(injector, mode, keys)
    scan_keys_service = injector.get(ScanKeysService)

    first_page = scan_keys_service.scan_keys(mode, b"", 1, 5)
    assert first_page.total == 23
    assert first_page.total_pages == 5

    collected = []
    for page in range(1, first_page.total_pages + 1):
        collected.extend(entry.key for entry in scan_keys_service.scan_keys(mode, b"", page, 5).entries)
    assert collected == keys


def test_page_beyond_results_is_empty(injector):
    put_keys(injector, KvMode.RAW, [b"a", b"b"])
    results = injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 3, 10)
    assert results.entries == []
    assert results.total == 2
    assert results.page == 3


def test_total_is_estimate_at_scan_cap(injector):
    # Scan cap is 50 in the test config
    put_keys(injector, KvMode.RAW, [f"key_{index:03d}".encode() for index in range(60)])
    results = injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 1, 20)
    assert results.total == 50
    assert results.total_is_estimate is True

    # Deep pages still reach past the cap
    deep = injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 3, 20)
    assert [entry.key for entry in deep.entries][0] == b"key_040"
    assert len(deep.entries) == 20
    assert deep.total == 60
    assert deep.total_is_estimate is False


def test_total_is_exact_when_keys_fill_the_scan_cap(injector):
    put_keys(injector, KvMode.RAW, [f"key_{index:03d}".encode() for index in range(50)])
    results = injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 1, 20)
    assert results.total == 50
    assert results.total_pages == 3
    assert results.total_is_estimate is False


def test_scan_skips_keys_outside_namespace(injector):
    with injector.get(ClientManager).raw_client() as raw:
        raw.put(b"foreign_key", b"v")
        raw.put(b"tikv_web_own", b"v")
    results = injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", 1, 10)
    assert [entry.key for entry in results.entries] == [b"own"]


@pytest.mark.parametrize("page, limit", [(0, 10), (1, 0), (1, 101)])
def test_invalid_page_arguments(injector, page, limit):
    with pytest.raises(InvalidArgumentException):
        injector.get(ScanKeysService).scan_keys(KvMode.RAW, b"", page, limit)
