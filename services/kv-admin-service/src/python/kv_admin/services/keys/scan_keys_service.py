import math
from injector import inject, singleton
from managed_exceptions import InvalidArgumentException
from kv_admin.configs import KvAdminConfig
from kv_admin.constants import MAX_PAGE_SIZE
from kv_admin.models import KvEntry, KvMode, PageResults
from .range_scanner import RangeScanner

@singleton
class ScanKeysService:
    """Page-oriented listing of the keys under a logical prefix.

    Every request runs one scan from the start of the prefix, so the cost of a
    page grows with its offset. The scan is capped; when keys remain past the cap
    the reported total only counts the keys seen and is flagged as an estimate.
    """

    @inject
    def __init__(self,
                 config: KvAdminConfig,
                 range_scanner: RangeScanner):
        self.__scan_cap: int = config.scan_max_scan_keys
        self.__range_scanner = range_scanner

    def scan_keys(self, mode: KvMode, prefix: bytes, page: int, limit: int) -> PageResults:
        if page < 1:
            raise InvalidArgumentException("Page must be greater than or equal to 1", {"page": str(page)})
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise InvalidArgumentException(f"Limit must be between 1 and {MAX_PAGE_SIZE}", {"limit": str(limit)})

        # Scan enough keys to cover the requested page, plus one to detect a truncated scan
        offset: int = (page - 1) * limit
        scan_limit: int = max(offset + limit, self.__scan_cap)
        entries: list[KvEntry] = self.__range_scanner.scan_prefix(mode, prefix, scan_limit + 1)
        truncated: bool = len(entries) > scan_limit
        entries = entries[:scan_limit]

        # Slice page
        total: int = len(entries)
        return PageResults(
            entries=entries[offset:offset + limit],
            total=total,
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
            total_is_estimate=truncated
        )
