import logging
from injector import inject, singleton
from managed_exceptions import ManagedException
from kv_admin.clients import ClientManager
from kv_admin.configs import KvAdminConfig
from kv_admin.constants import API_VERSION
from kv_admin.models import KvMode, KvStats, ModeStats
from kv_admin.services.keys import RangeScanner

@singleton
class GetStatsService:

    @inject
    def __init__(self,
                 config: KvAdminConfig,
                 client_manager: ClientManager,
                 range_scanner: RangeScanner):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__sample_limit: int = config.stats_sample_limit
        self.__client_manager = client_manager
        self.__range_scanner = range_scanner

    def get_stats(self) -> KvStats:
        return KvStats(
            raw=self.__get_mode_stats(KvMode.RAW),
            txn=self.__get_mode_stats(KvMode.TXN),
            connected=self.__client_manager.is_connected(),
            api_version=API_VERSION,
            driver=self.__client_manager.driver_name
        )

    def __get_mode_stats(self, mode: KvMode) -> ModeStats:
        if not self.__client_manager.is_available(mode):
            return ModeStats(sample_keys=0, sample_is_estimate=False, connected=False)

        # Sample count, capped; one extra key tells a full sample from a truncated one
        try:
            sampled: int = len(self.__range_scanner.scan_prefix(mode, b"", self.__sample_limit + 1))
        except ManagedException:
            self.__logger.warning(f"Failed to sample {mode} keys", exc_info=True)
            return ModeStats(sample_keys=0, sample_is_estimate=False, connected=False)

        return ModeStats(
            sample_keys=min(sampled, self.__sample_limit),
            sample_is_estimate=sampled > self.__sample_limit,
            connected=True
        )
