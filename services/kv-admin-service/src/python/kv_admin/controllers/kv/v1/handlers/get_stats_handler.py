from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import GetStatsRequest, GetStatsResponse, ModeStatsDetails, OverallStatsDetails
from kv_admin.models import ModeStats
from kv_admin.services.stats import GetStatsService
from request_handler import RequestHandler

@singleton
class GetStatsHandler(RequestHandler[GetStatsRequest, GetStatsResponse]):

    @inject
    def __init__(self,
                 get_stats_service: GetStatsService):
        super().__init__(success_message="Stats retrieved successfully")
        self.__get_stats_service = get_stats_service

    def _on_validate(self, request: GetStatsRequest):
        # Validate request
        pass

    def _on_invoke(self, request: GetStatsRequest) -> GetStatsResponse:
        # Get stats
        stats = self.__get_stats_service.get_stats()

        # Return response
        return GetStatsResponse(
            rawkv=self.__to_details(stats.raw),
            txn=self.__to_details(stats.txn),
            overall=OverallStatsDetails(
                connected=stats.connected,
                api_version=stats.api_version,
                driver=stats.driver
            )
        )

    def __to_details(self, mode_stats: ModeStats) -> ModeStatsDetails:
        return ModeStatsDetails(
            sample_keys=mode_stats.sample_keys,
            sample_is_estimate=mode_stats.sample_is_estimate,
            connected=mode_stats.connected
        )
