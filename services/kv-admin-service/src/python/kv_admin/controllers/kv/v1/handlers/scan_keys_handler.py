from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import ScanKeysRequest, ScanKeysResponse, KeyValueDetails
from kv_admin.services.keys import ScanKeysService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class ScanKeysHandler(RequestHandler[ScanKeysRequest, ScanKeysResponse]):

    @inject
    def __init__(self,
                 scan_keys_service: ScanKeysService):
        super().__init__(success_message="Keys retrieved successfully")
        self.__scan_keys_service = scan_keys_service

    def _on_validate(self, request: ScanKeysRequest):
        # Validate request
        pass

    def _on_invoke(self, request: ScanKeysRequest) -> ScanKeysResponse:
        # Scan keys
        page_results = self.__scan_keys_service.scan_keys(
            mode=request.type,
            prefix=BytesUtil.to_bytes(request.prefix),
            page=request.page,
            limit=request.limit
        )

        # Return response
        return ScanKeysResponse(
            entries=[
                KeyValueDetails(
                    key=BytesUtil.to_str(entry.key),
                    value=BytesUtil.to_str(entry.value)
                ) for entry in page_results.entries
            ],
            total=page_results.total,
            page=page_results.page,
            limit=page_results.limit,
            total_pages=page_results.total_pages,
            total_is_estimate=page_results.total_is_estimate
        )
