from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import GetKeyRequest, KeyValueDetails
from kv_admin.services.keys import GetKeyService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class GetKeyHandler(RequestHandler[GetKeyRequest, KeyValueDetails]):

    @inject
    def __init__(self,
                 get_key_service: GetKeyService):
        super().__init__(success_message="Key retrieved successfully")
        self.__get_key_service = get_key_service

    def _on_validate(self, request: GetKeyRequest):
        # Validate request
        pass

    def _on_invoke(self, request: GetKeyRequest) -> KeyValueDetails:
        # Get key
        value: bytes = self.__get_key_service.get_key(
            mode=request.type,
            key=BytesUtil.to_bytes(request.key)
        )

        # Return response
        return KeyValueDetails(
            key=request.key,
            value=BytesUtil.to_str(value)
        )
