from injector import inject, singleton
from managed_exceptions import InvalidArgumentException
from kv_admin.controllers.kv.v1.schemas import UpdateKeyRequest, KeyValueDetails
from kv_admin.services.keys import UpdateKeyService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class UpdateKeyHandler(RequestHandler[UpdateKeyRequest, KeyValueDetails]):

    @inject
    def __init__(self,
                 update_key_service: UpdateKeyService):
        super().__init__(success_message="Key updated successfully")
        self.__update_key_service = update_key_service

    def _on_validate(self, request: UpdateKeyRequest):
        # Validate request
        if not request.value:
            raise InvalidArgumentException("Value is required")

    def _on_invoke(self, request: UpdateKeyRequest) -> KeyValueDetails:
        # Update key
        self.__update_key_service.update_key(
            mode=request.type,
            key=BytesUtil.to_bytes(request.key),
            value=BytesUtil.to_bytes(request.value)
        )

        # Return response
        return KeyValueDetails(
            key=request.key,
            value=request.value
        )
