from http import HTTPStatus
from injector import inject, singleton
from managed_exceptions import InvalidArgumentException
from kv_admin.controllers.kv.v1.schemas import CreateKeyRequest, KeyValueDetails
from kv_admin.services.keys import CreateKeyService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class CreateKeyHandler(RequestHandler[CreateKeyRequest, KeyValueDetails]):

    @inject
    def __init__(self,
                 create_key_service: CreateKeyService):
        super().__init__(success_message="Key created successfully", success_status=HTTPStatus.CREATED)
        self.__create_key_service = create_key_service

    def _on_validate(self, request: CreateKeyRequest):
        # Validate request
        if not request.value:
            raise InvalidArgumentException("Value is required")

    def _on_invoke(self, request: CreateKeyRequest) -> KeyValueDetails:
        # Create key
        self.__create_key_service.create_key(
            mode=request.type,
            key=BytesUtil.to_bytes(request.key),
            value=BytesUtil.to_bytes(request.value)
        )

        # Return response
        return KeyValueDetails(
            key=request.key,
            value=request.value
        )
