from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import DeleteKeyRequest, DeleteKeyResponse
from kv_admin.services.keys import DeleteKeyService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class DeleteKeyHandler(RequestHandler[DeleteKeyRequest, DeleteKeyResponse]):

    @inject
    def __init__(self,
                 delete_key_service: DeleteKeyService):
        super().__init__(success_message="Key deleted successfully")
        self.__delete_key_service = delete_key_service

    def _on_validate(self, request: DeleteKeyRequest):
        # Validate request
        pass

    def _on_invoke(self, request: DeleteKeyRequest) -> DeleteKeyResponse:
        # Delete key
        self.__delete_key_service.delete_key(
            mode=request.type,
            key=BytesUtil.to_bytes(request.key)
        )

        # Return response
        return DeleteKeyResponse(key=request.key)
