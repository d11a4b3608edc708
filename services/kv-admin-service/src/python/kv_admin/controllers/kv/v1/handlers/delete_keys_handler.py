from injector import inject, singleton
from managed_exceptions import InvalidArgumentException
from kv_admin.controllers.kv.v1.schemas import DeleteKeysRequest, DeleteKeysResponse
from kv_admin.services.keys import DeleteKeysService
from kv_admin.utils import BytesUtil
from request_handler import RequestHandler

@singleton
class DeleteKeysHandler(RequestHandler[DeleteKeysRequest, DeleteKeysResponse]):

    @inject
    def __init__(self,
                 delete_keys_service: DeleteKeysService):
        super().__init__(success_message="Keys deleted successfully")
        self.__delete_keys_service = delete_keys_service

    def _on_validate(self, request: DeleteKeysRequest):
        # Validate request
        if any(not key for key in request.keys):
            raise InvalidArgumentException("Keys must not be empty")

    def _on_invoke(self, request: DeleteKeysRequest) -> DeleteKeysResponse:
        # Delete keys
        results = self.__delete_keys_service.delete_keys(
            mode=request.type,
            keys=[BytesUtil.to_bytes(key) for key in request.keys]
        )

        # Return response
        return DeleteKeysResponse(
            deleted_count=results.deleted_count,
            not_found_count=results.not_found_count
        )
