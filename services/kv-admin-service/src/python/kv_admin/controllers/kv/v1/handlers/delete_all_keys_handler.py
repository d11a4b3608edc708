from injector import inject, singleton
from kv_admin.controllers.kv.v1.schemas import DeleteAllKeysRequest, DeleteAllKeysResponse
from kv_admin.services.keys import DeleteAllKeysService
from request_handler import RequestHandler

@singleton
class DeleteAllKeysHandler(RequestHandler[DeleteAllKeysRequest, DeleteAllKeysResponse]):

    @inject
    def __init__(self,
                 delete_all_keys_service: DeleteAllKeysService):
        super().__init__(success_message="All keys deleted successfully")
        self.__delete_all_keys_service = delete_all_keys_service

    def _on_validate(self, request: DeleteAllKeysRequest):
        # Validate request
        pass

    def _on_invoke(self, request: DeleteAllKeysRequest) -> DeleteAllKeysResponse:
        # Delete all keys
        deleted_count: int = self.__delete_all_keys_service.delete_all_keys(mode=request.type)

        # Return response
        return DeleteAllKeysResponse(
            type=request.type,
            deleted_count=deleted_count
        )
