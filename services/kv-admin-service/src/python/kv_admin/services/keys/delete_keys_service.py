import logging
from injector import inject, singleton
from kv_admin.models import DeleteKeysResults, KvMode
from .delete_key_service import DeleteKeyService

@singleton
class DeleteKeysService:

    @inject
    def __init__(self, delete_key_service: DeleteKeyService):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__delete_key_service = delete_key_service

    def delete_keys(self, mode: KvMode, keys: list[bytes]) -> DeleteKeysResults:
        # Each key is deleted on its own, a missing key does not stop the others
        deleted_count: int = 0
        not_found_count: int = 0
        for key in keys:
            if self.__delete_key_service.try_delete_key(mode, key):
                deleted_count += 1
            else:
                not_found_count += 1

        self.__logger.info(f"Deleted {deleted_count} of {len(keys)} {mode} keys")
        return DeleteKeysResults(
            deleted_count=deleted_count,
            not_found_count=not_found_count
        )
