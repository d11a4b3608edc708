import logging
from kv_admin.configs import KvAdminConfig
from .kv_backend import KvBackend
from .local import LocalBackend

class KvBackendFactory:

    @staticmethod
    def create(config: KvAdminConfig) -> KvBackend:
        logger = logging.getLogger(KvBackendFactory.__name__)
        logger.info(f"Creating {config.backend_driver} backend")
        if config.backend_driver == "memory":
            return LocalBackend.memory()
        if config.backend_driver == "rocksdb":
            return LocalBackend.rocksdb(config.rocksdb_data_dir, config.rocksdb_create_if_missing)

        # Imported on demand, the local drivers never load the TiKV client
        from .tikv_backend import TikvBackend
        return TikvBackend()
