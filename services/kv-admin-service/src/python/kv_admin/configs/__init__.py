from .kv_admin_config import KvAdminConfig

__all__ = [
    "KvAdminConfig"
]
