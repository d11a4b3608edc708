from injector import inject, singleton
from kv_admin.configs import KvAdminConfig
from kv_admin.models import KeyRange
from kv_admin.utils import BytesUtil

@singleton
class KeyNamespacer:
    """Maps logical keys into the managed namespace of the backend and back."""

    @inject
    def __init__(self, config: KvAdminConfig):
        self.__prefix: bytes = BytesUtil.to_bytes(config.keys_namespace_prefix)

    @property
    def prefix(self) -> bytes:
        return self.__prefix

    def wrap(self, key: bytes) -> bytes:
        return self.__prefix + key

    def unwrap(self, key: bytes) -> bytes:
        if not self.is_managed(key):
            raise ValueError(f"Key {key!r} is outside the managed namespace")
        return key[len(self.__prefix):]

    def is_managed(self, key: bytes) -> bool:
        return key.startswith(self.__prefix)

    def prefix_range(self, prefix: bytes) -> KeyRange:
        start: bytes = self.wrap(prefix)
        return KeyRange(start=start, end=BytesUtil.successor(start))
