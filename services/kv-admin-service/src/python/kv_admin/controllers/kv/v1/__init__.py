from .kv_management_controller import router

__all__ = [
    "router"
]
