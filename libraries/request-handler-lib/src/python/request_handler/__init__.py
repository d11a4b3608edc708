from .api_response import ApiResponse
from .request_handler import RequestHandler
from .request_thread_pool import RequestThreadPool

__all__ = [
    "ApiResponse",
    "RequestHandler",
    "RequestThreadPool"
]
