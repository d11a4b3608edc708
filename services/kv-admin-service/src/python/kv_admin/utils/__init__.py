from .bytes_util import BytesUtil
from .endpoints_util import EndpointsUtil

__all__ = [
    "BytesUtil",
    "EndpointsUtil"
]
