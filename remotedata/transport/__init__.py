"""
Transport seam: request descriptors and the default httpx request function.
"""

from .descriptor import Method, RequestDescriptor, RequestService
from .http import DEFAULT_TIMEOUT, HttpxService

__all__ = (
    "DEFAULT_TIMEOUT",
    "HttpxService",
    "Method",
    "RequestDescriptor",
    "RequestService",
)
