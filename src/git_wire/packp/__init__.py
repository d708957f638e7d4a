"""
Packfile negotiation messages (upload requests).

Encodes what a fetching client sends to `git-upload-pack` after the
reference advertisement.
"""

from .depth import Depth, DepthCommits, DepthReference, DepthSince
from .errors import EncodeError, RequestValidationError, UnsupportedDepthError
from .loader import DepthConfig, UploadRequestConfig, parse_capability
from .ulreq import (
    UploadRequest,
    new_upload_request,
    new_upload_request_from_capabilities,
)
from .ulreq_encoder import UploadRequestEncoder

__all__ = [
    "Depth",
    "DepthCommits",
    "DepthConfig",
    "DepthReference",
    "DepthSince",
    "EncodeError",
    "RequestValidationError",
    "UnsupportedDepthError",
    "UploadRequest",
    "UploadRequestConfig",
    "UploadRequestEncoder",
    "new_upload_request",
    "new_upload_request_from_capabilities",
    "parse_capability",
]
