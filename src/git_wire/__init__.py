"""
git-wire: encoders for the git smart transport.

The main entry point is `UploadRequestEncoder`, which writes the want /
shallow / deepen lines a client sends to `git-upload-pack`.
"""

from .config import __version__
from .packp import (
    DepthCommits,
    DepthReference,
    DepthSince,
    UploadRequest,
    UploadRequestEncoder,
)
from .types import GitWireError, ObjectHash

__all__ = [
    "__version__",
    "DepthCommits",
    "DepthReference",
    "DepthSince",
    "GitWireError",
    "ObjectHash",
    "UploadRequest",
    "UploadRequestEncoder",
]
