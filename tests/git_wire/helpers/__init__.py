"""Test helpers for git_wire unit tests."""

from .builders import make_capabilities, make_hash, make_hex, pkt
from .mocks import FailingWriter, RecordingWriter

__all__ = [
    "FailingWriter",
    "RecordingWriter",
    "make_capabilities",
    "make_hash",
    "make_hex",
    "pkt",
]
