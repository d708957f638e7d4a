"""Tests for upload request construction and validation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from git_wire import config
from git_wire.capability import Capability, CapabilityList
from git_wire.packp import (
    DepthCommits,
    DepthReference,
    DepthSince,
    RequestValidationError,
    UploadRequest,
    new_upload_request,
    new_upload_request_from_capabilities,
)
from git_wire.types import GitWireError
from tests.git_wire.helpers import make_capabilities, make_hash


class TestConstruction:
    """Tests for request constructors."""

    def test_new_request_defaults(self) -> None:
        """An empty request has no limit and no capabilities."""
        request = new_upload_request()
        assert request.wants == []
        assert request.shallows == []
        assert request.depth == DepthCommits(0)
        assert request.capabilities.is_empty()

    def test_defaults_not_shared(self) -> None:
        """Each request gets its own lists."""
        first = new_upload_request()
        second = new_upload_request()
        first.wants.append(make_hash(1))
        first.capabilities.add(Capability.OFS_DELTA)
        assert second.wants == []
        assert second.capabilities.is_empty()

    def test_from_advertised_capabilities(self) -> None:
        """ofs-delta and agent are taken from the advertisement."""
        advertised = make_capabilities("multi_ack", "ofs-delta", "agent=git/2.43.0", "thin-pack")
        request = new_upload_request_from_capabilities(advertised)
        assert request.capabilities.all() == ["ofs-delta", "agent"]
        assert request.capabilities.get(Capability.AGENT) == [config.DEFAULT_AGENT]

    def test_from_minimal_advertisement(self) -> None:
        """Nothing is requested that the server did not advertise."""
        request = new_upload_request_from_capabilities(CapabilityList())
        assert request.capabilities.is_empty()


class TestValidate:
    """Tests for request consistency checks."""

    def test_valid_request(self) -> None:
        """A plain request with wants passes."""
        UploadRequest(wants=[make_hash(1)]).validate()

    def test_empty_wants(self) -> None:
        """Wants are mandatory."""
        with pytest.raises(RequestValidationError, match="want can't be empty"):
            UploadRequest().validate()

    def test_shallows_need_shallow_capability(self) -> None:
        """Shallow lines require the shallow capability."""
        request = UploadRequest(wants=[make_hash(1)], shallows=[make_hash(2)])
        with pytest.raises(RequestValidationError, match="shallows"):
            request.validate()

        request.capabilities.add(Capability.SHALLOW)
        request.validate()

    @pytest.mark.parametrize(
        ("depth", "capability"),
        [
            (DepthCommits(1), Capability.SHALLOW),
            (DepthSince(datetime(2024, 1, 1, tzinfo=timezone.utc)), Capability.DEEPEN_SINCE),
            (DepthReference("refs/heads/main"), Capability.DEEPEN_NOT),
        ],
    )
    def test_depth_needs_capability(
        self, depth: DepthCommits | DepthSince | DepthReference, capability: Capability
    ) -> None:
        """Each depth kind requires its capability."""
        request = UploadRequest(wants=[make_hash(1)], depth=depth)
        with pytest.raises(RequestValidationError, match=str(capability)):
            request.validate()

        request.capabilities.add(capability)
        request.validate()

    @pytest.mark.parametrize("depth", [DepthCommits(0), None])
    def test_unlimited_depth_needs_nothing(self, depth: DepthCommits | None) -> None:
        """No limit requires no capability."""
        UploadRequest(wants=[make_hash(1)], depth=depth).validate()

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (Capability.MULTI_ACK, Capability.MULTI_ACK_DETAILED),
            (Capability.SIDEBAND, Capability.SIDEBAND_64K),
        ],
    )
    def test_conflicting_capabilities(self, first: Capability, second: Capability) -> None:
        """Mutually exclusive capabilities are rejected."""
        request = UploadRequest(
            wants=[make_hash(1)], capabilities=make_capabilities(str(first), str(second))
        )
        with pytest.raises(RequestValidationError, match="mutually exclusive"):
            request.validate()

    def test_error_hierarchy(self) -> None:
        """Validation errors are package errors."""
        assert issubclass(RequestValidationError, GitWireError)
