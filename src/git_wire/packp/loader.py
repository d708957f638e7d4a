"""
Upload request loader.

Loads an upload request from YAML, for the command line and for fixtures:

    wants:
      - 6ecf0ef2c2dffb796033e5a02219af86ec6584e5
    shallows:
      - 1111111111111111111111111111111111111111
    depth:
      commits: 1
    capabilities:
      - ofs-delta
      - agent=git/2.43.0

`depth` takes exactly one of `commits`, `since` or `reference`, or is
omitted for no limit. Hashes may be left unquoted.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import Field, model_validator

from ..capability import CapabilityList
from ..types import ObjectHash, StrictBaseModel
from .depth import Depth, DepthCommits, DepthReference, DepthSince
from .ulreq import UploadRequest


class RequestLoader(yaml.SafeLoader):
    """
    Safe YAML loader that keeps unquoted numbers as text.

    A hash made only of digits would otherwise load as an int, or as an
    octal int when it starts with 0, losing the hex text it was written as.
    Numeric fields such as `commits` are converted by pydantic instead.
    """

    yaml_implicit_resolvers = {
        first: [
            (tag, regexp)
            for tag, regexp in resolvers
            if tag not in ("tag:yaml.org,2002:int", "tag:yaml.org,2002:float")
        ]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


def parse_capability(token: str) -> tuple[str, list[str]]:
    """
    Split a `name` or `name=value` token.

    Returns:
        The capability name and its values (empty for a bare token).
    """
    name, sep, value = token.partition("=")
    return name, [value] if sep else []


class DepthConfig(StrictBaseModel):
    """One of the three depth variants, keyed by kind."""

    commits: Annotated[int, Field(ge=0)] | None = None
    """Commit count for `deepen`."""

    since: datetime | None = None
    """Cutoff for `deepen-since`."""

    reference: Annotated[str, Field(min_length=1)] | None = None
    """Reference for `deepen-not`."""

    @model_validator(mode="after")
    def validate_single_kind(self) -> DepthConfig:
        """Exactly one kind may be set."""
        kinds = [k for k in ("commits", "since", "reference") if getattr(self, k) is not None]
        if len(kinds) != 1:
            raise ValueError(
                f"depth must set exactly one of commits, since, reference (got {kinds or 'none'})"
            )
        return self

    def to_depth(self) -> Depth:
        """Build the matching depth variant."""
        if self.commits is not None:
            return DepthCommits(self.commits)
        if self.since is not None:
            return DepthSince(self.since)
        if self.reference is not None:
            return DepthReference(self.reference)
        raise ValueError("depth must set one of commits, since, reference")


class UploadRequestConfig(StrictBaseModel):
    """Declarative form of an `UploadRequest`."""

    wants: list[ObjectHash] = Field(min_length=1)
    """Hex hashes of the wanted objects."""

    shallows: list[ObjectHash] = Field(default_factory=list)
    """Hex hashes of the shallow boundaries."""

    depth: DepthConfig | None = None
    """Optional history limit."""

    capabilities: list[str] = Field(default_factory=list)
    """Capability tokens, as `name` or `name=value`."""

    def to_upload_request(self) -> UploadRequest:
        """
        Build the request.

        Raises:
            CapabilityError: If a capability token breaks its argument rules.
        """
        capabilities = CapabilityList()
        for token in self.capabilities:
            name, values = parse_capability(token)
            capabilities.add(name, *values)

        return UploadRequest(
            wants=list(self.wants),
            shallows=list(self.shallows),
            depth=self.depth.to_depth() if self.depth is not None else DepthCommits(0),
            capabilities=capabilities,
        )

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> UploadRequestConfig:
        """
        Load a request from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f, Loader=RequestLoader)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> UploadRequestConfig:
        """Load a request from a YAML string."""
        data = yaml.load(content, Loader=RequestLoader)
        return cls.model_validate(data)
