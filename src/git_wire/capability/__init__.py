"""Capability negotiation tokens and ordered capability lists."""

from .. import config
from .capability import KNOWN, MULTIPLE_ARGUMENTS, REQUIRES_ARGUMENT, Capability
from .capability_list import (
    ArgumentsRequiredError,
    CapabilityError,
    CapabilityList,
    MultipleArgumentsError,
    UnexpectedArgumentsError,
)


def default_agent() -> str:
    """Return the value this package sends with the `agent` capability."""
    return config.DEFAULT_AGENT


__all__ = [
    "KNOWN",
    "MULTIPLE_ARGUMENTS",
    "REQUIRES_ARGUMENT",
    "ArgumentsRequiredError",
    "Capability",
    "CapabilityError",
    "CapabilityList",
    "MultipleArgumentsError",
    "UnexpectedArgumentsError",
    "default_agent",
]
