"""
Global configuration for the git wire protocol package.

This module contains environment-specific settings read once at import time.
"""

import os

from typing_extensions import Final

__version__: Final = "0.1.0"
"""Package version, also used in the default agent string."""

_SUPPORTED_GIT_WIRE_ENVS: list[str] = ["prod", "test"]

GIT_WIRE_ENV = os.environ.get("GIT_WIRE_ENV", "prod").lower()
"""The environment flag ('prod' or 'test'). Defaults to 'prod'."""

if GIT_WIRE_ENV not in _SUPPORTED_GIT_WIRE_ENVS:
    raise ValueError(
        f"Invalid GIT_WIRE_ENV environment variable: '{GIT_WIRE_ENV}'. "
        f"Supported values: {_SUPPORTED_GIT_WIRE_ENVS}"
    )

DEFAULT_AGENT = os.environ.get("GIT_WIRE_AGENT", f"git-wire/{__version__}")
"""
Value sent with the `agent` capability.

Peers log this string; it never changes protocol behaviour.
"""
