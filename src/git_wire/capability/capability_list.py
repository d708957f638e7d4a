"""
Ordered capability collections.

A `CapabilityList` keeps its entries in first-insertion order, so that a
list copied from a server advertisement renders the way it was received.
`sort()` switches to the canonical order (by token name), which is what
requests use to get reproducible bytes.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..types import GitWireError
from .capability import KNOWN, MULTIPLE_ARGUMENTS, REQUIRES_ARGUMENT


class CapabilityError(GitWireError):
    """Base class for capability argument errors."""


class ArgumentsRequiredError(CapabilityError):
    """Raised when a capability that needs a value is given none."""

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"capability {capability!r} requires an argument")


class UnexpectedArgumentsError(CapabilityError):
    """Raised when a capability that takes no value is given one."""

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"capability {capability!r} does not take arguments")


class MultipleArgumentsError(CapabilityError):
    """Raised when a single-valued capability is given several values."""

    def __init__(self, capability: str) -> None:
        self.capability = capability
        super().__init__(f"capability {capability!r} does not support multiple arguments")


class CapabilityList:
    """
    Ordered mapping from capability name to its values.

    Names are plain strings; `Capability` members work as keys because they
    are `str` subclasses. Unknown tokens are stored as given.
    """

    def __init__(self) -> None:
        self._values: dict[str, list[str]] = {}

    def is_empty(self) -> bool:
        """Check whether no capability is present."""
        return not self._values

    def supports(self, capability: str) -> bool:
        """Check whether `capability` is present."""
        return str(capability) in self._values

    def get(self, capability: str) -> list[str]:
        """
        Return the values of `capability`.

        Returns an empty list when the capability is absent or bare.
        """
        return list(self._values.get(str(capability), []))

    def add(self, capability: str, *values: str) -> None:
        """
        Add a capability, appending values if it is already present.

        Raises:
            ArgumentsRequiredError: If a value is mandatory and none is given.
            UnexpectedArgumentsError: If a known bare capability is given a value.
            MultipleArgumentsError: If a single-valued capability would end up
                with more than one value.
        """
        name = str(capability)
        self._check_arguments(name, values)

        existing = self._values.setdefault(name, [])
        if values and existing and name not in MULTIPLE_ARGUMENTS:
            raise MultipleArgumentsError(name)
        existing.extend(values)

    def set(self, capability: str, *values: str) -> None:
        """Replace any existing values of `capability`, keeping its position."""
        name = str(capability)
        self._check_arguments(name, values)

        self._values[name] = list(values)

    def delete(self, capability: str) -> None:
        """Remove `capability` if present."""
        self._values.pop(str(capability), None)

    def all(self) -> list[str]:
        """Return the capability names in their current order."""
        return list(self._values)

    def sort(self) -> None:
        """Reorder entries by capability name, in place."""
        self._values = dict(sorted(self._values.items()))

    def sorted(self) -> CapabilityList:
        """Return a sorted copy, leaving this list untouched."""
        result = self.copy()
        result.sort()
        return result

    def copy(self) -> CapabilityList:
        """Return an independent copy."""
        result = CapabilityList()
        result._values = {name: list(values) for name, values in self._values.items()}
        return result

    def _check_arguments(self, name: str, values: tuple[str, ...]) -> None:
        if name not in KNOWN:
            return

        if not values:
            if name in REQUIRES_ARGUMENT:
                raise ArgumentsRequiredError(name)
            return

        if name not in REQUIRES_ARGUMENT:
            raise UnexpectedArgumentsError(name)
        if len(values) > 1 and name not in MULTIPLE_ARGUMENTS:
            raise MultipleArgumentsError(name)

    def __str__(self) -> str:
        """
        Render the canonical space-separated form.

        A bare capability is written as its name. Each value of a valued
        capability becomes its own `name=value` token.
        """
        tokens: list[str] = []
        for name, values in self._values.items():
            if not values:
                tokens.append(name)
            else:
                tokens.extend(f"{name}={value}" for value in values)
        return " ".join(tokens)

    def __repr__(self) -> str:
        return f"CapabilityList({str(self)!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, capability: object) -> bool:
        return isinstance(capability, str) and str(capability) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapabilityList):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())
