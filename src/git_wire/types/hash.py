"""
Git object identifiers.

A git object is named by the SHA-1 of its content: 20 raw bytes, written on
the wire as 40 lowercase hexadecimal characters.

Two hashes compare in the same order as their hex text. Because every hash
has the same length and lowercase hex digits sort like the nibbles they
encode, byte order and text order agree.
"""

from __future__ import annotations

from typing import Any, ClassVar, Final, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

HASH_SIZE: Final[int] = 20
"""Size of a SHA-1 object identifier in bytes."""

HEX_SIZE: Final[int] = 2 * HASH_SIZE
"""Size of the textual (hex) form of an object identifier."""


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        return bytes(bytearray(value))
    return bytes(value)


class ObjectHash(bytes):
    """
    A 20-byte git object identifier.

    Instances are immutable byte objects with strict length checking.
    `str()` and `hex()` both give the canonical lowercase hex form.
    """

    LENGTH: ClassVar[int] = HASH_SIZE
    """The exact number of bytes."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new hash.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ValueError: If the resulting byte length differs from `LENGTH`.
        """
        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def zero(cls) -> Self:
        """Create the all-zero hash."""
        return cls(b"\x00" * cls.LENGTH)

    def is_zero(self) -> bool:
        """Check whether every byte is zero."""
        return not any(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an ObjectHash, accept it.
        2. Otherwise coerce it (hex string, bytes) through the constructor.
        3. For serialization, emit the hex string.
        """
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(lambda x: x.hex()),
        )

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"

    def __hash__(self) -> int:
        return hash((type(self), bytes(self)))

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)


ZERO_HASH: Final[ObjectHash] = ObjectHash.zero()
"""The all-zero object identifier."""


def sort_hashes(hashes: Iterable[ObjectHash]) -> list[str]:
    """
    Convert hashes to hex and sort them lexicographically.

    The result depends only on the set of hashes, never on the order in
    which they were supplied.

    Args:
        hashes: Object identifiers in any order.

    Returns:
        Sorted list of lowercase hex strings.
    """
    return sorted(h.hex() for h in hashes)
