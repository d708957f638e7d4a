"""Tests for git object identifiers and their canonical ordering."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from git_wire.types import ZERO_HASH, ObjectHash, sort_hashes
from tests.git_wire.helpers import make_hash

HEX = "6ecf0ef2c2dffb796033e5a02219af86ec6584e5"


class TestObjectHash:
    """Construction, formatting and comparison."""

    @pytest.mark.parametrize(
        "value",
        [
            HEX,
            "0x" + HEX,
            bytes.fromhex(HEX),
            bytearray.fromhex(HEX),
            list(bytes.fromhex(HEX)),
        ],
    )
    def test_coercion(self, value: Any) -> None:
        """Hex strings, bytes and int iterables all produce the same hash."""
        h = ObjectHash(value)
        assert bytes(h) == bytes.fromhex(HEX)
        assert isinstance(h, bytes)

    @pytest.mark.parametrize("length", [0, 19, 21, 32])
    def test_wrong_length_raises(self, length: int) -> None:
        """Only exactly 20 bytes are accepted."""
        with pytest.raises(ValueError, match="exactly 20 bytes"):
            ObjectHash(b"\x01" * length)

    def test_invalid_hex_raises(self) -> None:
        """Non-hex characters are rejected."""
        with pytest.raises(ValueError):
            ObjectHash("z" * 40)

    def test_str_is_lowercase_hex(self) -> None:
        """The textual form is 40 lowercase hex characters."""
        h = ObjectHash(HEX.upper())
        assert str(h) == HEX
        assert h.hex() == HEX
        assert repr(h) == f"ObjectHash({HEX})"

    def test_zero(self) -> None:
        """The zero hash is all zero bytes."""
        assert ZERO_HASH == ObjectHash.zero()
        assert ZERO_HASH.is_zero()
        assert str(ZERO_HASH) == "0" * 40
        assert not make_hash(1).is_zero()

    def test_hashable(self) -> None:
        """Equal hashes collapse in a set."""
        assert len({make_hash(7), make_hash(7), make_hash(8)}) == 2

    def test_ordering_matches_hex(self) -> None:
        """Byte order agrees with the order of the hex text."""
        a = ObjectHash("0a" * 20)
        b = ObjectHash("a0" * 20)
        assert a < b
        assert a.hex() < b.hex()


class TestPydanticIntegration:
    """ObjectHash as a pydantic field."""

    class Model(BaseModel):
        target: ObjectHash

    def test_validates_hex_string(self) -> None:
        """Hex input is converted to an ObjectHash."""
        m = self.Model(target=HEX)
        assert isinstance(m.target, ObjectHash)
        assert m.target.hex() == HEX

    def test_serializes_to_hex(self) -> None:
        """JSON output uses the hex form."""
        m = self.Model(target=HEX)
        assert m.model_dump(mode="json") == {"target": HEX}

    def test_rejects_short_value(self) -> None:
        """Validation fails on a wrong-length value."""
        with pytest.raises(ValueError):
            self.Model(target="abcd")


class TestSortHashes:
    """The canonical ordering helper."""

    def test_empty(self) -> None:
        """No hashes give an empty list."""
        assert sort_hashes([]) == []

    def test_sorts_lexicographically(self) -> None:
        """Hashes come back as sorted hex strings."""
        hashes = [make_hash(0xBB), make_hash(0x0A), make_hash(0xAA)]
        assert sort_hashes(hashes) == [
            "0a" * 20,
            "aa" * 20,
            "bb" * 20,
        ]

    def test_does_not_modify_input(self) -> None:
        """The input list keeps its order."""
        hashes = [make_hash(2), make_hash(1)]
        sort_hashes(hashes)
        assert hashes == [make_hash(2), make_hash(1)]

    @given(st.lists(st.binary(min_size=20, max_size=20), max_size=16), st.randoms())
    def test_independent_of_input_order(self, raw: list[bytes], rnd: Any) -> None:
        """Any permutation of the same hashes sorts identically."""
        hashes = [ObjectHash(r) for r in raw]
        shuffled = list(hashes)
        rnd.shuffle(shuffled)
        assert sort_hashes(hashes) == sort_hashes(shuffled)
