"""Tests for the System store (block number and nonces)."""

import pytest

from minichain.primitives import CheckedNumeric
from minichain.system import System


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _SmallCounter:
    """Unsigned counter type with a ceiling of 3."""

    zero = 0
    one = 1
    max_value = 3

    def contains(self, value: int) -> bool:
        return isinstance(value, int) and 0 <= value <= self.max_value

    def checked_add(self, a: int, b: int) -> int | None:
        return a + b if self.contains(a + b) else None

    def checked_sub(self, a: int, b: int) -> int | None:
        return a - b if self.contains(a - b) else None


SMALL = _SmallCounter()


# ---------------------------------------------------------------------------
# Block number
# ---------------------------------------------------------------------------


class TestBlockNumber:
    def test_starts_at_zero(self) -> None:
        assert System().block_number() == 0

    def test_increment(self) -> None:
        system = System()
        system.inc_block_number()
        assert system.block_number() == 1

    def test_increment_n_times(self) -> None:
        system = System()
        for _ in range(25):
            system.inc_block_number()
        assert system.block_number() == 25

    def test_small_counter_satisfies_protocol(self) -> None:
        assert isinstance(SMALL, CheckedNumeric)

    def test_ceiling_raises(self) -> None:
        system = System(block_number_type=SMALL)
        for _ in range(3):
            system.inc_block_number()
        with pytest.raises(OverflowError):
            system.inc_block_number()
        assert system.block_number() == 3


# ---------------------------------------------------------------------------
# Nonce
# ---------------------------------------------------------------------------


class TestNonce:
    def test_unknown_account_is_zero(self) -> None:
        assert System().nonce("alice") == 0

    def test_increment(self) -> None:
        system = System()
        system.inc_block_number()
        system.inc_nonce("alice")
        assert system.block_number() == 1
        assert system.nonce("alice") == 1
        assert system.nonce("bob") == 0

    def test_increment_n_times(self) -> None:
        system = System()
        for _ in range(5):
            system.inc_nonce("alice")
        assert system.nonce("alice") == 5

    def test_accounts_independent(self) -> None:
        system = System()
        system.inc_nonce("alice")
        system.inc_nonce("bob")
        system.inc_nonce("alice")
        assert system.nonce("alice") == 2
        assert system.nonce("bob") == 1

    def test_nonce_does_not_touch_block_number(self) -> None:
        system = System()
        system.inc_nonce("alice")
        assert system.block_number() == 0

    def test_ceiling_raises(self) -> None:
        system = System(nonce_type=SMALL)
        for _ in range(3):
            system.inc_nonce("alice")
        with pytest.raises(OverflowError):
            system.inc_nonce("alice")
        assert system.nonce("alice") == 3
        system.inc_nonce("bob")
        assert system.nonce("bob") == 1


class TestSystemDump:
    def test_to_dict(self) -> None:
        system = System()
        system.inc_block_number()
        system.inc_nonce("bob")
        system.inc_nonce("alice")
        assert system.to_dict() == {"block_number": 1, "nonce": {"alice": 1, "bob": 1}}
        assert list(system.to_dict()["nonce"]) == ["alice", "bob"]

    def test_repr(self) -> None:
        system = System()
        system.inc_nonce("alice")
        assert repr(system) == "System(block_number=0, accounts=1)"
