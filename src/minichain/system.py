"""Chain metadata store: block height and per-account nonces."""

from __future__ import annotations

from typing import Any

from minichain.primitives import U32, AccountId, CheckedNumeric


class System:
    """Block number plus a nonce per account.

    Both counters only ever move up by one. Reaching a type's ceiling is
    not a recoverable condition and raises ``OverflowError``.
    """

    def __init__(
        self,
        block_number_type: CheckedNumeric = U32,
        nonce_type: CheckedNumeric = U32,
    ) -> None:
        self._block_number_type = block_number_type
        self._nonce_type = nonce_type
        self._block_number = block_number_type.zero
        self._nonce: dict[AccountId, int] = {}

    def block_number(self) -> int:
        return self._block_number

    def inc_block_number(self) -> None:
        """Increase the block number by one."""
        t = self._block_number_type
        new = t.checked_add(self._block_number, t.one)
        if new is None:
            raise OverflowError(f"block number exceeds {t} ceiling")
        self._block_number = new

    def nonce(self, who: AccountId) -> int:
        return self._nonce.get(who, self._nonce_type.zero)

    def inc_nonce(self, who: AccountId) -> None:
        """Increment the nonce of ``who``, creating the entry at zero first."""
        t = self._nonce_type
        new = t.checked_add(self._nonce.get(who, t.zero), t.one)
        if new is None:
            raise OverflowError(f"nonce of {who!r} exceeds {t} ceiling")
        self._nonce[who] = new

    def to_dict(self) -> dict[str, Any]:
        return {
            "block_number": self._block_number,
            "nonce": {who: self._nonce[who] for who in sorted(self._nonce)},
        }

    def __repr__(self) -> str:
        return f"System(block_number={self._block_number}, accounts={len(self._nonce)})"
