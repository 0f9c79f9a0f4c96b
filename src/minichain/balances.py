"""Per-account balance store with checked transfers.

Pure in-memory state: no I/O and no logging. Failed transfers raise a
``TransferError`` subclass and leave every balance untouched.
"""

from __future__ import annotations

from enum import Enum

from minichain.primitives import U128, AccountId, CheckedNumeric


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERFLOW = "overflow"


class TransferError(Exception):
    """Base exception for rejected transfers."""

    kind: ErrorKind

    def __init__(self, message: str, caller: AccountId, to: AccountId, amount: int) -> None:
        super().__init__(message)
        self.caller = caller
        self.to = to
        self.amount = amount


class InsufficientFundsError(TransferError):
    """Sender balance is below the transfer amount."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class BalanceOverflowError(TransferError):
    """Recipient balance plus the amount exceeds the balance ceiling."""

    kind = ErrorKind.OVERFLOW


# ---------------------------------------------------------------------------
# Balances
# ---------------------------------------------------------------------------


class Balances:
    """Account → balance mapping.

    An account with no entry has a zero balance; reads never distinguish
    "never set" from "set to zero".
    """

    def __init__(self, numeric: CheckedNumeric = U128) -> None:
        self._numeric = numeric
        self._balances: dict[AccountId, int] = {}

    @property
    def numeric(self) -> CheckedNumeric:
        return self._numeric

    def _check_amount(self, amount: int) -> None:
        if not self._numeric.contains(amount):
            raise ValueError(f"amount {amount!r} is not a valid {self._numeric} value")

    def balance(self, who: AccountId) -> int:
        """Balance of ``who``; zero if the account has no entry."""
        return self._balances.get(who, self._numeric.zero)

    def set_balance(self, who: AccountId, amount: int) -> None:
        """Overwrite the balance of ``who`` with ``amount``."""
        self._check_amount(amount)
        self._balances[who] = amount

    def transfer(self, caller: AccountId, to: AccountId, amount: int) -> None:
        """Move ``amount`` from ``caller`` to ``to``.

        Both balances are read before either is written. A self-transfer
        only needs the funds check and leaves the balance as it was. Raises
        ``InsufficientFundsError`` or ``BalanceOverflowError`` without
        mutating anything.
        """
        self._check_amount(amount)
        caller_balance = self.balance(caller)
        to_balance = self.balance(to)

        new_caller_balance = self._numeric.checked_sub(caller_balance, amount)
        if new_caller_balance is None:
            raise InsufficientFundsError("Not enough funds", caller, to, amount)
        if caller == to:
            return
        new_to_balance = self._numeric.checked_add(to_balance, amount)
        if new_to_balance is None:
            raise BalanceOverflowError("Overflow occurred", caller, to, amount)

        self._balances[caller] = new_caller_balance
        self._balances[to] = new_to_balance

    # -- inspection -------------------------------------------------------------

    def accounts(self) -> list[AccountId]:
        """Accounts with a stored entry, in key order."""
        return sorted(self._balances)

    def total_issuance(self) -> int:
        """Sum of all stored balances (unbounded Python int)."""
        return sum(self._balances.values())

    def to_dict(self) -> dict[AccountId, int]:
        return {who: self._balances[who] for who in sorted(self._balances)}

    def __repr__(self) -> str:
        return f"Balances(numeric={self._numeric}, accounts={len(self._balances)})"
