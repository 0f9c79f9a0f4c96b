"""Shared primitive types for both stores.

``AccountId`` is the single account key type. ``CheckedNumeric`` is the
capability contract a quantity type must satisfy: identities, a ceiling,
and checked add/sub that report failure with ``None`` instead of wrapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from minichain.constants import IntWidth

AccountId = str


@runtime_checkable
class CheckedNumeric(Protocol):
    """Arithmetic contract used by ``Balances`` and ``System``."""

    @property
    def zero(self) -> int: ...

    @property
    def one(self) -> int: ...

    @property
    def max_value(self) -> int: ...

    def checked_add(self, a: int, b: int) -> int | None: ...

    def checked_sub(self, a: int, b: int) -> int | None: ...

    def contains(self, value: int) -> bool: ...


@dataclass(frozen=True)
class UnsignedInt:
    """Fixed-width unsigned integer arithmetic over plain Python ints."""

    width: IntWidth

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    @property
    def max_value(self) -> int:
        return (1 << self.width) - 1

    def contains(self, value: int) -> bool:
        # bool is an int subclass but never a quantity
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return 0 <= value <= self.max_value

    def checked_add(self, a: int, b: int) -> int | None:
        """Return ``a + b``, or None if the sum leaves the representable range."""
        result = a + b
        if not self.contains(result):
            return None
        return result

    def checked_sub(self, a: int, b: int) -> int | None:
        """Return ``a - b``, or None if the difference leaves the representable range."""
        result = a - b
        if not self.contains(result):
            return None
        return result

    def __str__(self) -> str:
        return f"u{int(self.width)}"


U32 = UnsignedInt(IntWidth.U32)
U64 = UnsignedInt(IntWidth.U64)
U128 = UnsignedInt(IntWidth.U128)
