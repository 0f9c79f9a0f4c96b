"""minichain — a minimal deterministic ledger state machine.

Balance transfers with checked arithmetic, plus block height and
per-account nonce tracking.
"""

__version__ = "0.1.0"

from minichain.balances import (
    Balances,
    BalanceOverflowError,
    ErrorKind,
    InsufficientFundsError,
    TransferError,
)
from minichain.config import RuntimeConfig
from minichain.constants import IntWidth, U32_MAX, U64_MAX, U128_MAX
from minichain.primitives import U32, U64, U128, AccountId, CheckedNumeric, UnsignedInt
from minichain.runtime import Runtime
from minichain.system import System

__all__ = [
    "AccountId",
    "Balances",
    "BalanceOverflowError",
    "CheckedNumeric",
    "ErrorKind",
    "InsufficientFundsError",
    "IntWidth",
    "Runtime",
    "RuntimeConfig",
    "System",
    "TransferError",
    "UnsignedInt",
    "U32",
    "U64",
    "U128",
    "U32_MAX",
    "U64_MAX",
    "U128_MAX",
]
