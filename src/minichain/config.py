"""Runtime configuration — plain frozen dataclass, no pydantic.

The host picks the numeric type of each quantity and passes the config
to ``Runtime``.
"""

from dataclasses import dataclass

from minichain.primitives import U32, U128, CheckedNumeric


@dataclass(frozen=True)
class RuntimeConfig:
    balance_type: CheckedNumeric = U128
    block_number_type: CheckedNumeric = U32
    nonce_type: CheckedNumeric = U32
