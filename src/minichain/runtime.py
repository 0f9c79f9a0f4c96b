"""Runtime composing the balance and chain metadata stores.

The stores only report failures; the runtime decides what to do with
them. Its policy is log-and-continue: a rejected transfer is logged and
the rest of the block still runs.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from minichain.balances import Balances, TransferError
from minichain.config import RuntimeConfig
from minichain.primitives import AccountId
from minichain.system import System

logger = logging.getLogger(__name__)

Transfer = tuple[AccountId, AccountId, int]


class Runtime:
    """Owns one ``System`` and one ``Balances`` store."""

    def __init__(self, config: RuntimeConfig | None = None) -> None:
        self.config = config or RuntimeConfig()
        self.system = System(
            block_number_type=self.config.block_number_type,
            nonce_type=self.config.nonce_type,
        )
        self.balances = Balances(self.config.balance_type)

    def execute_transfer(self, caller: AccountId, to: AccountId, amount: int) -> bool:
        """Bump ``caller``'s nonce, then attempt the transfer.

        Returns False when the transfer is rejected, including an amount that
        is not a valid balance value. The nonce bump is kept either way.
        """
        self.system.inc_nonce(caller)
        try:
            self.balances.transfer(caller, to, amount)
        except (TransferError, ValueError) as e:
            logger.warning(
                "Transfer %s -> %s of %s rejected: %s", caller, to, amount, e,
            )
            return False
        logger.debug("Transfer %s -> %s of %s applied.", caller, to, amount)
        return True

    def run_block(self, transfers: Iterable[Transfer]) -> list[bool]:
        """Advance the block number and execute ``transfers`` in order."""
        self.system.inc_block_number()
        results = [
            self.execute_transfer(caller, to, amount)
            for caller, to, amount in transfers
        ]
        logger.info(
            "Block %d: %d/%d transfer(s) applied.",
            self.system.block_number(), sum(results), len(results),
        )
        return results

    # -- diagnostics ------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "system": self.system.to_dict(),
            "balances": self.balances.to_dict(),
        }

    def to_json(self) -> str:
        """Pretty-printed dump of both stores, for human inspection."""
        return json.dumps(self.to_dict(), indent=2)

    def __repr__(self) -> str:
        return f"Runtime(system={self.system!r}, balances={self.balances!r})"
