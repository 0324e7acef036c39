"""Pool token and reserve reads for a single calculation"""

import asyncio
import logging

from ...core.exceptions import PoolUninitializedError
from .types import ReserveSnapshot, TokenMetadata

logger = logging.getLogger(__name__)


class PoolMetadataReader:
    """
    Reads token addresses, token decimals and reserves of one pool.

    Every field is fetched at most once: the first caller starts a task and
    later (or concurrent) callers await the same task. Create a new reader
    for each calculation so pool state is never reused across calls.
    """

    def __init__(self, reader, pool_address):
        """
        Args:
            reader: BaseChainReader implementation
            pool_address: Pool contract address
        """
        if not pool_address:
            raise PoolUninitializedError("Liquidity pool not initialized")
        self.reader = reader
        self.pool_address = pool_address
        self._reads = {}

    def _once(self, field, factory):
        """Return the task reading *field*, starting it on first use"""
        if field not in self._reads:
            self._reads[field] = asyncio.ensure_future(factory())
        return self._reads[field]

    def cancel_pending(self):
        """Cancel reads still in flight (after a sibling read failed)"""
        for task in self._reads.values():
            if not task.done():
                task.cancel()

    async def _decimals_of(self, address_read):
        # Token identity is only known once the pool has been queried
        address = await address_read()
        decimals = int(await self.reader.decimals(address))
        logger.debug("Token %s has %d decimals", address, decimals)
        return decimals

    async def token_a_address(self):
        """Pool token0 address"""
        return await self._once("token_a", lambda: self.reader.token0(self.pool_address))

    async def token_b_address(self):
        """Pool token1 address"""
        return await self._once("token_b", lambda: self.reader.token1(self.pool_address))

    async def token_a_decimals(self):
        """Decimals of token0, read from the token contract"""
        return await self._once(
            "token_a_decimals", lambda: self._decimals_of(self.token_a_address)
        )

    async def token_b_decimals(self):
        """Decimals of token1, read from the token contract"""
        return await self._once(
            "token_b_decimals", lambda: self._decimals_of(self.token_b_address)
        )

    async def token_a(self):
        address, decimals = await asyncio.gather(
            self.token_a_address(), self.token_a_decimals()
        )
        return TokenMetadata(address=address, decimals=decimals)

    async def token_b(self):
        address, decimals = await asyncio.gather(
            self.token_b_address(), self.token_b_decimals()
        )
        return TokenMetadata(address=address, decimals=decimals)

    async def reserves(self):
        """Both reserves from one getReserves() call"""
        result = await self._once(
            "reserves", lambda: self.reader.get_reserves(self.pool_address)
        )
        snapshot = ReserveSnapshot.from_call(result)
        logger.debug(
            "Pool %s reserves: %d / %d",
            self.pool_address, snapshot.reserve_a, snapshot.reserve_b,
        )
        return snapshot
