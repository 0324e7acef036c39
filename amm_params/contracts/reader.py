"""Chain reader backed by AsyncWeb3 contract calls"""

import logging

from ..core.exceptions import RemoteReadError
from ..protocols.base import BaseChainReader
from .erc20 import ERC20
from .pair import Pair

logger = logging.getLogger(__name__)


class Web3ChainReader(BaseChainReader):
    """Serves pool and token reads through a Web3Manager"""

    def __init__(self, manager):
        """
        Args:
            manager: Web3Manager instance
        """
        self.manager = manager

    async def _call(self, description, awaitable):
        """Await a contract call, reporting any failure as RemoteReadError"""
        logger.debug("Reading %s", description)
        try:
            return await awaitable
        except Exception as e:
            raise RemoteReadError(f"{description} failed: {e}") from e

    async def token0(self, pool_address):
        pair = Pair(self.manager, pool_address)
        return await self._call(f"token0() on {pair.address}", pair.token0())

    async def token1(self, pool_address):
        pair = Pair(self.manager, pool_address)
        return await self._call(f"token1() on {pair.address}", pair.token1())

    async def get_reserves(self, pool_address):
        pair = Pair(self.manager, pool_address)
        return await self._call(f"getReserves() on {pair.address}", pair.get_reserves())

    async def decimals(self, token_address):
        token = ERC20(self.manager, token_address)
        return await self._call(f"decimals() on {token.address}", token.decimals())
