"""Uniswap V2 pair contract wrapper"""


class Pair:
    """Read-only wrapper for Uniswap V2 (and SushiSwap) pair interactions"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Pair contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "uniswap_v2_pair")

    async def token0(self):
        """Token0 address"""
        return await self.contract.functions.token0().call()

    async def token1(self):
        """Token1 address"""
        return await self.contract.functions.token1().call()

    async def get_reserves(self):
        """
        Get reserves from a single call.
        Returns: (reserve0, reserve1, blockTimestampLast)
        """
        return await self.contract.functions.getReserves().call()
