"""ERC20 token contract wrapper"""


class ERC20:
    """Read-only wrapper for ERC20 token metadata"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Token contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "erc20")

    async def decimals(self):
        """Token decimals"""
        return await self.contract.functions.decimals().call()
