"""Web3 connection management"""

import os
import logging
from web3 import AsyncWeb3, AsyncHTTPProvider
from dotenv import load_dotenv
from .config import Config
from .exceptions import ConnectionError, ConfigError

logger = logging.getLogger(__name__)


class Web3Manager:
    """Manages an async, read-only Web3 connection"""

    def __init__(self, rpc_url=None):
        """
        Initialize Web3 connection.

        Args:
            rpc_url: RPC endpoint (falls back to RPC_URL from the environment / .env)
        """
        load_dotenv()

        self.config = Config()
        self._setup_web3(rpc_url)

    def _setup_web3(self, rpc_url=None):
        """Setup Web3 connection"""
        rpc_url = rpc_url or os.getenv("RPC_URL")
        if not rpc_url:
            raise ConfigError("RPC_URL not found in environment")

        self.rpc_url = rpc_url
        self.w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url))

    async def ensure_connected(self):
        """Raise ConnectionError if the RPC endpoint does not answer"""
        if not await self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to {self.rpc_url}")
        logger.debug("Connected to %s", self.rpc_url)

    async def chain_id(self):
        """Get current chain ID"""
        return await self.w3.eth.chain_id

    def get_contract(self, address, abi_name):
        """Create contract instance"""
        abi = self.config.get_abi(abi_name)
        return self.w3.eth.contract(
            address=self.checksum(address),
            abi=abi
        )

    def checksum(self, address):
        """Convert address to checksum format"""
        return AsyncWeb3.to_checksum_address(address)
