"""Abstract base classes for AMM protocol implementations"""

from abc import ABC, abstractmethod
from typing import Any, Sequence


class BaseChainReader(ABC):
    """
    Read-only access to pool and token state.

    Implementations own transport concerns (timeouts, retries). Any failed
    read should surface as RemoteReadError.
    """

    @abstractmethod
    async def token0(self, pool_address: str) -> str:
        """Address of the pool's token0"""
        pass

    @abstractmethod
    async def token1(self, pool_address: str) -> str:
        """Address of the pool's token1"""
        pass

    @abstractmethod
    async def get_reserves(self, pool_address: str) -> Sequence[int]:
        """
        Current pool reserves from a single read.

        Returns:
            (reserve0, reserve1, ...) - extra fields are ignored
        """
        pass

    @abstractmethod
    async def decimals(self, token_address: str) -> int:
        """Decimal count reported by an ERC20 token"""
        pass


class BaseParameterCalculator(ABC):
    """Abstract base class for strategy parameter calculators"""

    @abstractmethod
    async def build_parameters(self) -> Any:
        """
        Read pool state and compute the strategy parameters.

        Returns:
            Protocol-specific parameter object
        """
        pass

    @abstractmethod
    async def build_encoded_parameters(self) -> bytes:
        """
        Compute the parameters and ABI-encode them for the strategy contract.

        Returns:
            Encoded parameter block
        """
        pass
