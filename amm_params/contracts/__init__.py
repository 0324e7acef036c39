"""Contract wrappers for ERC20 and Uniswap V2 pair reads"""

from .erc20 import ERC20
from .pair import Pair
from .reader import Web3ChainReader

__all__ = ["ERC20", "Pair", "Web3ChainReader"]
