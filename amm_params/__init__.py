"""
AMM Params - deposit parameter calculation for AMM liquidity strategies
"""

from .core.connection import Web3Manager
from .core.config import Config
from .core.exceptions import (
    AMMError,
    ConfigError,
    ConnectionError,
    RemoteReadError,
    PoolUninitializedError,
    DegenerateReserveError,
    UnmatchedAnchorTokenError,
    ParameterEncodingError,
)
from .protocols.uniswap_v2 import UniswapV2ParameterCalculator, RatioPolicy

__version__ = "0.1.0"
__all__ = [
    "Web3Manager",
    "Config",
    "AMMError",
    "ConfigError",
    "ConnectionError",
    "RemoteReadError",
    "PoolUninitializedError",
    "DegenerateReserveError",
    "UnmatchedAnchorTokenError",
    "ParameterEncodingError",
    "UniswapV2ParameterCalculator",
    "RatioPolicy",
]
