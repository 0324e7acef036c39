"""Uniswap V2 (and SushiSwap) parameter calculation"""

from .calculator import CalculatorSettings, UniswapV2ParameterCalculator
from .encoding import encode_parameters, decode_parameters
from .math import compute_reserve_ratio, slippage_factor
from .metadata import PoolMetadataReader
from .ratio import ReserveRatioEngine
from .types import (
    EncodedParameters,
    RatioPolicy,
    ReserveRatio,
    ReserveSnapshot,
    TokenMetadata,
)

__all__ = [
    "CalculatorSettings",
    "UniswapV2ParameterCalculator",
    "encode_parameters",
    "decode_parameters",
    "compute_reserve_ratio",
    "slippage_factor",
    "PoolMetadataReader",
    "ReserveRatioEngine",
    "EncodedParameters",
    "RatioPolicy",
    "ReserveRatio",
    "ReserveSnapshot",
    "TokenMetadata",
]
