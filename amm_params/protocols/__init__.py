"""Protocol implementations for different AMM platforms"""

from .base import BaseChainReader, BaseParameterCalculator

__all__ = [
    "BaseChainReader",
    "BaseParameterCalculator",
]
