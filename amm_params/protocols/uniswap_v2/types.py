"""Uniswap V2 type definitions and helpers"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RatioPolicy(Enum):
    """
    How reserves of tokens with different decimals are brought to one scale.

    LEGACY_DECIMAL_COUNT divides the decimal counts themselves
    (18 vs 6 decimals -> multiply the smaller side by 3). It reproduces the
    amounts computed by the deployed strategy tooling.

    POWER_OF_TEN_SCALING multiplies the less precise reserve by
    10 ** |decimalsA - decimalsB| and truncates only once.
    """

    LEGACY_DECIMAL_COUNT = "legacy"
    POWER_OF_TEN_SCALING = "power-of-ten"


@dataclass(frozen=True)
class TokenMetadata:
    """Pool token address and its decimal count"""

    address: str
    decimals: int


@dataclass(frozen=True)
class ReserveSnapshot:
    """Both pool reserves, taken from one getReserves() call"""

    reserve_a: int
    reserve_b: int

    @classmethod
    def from_call(cls, result) -> ReserveSnapshot:
        """Build from a raw getReserves() result (reserve0, reserve1, ...)"""
        return cls(reserve_a=int(result[0]), reserve_b=int(result[1]))


@dataclass(frozen=True)
class ReserveRatio:
    """
    Units of token A per 100 units of token B.

    Attributes:
        value: Percentage-scaled integer ratio
        policy: Policy used to normalize decimals
        scale_a: Multiplier applied to reserve A before dividing
        scale_b: Multiplier applied to reserve B before dividing
    """

    value: int
    policy: RatioPolicy
    scale_a: int = 1
    scale_b: int = 1


@dataclass(frozen=True)
class EncodedParameters:
    """
    Parameters consumed by the liquidity strategy contract.

    Field order is fixed by the strategy's abi.decode call.
    """

    token_a: str
    token_b: str
    amount_a: int
    amount_b: int
    min_amount_a_out: int
    min_amount_b_out: int

    def to_tuple(self) -> Tuple[str, str, int, int, int, int]:
        """Convert to tuple for ABI encoding"""
        return (
            self.token_a,
            self.token_b,
            self.amount_a,
            self.amount_b,
            self.min_amount_a_out,
            self.min_amount_b_out,
        )

    def encode(self) -> bytes:
        """ABI-encode the six fields"""
        from .encoding import encode_parameters

        return encode_parameters(self)

    def to_dict(self) -> dict:
        return {
            "token_a": self.token_a,
            "token_b": self.token_b,
            "amount_a": str(self.amount_a),
            "amount_b": str(self.amount_b),
            "min_amount_a_out": str(self.min_amount_a_out),
            "min_amount_b_out": str(self.min_amount_b_out),
        }
