"""Deposit parameter calculation for Uniswap V2 style strategies"""

import asyncio
import logging
from dataclasses import dataclass

from ...core.exceptions import ConfigError, PoolUninitializedError, UnmatchedAnchorTokenError
from ..base import BaseParameterCalculator
from .encoding import encode_parameters
from .math import derive_amount_a, derive_amount_b, min_amount_out, slippage_factor
from .metadata import PoolMetadataReader
from .ratio import ReserveRatioEngine
from .types import EncodedParameters, RatioPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorSettings:
    """
    Inputs of a parameter calculation.

    Attributes:
        pool_address: Uniswap V2 / SushiSwap pair address
        fixed_token_amount: Amount of the anchor token to deposit (raw units)
        anchor_token: Address of the anchor (debt) token
        slippage_tolerance: Fraction in [0, 1) (0.01 = 1%)
        ratio_policy: How reserves with different decimals are normalized
    """

    pool_address: str
    fixed_token_amount: int
    anchor_token: str
    slippage_tolerance: float = 0.01
    ratio_policy: RatioPolicy = RatioPolicy.POWER_OF_TEN_SCALING

    def __post_init__(self):
        if not self.pool_address:
            raise PoolUninitializedError("Liquidity pool not initialized")
        if not self.anchor_token:
            raise ConfigError("Anchor token address is required")
        amount = self.fixed_token_amount
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise ConfigError(
                f"fixed_token_amount must be a non-negative integer, got {self.fixed_token_amount!r}"
            )
        # Raises ConfigError for tolerances outside [0, 1)
        slippage_factor(self.slippage_tolerance)
        object.__setattr__(self, "ratio_policy", RatioPolicy(self.ratio_policy))


def _same_address(a, b):
    return a.lower() == b.lower()


class UniswapV2ParameterCalculator(BaseParameterCalculator):
    """
    Splits a single anchor-token amount into a matched two-sided deposit.

    Each call reads the pool afresh; nothing is cached between calls.
    """

    def __init__(self, reader, settings):
        """
        Args:
            reader: BaseChainReader implementation
            settings: CalculatorSettings
        """
        if reader is None:
            raise ConfigError("A chain reader is required")
        self.reader = reader
        self.settings = settings
        self.slippage_factor = slippage_factor(settings.slippage_tolerance)
        self.ratio_engine = ReserveRatioEngine(settings.ratio_policy)

    @classmethod
    def create(cls, reader, pool_address, fixed_token_amount, anchor_token,
               slippage_tolerance=0.01, ratio_policy=RatioPolicy.POWER_OF_TEN_SCALING):
        """Build settings and calculator in one step"""
        settings = CalculatorSettings(
            pool_address=pool_address,
            fixed_token_amount=fixed_token_amount,
            anchor_token=anchor_token,
            slippage_tolerance=slippage_tolerance,
            ratio_policy=ratio_policy,
        )
        return cls(reader, settings)

    async def build_parameters(self):
        """
        Read the pool and compute the six strategy parameters.

        Returns:
            EncodedParameters

        Raises:
            RemoteReadError: A pool or token read failed
            DegenerateReserveError: Reserves cannot produce a ratio
            UnmatchedAnchorTokenError: Neither pool token is the anchor
        """
        metadata = PoolMetadataReader(self.reader, self.settings.pool_address)
        try:
            token_a, token_b, ratio = await asyncio.gather(
                metadata.token_a(),
                metadata.token_b(),
                self.ratio_engine.reserve_ratio(metadata),
            )
        finally:
            metadata.cancel_pending()

        params = self._split_amount(token_a.address, token_b.address, ratio)
        logger.info(
            "Parameters for pool %s: amountA=%d amountB=%d minA=%d minB=%d",
            self.settings.pool_address,
            params.amount_a, params.amount_b,
            params.min_amount_a_out, params.min_amount_b_out,
        )
        return params

    def _split_amount(self, token_a, token_b, ratio):
        """Place the fixed amount on the anchor side and derive the other side"""
        fixed = self.settings.fixed_token_amount
        anchor = self.settings.anchor_token

        if _same_address(token_a, anchor):
            amount_a = fixed
            amount_b = derive_amount_b(amount_a, ratio)
        elif _same_address(token_b, anchor):
            amount_b = fixed
            amount_a = derive_amount_a(amount_b, ratio)
        else:
            raise UnmatchedAnchorTokenError(
                f"Pool {self.settings.pool_address} holds {token_a} and {token_b}, "
                f"neither is the anchor token {anchor}"
            )

        return EncodedParameters(
            token_a=token_a,
            token_b=token_b,
            amount_a=amount_a,
            amount_b=amount_b,
            min_amount_a_out=min_amount_out(amount_a, self.slippage_factor),
            min_amount_b_out=min_amount_out(amount_b, self.slippage_factor),
        )

    async def build_encoded_parameters(self):
        """
        Compute the parameters and ABI-encode them.

        Returns:
            192-byte parameter block for the strategy contract
        """
        return encode_parameters(await self.build_parameters())
