"""Reserve ratio engine"""

import asyncio
import logging

from .math import compute_reserve_ratio
from .types import RatioPolicy

logger = logging.getLogger(__name__)


class ReserveRatioEngine:
    """Turns a pool's reserves and token decimals into a ReserveRatio"""

    def __init__(self, policy=RatioPolicy.POWER_OF_TEN_SCALING):
        """
        Args:
            policy: RatioPolicy used to normalize decimals
        """
        self.policy = RatioPolicy(policy)

    def compute(self, reserves, decimals_a, decimals_b):
        """Pure ratio computation for already-fetched values"""
        return compute_reserve_ratio(reserves, decimals_a, decimals_b, self.policy)

    async def reserve_ratio(self, metadata):
        """
        Fetch reserves and both decimals, then compute the ratio.

        The reserve read and the two decimals chains run concurrently.

        Args:
            metadata: PoolMetadataReader for the current calculation

        Returns:
            ReserveRatio
        """
        reserves, decimals_a, decimals_b = await asyncio.gather(
            metadata.reserves(),
            metadata.token_a_decimals(),
            metadata.token_b_decimals(),
        )
        ratio = self.compute(reserves, decimals_a, decimals_b)
        logger.debug(
            "Reserve ratio %d (policy=%s, scales=%d/%d)",
            ratio.value, ratio.policy.value, ratio.scale_a, ratio.scale_b,
        )
        return ratio
