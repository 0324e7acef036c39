"""Integer math for Uniswap V2 deposit parameters"""

from fractions import Fraction

from ...core.exceptions import ConfigError, DegenerateReserveError
from .types import RatioPolicy, ReserveRatio, ReserveSnapshot

# Ratios and slippage factors are percentages
PERCENT = 100


def _legacy_scales(decimals_a, decimals_b):
    """
    Reserve multipliers from the quotient of the decimal counts.

    The less precise side is multiplied by floor(larger / smaller).
    """
    if decimals_a == decimals_b:
        return 1, 1
    if decimals_a > decimals_b:
        if decimals_b == 0:
            raise DegenerateReserveError(
                "Cannot adjust decimals: token B reports 0 decimals"
            )
        return 1, decimals_a // decimals_b
    if decimals_a == 0:
        raise DegenerateReserveError(
            "Cannot adjust decimals: token A reports 0 decimals"
        )
    return decimals_b // decimals_a, 1


def _power_of_ten_scales(decimals_a, decimals_b):
    """Reserve multipliers that bring both sides to the larger decimal count"""
    if decimals_a >= decimals_b:
        return 1, 10 ** (decimals_a - decimals_b)
    return 10 ** (decimals_b - decimals_a), 1


def compute_reserve_ratio(
    reserves: ReserveSnapshot,
    decimals_a: int,
    decimals_b: int,
    policy: RatioPolicy = RatioPolicy.POWER_OF_TEN_SCALING,
) -> ReserveRatio:
    """
    Compute units of token A per 100 units of token B.

    LEGACY_DECIMAL_COUNT truncates the reserve quotient before scaling by 100:
        floor((reserveA * scaleA) / (reserveB * scaleB)) * 100
    POWER_OF_TEN_SCALING scales by 100 first and truncates once:
        floor(reserveA * scaleA * 100 / (reserveB * scaleB))

    Args:
        reserves: Reserve snapshot (both sides from one read)
        decimals_a: Token A decimals
        decimals_b: Token B decimals
        policy: Decimal normalization policy

    Returns:
        ReserveRatio

    Raises:
        DegenerateReserveError: If a reserve is zero, the legacy adjustment
            divides by a zero decimal count, or the ratio truncates to zero
    """
    if decimals_a < 0 or decimals_b < 0:
        raise DegenerateReserveError(
            f"Negative decimals: A={decimals_a}, B={decimals_b}"
        )
    if reserves.reserve_a <= 0 or reserves.reserve_b <= 0:
        raise DegenerateReserveError(
            f"Pool has an empty side: reserveA={reserves.reserve_a}, "
            f"reserveB={reserves.reserve_b}"
        )

    if policy is RatioPolicy.LEGACY_DECIMAL_COUNT:
        scale_a, scale_b = _legacy_scales(decimals_a, decimals_b)
        adjusted_a = reserves.reserve_a * scale_a
        adjusted_b = reserves.reserve_b * scale_b
        value = (adjusted_a // adjusted_b) * PERCENT
    else:
        scale_a, scale_b = _power_of_ten_scales(decimals_a, decimals_b)
        adjusted_a = reserves.reserve_a * scale_a
        adjusted_b = reserves.reserve_b * scale_b
        value = (adjusted_a * PERCENT) // adjusted_b

    if value == 0:
        raise DegenerateReserveError(
            f"Reserve ratio truncates to zero ({adjusted_a} / {adjusted_b}, {policy.value})"
        )

    return ReserveRatio(value=value, policy=policy, scale_a=scale_a, scale_b=scale_b)


def derive_amount_b(amount_a: int, ratio: ReserveRatio) -> int:
    """Token B amount matching a fixed token A amount"""
    if ratio.policy is RatioPolicy.LEGACY_DECIMAL_COUNT:
        return (amount_a * PERCENT) // ratio.value
    # Undo the decimal normalization so the result is in raw token B units
    return (amount_a * ratio.scale_a * PERCENT) // (ratio.value * ratio.scale_b)


def derive_amount_a(amount_b: int, ratio: ReserveRatio) -> int:
    """Token A amount matching a fixed token B amount"""
    if ratio.policy is RatioPolicy.LEGACY_DECIMAL_COUNT:
        return (amount_b * ratio.value) // PERCENT
    return (amount_b * ratio.scale_b * ratio.value) // (PERCENT * ratio.scale_a)


def slippage_factor(slippage_tolerance) -> int:
    """
    Percentage of the gross amount accepted as minimum output.

    Parsed from the decimal string as an exact Fraction, so 0.07 gives 93
    rather than 92 and 1e-30 gives 99 rather than 100.

    Args:
        slippage_tolerance: Fraction in [0, 1) (0.01 = 1%)

    Returns:
        floor((1 - slippage_tolerance) * 100)
    """
    try:
        tolerance = Fraction(str(slippage_tolerance))
    except (ValueError, TypeError, ZeroDivisionError):
        raise ConfigError(
            f"Slippage tolerance must be a number, got {slippage_tolerance!r}"
        )
    if not (0 <= tolerance < 1):
        raise ConfigError(
            f"Slippage tolerance must be in [0, 1), got {slippage_tolerance}"
        )
    return int((1 - tolerance) * PERCENT)


def min_amount_out(amount: int, factor: int) -> int:
    """Minimum acceptable amount after slippage: floor(amount * factor / 100)"""
    return (amount * factor) // PERCENT
