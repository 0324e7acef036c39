"""Tests for the parameter calculation pipeline against an in-memory pool.

These tests validate:
  - End-to-end parameters and encoding for anchor on token A and token B
  - Rejection of pools that do not hold the anchor token
  - Construction-time validation (pool reference, tolerance, amount)
  - Each remote field is read exactly once per calculation
  - Remote read failures propagate unchanged
"""

import asyncio

import pytest

from amm_params.core.exceptions import (
    ConfigError,
    DegenerateReserveError,
    PoolUninitializedError,
    RemoteReadError,
    UnmatchedAnchorTokenError,
)
from amm_params.protocols.uniswap_v2 import (
    CalculatorSettings,
    PoolMetadataReader,
    RatioPolicy,
    UniswapV2ParameterCalculator,
    decode_parameters,
)

from conftest import FakeChainReader, TOKEN_A, TOKEN_B, POOL, OTHER_TOKEN


OHM = "0x64aa3364F17a4D01c6f1751Fd97C2BD3D7e7f1D5"


def make_calculator(reader, anchor=TOKEN_A, amount=1000, slippage=0.01,
                    policy=RatioPolicy.POWER_OF_TEN_SCALING):
    return UniswapV2ParameterCalculator.create(
        reader,
        pool_address=POOL,
        fixed_token_amount=amount,
        anchor_token=anchor,
        slippage_tolerance=slippage,
        ratio_policy=policy,
    )


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------

class TestEndToEnd:
    @pytest.mark.parametrize("policy", list(RatioPolicy))
    def test_anchor_on_token_a(self, fake_reader, policy):
        calculator = make_calculator(fake_reader, policy=policy)
        assert calculator.slippage_factor == 99

        params = asyncio.run(calculator.build_parameters())
        assert params.token_a == TOKEN_A
        assert params.token_b == TOKEN_B
        assert params.amount_a == 1000
        assert params.amount_b == 500
        assert params.min_amount_a_out == 990
        assert params.min_amount_b_out == 495

    def test_encoded_field_order(self, fake_reader):
        encoded = asyncio.run(make_calculator(fake_reader).build_encoded_parameters())
        assert len(encoded) == 192

        words = [encoded[i:i + 32] for i in range(0, 192, 32)]
        assert words[0] == bytes(12) + bytes.fromhex(TOKEN_A[2:])
        assert words[1] == bytes(12) + bytes.fromhex(TOKEN_B[2:])
        assert [int.from_bytes(w, "big") for w in words[2:]] == [1000, 500, 990, 495]

        decoded = decode_parameters(encoded)
        assert decoded.amount_b == 500

    def test_anchor_on_token_b(self, fake_reader):
        calculator = make_calculator(fake_reader, anchor=TOKEN_B)
        params = asyncio.run(calculator.build_parameters())
        assert params.amount_a == 2000
        assert params.amount_b == 1000
        assert params.min_amount_a_out == 1980
        assert params.min_amount_b_out == 990

    def test_anchor_match_ignores_case(self):
        reader = FakeChainReader(token0=OHM.lower(), token1=TOKEN_B)
        params = asyncio.run(make_calculator(reader, anchor=OHM).build_parameters())
        assert params.amount_a == 1000

    def test_zero_slippage_keeps_full_amounts(self, fake_reader):
        params = asyncio.run(make_calculator(fake_reader, slippage=0).build_parameters())
        assert params.min_amount_a_out == params.amount_a
        assert params.min_amount_b_out == params.amount_b

    def test_mixed_decimals_anchor_on_b(self):
        # A: 18 decimals, B: 6 decimals, 100 A per B
        reader = FakeChainReader(
            reserves=(1_000_000 * 10**18, 10_000 * 10**6),
            decimals={TOKEN_A: 18, TOKEN_B: 6},
        )
        amount_b = 5 * 10**6

        correct = asyncio.run(make_calculator(
            reader, anchor=TOKEN_B, amount=amount_b,
        ).build_parameters())
        assert correct.amount_a == 500 * 10**18

        legacy = asyncio.run(make_calculator(
            FakeChainReader(
                reserves=(1_000_000 * 10**18, 10_000 * 10**6),
                decimals={TOKEN_A: 18, TOKEN_B: 6},
            ),
            anchor=TOKEN_B, amount=amount_b, policy=RatioPolicy.LEGACY_DECIMAL_COUNT,
        ).build_parameters())
        assert legacy.amount_a == 166666666666665000000

    def test_calls_are_independent(self, fake_reader):
        calculator = make_calculator(fake_reader)
        first = asyncio.run(calculator.build_encoded_parameters())
        second = asyncio.run(calculator.build_encoded_parameters())
        assert first == second
        assert fake_reader.calls["getReserves"] == 2


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailures:
    def test_unmatched_anchor(self, fake_reader):
        with pytest.raises(UnmatchedAnchorTokenError):
            asyncio.run(make_calculator(fake_reader, anchor=OTHER_TOKEN).build_parameters())

    @pytest.mark.parametrize("reserves", [(0, 500), (500, 0)])
    def test_empty_pool(self, reserves):
        calculator = make_calculator(FakeChainReader(reserves=reserves))
        with pytest.raises(DegenerateReserveError):
            asyncio.run(calculator.build_encoded_parameters())

    def test_remote_error_propagates_unchanged(self):
        error = RemoteReadError("decimals() reverted")
        reader = FakeChainReader(errors={"decimals": error})
        with pytest.raises(RemoteReadError) as exc_info:
            asyncio.run(make_calculator(reader).build_encoded_parameters())
        assert exc_info.value is error

    def test_failed_reserve_read_aborts(self):
        reader = FakeChainReader(errors={"getReserves": RemoteReadError("timeout")})
        with pytest.raises(RemoteReadError):
            asyncio.run(make_calculator(reader).build_parameters())


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    @pytest.mark.parametrize("pool", [None, ""])
    def test_pool_required(self, fake_reader, pool):
        with pytest.raises(PoolUninitializedError):
            UniswapV2ParameterCalculator.create(
                fake_reader, pool_address=pool, fixed_token_amount=1, anchor_token=TOKEN_A,
            )

    def test_reader_required(self):
        settings = CalculatorSettings(POOL, 1000, TOKEN_A)
        with pytest.raises(ConfigError):
            UniswapV2ParameterCalculator(None, settings)

    @pytest.mark.parametrize("tolerance", [1.0, -0.5, float("nan")])
    def test_tolerance_range(self, tolerance):
        with pytest.raises(ConfigError):
            CalculatorSettings(POOL, 1000, TOKEN_A, slippage_tolerance=tolerance)

    @pytest.mark.parametrize("amount", [-1, 1.5, "1000", True, False])
    def test_amount_must_be_non_negative_int(self, amount):
        with pytest.raises(ConfigError):
            CalculatorSettings(POOL, amount, TOKEN_A)

    def test_anchor_required(self):
        with pytest.raises(ConfigError):
            CalculatorSettings(POOL, 1000, "")

    def test_policy_accepts_value(self):
        settings = CalculatorSettings(POOL, 1000, TOKEN_A, ratio_policy="legacy")
        assert settings.ratio_policy is RatioPolicy.LEGACY_DECIMAL_COUNT

    def test_settings_are_frozen(self):
        settings = CalculatorSettings(POOL, 1000, TOKEN_A)
        with pytest.raises(AttributeError):
            settings.fixed_token_amount = 5


# ---------------------------------------------------------------------------
# Metadata reads
# ---------------------------------------------------------------------------

class TestPoolMetadataReader:
    def test_pool_required(self, fake_reader):
        with pytest.raises(PoolUninitializedError):
            PoolMetadataReader(fake_reader, None)

    def test_each_field_read_once(self, fake_reader):
        asyncio.run(make_calculator(fake_reader).build_parameters())
        assert fake_reader.calls["token0"] == 1
        assert fake_reader.calls["token1"] == 1
        assert fake_reader.calls["getReserves"] == 1
        assert fake_reader.calls["decimals"] == 2

    def test_decimals_read_from_pool_tokens(self):
        reader = FakeChainReader(decimals={TOKEN_A: 9, TOKEN_B: 18})

        async def read():
            metadata = PoolMetadataReader(reader, POOL)
            return await asyncio.gather(metadata.token_b_decimals(), metadata.token_a_decimals())

        assert asyncio.run(read()) == [18, 9]
        assert sorted(reader.decimals_queried) == [TOKEN_A, TOKEN_B]

    def test_repeated_reads_share_one_call(self, fake_reader):
        async def read():
            metadata = PoolMetadataReader(fake_reader, POOL)
            first = await metadata.token_a()
            second = await metadata.token_a()
            reserves = await metadata.reserves()
            await metadata.reserves()
            return first, second, reserves

        first, second, reserves = asyncio.run(read())
        assert first == second
        assert first.decimals == 18
        assert (reserves.reserve_a, reserves.reserve_b) == (1000, 500)
        assert fake_reader.calls["token0"] == 1
        assert fake_reader.calls["decimals"] == 1
        assert fake_reader.calls["getReserves"] == 1
