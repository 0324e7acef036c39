"""Shared pytest fixtures for amm-params tests.

Provides an in-memory chain reader so the calculation pipeline can be
exercised without an RPC endpoint.
"""

from collections import Counter

import pytest

from amm_params.core.config import Config
from amm_params.protocols.base import BaseChainReader


TOKEN_A = "0x" + "11" * 20
TOKEN_B = "0x" + "22" * 20
POOL = "0x" + "33" * 20
OTHER_TOKEN = "0x" + "44" * 20


class FakeChainReader(BaseChainReader):
    """Serves fixed pool state and counts every read"""

    def __init__(self, token0=TOKEN_A, token1=TOKEN_B, reserves=(1000, 500),
                 decimals=None, errors=None):
        self._token0 = token0
        self._token1 = token1
        self._reserves = reserves
        self._decimals = decimals or {token0: 18, token1: 18}
        self._errors = errors or {}
        self.calls = Counter()
        self.decimals_queried = []

    def _record(self, name):
        self.calls[name] += 1
        if name in self._errors:
            raise self._errors[name]

    async def token0(self, pool_address):
        self._record("token0")
        return self._token0

    async def token1(self, pool_address):
        self._record("token1")
        return self._token1

    async def get_reserves(self, pool_address):
        self._record("getReserves")
        return (self._reserves[0], self._reserves[1], 1700000000)

    async def decimals(self, token_address):
        self._record("decimals")
        self.decimals_queried.append(token_address)
        return self._decimals[token_address]


@pytest.fixture
def fake_reader():
    return FakeChainReader()


@pytest.fixture
def fresh_config():
    """Config singleton reloaded from disk, cleared again afterwards"""
    Config.reset()
    yield
    Config.reset()
