"""Configuration loading and management"""

import os
import json
from pathlib import Path
from .exceptions import ConfigError


# Chain ID to network name mapping
CHAIN_NAMES = {
    1: "mainnet",
    5: "goerli",
}


class Config:
    """Centralized configuration manager for ABIs and per-network addresses"""

    _instance = None
    _addresses = None
    _abis = None

    # Package files (not user-configurable)
    PACKAGE_ABIS = Path(__file__).parent.parent / "abis.json"
    PACKAGE_ADDRESSES = Path(__file__).parent.parent / "addresses.json"

    MAX_UINT256 = 2 ** 256 - 1

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._abis is None:
            self._load()

    def _find_config_dir(self):
        """Find user config directory"""
        env_path = os.getenv("AMM_CONFIG_DIR")
        if env_path:
            path = Path(env_path)
            if path.exists():
                return path

        locations = [
            Path.cwd() / "config",
            Path.home() / ".amm-params" / "config",
        ]

        for path in locations:
            if path.exists():
                return path

        return None

    def _load(self):
        """Load packaged ABIs and address book, then user overrides"""
        if not self.PACKAGE_ABIS.exists():
            raise ConfigError(f"Shared ABIs not found: {self.PACKAGE_ABIS}")
        with open(self.PACKAGE_ABIS) as f:
            abis = json.load(f)

        if not self.PACKAGE_ADDRESSES.exists():
            raise ConfigError(f"Address book not found: {self.PACKAGE_ADDRESSES}")
        with open(self.PACKAGE_ADDRESSES) as f:
            addresses = json.load(f)

        # User addresses.json overrides whole networks
        config_dir = self._find_config_dir()
        if config_dir:
            user_file = config_dir / "addresses.json"
            if user_file.exists():
                with open(user_file) as f:
                    addresses.update(json.load(f))

        Config._addresses = addresses
        Config._abis = abis

    @classmethod
    def reset(cls):
        """Drop cached configuration so the next Config() reloads from disk"""
        cls._instance = None
        cls._addresses = None
        cls._abis = None

    def _get_network(self, chain_id):
        """Get network name from chain ID"""
        if chain_id not in CHAIN_NAMES:
            raise ConfigError(f"Unsupported chain: {chain_id}. Valid: {list(CHAIN_NAMES.keys())}")
        return CHAIN_NAMES[chain_id]

    @property
    def networks(self):
        """Network name -> address book mapping"""
        return Config._addresses or {}

    def get_network_addresses(self, chain_id):
        """Get address book for a specific chain"""
        network = self._get_network(chain_id)
        if network not in self.networks:
            raise ConfigError(f"No addresses configured for {network}")
        return self.networks[network]

    def get_anchor_token(self, chain_id):
        """Address of the anchor (debt) token on a chain"""
        anchor = self.get_network_addresses(chain_id).get("anchor_token")
        if not anchor:
            raise ConfigError(f"anchor_token not configured for chain {chain_id}")
        return anchor

    def get_strategy_address(self, chain_id, protocol):
        """Strategy contract that consumes the encoded parameters"""
        strategies = self.get_network_addresses(chain_id).get("strategies", {})
        if protocol not in strategies:
            raise ConfigError(
                f"No {protocol} strategy on chain {chain_id}. Valid: {list(strategies.keys())}"
            )
        return strategies[protocol]

    def get_abi(self, name):
        """Get ABI by name"""
        if name in Config._abis:
            return Config._abis[name]
        raise ConfigError(f"ABI not found: {name}")
