"""Core module - configuration, connection and exceptions"""

from .config import Config
from .connection import Web3Manager
from .exceptions import (
    AMMError,
    ConfigError,
    ConnectionError,
    RemoteReadError,
    PoolError,
    PoolUninitializedError,
    DegenerateReserveError,
    UnmatchedAnchorTokenError,
    ParameterEncodingError,
)

__all__ = [
    "Config",
    "Web3Manager",
    "AMMError",
    "ConfigError",
    "ConnectionError",
    "RemoteReadError",
    "PoolError",
    "PoolUninitializedError",
    "DegenerateReserveError",
    "UnmatchedAnchorTokenError",
    "ParameterEncodingError",
]
