"""Custom exceptions for AMM parameter calculation"""


class AMMError(Exception):
    """Base exception for all AMM errors"""
    pass


class ConfigError(AMMError):
    """Configuration-related errors"""
    pass


class ConnectionError(AMMError):
    """Web3 connection errors"""
    pass


class RemoteReadError(AMMError):
    """A pool, token or reserve read against the chain failed"""
    pass


class PoolError(AMMError):
    """Pool-related errors (not found, not initialized, etc.)"""
    pass


class PoolUninitializedError(PoolError):
    """Calculator or reader was built without a pool reference"""
    pass


class DegenerateReserveError(PoolError):
    """Pool reserves cannot produce a usable ratio (zero reserve, zero ratio)"""
    pass


class UnmatchedAnchorTokenError(PoolError):
    """Neither pool token is the configured anchor token"""
    pass


class ParameterEncodingError(AMMError):
    """Computed parameters do not fit the strategy's ABI layout"""
    pass
