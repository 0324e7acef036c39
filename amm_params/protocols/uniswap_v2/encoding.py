"""ABI encoding of strategy parameters"""

from eth_abi import encode, decode
from eth_abi.exceptions import EncodingError, DecodingError

from ...core.exceptions import ParameterEncodingError
from .types import EncodedParameters

# address tokenA, address tokenB, uint256 amountA, uint256 amountB,
# uint256 minAmountAOut, uint256 minAmountBOut
PARAMETER_TYPES = ["address", "address", "uint256", "uint256", "uint256", "uint256"]

# Six static 32-byte words
ENCODED_LENGTH = 32 * len(PARAMETER_TYPES)


def encode_parameters(params: EncodedParameters) -> bytes:
    """
    Encode parameters for the strategy contract.

    Addresses are left-padded to 32 bytes, amounts are 256-bit big-endian.

    Raises:
        ParameterEncodingError: If an address is malformed or an amount
            does not fit in uint256
    """
    try:
        return encode(PARAMETER_TYPES, list(params.to_tuple()))
    except EncodingError as e:
        raise ParameterEncodingError(f"Cannot encode parameters {params}: {e}") from e


def decode_parameters(data: bytes) -> EncodedParameters:
    """
    Decode a parameter block back into its six fields.

    Args:
        data: Encoded bytes (exactly 192 bytes)

    Returns:
        EncodedParameters
    """
    if len(data) != ENCODED_LENGTH:
        raise ParameterEncodingError(
            f"Expected {ENCODED_LENGTH} bytes, got {len(data)}"
        )
    try:
        values = decode(PARAMETER_TYPES, data)
    except DecodingError as e:
        raise ParameterEncodingError(f"Cannot decode parameters: {e}") from e
    return EncodedParameters(*values)
