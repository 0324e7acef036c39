"""Main CLI entry point"""

import sys
import json
import asyncio
import logging
import argparse
from pathlib import Path

from ..core.config import Config, CHAIN_NAMES
from ..core.connection import Web3Manager
from ..core.exceptions import AMMError
from ..contracts.reader import Web3ChainReader
from ..protocols.uniswap_v2 import (
    PoolMetadataReader,
    RatioPolicy,
    ReserveRatioEngine,
    UniswapV2ParameterCalculator,
    decode_parameters,
)


def get_results_dir():
    """Get results directory, create if needed"""
    results_dir = Path.cwd() / "results"
    results_dir.mkdir(exist_ok=True)
    return results_dir


def save_result(filename, data):
    """Save result to JSON file in results directory"""
    results_dir = get_results_dir()
    filepath = results_dir / filename
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return filepath


async def _encode(args):
    manager = Web3Manager(rpc_url=args.rpc_url)
    await manager.ensure_connected()

    anchor = args.anchor
    if not anchor:
        anchor = Config().get_anchor_token(await manager.chain_id())

    calculator = UniswapV2ParameterCalculator.create(
        Web3ChainReader(manager),
        pool_address=args.pool,
        fixed_token_amount=args.amount,
        anchor_token=anchor,
        slippage_tolerance=args.slippage,
        ratio_policy=RatioPolicy(args.policy),
    )
    params = await calculator.build_parameters()
    result = params.to_dict()
    result["pool"] = args.pool
    result["anchor_token"] = anchor
    result["slippage_factor"] = calculator.slippage_factor
    result["ratio_policy"] = args.policy
    result["encoded"] = "0x" + params.encode().hex()
    return result


async def _ratio(args):
    manager = Web3Manager(rpc_url=args.rpc_url)
    await manager.ensure_connected()

    metadata = PoolMetadataReader(Web3ChainReader(manager), args.pool)
    engine = ReserveRatioEngine(RatioPolicy(args.policy))
    try:
        token_a, token_b, ratio = await asyncio.gather(
            metadata.token_a(), metadata.token_b(), engine.reserve_ratio(metadata)
        )
        reserves = await metadata.reserves()
    finally:
        metadata.cancel_pending()
    return {
        "pool": args.pool,
        "token_a": {"address": token_a.address, "decimals": token_a.decimals},
        "token_b": {"address": token_b.address, "decimals": token_b.decimals},
        "reserve_a": str(reserves.reserve_a),
        "reserve_b": str(reserves.reserve_b),
        "ratio": ratio.value,
        "ratio_policy": ratio.policy.value,
    }


def cmd_encode(args):
    """Compute and encode deposit parameters for a pool"""
    result = asyncio.run(_encode(args))

    print(json.dumps(result, indent=2, default=str))
    filepath = save_result(f"params_{args.pool[:10]}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_ratio(args):
    """Show pool tokens, reserves and reserve ratio"""
    result = asyncio.run(_ratio(args))
    print(json.dumps(result, indent=2, default=str))


def cmd_decode(args):
    """Decode an encoded parameter block"""
    data = args.data[2:] if args.data.startswith("0x") else args.data
    params = decode_parameters(bytes.fromhex(data))
    print(json.dumps(params.to_dict(), indent=2))


def cmd_addresses(args):
    """Show configured anchor and strategy addresses"""
    config = Config()
    chain_ids = [args.chain_id] if args.chain_id else list(CHAIN_NAMES.keys())
    result = {}
    for chain_id in chain_ids:
        book = config.get_network_addresses(chain_id)
        result[CHAIN_NAMES[chain_id]] = {
            "chain_id": chain_id,
            "anchor_token": book.get("anchor_token"),
            "strategies": book.get("strategies", {}),
        }
    print(json.dumps(result, indent=2))


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="amm-params",
        description="AMM Params - Compute liquidity strategy parameters for Uniswap V2 style pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  amm-params encode 0xPOOL 1000000000 --slippage 0.01    # Encode deposit parameters
  amm-params ratio 0xPOOL --policy legacy                 # Inspect reserve ratio
  amm-params decode 0x...                                 # Decode a parameter block
  amm-params addresses --chain-id 1                       # Show address book

configuration:
  RPC_URL      Set in .env file
  addresses    config/addresses.json (overrides packaged networks)
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    policies = [p.value for p in RatioPolicy]

    encode_parser = subparsers.add_parser("encode", help="Compute and encode deposit parameters")
    encode_parser.add_argument("pool", help="Pool (pair) address")
    encode_parser.add_argument("amount", type=int, help="Anchor token amount in raw units")
    encode_parser.add_argument("--slippage", type=float, default=0.01, help="Slippage tolerance (default: 0.01)")
    encode_parser.add_argument("--policy", choices=policies, default=RatioPolicy.POWER_OF_TEN_SCALING.value,
                               help="Decimal normalization policy")
    encode_parser.add_argument("--anchor", help="Anchor token address (default: from address book)")
    encode_parser.add_argument("--rpc-url", help="RPC endpoint (default: RPC_URL)")
    encode_parser.set_defaults(func=cmd_encode)

    ratio_parser = subparsers.add_parser("ratio", help="Show pool reserve ratio")
    ratio_parser.add_argument("pool", help="Pool (pair) address")
    ratio_parser.add_argument("--policy", choices=policies, default=RatioPolicy.POWER_OF_TEN_SCALING.value,
                              help="Decimal normalization policy")
    ratio_parser.add_argument("--rpc-url", help="RPC endpoint (default: RPC_URL)")
    ratio_parser.set_defaults(func=cmd_ratio)

    decode_parser = subparsers.add_parser("decode", help="Decode an encoded parameter block")
    decode_parser.add_argument("data", help="Hex-encoded parameters")
    decode_parser.set_defaults(func=cmd_decode)

    addresses_parser = subparsers.add_parser("addresses", help="Show configured addresses")
    addresses_parser.add_argument("--chain-id", type=int, help="Only this chain")
    addresses_parser.set_defaults(func=cmd_addresses)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except (AMMError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
