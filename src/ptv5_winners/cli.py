from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .errors import (
    MissingCredentialError,
    NetworkNotFoundError,
    RetriesExhaustedError,
    RpcCheckError,
)
from .networks import resolve_network
from .project_constants import MAX_ATTEMPTS, OUTPUT_DIRECTORY_NAME, RETRY_DELAY_S
from .rpc import check_chain_id
from .runner import RunContext, prepare_output_dir, run_with_retries


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def print_usage(err: NetworkNotFoundError) -> None:
    print("Available networks:")
    for name in err.available:
        print(f"  - {name}")
    print("\nUsage: ptv5-winners <network-name>")
    print(f"Example: ptv5-winners {err.available[0]}")


def cmd_run(args: argparse.Namespace) -> int:
    log = logging.getLogger("cli")

    try:
        profile = resolve_network(args.network)
    except NetworkNotFoundError as e:
        print_usage(e)
        return 1

    try:
        settings = Settings.from_env(profile, rpc_url_override=args.rpc_url)
    except MissingCredentialError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(
            f"Please set it using: export {e.env_var}=<your-rpc-url>",
            file=sys.stderr,
        )
        return 1

    if args.check_rpc:
        try:
            chain_id = check_chain_id(settings.rpc_url, profile.chain_id)
        except RpcCheckError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        log.info("RPC chain id verified: %d", chain_id)

    ctx = RunContext(
        profile=profile,
        rpc_url=settings.rpc_url,
        output_dir=prepare_output_dir(Path(OUTPUT_DIRECTORY_NAME)),
    )

    try:
        run_with_retries(
            ctx, max_attempts=args.max_attempts, retry_delay_s=args.retry_delay
        )
    except RetriesExhaustedError as e:
        print(f"Last error: {e.last_error}", file=sys.stderr)
        print(f"Exceeded maximum retries ({e.attempts}). Exiting.", file=sys.stderr)
        return 1

    print(f"\nSuccessfully computed winners for {profile.name}!")
    print(f"Results saved to ./{ctx.results_dir.as_posix()}/")
    return 0


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return n


def non_negative_float(value: str) -> float:
    x = float(value)
    if x < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return x


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ptv5-winners",
        description="Compute PoolTogether V5 prize winners for one network.",
    )
    # Optional so a missing network prints the network list, not an argparse error.
    p.add_argument("network", nargs="?", default=None, help="Network identifier.")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    p.add_argument("--rpc-url", default=None, help="Override RPC URL (else use env).")
    p.add_argument(
        "--max-attempts",
        type=positive_int,
        default=MAX_ATTEMPTS,
        help=f"Attempts before giving up (default {MAX_ATTEMPTS}).",
    )
    p.add_argument(
        "--retry-delay",
        type=non_negative_float,
        default=RETRY_DELAY_S,
        help="Seconds to wait between attempts (default: retry immediately).",
    )
    p.add_argument(
        "--check-rpc",
        action="store_true",
        help="Verify the RPC endpoint's chain id before running.",
    )
    return p


def run(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    # Anything past the network identifier is ignored.
    args, _ = parser.parse_known_args(argv)
    setup_logging(args.verbose)
    return cmd_run(args)


def main(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(run(argv))


if __name__ == "__main__":
    main()
