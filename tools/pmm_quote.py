#!/usr/bin/env python3
"""
Quote one swap against a YAML-configured PMM pool.

Amounts, reserves and the reference price are human decimals ("10", "0.5").
With --native, reserves and amounts are raw token integers scaled by the
pool file's base_decimals / quote_decimals, and the result is printed the same way.
The reference price falls back to the pool file's `oracle` entry.

Example:
  python3 tools/pmm_quote.py --config pool.yaml --base 1000 --quote 2000 \
      --price 2 --sell-base --exact-in 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pmm import PoolConfig, ReserveState, SwapDirection, SwapRequest, build_engine, load_pool_config  # noqa: E402
from pmm.core.errors import InvalidAmount, PricingError  # noqa: E402
from pmm.core.fixed_point import from_fixed, to_fixed  # noqa: E402

logger = logging.getLogger("pmm_quote")


def _parse(text: str, config: PoolConfig, native: bool, asset: str) -> int:
    """Human decimal, or a raw token integer in the asset's native decimals."""
    if not native:
        return to_fixed(text)
    try:
        raw = int(text)
    except ValueError as exc:
        raise InvalidAmount(f"native amounts must be integers: {text!r}") from exc
    return config.from_native(asset, raw)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Price a swap on a PMM pool.")
    p.add_argument("--config", required=True, type=Path, help="Path to the pool YAML file")
    p.add_argument("--base", required=True, help="Base reserve (decimal)")
    p.add_argument("--quote", required=True, help="Quote reserve (decimal)")
    p.add_argument("--price", default=None, help="Reference price, quote per base (default: config oracle)")
    side = p.add_mutually_exclusive_group(required=True)
    side.add_argument("--sell-base", action="store_true", help="Taker gives base, receives quote")
    side.add_argument("--buy-base", action="store_true", help="Taker gives quote, receives base")
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument("--exact-in", metavar="AMOUNT", help="Fixed input amount (decimal)")
    mode.add_argument("--exact-out", metavar="AMOUNT", help="Fixed output amount (decimal)")
    p.add_argument("--raw", action="store_true", help="Print the fixed-point integer instead of a decimal")
    p.add_argument(
        "--native",
        action="store_true",
        help="Reserves and amounts are raw token integers in the config's base/quote decimals",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_pool_config(args.config)
        engine = build_engine(config)
        selling_base = bool(args.sell_base)
        reserves = ReserveState(
            base=_parse(args.base, config, args.native, "base"),
            quote=_parse(args.quote, config, args.native, "quote"),
        )
        price = to_fixed(args.price) if args.price is not None else config.reference_price()
        if price is None:
            print("pmm_quote error: no --price given and the pool config has no oracle entry", file=sys.stderr)
            return 2
        if args.exact_in is not None:
            amount_in = _parse(args.exact_in, config, args.native, "base" if selling_base else "quote")
            request = SwapRequest(SwapDirection.EXACT_IN, selling_base, amount_in)
        else:
            amount_out = _parse(args.exact_out, config, args.native, "quote" if selling_base else "base")
            request = SwapRequest(SwapDirection.EXACT_OUT, selling_base, amount_out)
        logger.debug("engine=%r reserves=%r price=%d request=%r", engine, reserves, price, request)
        amount = engine.compute_swap(reserves, price, request)
    except PricingError as exc:
        print(f"pmm_quote error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    label = "amount_out" if request.exact_in else "amount_in"
    asset = request.asset_out if request.exact_in else request.asset_in
    if args.native:
        # exact-out prices a charge, so it rounds up in native units too
        value = str(config.to_native(asset, amount, round_up=not request.exact_in))
    elif args.raw:
        value = str(amount)
    else:
        value = format(from_fixed(amount).normalize(), "f")
    print(f"{label}={value} {asset}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
