from __future__ import annotations

import argparse
import random
from typing import List, Optional

import nepcal
from nepcal.core.time import jdn_to_ymd, ymd_to_jdn
from nepcal.engines.converter import Converter


def _ad_range(conv: Converter) -> tuple[int, int]:
    first = conv.to_ad(nepcal.CalendarDate(conv.ctx.start_year, 1, 1, "bs"))
    last_year = conv.table.last_year
    last = conv.to_ad(nepcal.CalendarDate(last_year, 12, conv.table.days_in_month(last_year, 12), "bs"))
    return ymd_to_jdn(*first.ymd()), ymd_to_jdn(*last.ymd())


def roundtrip_test(conv: Converter, N: int, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0
    lo, hi = _ad_range(conv)

    for _ in range(N):
        ad = "%04d-%02d-%02d" % jdn_to_ymd(random.randint(lo, hi))
        bs = conv.ad_to_bs(ad)
        back = conv.bs_to_ad(bs)
        if back != ad:
            failures += 1
            print("\nFAIL (ad -> bs -> ad)")
            print("ad:", ad)
            print("bs:", bs)
            print("back:", back)
            if failures >= max_failures:
                return failures

        if conv.ad_to_bs(conv.bs_to_ad(bs)) != bs:
            failures += 1
            print("\nFAIL (bs -> ad -> bs)")
            print("bs:", bs)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: AD -> BS -> AD and BS -> AD -> BS.")
    p.add_argument("--N", type=int, default=2000, help="Number of random days.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--start-year", type=int, default=None, help="BS start year of the converter.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    conv = nepcal.make_converter(args.start_year)
    print(f"Testing BS {conv.ctx.start_year}..{conv.table.last_year} ...")
    fails = roundtrip_test(conv, N=args.N, seed=args.seed, max_failures=args.max_failures)

    if fails == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {fails}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
