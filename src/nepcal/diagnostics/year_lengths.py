#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from nepcal.core.config import shared_table
from nepcal.diagnostics.table_check import _need_numpy, month_matrix
from nepcal.locales import BS_MONTHS_EN


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "nepcal[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Heatmap of BS month lengths per year.")
    p.add_argument("--outbase", default="bs_month_lengths", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    table = shared_table()
    years, lengths, _ = month_matrix(np, table)

    fig, ax = plt.subplots(figsize=(6.4, 9.0), constrained_layout=True)
    im = ax.imshow(lengths, aspect="auto", cmap="viridis", vmin=29, vmax=32,
                   extent=(0.5, 12.5, years[-1] + 0.5, years[0] - 0.5))
    ax.set_xticks(range(1, 13))
    ax.set_xticklabels(BS_MONTHS_EN, rotation=60, ha="right")
    ax.set_ylabel("BS year")
    ax.set_title("Bikram Sambat month lengths")
    cbar = fig.colorbar(im, ax=ax, ticks=[29, 30, 31, 32])
    cbar.set_label("days")

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
