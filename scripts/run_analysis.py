# scripts/run_analysis.py
"""
Perfil de altura del BstMap (inserción aleatoria vs ordenada) y gráfica.
Uso (desde la raíz del proyecto):
  python scripts/run_analysis.py --out outputs/analysis
  python scripts/run_analysis.py --sizes 10 100 500 --trials 20 --seed 1 --out outputs/analysis2
"""
from pathlib import Path
import argparse
import sys

import matplotlib.pyplot as plt
import numpy as np

from bstmap.utils import depth_profile, summarize_profile, save_depth_profile

ROOT = Path(__file__).resolve().parents[1]


def plot_summary(summary, out_file: Path):
    fig, ax = plt.subplots(figsize=(8, 5))
    for order, grp in summary.groupby("order"):
        ax.plot(grp["n"], grp["height_mean"], marker="o", label=f"{order} (media)")
    ns = np.sort(summary["n"].unique())
    ax.plot(ns, np.ceil(np.log2(ns + 1)), linestyle="--", color="gray", label="ideal log2(n+1)")
    ax.set_xlabel("n (claves insertadas)")
    ax.set_ylabel("altura")
    ax.set_title("Altura del BstMap según orden de inserción")
    ax.legend()
    fig.savefig(out_file, bbox_inches="tight")
    plt.close(fig)
    return out_file


def main(argv=None):
    p = argparse.ArgumentParser(description="Perfil de altura de BstMap")
    p.add_argument("--sizes", nargs="+", type=int, default=[10, 25, 50, 100, 200, 400, 800])
    p.add_argument("--trials", type=int, default=10)
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--out", default=str(ROOT / "outputs" / "analysis"))
    args = p.parse_args(argv)

    out_dir = Path(args.out)
    print("Midiendo alturas para n =", args.sizes, "| trials:", args.trials)
    df = depth_profile(args.sizes, trials=args.trials, seed=args.seed)
    summary = summarize_profile(df)
    print(summary.to_string(index=False))

    print("Saved:", save_depth_profile(df, out_dir, "depth_profile.csv"))
    print("Saved:", save_depth_profile(summary, out_dir, "depth_summary.csv"))
    print("Saved:", plot_summary(summary, out_dir / "depth_profile.png"))
    print("Análisis finalizado.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
