# src/bstmap/utils.py
"""
Utilidades de análisis: cómo crece la altura de un BstMap según el orden de inserción.
Sin balanceo, la inserción ordenada produce un árbol degenerado (altura == n).
"""
from pathlib import Path
import sys
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from bstmap.tree.bstmap import BstMap

ORDERS = ("random", "sorted")
RECURSION_MARGIN = 100


def build_map(keys: Iterable) -> BstMap:
    """Crea un BstMap insertando cada clave con su posición de inserción como valor."""
    m = BstMap()
    for i, k in enumerate(keys):
        m.insert(k, i)
    return m


def depth_profile(sizes: Iterable[int], trials: int = 5, seed: Optional[int] = 0,
                  orders: Iterable[str] = ORDERS) -> pd.DataFrame:
    """
    Mide la altura del árbol para cada tamaño n y cada orden de inserción.

    Args:
      sizes: tamaños n a probar (enteros positivos).
      trials: repeticiones por (n, orden). "sorted" es determinista, pero se repite igual
              para que la tabla quede rectangular.
      seed: semilla para numpy.random.default_rng.
      orders: subconjunto de ("random", "sorted").

    Retorna:
      DataFrame con columnas n, order, trial, height.
    """
    if trials < 1:
        raise ValueError("trials must be >= 1")
    orders = list(orders)
    for order in orders:
        if order not in ORDERS:
            raise ValueError(f"unknown insertion order '{order}'")

    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        n = int(n)
        if n < 1:
            raise ValueError("sizes must be >= 1")
        # la inserción ordenada recursa n niveles
        if "sorted" in orders and n > sys.getrecursionlimit() - RECURSION_MARGIN:
            raise ValueError(f"n={n} too deep for sorted insertion (recursion limit)")
        for order in orders:
            for trial in range(trials):
                if order == "random":
                    keys = rng.permutation(n)
                else:
                    keys = np.arange(n)
                m = build_map(int(k) for k in keys)
                rows.append({"n": n, "order": order, "trial": trial, "height": m.height()})

    return pd.DataFrame(rows, columns=["n", "order", "trial", "height"])


def summarize_profile(df: pd.DataFrame) -> pd.DataFrame:
    """Altura media y máxima por (n, order), más la cota ideal log2(n+1)."""
    summary = (
        df.groupby(["n", "order"])["height"]
        .agg(["mean", "max"])
        .reset_index()
        .rename(columns={"mean": "height_mean", "max": "height_max"})
    )
    summary["height_ideal"] = np.ceil(np.log2(summary["n"] + 1)).astype(int)
    return summary


def save_depth_profile(df: pd.DataFrame, out_dir: Path, filename: str = "depth_profile.csv") -> Path:
    """
    Guarda el perfil (o su resumen) como CSV.

    Retorna:
      Path al archivo guardado.
    """
    out_p = Path(out_dir)
    out_p.mkdir(parents=True, exist_ok=True)
    out_file = out_p / filename
    df.to_csv(out_file, index=False)
    return out_file
