# src/bstmap/cli.py
import argparse
import os
import sys

from bstmap.tree.bstmap import BstMap
from bstmap.utils import depth_profile, summarize_profile, save_depth_profile

# visualización opcional
try:
    from bstmap.viz.visualizer import visualize_tree
    HAS_VIS = True
except ImportError:
    HAS_VIS = False

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_OUTPUT_DIR = os.path.join(PROJECT_ROOT, "outputs")
DEFAULT_SIZES = [10, 50, 100, 200, 400]
DEFAULT_TRIALS = 5

# escenario de ejemplo: (clave, valor)
DEMO_ENTRIES = [(10, "head"), (14, "x"), (13, "y"), (16, "z"), (15, "w"), (1, "a"), (3, "b"), (2, "c")]


def parse_keys(raw):
    """
    Claves de la línea de comandos: todas int si todas lo son, si no todas str
    (el árbol necesita claves comparables entre sí).
    """
    try:
        return [int(k) for k in raw]
    except ValueError:
        return [str(k) for k in raw]


def build_from_keys(keys):
    m = BstMap()
    for k in keys:
        m.insert(k, str(k))
    return m


def cmd_demo(args):
    m = BstMap()
    for k, v in DEMO_ENTRIES:
        m.insert(k, v)

    print("=== INSERTADOS ===")
    print("len:", len(m), "| altura:", m.height())
    print("first:", m.first_key_value(), "| last:", m.last_key_value())

    print("remove(99):", m.remove(99))
    print("remove(10):", m.remove(10), "| len:", len(m))

    firsts = [m.remove_first() for _ in range(4)]
    print("remove_first x4:", firsts)
    lasts = [m.remove_last() for _ in range(3)]
    print("remove_last x3:", lasts)
    print("vacío:", m.is_empty())

    if args.verbose:
        print(m)


def cmd_dump(args):
    # se parsean juntas para que insertadas y eliminadas sean del mismo tipo
    extra = args.remove or []
    parsed = parse_keys(args.keys + extra)
    m = build_from_keys(parsed[:len(args.keys)])
    for k in parsed[len(args.keys):]:
        m.remove(k)
    print(m)


def cmd_plot(args):
    if not HAS_VIS:
        print("Visualización no disponible. Instala networkx y matplotlib.")
        return 1
    extra = args.highlight or []
    parsed = parse_keys(args.keys + extra)
    m = build_from_keys(parsed[:len(args.keys)])
    highlight = parsed[len(args.keys):]
    visualize_tree(m, title=args.title, highlight=highlight, out=args.out)
    if args.out:
        print("Saved:", args.out)
    return 0


def cmd_profile(args):
    df = depth_profile(args.sizes, trials=args.trials, seed=args.seed)
    summary = summarize_profile(df)

    print("=== PERFIL DE ALTURA ===")
    print(summary.to_string(index=False))

    if args.out:
        raw_path = save_depth_profile(df, args.out, "depth_profile.csv")
        summary_path = save_depth_profile(summary, args.out, "depth_summary.csv")
        print("Saved:", raw_path)
        print("Saved:", summary_path)
    return 0


def main(argv=None):
    p = argparse.ArgumentParser(prog="bstmap")
    sub = p.add_subparsers(dest="cmd", required=True)

    pd_ = sub.add_parser("demo", help="Ejecutar el escenario de ejemplo de inserción/eliminación")
    pd_.add_argument("--verbose", "-v", action="store_true", help="Imprimir el volcado final del map")

    pdump = sub.add_parser("dump", help="Construir un map con las claves dadas e imprimir su estructura")
    pdump.add_argument("keys", nargs="+", help="Claves a insertar (en orden)")
    pdump.add_argument("--remove", nargs="*", help="Claves a eliminar después de insertar")

    pplot = sub.add_parser("plot", help="Dibujar el árbol (requiere networkx y matplotlib)")
    pplot.add_argument("keys", nargs="+", help="Claves a insertar (en orden)")
    pplot.add_argument("--highlight", nargs="*", help="Claves a resaltar")
    pplot.add_argument("--title", default="BstMap")
    pplot.add_argument("--out", default=None, help="Archivo de salida (png/svg); si no se da, se muestra")

    pprof = sub.add_parser("profile", help="Altura del árbol según orden de inserción")
    pprof.add_argument("--sizes", nargs="+", type=int, default=DEFAULT_SIZES)
    pprof.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    pprof.add_argument("--seed", type=int, default=0)
    pprof.add_argument("--out", default=None, help=f"Carpeta para CSV (p. ej. {DEFAULT_OUTPUT_DIR})")

    args = p.parse_args(argv)
    if args.cmd == "demo":
        cmd_demo(args)
        return 0
    if args.cmd == "dump":
        cmd_dump(args)
        return 0
    if args.cmd == "plot":
        return cmd_plot(args)
    if args.cmd == "profile":
        return cmd_profile(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
