# src/bstmap/viz/visualizer.py
"""
Dibujo del árbol de un BstMap: cada clave es un nodo colocado por orden in-order (x)
y profundidad (y), con aristas padre -> hijo y claves resaltadas opcionales.
La CLI trata el subcomando plot como opcional si faltan networkx o matplotlib.
"""
from typing import Any, Dict, Iterable, Optional, Tuple

import networkx as nx
import matplotlib.pyplot as plt


def to_networkx(bst) -> nx.DiGraph:
    """
    DiGraph con un nodo por clave (atributo value) y aristas padre -> hijo
    con atributo side ("left" / "right").
    """
    G = nx.DiGraph()
    head = bst.head
    if head is None:
        return G

    stack = [head]
    while stack:
        node = stack.pop()
        G.add_node(node.key, value=node.value)
        for side in ("left", "right"):
            child = getattr(node, side)
            if child is not None:
                G.add_edge(node.key, child.key, side=side)
                stack.append(child)
    return G


def tree_layout(bst) -> Dict[Any, Tuple[float, float]]:
    """
    Posiciones jerárquicas: x = índice in-order, y = -profundidad.
    Así el dibujo respeta el orden de las claves sin depender de graphviz.
    """
    pos: Dict[Any, Tuple[float, float]] = {}
    # recorrido in-order iterativo con profundidad
    stack = []
    node, depth = bst.head, 0
    x = 0
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        node, depth = stack.pop()
        pos[node.key] = (float(x), float(-depth))
        x += 1
        node, depth = node.right, depth + 1
    return pos


def visualize_tree(bst, title: str = "BstMap", highlight: Optional[Iterable[Any]] = None,
                   out: Optional[str] = None):
    """
    bst: BstMap a dibujar
    highlight: claves a resaltar en rojo (opcional)
    out: si se da, guarda la figura en ese archivo en vez de mostrarla
    """
    G = to_networkx(bst)
    pos = tree_layout(bst)

    # el ancho crece con la cantidad de nodos, con límites razonables
    width = min(max(6, len(G) * 0.5), 30)
    fig = plt.figure(figsize=(width, 6))

    nx.draw_networkx_edges(G, pos, arrows=False, width=1.0, alpha=0.7)
    nx.draw_networkx_nodes(G, pos, node_size=300, node_color="lightsteelblue")
    # con muchos nodos las etiquetas se solapan
    if len(G) < 200:
        nx.draw_networkx_labels(G, pos, font_size=7)

    if highlight:
        keys = [k for k in highlight if k in G]
        nx.draw_networkx_nodes(G, pos, nodelist=keys, node_size=400, node_color="red")

    plt.title(title)
    plt.axis("off")
    if out:
        fig.savefig(out, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show()
    return fig
