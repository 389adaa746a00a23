# tests/test_visualizer.py
import matplotlib
matplotlib.use("Agg")

from bstmap.tree.bstmap import BstMap
from bstmap.viz.visualizer import to_networkx, tree_layout, visualize_tree


def sample_map():
    m = BstMap()
    for k in (10, 5, 15, 3, 7):
        m.insert(k, str(k))
    return m


def test_to_networkx_edges_and_sides():
    G = to_networkx(sample_map())
    assert set(G.nodes) == {3, 5, 7, 10, 15}
    assert G.nodes[7]["value"] == "7"
    assert G.edges[10, 5]["side"] == "left"
    assert G.edges[10, 15]["side"] == "right"
    assert G.edges[5, 7]["side"] == "right"
    assert G.number_of_edges() == 4


def test_to_networkx_method_and_empty():
    assert len(BstMap().to_networkx()) == 0
    assert sample_map().to_networkx().number_of_nodes() == 5


def test_tree_layout_follows_key_order_and_depth():
    pos = tree_layout(sample_map())
    xs = [pos[k][0] for k in sorted(pos)]
    assert xs == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert pos[10][1] == 0.0
    assert pos[5][1] == -1.0 and pos[15][1] == -1.0
    assert pos[3][1] == -2.0 and pos[7][1] == -2.0


def test_visualize_tree_saves_file(tmp_path):
    out = tmp_path / "tree.png"
    visualize_tree(sample_map(), title="test", highlight=[7, 99], out=str(out))
    assert out.exists()
