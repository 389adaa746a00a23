# tests/test_node.py
from bstmap.tree.actions import InsertAction, NodePosition, Return, UpdateNode
from bstmap.tree.node import Entry, Node


def build(*keys):
    root = Node(keys[0], str(keys[0]))
    for k in keys[1:]:
        root.insert(k, str(k))
    return root


def test_insert_reports_added_and_updated():
    root = Node(5, "a")
    assert root.insert(3, "b") is InsertAction.ADDED
    assert root.insert(8, "c") is InsertAction.ADDED
    assert root.insert(3, "B") is InsertAction.UPDATED
    assert root.left.key == 3 and root.left.value == "B"
    assert root.right.key == 8


def test_insert_or_calls_func_only_when_present():
    root = Node(5, 1)
    calls = []

    def bump(entry):
        calls.append(entry.value)
        entry.value += 1

    assert root.insert_or(5, 100, bump) is InsertAction.UPDATED
    assert root.value == 2
    assert root.insert_or(7, 100, bump) is InsertAction.ADDED
    assert root.right.value == 100
    assert calls == [1]


def test_get_and_missing():
    root = build(10, 5, 15, 3, 7)
    assert root.get(7) == Return(True, "7")
    assert root.get(4) == Return(False, None)


def test_get_distinguishes_stored_none():
    root = Node(1, None)
    assert root.get(1).found is True
    assert root.get(2).found is False


def test_get_mut_reaches_left_subtree():
    root = build(10, 5, 15, 3, 7, 12)
    for k in (3, 5, 7, 12, 15):
        entry = root.get_mut(k)
        assert isinstance(entry, Entry)
        assert entry.key == k
        entry.value = k * 100
    assert root.get(3).value == 300
    assert root.get(12).value == 1200
    assert root.get_mut(4) is None


def test_first_last_key_value():
    root = build(10, 5, 15, 3, 7, 20)
    assert root.first_key_value() == (3, "3")
    assert root.last_key_value() == (20, "20")


def test_remove_self_returns_update_node():
    root = build(10, 5)
    action = root.remove(10)
    assert isinstance(action, UpdateNode)
    assert action.node.key == 5
    # el nodo eliminado soltó a sus hijos
    assert root.left is None and root.right is None


def test_remove_missing_key():
    root = build(10, 5, 15)
    assert root.remove(99) == Return(False, None)
    assert root.remove(1) == Return(False, None)
    assert root.count_nodes() == 3


def test_remove_leaf():
    root = build(10, 5, 15)
    assert root.remove(5) == Return(True, "5")
    assert root.left is None
    assert root.right.key == 15


def test_remove_one_child_promotes_it():
    root = build(10, 5, 3, 1)
    assert root.remove(5) == Return(True, "5")
    assert root.left.key == 3
    assert root.left.left.key == 1


def test_remove_two_children_right_child_is_successor():
    root = build(10, 5, 3, 7, 8)
    assert root.remove(5) == Return(True, "5")
    succ = root.left
    assert succ.key == 7
    assert succ.left.key == 3
    assert succ.right.key == 8


def test_remove_two_children_deep_successor():
    root = build(10, 5, 3, 9, 7, 8)
    assert root.remove(5) == Return(True, "5")
    succ = root.left
    assert succ.key == 7
    assert succ.left.key == 3
    assert succ.right.key == 9
    # el hijo derecho del sucesor ocupa su antiguo lugar
    assert succ.right.left.key == 8
    assert succ.right.left.left is None


def test_remove_position_first_and_last():
    root = build(10, 5, 15, 7, 12)
    assert root.remove_position(NodePosition.FIRST) == Return(True, "5")
    assert root.left.key == 7
    assert root.remove_position(NodePosition.LAST) == Return(True, "15")
    assert root.right.key == 12


def test_remove_position_on_extreme_root():
    root = build(10, 15)
    action = root.remove_position(NodePosition.FIRST)
    assert isinstance(action, UpdateNode)
    assert action.node.key == 15


def test_height_and_count():
    root = build(1, 2, 3, 4)
    assert root.height() == 4
    assert root.count_nodes() == 4
    assert build(2, 1, 3).height() == 2


def test_str_lists_children_keys():
    text = str(build(10, 5))
    assert "key: 10" in text
    assert "left key: 5" in text
    assert "right key: None" in text
