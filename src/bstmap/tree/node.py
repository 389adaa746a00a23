# src/bstmap/tree/node.py
"""
Nodo del árbol binario de búsqueda (sin balanceo) usado por BstMap.

Cada nodo es dueño exclusivo de sus dos hijos (left / right); no hay referencia
al padre. Todas las operaciones son recursivas sobre la altura del árbol, por
lo que un árbol degenerado (inserción ordenada) queda limitado por
sys.getrecursionlimit().

La eliminación usa un protocolo de resultados (ver actions.py): el nodo que
coincide con la clave devuelve UpdateNode(reemplazo) y su padre inmediato es
quien lo empalma y lo convierte en Return(True, valor) para el resto del camino.
"""
from typing import Any, Callable, List, Optional, Tuple, Union

from .actions import InsertAction, NodePosition, Return, UpdateNode, NOT_FOUND

RemoveAction = Union[Return, UpdateNode]


class Entry:
    """Vista mutable de un nodo: la clave es de solo lectura, el valor se puede asignar."""
    __slots__ = ("_node",)

    def __init__(self, node: "Node"):
        self._node = node

    @property
    def key(self) -> Any:
        return self._node.key

    @property
    def value(self) -> Any:
        return self._node.value

    @value.setter
    def value(self, value: Any) -> None:
        self._node.value = value

    def __repr__(self):
        return f"Entry({self.key!r}, {self.value!r})"


class Node:
    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.left: Optional["Node"] = None
        self.right: Optional["Node"] = None

    def _side(self, key: Any) -> str:
        # solo se llama cuando key != self.key
        return "left" if key < self.key else "right"

    # -------------------------
    # Llenado para iteración
    # -------------------------
    def fill_items(self, out: List[Tuple[Any, Any]]) -> None:
        """Agrega a out cada par (key, value) del subárbol (recorrido in-order)."""
        if self.left is not None:
            self.left.fill_items(out)
        out.append((self.key, self.value))
        if self.right is not None:
            self.right.fill_items(out)

    def fill_entries(self, out: List[Entry]) -> None:
        if self.left is not None:
            self.left.fill_entries(out)
        out.append(Entry(self))
        if self.right is not None:
            self.right.fill_entries(out)

    # -------------------------
    # Inserción
    # -------------------------
    def insert(self, key: Any, value: Any) -> InsertAction:
        """
        Baja por el árbol hasta la posición de key.
        Si la clave ya existe se sobrescribe el valor (UPDATED);
        si no, se crea una hoja nueva (ADDED).
        """
        if key == self.key:
            self.value = value
            return InsertAction.UPDATED

        side = self._side(key)
        child = getattr(self, side)
        if child is not None:
            return child.insert(key, value)
        setattr(self, side, Node(key, value))
        return InsertAction.ADDED

    def insert_or(self, key: Any, value: Any, func: Callable[[Entry], None]) -> InsertAction:
        """
        Igual que insert, pero si la clave existe se llama func(Entry(self)):
        la función modifica el valor existente (entry.value) y value se ignora.
        """
        if key == self.key:
            func(Entry(self))
            return InsertAction.UPDATED

        side = self._side(key)
        child = getattr(self, side)
        if child is not None:
            return child.insert_or(key, value, func)
        setattr(self, side, Node(key, value))
        return InsertAction.ADDED

    # -------------------------
    # Búsqueda
    # -------------------------
    def get(self, key: Any) -> Return:
        if key == self.key:
            return Return(True, self.value)

        child = getattr(self, self._side(key))
        if child is None:
            return NOT_FOUND
        return child.get(key)

    def get_mut(self, key: Any) -> Optional[Entry]:
        # misma selección de rama que get(): menor -> left, mayor -> right
        if key == self.key:
            return Entry(self)

        child = getattr(self, self._side(key))
        if child is None:
            return None
        return child.get_mut(key)

    def first_key_value(self) -> Tuple[Any, Any]:
        """Par (key, value) más a la izquierda."""
        if self.left is not None:
            return self.left.first_key_value()
        return self.key, self.value

    def last_key_value(self) -> Tuple[Any, Any]:
        """Par (key, value) más a la derecha."""
        if self.right is not None:
            return self.right.last_key_value()
        return self.key, self.value

    # -------------------------
    # Eliminación
    # -------------------------
    def remove(self, key: Any) -> RemoveAction:
        """
        Busca recursivamente el nodo con key.

        Devuelve UpdateNode(reemplazo) si self es el nodo a eliminar; el
        llamador debe empalmar el reemplazo en la posición de self.
        En cualquier otro caso devuelve Return(found, value).
        """
        if key == self.key:
            return UpdateNode(self._replacement_node())

        side = self._side(key)
        child = getattr(self, side)
        if child is None:
            return NOT_FOUND
        return self._splice(side, child.remove(key))

    def remove_position(self, position: NodePosition) -> RemoveAction:
        """Elimina el nodo más a la izquierda (FIRST) o más a la derecha (LAST)."""
        side = "left" if position is NodePosition.FIRST else "right"
        child = getattr(self, side)
        if child is None:
            # somos el extremo
            return UpdateNode(self._replacement_node())
        return self._splice(side, child.remove_position(position))

    def _splice(self, side: str, action: RemoveAction) -> Return:
        """
        Consume el resultado de un hijo directo. Un UpdateNode significa que
        ese hijo fue el eliminado: se instala su reemplazo y se reenvía su valor.
        """
        if isinstance(action, Return):
            return action
        removed = getattr(self, side)
        setattr(self, side, action.node)
        return Return(True, removed.value)

    def _replacement_node(self) -> Optional["Node"]:
        """
        Elige el subárbol que ocupará el lugar de self y suelta los hijos de self.
        - hoja: None
        - un hijo: ese hijo
        - dos hijos: el sucesor in-order (mínimo del subárbol derecho)
        """
        left, right = self.left, self.right
        self.left = self.right = None

        if left is None:
            return right
        if right is None:
            return left

        if right.left is None:
            # el hijo derecho ya es el sucesor
            right.left = left
            return right

        successor = right._take_successor()
        successor.left = left
        successor.right = right
        return successor

    def _take_successor(self) -> "Node":
        """
        Desengancha y devuelve el mínimo del subárbol izquierdo de self.
        Requiere self.left no None. El hijo derecho del sucesor ocupa su lugar.
        """
        left = self.left
        if left.left is None:
            self.left = left.right
            left.right = None
            return left
        return left._take_successor()

    # -------------------------
    # Diagnóstico
    # -------------------------
    def height(self) -> int:
        h_left = self.left.height() if self.left is not None else 0
        h_right = self.right.height() if self.right is not None else 0
        return 1 + max(h_left, h_right)

    def count_nodes(self) -> int:
        n = 1
        if self.left is not None:
            n += self.left.count_nodes()
        if self.right is not None:
            n += self.right.count_nodes()
        return n

    def __str__(self) -> str:
        key_left = repr(self.left.key) if self.left is not None else "None"
        key_right = repr(self.right.key) if self.right is not None else "None"
        node_left = str(self.left) if self.left is not None else ""
        node_right = str(self.right) if self.right is not None else ""
        return (
            f"\n\n[BstMap.Node @ {id(self):#x}]"
            f"\n      key: {self.key!r}"
            f"\n    value: {self.value!r}"
            f"\n left key: {key_left}"
            f"\nright key: {key_right}"
            f"{node_left}{node_right}"
        )

    def __repr__(self):
        return f"Node({self.key!r}, {self.value!r})"
