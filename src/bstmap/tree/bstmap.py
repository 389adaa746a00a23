# src/bstmap/tree/bstmap.py
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .actions import InsertAction, NodePosition, Return
from .node import Entry, Node

_MISSING = object()


class BstMap:
    """
    Map implementado con un árbol binario de búsqueda sin balanceo.
    API: insert(key, value), insert_or(key, value, func), get(key), get_mut(key),
    first_key_value(), last_key_value(), remove(key), remove_first(), remove_last(),
    iter()/items(), iter_mut(), drain().

    La iteración no garantiza orden (aunque internamente sea in-order).
    """

    def __init__(self):
        self._head: Optional[Node] = None
        self._len = 0

    # ------------------ Estado ------------------
    @property
    def head(self) -> Optional[Node]:
        """Nodo raíz, solo para diagnóstico (no modificar claves)."""
        return self._head

    def clear(self) -> None:
        self._head = None
        self._len = 0

    def is_empty(self) -> bool:
        return self._len == 0

    def len(self) -> int:
        return self._len

    def __len__(self) -> int:
        return self._len

    def height(self) -> int:
        if self._head is None:
            return 0
        return self._head.height()

    # ------------------ Inserción ------------------
    def insert(self, key: Any, value: Any) -> None:
        """Inserta key/value. Si la clave existe, el valor anterior se sobrescribe."""
        if self._head is None:
            self._head = Node(key, value)
            self._len += 1
            return
        if self._head.insert(key, value) is InsertAction.ADDED:
            self._len += 1

    def insert_or(self, key: Any, value: Any, func: Callable[[Entry], None]) -> None:
        """
        Inserta key/value, o si la clave ya existe llama func(entry) con acceso
        mutable al valor existente (value se ignora en ese caso). Lo que devuelva
        func no se usa.

        >>> m = BstMap()
        >>> m.insert(10, 10)
        >>> def bump(entry):
        ...     entry.value += 1
        >>> m.insert_or(10, 20, bump)
        >>> m[10]
        11
        """
        if self._head is None:
            self._head = Node(key, value)
            self._len += 1
            return
        if self._head.insert_or(key, value, func) is InsertAction.ADDED:
            self._len += 1

    # ------------------ Búsqueda ------------------
    def get(self, key: Any, default: Any = None) -> Any:
        """Valor asociado a key, o default si no existe."""
        if self._head is None:
            return default
        found, value = self._head.get(key)
        return value if found else default

    def get_mut(self, key: Any) -> Optional[Entry]:
        """Entry con valor asignable asociado a key, o None si no existe."""
        if self._head is None:
            return None
        return self._head.get_mut(key)

    def first_key_value(self) -> Optional[Tuple[Any, Any]]:
        """Primer par (key, value) según el orden de las claves."""
        if self._head is None:
            return None
        return self._head.first_key_value()

    def last_key_value(self) -> Optional[Tuple[Any, Any]]:
        """Último par (key, value) según el orden de las claves."""
        if self._head is None:
            return None
        return self._head.last_key_value()

    def __contains__(self, key: Any) -> bool:
        return self._head is not None and self._head.get(key).found

    def __getitem__(self, key: Any) -> Any:
        # acceso para llamadores que ya saben que la clave existe
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(f"no entry found for key {key!r}")
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    # ------------------ Eliminación ------------------
    def remove(self, key: Any) -> Any:
        """Elimina la entrada y devuelve su valor; None si la clave no existe."""
        return self._remove(key).value

    def __delitem__(self, key: Any) -> None:
        if not self._remove(key).found:
            raise KeyError(f"no entry found for key {key!r}")

    def _remove(self, key: Any) -> Return:
        if self._head is None:
            return Return(False, None)

        action = self._head.remove(key)
        if isinstance(action, Return):
            if action.found:
                self._len -= 1
            return action

        # la raíz fue el nodo eliminado: action.node es la nueva raíz
        old_head = self._head
        self._head = action.node
        self._len -= 1
        return Return(True, old_head.value)

    def remove_first(self) -> Any:
        """Elimina la entrada con la clave mínima y devuelve su valor."""
        return self._remove_position(NodePosition.FIRST)

    def remove_last(self) -> Any:
        """Elimina la entrada con la clave máxima y devuelve su valor."""
        return self._remove_position(NodePosition.LAST)

    def _remove_position(self, position: NodePosition) -> Any:
        if self._head is None:
            return None

        # con raíz presente siempre se elimina exactamente un nodo
        self._len -= 1
        action = self._head.remove_position(position)
        if isinstance(action, Return):
            return action.value

        old_head = self._head
        self._head = action.node
        return old_head.value

    # ------------------ Iteración ------------------
    def items(self) -> Iterator[Tuple[Any, Any]]:
        """Itera pares (key, value) de solo lectura. Sin orden garantizado."""
        pairs: List[Tuple[Any, Any]] = []
        if self._head is not None:
            self._head.fill_items(pairs)
        return iter(pairs)

    iter = items

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return self.items()

    def keys(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self.items():
            yield value

    def iter_mut(self) -> Iterator[Entry]:
        """Itera objetos Entry: la clave es de solo lectura y el valor se puede asignar."""
        entries: List[Entry] = []
        if self._head is not None:
            self._head.fill_entries(entries)
        return iter(entries)

    def drain(self) -> Iterator[Tuple[Any, Any]]:
        """
        Iteración consumidora: entrega todos los pares y deja el map vacío
        (el map queda vacío en cuanto se llama, no al agotar el iterador).
        """
        pairs = list(self.items())
        self.clear()
        return iter(pairs)

    into_iter = drain

    # ------------------ Visualización ------------------
    def to_networkx(self):
        """
        Crea un networkx.DiGraph con aristas padre -> hijo.
        Requiere networkx instalado.
        """
        from bstmap.viz.visualizer import to_networkx
        return to_networkx(self)

    def __str__(self) -> str:
        head_key = repr(self._head.key) if self._head is not None else "None"
        node_display = str(self._head) if self._head is not None else ""
        return (
            f"[BstMap @ {id(self):#x}]"
            f"\n      len: {self._len}"
            f"\n head key: {head_key}"
            f"{node_display}"
        )

    def __repr__(self):
        return f"BstMap({list(self.items())!r})"
