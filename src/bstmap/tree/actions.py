# src/bstmap/tree/actions.py
"""
Tipos de resultado usados por los algoritmos recursivos de Node:
- InsertAction: le dice al map si debe incrementar su contador.
- Return / UpdateNode: resultado etiquetado de la eliminación.
- NodePosition: extremo a eliminar en remove_first / remove_last.
"""
from collections import namedtuple
from enum import Enum


class InsertAction(Enum):
    ADDED = "added"        # se creó un nodo nuevo
    UPDATED = "updated"    # la clave existía; sin cambio estructural


class NodePosition(Enum):
    FIRST = "first"
    LAST = "last"


# Valor encontrado (o no) que solo se reenvía hacia arriba.
# found distingue "no existe" de un valor None almacenado.
Return = namedtuple("Return", ["found", "value"])

# El hijo que el llamador tiene en esa posición debe ser reemplazado por node
# (posiblemente None). Solo lo consume el padre inmediato.
UpdateNode = namedtuple("UpdateNode", ["node"])

NOT_FOUND = Return(False, None)
