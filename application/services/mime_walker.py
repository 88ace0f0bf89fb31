# application/services/mime_walker.py
from __future__ import annotations
from typing import Iterator

from domain.models import MimePart


def iter_leaves(part: MimePart) -> Iterator[MimePart]:
    """
    Recorre el árbol MIME en profundidad (hijos en orden) y devuelve solo las hojas.
    Un contenedor nunca se devuelve; una parte sin hijos es hoja por sí misma.
    """
    stack = [part]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        # invertidos para que el pop respete el orden izquierda → derecha
        stack.extend(reversed(node.children))
