#Edges.py

import enum
import operator

# Edge index -> (start vertex, end vertex), walking the outline in order.
EDGE_VERTICES = {
    1: (0, 1),
    2: (1, 2),
    3: (2, 3),
    4: (3, 0),
}


class EdgeLength(enum.Enum):
    SHORT = 'short'
    LONG = 'long'


class InvalidEdgeIndex(ValueError):
    """Raised when an edge index outside 1..4 reaches an edge query or a placement."""

    def __init__(self, edge):
        super().__init__(f"Invalid edge index {edge!r}, expected one of 1, 2, 3, 4")
        self.edge = edge


def check_edge(edge):
    """Return `edge` as an int if it names one of the four edges."""
    # bool is an int subclass; True must not alias edge 1
    if isinstance(edge, bool):
        raise InvalidEdgeIndex(edge)
    try:
        index = operator.index(edge)
    except TypeError:
        raise InvalidEdgeIndex(edge) from None
    if index not in EDGE_VERTICES:
        raise InvalidEdgeIndex(edge)
    return index


def edge_vertex_pair(edge):
    return EDGE_VERTICES[check_edge(edge)]
