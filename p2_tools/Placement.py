#Placement.py

import logging
from p2_tools.Geometry import PHI, H, normalize_angle, rotate_offset
from p2_tools.Edges import check_edge
from p2_tools.Tile import Dart, Kite

logger = logging.getLogger('Placement')

# edge -> (rotation offset K, dx, dy)
# The new tile's angle is anchor_angle + K, which turns its edge to face the
# anchor edge (anti-parallel). (dx, dy) is minus the template midpoint of the
# edge, taken in the new tile's frame, so both midpoints coincide.
DART_PLACEMENTS = {
    1: (288, 0.25, H / 2),
    2: (144, 0.25 - PHI / 2, H / 2),
    3: (36, 0.25 - PHI / 2, -H / 2),
    4: (252, 0.25, -H / 2),
}

KITE_PLACEMENTS = {
    1: (216, PHI / 2 - 0.25, H / 2),
    2: (108, -0.75, H / 2),
    3: (72, -0.75, -H / 2),
    4: (324, PHI / 2 - 0.25, -H / 2),
}

PLACEMENT_TABLES = {
    Dart: DART_PLACEMENTS,
    Kite: KITE_PLACEMENTS,
}


def _place(shape, table, e, pt, edge_angle):
    k, dx, dy = table[check_edge(e)]
    new_angle = (normalize_angle(edge_angle) + k) % 360
    ox, oy = rotate_offset(new_angle, dx, dy)
    tile = shape(pt[0] + ox, pt[1] + oy, new_angle)
    logger.debug(f"Placed {tile!r} on edge {e} against anchor {pt} at {edge_angle} deg")
    return tile


def place_dart_edge(e, pt, edge_angle):
    """Dart whose edge `e` lies on the anchor edge through `pt` with direction `edge_angle`."""
    return _place(Dart, DART_PLACEMENTS, e, pt, edge_angle)


def place_kite_edge(e, pt, edge_angle):
    """Kite whose edge `e` lies on the anchor edge through `pt` with direction `edge_angle`."""
    return _place(Kite, KITE_PLACEMENTS, e, pt, edge_angle)


def place_edge(shape, e, pt, edge_angle):
    """Dispatch to the placement of `shape` (Dart or Kite)."""
    if shape not in PLACEMENT_TABLES:
        raise TypeError(f"Cannot place tiles of type {shape!r}")
    return _place(shape, PLACEMENT_TABLES[shape], e, pt, edge_angle)


def attach(anchor, anchor_edge, shape, edge):
    """Glue edge `edge` of a new `shape` tile onto edge `anchor_edge` of `anchor`."""
    center = anchor.edge_center(anchor_edge)
    angle = anchor.edge_angle(anchor_edge)
    tile = place_edge(shape, edge, center, angle)
    if tile.edge_length(edge) is not anchor.edge_length(anchor_edge):
        logger.warning(
            f"Edge {edge} of {tile!r} and edge {anchor_edge} of {anchor!r} "
            f"differ in length; the tiles will not share the whole edge")
    return tile
