from .Geometry import PHI, H, KAPPA, RHO
from .Pose import Pose
from .Edges import EdgeLength, InvalidEdgeIndex
from .Tile import Dart, Kite
from .Placement import place_dart_edge, place_kite_edge, place_edge, attach
from .Vertices import (
    build_vertex_1, build_vertex_2, build_vertex_3, build_vertex_4,
    build_vertex_5, build_vertex_6, build_vertex_7,
    build_vertex, build_chain, seed_pose,
    VERTEX_BUILDERS, VERTEX_NAMES, CANONICAL_SEEDS
)
from .Operations import Operations
from .Renderer import ImageRenderer

__all__ = ['PHI', 'H', 'KAPPA', 'RHO', 'Pose', 'EdgeLength', 'InvalidEdgeIndex',
           'Dart', 'Kite',
           'place_dart_edge', 'place_kite_edge', 'place_edge', 'attach',
           'build_vertex_1', 'build_vertex_2', 'build_vertex_3', 'build_vertex_4',
           'build_vertex_5', 'build_vertex_6', 'build_vertex_7',
           'build_vertex', 'build_chain', 'seed_pose',
           'VERTEX_BUILDERS', 'VERTEX_NAMES', 'CANONICAL_SEEDS',
           'Operations', 'ImageRenderer']
