#Vertices.py
"""
The seven vertex figures of the kite and dart tiling.

Each builder drops a seed tile at the pose it is given and then glues the
remaining tiles on one at a time, always reading the anchor edge off the
tile placed just before. With the seeds in CANONICAL_SEEDS every figure
closes around the origin; build_vertex() moves and turns a figure so that
shared corner lands wherever the caller wants it.
"""
import logging
from p2_tools.Geometry import PHI, KAPPA, RHO, normalize_angle, rotate_offset
from p2_tools.Pose import Pose
from p2_tools.Tile import Dart, Kite
from p2_tools.Placement import attach

logger = logging.getLogger('Vertices')


def build_chain(seed, steps):
    """Grow a list of tiles from `seed`.

    `steps` is a sequence of (anchor_edge, shape, edge) triples: edge
    `anchor_edge` of the last tile receives edge `edge` of a new `shape`.
    Either every step succeeds or the error propagates and nothing is returned.
    """
    tiles = [seed]
    for step, (anchor_edge, shape, edge) in enumerate(steps, start=1):
        try:
            tiles.append(attach(tiles[-1], anchor_edge, shape, edge))
        except Exception as e:
            logger.error(f"Step {step} of chain from {seed!r} failed: {e}")
            raise
    return tiles


def build_vertex_1(x, y, angle):
    """Star: five darts meeting at their tips."""
    return build_chain(Dart(x, y, angle), [(2, Dart, 3)] * 4)


def build_vertex_2(x, y, angle):
    """Ace: two kites closing the notch of one dart."""
    return build_chain(Dart(x, y, angle), [
        (4, Kite, 2),
        (1, Kite, 4),
    ])


def build_vertex_3(x, y, angle):
    """Sun: five kites meeting at their sharp ends."""
    return build_chain(Kite(x, y, angle), [(4, Kite, 1)] * 4)


def build_vertex_4(x, y, angle):
    """King: three darts and two kites."""
    return build_chain(Dart(x, y, angle), [
        (2, Dart, 3),
        (2, Kite, 1),
        (4, Kite, 1),
        (4, Dart, 3),
    ])


def build_vertex_5(x, y, angle):
    """Jack: three kites and two darts."""
    return build_chain(Kite(x, y, angle), [
        (2, Dart, 4),
        (3, Kite, 1),
        (4, Kite, 1),
        (4, Dart, 2),
    ])


def build_vertex_6(x, y, angle):
    """Queen: four kites around the tip of a dart."""
    return build_chain(Dart(x, y, angle), [
        (2, Kite, 4),
        (3, Kite, 2),
        (1, Kite, 4),
        (3, Kite, 2),
    ])


def build_vertex_7(x, y, angle):
    """Deuce: two kites and two darts."""
    return build_chain(Kite(x, y, angle), [
        (2, Kite, 3),
        (2, Dart, 4),
        (3, Dart, 2),
    ])


VERTEX_BUILDERS = {
    1: build_vertex_1,
    2: build_vertex_2,
    3: build_vertex_3,
    4: build_vertex_4,
    5: build_vertex_5,
    6: build_vertex_6,
    7: build_vertex_7,
}

VERTEX_NAMES = {
    1: 'star',
    2: 'ace',
    3: 'sun',
    4: 'king',
    5: 'jack',
    6: 'queen',
    7: 'deuce',
}

# Seed poses that put the shared corner of each figure on the origin
CANONICAL_SEEDS = {
    1: Pose(-PHI, 0., 0),
    2: Pose(0., 0., 0),
    3: Pose(PHI, 0., 0),
    4: Pose(-PHI, 0., 0),
    5: Pose(-1., 0., 0),
    6: Pose(-PHI, 0., 0),
    7: Pose(KAPPA - 1., -RHO, 108),
}


def seed_pose(k, x=0., y=0., rotation=0):
    """Seed pose for figure `k` with its shared corner at (x, y), turned by `rotation` degrees."""
    if k not in CANONICAL_SEEDS:
        raise ValueError(f"Unknown vertex configuration {k!r}, expected 1..7")
    seed = CANONICAL_SEEDS[k]
    rotation = normalize_angle(rotation)
    ox, oy = rotate_offset(rotation, seed.x, seed.y)
    return Pose(x + ox, y + oy, seed.angle + rotation)


def build_vertex(k, x=0., y=0., rotation=0):
    """Build figure `k` around the point (x, y)."""
    seed = seed_pose(k, x, y, rotation)
    logger.debug(f"Building vertex {k} ({VERTEX_NAMES[k]}) from {seed}")
    return VERTEX_BUILDERS[k](*seed)
