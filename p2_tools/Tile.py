#Tile.py

import numpy as np
from p2_tools.Geometry import PHI, H, rotation_matrix
from p2_tools.Pose import Pose
from p2_tools.Edges import EdgeLength, check_edge, edge_vertex_pair


class Tile:
    """Common behaviour of the two P2 shapes.

    A tile is nothing but a shape plus a Pose. Vertices, edges and their
    angles are all derived from the shape's local template on demand. Only
    Dart and Kite are meant to exist.
    """
    __slots__ = ('_pose',)

    # Filled in by the two shapes
    TEMPLATE = None
    EDGE_OFFSETS = {}
    EDGE_LENGTHS = {}
    INTERNAL_ANGLES = ()

    def __init__(self, x, y, angle):
        if type(self) is Tile:
            raise TypeError("Tile is abstract; build a Dart or a Kite")
        self._pose = Pose(x, y, angle)

    @classmethod
    def from_pose(cls, pose):
        return cls(pose.x, pose.y, pose.angle)

    def __repr__(self):
        return f"{type(self).__name__}({self.cx!r}, {self.cy!r}, {self.angle!r})"

    def __hash__(self):
        # Hash on shape and pose
        return hash((type(self).__name__, self._pose))

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return type(self) is type(other) and self._pose == other._pose

    @property
    def pose(self):
        return self._pose

    @property
    def cx(self):
        return self._pose.x

    @property
    def cy(self):
        return self._pose.y

    @property
    def angle(self):
        return self._pose.angle

    @property
    def is_kite(self):
        return isinstance(self, Kite)

    def rotate(self, delta):
        """Same centre, orientation turned by `delta` degrees."""
        return self.from_pose(self._pose.rotate(delta))

    def translate(self, dx, dy):
        """Same orientation, centre shifted by (dx, dy)."""
        return self.from_pose(self._pose.translate(dx, dy))

    def vertices(self):
        """The four corners in world coordinates, shape (4, 2)."""
        rotated = self.TEMPLATE @ rotation_matrix(self.angle).T
        return rotated + np.array([self.cx, self.cy])

    def polygon(self, xoff, yoff, scale):
        """Corners mapped into output space as p * scale + (xoff, yoff)."""
        pts = self.vertices() * scale + np.array([xoff, yoff])
        return pts.astype(np.float32)

    def edge_angle(self, e):
        """Direction of edge `e` in whole degrees, straight from the shape table."""
        return (self.EDGE_OFFSETS[check_edge(e)] + self.angle) % 360

    def edge_length(self, e):
        return self.EDGE_LENGTHS[check_edge(e)]

    def edge_points(self, e):
        i1, i2 = edge_vertex_pair(e)
        pts = self.vertices()
        x1, y1 = pts[i1]
        x2, y2 = pts[i2]
        return (float(x1), float(y1)), (float(x2), float(y2))

    def edge_center(self, e):
        (x1, y1), (x2, y2) = self.edge_points(e)
        return ((x1 + x2) / 2., (y1 + y2) / 2.)

    def internal_angles(self):
        """Interior angle at the far end of edges 1..4, in degrees."""
        return self.INTERNAL_ANGLES


class Dart(Tile):
    __slots__ = ()

    # Vertex 0 is the reflex corner, vertex 2 the tip
    TEMPLATE = np.array([
        [0., 0.],
        [-0.5, -H],
        [PHI, 0.],
        [-0.5, H],
    ])
    EDGE_OFFSETS = {1: 252, 2: 36, 3: 144, 4: 288}
    EDGE_LENGTHS = {
        1: EdgeLength.SHORT,
        2: EdgeLength.LONG,
        3: EdgeLength.LONG,
        4: EdgeLength.SHORT,
    }
    INTERNAL_ANGLES = (36, 72, 36, 216)


class Kite(Tile):
    __slots__ = ()

    TEMPLATE = np.array([
        [-PHI, 0.],
        [0.5, -H],
        [1., 0.],
        [0.5, H],
    ])
    EDGE_OFFSETS = {1: 324, 2: 72, 3: 108, 4: 216}
    EDGE_LENGTHS = {
        1: EdgeLength.LONG,
        2: EdgeLength.SHORT,
        3: EdgeLength.SHORT,
        4: EdgeLength.LONG,
    }
    INTERNAL_ANGLES = (72, 144, 72, 72)
