#Pose.py

from collections import namedtuple
from p2_tools.Geometry import normalize_angle


class Pose(namedtuple('Pose', ['x', 'y', 'angle'])):
    """Position of a tile's centre plus its orientation in whole degrees.

    The angle is always stored in [0, 360). Poses are immutable; rotate and
    translate hand back new poses.
    """
    __slots__ = ()

    def __new__(cls, x, y, angle):
        return super().__new__(cls, float(x), float(y), normalize_angle(angle))

    def rotate(self, delta):
        return Pose(self.x, self.y, self.angle + normalize_angle(delta))

    def translate(self, dx, dy):
        return Pose(self.x + dx, self.y + dy, self.angle)
