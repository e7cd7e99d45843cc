#Geometry.py

import math
import operator
import numpy as np

# Golden ratio and the half-height of both tiles. Every vertex offset and
# placement displacement is built from 1, PHI and H.
PHI = (1 + math.sqrt(5)) / 2
H = math.sqrt(5 + 2 * math.sqrt(5)) / 2

# Distances that show up in the assembled vertex figures.
KAPPA = (2 + math.sqrt(5)) / (1 + math.sqrt(5))
RHO = math.sqrt(10 + math.sqrt(20)) / 4


def normalize_angle(angle):
    """Reduce an integer angle in degrees into [0, 360)."""
    return operator.index(angle) % 360


def rotation_matrix(angle):
    """Standard 2x2 counter-clockwise rotation by `angle` degrees."""
    theta = math.radians(angle)
    c = math.cos(theta)
    s = math.sin(theta)
    return np.array([[c, -s], [s, c]])


def rotate_offset(angle, dx, dy):
    """Rotate the local displacement (dx, dy) by `angle` degrees."""
    x, y = rotation_matrix(angle) @ np.array([dx, dy])
    return float(x), float(y)


def direction_angle(p1, p2):
    """Direction of the segment p1 -> p2 in whole degrees, normalised."""
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    return int(round(math.degrees(math.atan2(dy, dx)))) % 360


def distance(p1, p2):
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])
