import copy
from typing import NamedTuple


# ---------- map / observation records ----------

class Landmark(NamedTuple):
    """Map landmark, read-only once loaded"""
    id: int
    x: float
    y: float


class LandmarkObservation(NamedTuple):
    """
    Observed (vehicle frame) or predicted (map frame) landmark position.
    Also used for association results, where id is the index of the matched candidate.
    """
    id: int
    x: float
    y: float


# ---------- Particle class ----------
class Particle:
    def __init__(self, id, x, y, theta, weight=1.0):
        self.id = id
        # pose
        self.x = x
        self.y = y
        self.theta = theta
        # importance weight, >= 0
        self.weight = weight

    def copy(self):
        return copy.copy(self)

    def pose(self):
        return self.x, self.y, self.theta

    def __repr__(self):
        return (f"Particle(id={self.id}, x={self.x:.3f}, y={self.y:.3f}, "
                f"theta={self.theta:.3f}, weight={self.weight:.3g})")
