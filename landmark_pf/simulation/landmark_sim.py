# coding: utf-8

import math
import numpy as np

from ..core.geometry import dist
from ..core.particle_filter import YAW_RATE_EPS
from ..core.particle import Landmark, LandmarkObservation


def generate_landmarks(n, width, height, rng=None):
    """Random landmark map on [0, width] x [0, height], ids 1..n"""
    rng = rng if rng is not None else np.random.default_rng()
    xs = rng.uniform(0, width, size=n)
    ys = rng.uniform(0, height, size=n)
    return [Landmark(i + 1, float(xs[i]), float(ys[i])) for i in range(n)]


class LandmarkWorldSim:
    '''
    Ground truth vehicle driving among known landmarks.

    Produces the control input and the vehicle-frame landmark observations
    consumed by the particle filter each step.
    '''
    def __init__(self, landmarks, **params):
        self.landmarks = list(landmarks)
        self.x = params.get('x', 0.0)
        self.y = params.get('y', 0.0)
        self.theta = params.get('theta', 0.0)
        self.sensor_range = params.get('sensor_range', 50.0)
        self.std_observation = params.get('std_observation', (0.3, 0.3))
        self.rng = params.get('rng') or np.random.default_rng(params.get('seed'))

    def pose(self):
        return self.x, self.y, self.theta

    def move(self, delta_t, velocity, yaw_rate):
        # noise-free constant turn rate motion
        if abs(yaw_rate) > YAW_RATE_EPS:
            theta_1 = self.theta + yaw_rate * delta_t
            self.x += (velocity / yaw_rate) * (math.sin(theta_1) - math.sin(self.theta))
            self.y += (velocity / yaw_rate) * (math.cos(self.theta) - math.cos(theta_1))
            self.theta = theta_1
        else:
            self.x += velocity * delta_t * math.cos(self.theta)
            self.y += velocity * delta_t * math.sin(self.theta)

    def observe(self):
        """Noisy observations of landmarks within range, in the vehicle frame"""
        cos_t = math.cos(self.theta)
        sin_t = math.sin(self.theta)
        std_x, std_y = self.std_observation
        observations = []
        for lm in self.landmarks:
            if dist(self.x, self.y, lm.x, lm.y) > self.sensor_range:
                continue
            dx = lm.x - self.x
            dy = lm.y - self.y
            # inverse of the vehicle -> map transform
            ox = dx * cos_t + dy * sin_t + self.rng.normal(0.0, std_x)
            oy = -dx * sin_t + dy * cos_t + self.rng.normal(0.0, std_y)
            observations.append(LandmarkObservation(lm.id, float(ox), float(oy)))
        return observations

    def command(self, delta_t, velocity, yaw_rate):
        """
        Drive one step and sense.

        Returns:
            (observations, ground truth pose)
        """
        self.move(delta_t, velocity, yaw_rate)
        return self.observe(), self.pose()
