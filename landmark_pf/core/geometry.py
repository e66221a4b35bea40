"""
Distance, frame transform and measurement likelihood helpers
"""

import math
import numpy as np
from scipy.stats import multivariate_normal

from .particle import LandmarkObservation


def dist(x1, y1, x2, y2):
    return math.hypot(x2 - x1, y2 - y1)


def transform_observations(x, y, theta, observations):
    """
    Express vehicle-frame observations in the map frame of a particle at (x, y, theta).

    Rotation by theta followed by translation by (x, y). Order and ids are kept.
    """
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return [
        LandmarkObservation(obs.id,
                            x + obs.x * cos_t - obs.y * sin_t,
                            y + obs.x * sin_t + obs.y * cos_t)
        for obs in observations
    ]


def measurement_model(std_x, std_y):
    """Frozen zero-mean bivariate Gaussian with covariance diag(std_x^2, std_y^2), evaluated on residuals"""
    return multivariate_normal(mean=[0.0, 0.0], cov=np.diag([std_x * std_x, std_y * std_y]))


def bivariate_gaussian_pdf(x, y, mu_x, mu_y, std_x, std_y):
    """
    Density of (x, y) under N((mu_x, mu_y), diag(std_x^2, std_y^2)).
    Far-away points give 0.0 through underflow.
    """
    return float(measurement_model(std_x, std_y).pdf([x - mu_x, y - mu_y]))
