"""
Landmark selection and nearest-neighbour data association
"""

import numpy as np

from .errors import EmptyCandidateSetError
from .geometry import dist
from .particle import LandmarkObservation


def landmarks_in_range(x, y, landmarks, sensor_range):
    """
    Landmarks within sensor_range (inclusive) of (x, y), in map order.

    Args:
        x, y: particle position
        landmarks: sequence of Landmark
        sensor_range: maximum sensing distance

    Returns:
        list of LandmarkObservation carrying each landmark's own id (possibly empty)
    """
    if sensor_range < 0:
        raise ValueError(f"sensor_range must be non-negative, got {sensor_range}")
    return [
        LandmarkObservation(lm.id, float(lm.x), float(lm.y))
        for lm in landmarks
        if dist(x, y, lm.x, lm.y) <= sensor_range
    ]


def associate(predicted, observations):
    """
    Match every observation to its nearest predicted landmark.

    Matches are not exclusive: several observations may pick the same landmark.
    On equal distances the first candidate wins.

    Args:
        predicted: candidate landmarks in the map frame
        observations: observations already transformed into the map frame

    Returns:
        list of LandmarkObservation, one per observation, holding the matched
        candidate's position and its index within `predicted` as id

    Raises:
        EmptyCandidateSetError: observations given but no candidates
    """
    if len(observations) == 0:
        return []
    if len(predicted) == 0:
        raise EmptyCandidateSetError(
            f"cannot associate {len(observations)} observation(s) with an empty landmark set")

    cand = np.array([(p.x, p.y) for p in predicted], dtype=float)
    obs = np.array([(o.x, o.y) for o in observations], dtype=float)

    # (n_obs, n_cand) distance table; argmin returns the first minimum
    d = np.hypot(obs[:, None, 0] - cand[None, :, 0], obs[:, None, 1] - cand[None, :, 1])
    closest = np.argmin(d, axis=1)

    return [LandmarkObservation(int(j), float(cand[j, 0]), float(cand[j, 1])) for j in closest]
