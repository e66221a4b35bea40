# Landmark-based Monte Carlo localization
# - Particles store a pose hypothesis (x, y, theta) and an importance weight
# - Prediction uses the constant-turn-rate motion model plus Gaussian noise
# - Weight update: per particle, 1) keep landmarks within sensor range
#                                 2) move observations into the particle's map frame
#                                 3) nearest-neighbour association
#                                 4) product of bivariate Gaussian likelihoods
# - Resampling draws N particles with replacement, proportional to weight

import math
import multiprocessing as mp
import numpy as np

from .association import associate, landmarks_in_range
from .errors import FilterNotInitializedError
from .geometry import measurement_model, transform_observations
from .particle import Particle
from .weights import particle_weight
from ..utils.state_io import write_particles

# below this |yaw_rate| the straight-line motion branch is used
YAW_RATE_EPS = 1e-9


def _check_std(name, std, size, strictly_positive=False):
    std = tuple(float(s) for s in std)
    if len(std) != size:
        raise ValueError(f"{name} needs {size} standard deviations, got {len(std)}")
    for s in std:
        if not math.isfinite(s):
            raise ValueError(f"{name} standard deviations must be finite, got {std}")
        if strictly_positive and not s > 0:
            raise ValueError(f"{name} standard deviations must be positive, got {std}")
        if s < 0:
            raise ValueError(f"{name} standard deviations must be non-negative, got {std}")
    return std


def _normalized(weights):
    """
    Weights scaled to sum to 1, or None when none is positive.

    nan counts as zero. Overflowed (inf) weights share all the mass equally.
    """
    w = np.where(np.isnan(weights), 0.0, weights)
    if np.any(np.isinf(w)):
        w = np.isinf(w).astype(float)
    peak = float(np.max(w)) if w.size else 0.0
    if not peak > 0:
        return None
    # scale by the peak first so the sum cannot overflow
    w = w / peak
    return w / np.sum(w)


def _weigh_particle(args):
    """Weight of one particle pose; runs in the caller or in a worker process."""
    pose, sensor_range, std_landmark, model, observations, landmarks = args
    x, y, theta = pose

    predicted = landmarks_in_range(x, y, landmarks, sensor_range)
    if observations and not predicted:
        # nothing to match against
        return 0.0

    transformed = transform_observations(x, y, theta, observations)
    matches = associate(predicted, transformed)
    return particle_weight(transformed, matches, std_landmark, model)


# ---------- Particle Filter Class ----------
class ParticleFilter:
    def __init__(self, num_particles=75, rng=None, seed=None, n_workers=1, verbose=False):
        if int(num_particles) < 1:
            raise ValueError(f"num_particles must be at least 1, got {num_particles}")
        if int(n_workers) < 1:
            raise ValueError(f"n_workers must be at least 1, got {n_workers}")
        self.N = int(num_particles)
        # one generator for the whole lifetime of the filter
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.n_workers = int(n_workers)
        self.verbose = verbose

        self.particles = []
        self.weights = np.zeros(0)
        self.is_initialized = False
        # set when the last resample had no usable weights
        self.diverged = False

    def _require_init(self):
        if not self.is_initialized:
            raise FilterNotInitializedError("particle filter used before init()")

    def _sync_weights(self):
        self.weights = np.array([p.weight for p in self.particles], dtype=float)

    def init(self, x, y, theta, std):
        """
        Sample N particles around the initial estimate (x, y, theta).

        Args:
            x, y, theta: initial pose estimate [m, m, rad]
            std: (std_x, std_y, std_theta) of the estimate
        """
        std_x, std_y, std_theta = _check_std('init', std, 3)

        xs = self.rng.normal(x, std_x, size=self.N)
        ys = self.rng.normal(y, std_y, size=self.N)
        thetas = self.rng.normal(theta, std_theta, size=self.N)

        self.particles = [Particle(i, float(xs[i]), float(ys[i]), float(thetas[i]), 1.0)
                          for i in range(self.N)]
        self._sync_weights()
        self.is_initialized = True
        self.diverged = False

    def predict(self, delta_t, std_pos, velocity, yaw_rate):
        """
        Move every particle with the shared control (velocity, yaw_rate) over delta_t.

        Each particle gets its own Gaussian noise draw on x, y and theta.
        Weights are reset to 1.
        """
        self._require_init()
        std_x, std_y, std_theta = _check_std('predict', std_pos, 3)

        noise_x = self.rng.normal(0.0, std_x, size=self.N)
        noise_y = self.rng.normal(0.0, std_y, size=self.N)
        noise_theta = self.rng.normal(0.0, std_theta, size=self.N)

        for i, p in enumerate(self.particles):
            theta_0 = p.theta
            if abs(yaw_rate) > YAW_RATE_EPS:
                theta_1 = theta_0 + yaw_rate * delta_t
                x = p.x + (velocity / yaw_rate) * (math.sin(theta_1) - math.sin(theta_0))
                y = p.y + (velocity / yaw_rate) * (math.cos(theta_0) - math.cos(theta_1))
            else:
                theta_1 = theta_0
                x = p.x + velocity * delta_t * math.cos(theta_0)
                y = p.y + velocity * delta_t * math.sin(theta_0)

            p.x = x + float(noise_x[i])
            p.y = y + float(noise_y[i])
            p.theta = theta_1 + float(noise_theta[i])
            p.weight = 1.0
        self._sync_weights()

    def update_weights(self, sensor_range, std_landmark, observations, landmarks):
        """
        Re-weight every particle by the likelihood of the observations.

        Args:
            sensor_range: sensor range [m]
            std_landmark: (std_x, std_y) of the landmark measurement
            observations: vehicle-frame LandmarkObservation list
            landmarks: map Landmark list
        """
        self._require_init()
        std_landmark = _check_std('landmark', std_landmark, 2, strictly_positive=True)
        if sensor_range < 0:
            raise ValueError(f"sensor_range must be non-negative, got {sensor_range}")

        observations = list(observations)
        landmarks = list(landmarks)
        # one frozen measurement density shared by every particle
        model = measurement_model(*std_landmark)
        jobs = [(p.pose(), sensor_range, std_landmark, model, observations, landmarks)
                for p in self.particles]

        if self.n_workers > 1:
            with mp.Pool(self.n_workers) as pool:
                new_weights = pool.map(_weigh_particle, jobs)
        else:
            new_weights = [_weigh_particle(job) for job in jobs]

        for p, w in zip(self.particles, new_weights):
            p.weight = w
        self._sync_weights()

    def resample(self):
        """
        Draw a new generation of N particles with replacement, proportional to weight.

        Copies keep their source weight until the next predict(). If no weight is
        usable the draw is uniform and `diverged` is set.
        """
        self._require_init()
        probs = _normalized(self.weights)

        if probs is not None:
            indexes = self.rng.choice(self.N, size=self.N, p=probs)
            self.diverged = False
        else:
            indexes = self.rng.integers(0, self.N, size=self.N)
            self.diverged = True
            if self.verbose:
                print("Particle filter diverged: no positive weight, resampling uniformly")

        self.particles = [self.particles[i].copy() for i in indexes]
        self._sync_weights()

    def get_best_particle(self):
        # return particle with highest weight
        self._require_init()
        idx = int(np.argmax(self.weights))
        return self.particles[idx], self.weights.copy()

    def estimate(self):
        """Weighted mean pose; the heading is averaged on the circle."""
        self._require_init()
        w = _normalized(self.weights)
        if w is None:
            w = np.full(self.N, 1.0 / self.N)

        xs = np.array([p.x for p in self.particles])
        ys = np.array([p.y for p in self.particles])
        thetas = np.array([p.theta for p in self.particles])

        x = float(np.sum(w * xs))
        y = float(np.sum(w * ys))
        theta = float(math.atan2(np.sum(w * np.sin(thetas)), np.sum(w * np.cos(thetas))))
        return x, y, theta

    def write(self, filename):
        """Append the current particle set to filename, one 'x y theta' line each."""
        self._require_init()
        write_particles(filename, self.particles)
