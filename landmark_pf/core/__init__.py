"""
Core particle filter localization components
"""

from .particle import Particle, Landmark, LandmarkObservation
from .errors import ParticleFilterError, FilterNotInitializedError, EmptyCandidateSetError
from .geometry import dist, transform_observations, bivariate_gaussian_pdf
from .association import landmarks_in_range, associate
from .weights import particle_weight
from .particle_filter import ParticleFilter, YAW_RATE_EPS

__all__ = [
    'Particle',
    'Landmark',
    'LandmarkObservation',
    'ParticleFilterError',
    'FilterNotInitializedError',
    'EmptyCandidateSetError',
    'dist',
    'transform_observations',
    'bivariate_gaussian_pdf',
    'landmarks_in_range',
    'associate',
    'particle_weight',
    'ParticleFilter',
    'YAW_RATE_EPS',
]
