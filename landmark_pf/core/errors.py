"""
Exceptions raised by the particle filter core
"""


class ParticleFilterError(RuntimeError):
    """Base class for particle filter failures"""


class FilterNotInitializedError(ParticleFilterError):
    """A cycle operation was called before init()"""


class EmptyCandidateSetError(ParticleFilterError):
    """Data association was asked to match against no landmarks"""
