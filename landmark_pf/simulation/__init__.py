"""
Landmark world simulator driving the filter
"""

from .landmark_sim import LandmarkWorldSim, generate_landmarks

__all__ = ['LandmarkWorldSim', 'generate_landmarks']
