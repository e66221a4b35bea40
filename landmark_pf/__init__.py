"""
Particle filter localization of a 2D agent against a map of known landmarks
"""

__version__ = "0.1.0"
