"""
Utility functions for configuration parsing, map loading and particle state output
"""

from .config_parser import (load_config, get_particle_filter_params, get_init_params,
                            get_motion_params, get_sensor_params, get_simulation_params,
                            print_config, Config)
from .map_loader import load_map, save_map
from .state_io import write_particles, read_particles

__all__ = [
    'load_config',
    'get_particle_filter_params',
    'get_init_params',
    'get_motion_params',
    'get_sensor_params',
    'get_simulation_params',
    'print_config',
    'Config',
    'load_map',
    'save_map',
    'write_particles',
    'read_particles',
]
