"""
Configuration file parser for particle filter localization parameters
"""

import yaml
import os
from typing import Dict, Any


class Config:
    """Configuration container with dot notation access"""

    def __init__(self, config_dict: Dict[str, Any]):
        for key, value in config_dict.items():
            if isinstance(value, dict):
                setattr(self, key, Config(value))
            else:
                setattr(self, key, value)

    def __repr__(self):
        return f"Config({self.__dict__})"

    def get(self, key: str, default: Any = None) -> Any:
        """Attribute lookup with a default for optional keys"""
        return getattr(self, key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config back to dictionary"""
        result = {}
        for key, value in self.__dict__.items():
            if isinstance(value, Config):
                result[key] = value.to_dict()
            else:
                result[key] = value
        return result


REQUIRED_SECTIONS = ['particle_filter', 'noise', 'sensor', 'simulation']


def load_config(config_path: str = "config.yaml") -> Config:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to configuration file

    Returns:
        Config object with dot notation access

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
        ValueError: If a required section is missing
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not isinstance(config_dict, dict):
        raise ValueError(f"Configuration file is empty or not a mapping: {config_path}")

    # Validate required sections
    for section in REQUIRED_SECTIONS:
        if section not in config_dict:
            raise ValueError(f"Missing required configuration section: {section}")

    return Config(config_dict)


def get_particle_filter_params(config: Config) -> Dict[str, Any]:
    """
    Extract ParticleFilter constructor arguments from config

    Args:
        config: Configuration object

    Returns:
        Dictionary of particle filter parameters
    """
    pf = config.particle_filter
    num_particles = pf.num_particles
    if num_particles < 1:
        raise ValueError(f"particle_filter.num_particles must be at least 1, got {num_particles}")

    return {
        'num_particles': num_particles,
        'seed': config.get('random_seed'),
        'n_workers': pf.get('n_workers', 1),
        'verbose': pf.get('verbose', False),
    }


def get_init_params(config: Config) -> Dict[str, Any]:
    """
    Initial pose estimate and its uncertainty, as ParticleFilter.init arguments
    """
    sim = config.simulation
    return {
        'x': sim.initial_x,
        'y': sim.initial_y,
        'theta': sim.initial_theta,
        'std': _std(config.noise.initial, 3, 'noise.initial'),
    }


def get_motion_params(config: Config) -> Dict[str, Any]:
    """
    Control input and process noise, as ParticleFilter.predict arguments
    """
    sim = config.simulation
    return {
        'delta_t': sim.delta_t,
        'std_pos': _std(config.noise.motion, 3, 'noise.motion'),
        'velocity': sim.velocity,
        'yaw_rate': sim.yaw_rate,
    }


def get_sensor_params(config: Config) -> Dict[str, Any]:
    """
    Sensor range and landmark measurement noise, as ParticleFilter.update_weights arguments
    """
    sensor_range = config.sensor.range
    if sensor_range < 0:
        raise ValueError(f"sensor.range must be non-negative, got {sensor_range}")
    return {
        'sensor_range': sensor_range,
        'std_landmark': _std(config.noise.landmark, 2, 'noise.landmark', strictly_positive=True),
    }


def get_simulation_params(config: Config) -> Dict[str, Any]:
    """
    Extract landmark world simulator parameters from config
    """
    sim = config.simulation
    return {
        'x': sim.initial_x,
        'y': sim.initial_y,
        'theta': sim.initial_theta,
        'sensor_range': config.sensor.range,
        'std_observation': _std(config.noise.observation, 2, 'noise.observation'),
    }


def _std(values, size, name, strictly_positive=False):
    values = [float(v) for v in values]
    if len(values) != size:
        raise ValueError(f"{name} needs {size} values, got {len(values)}")
    if strictly_positive and any(v <= 0 for v in values):
        raise ValueError(f"{name} must be positive, got {values}")
    if any(v < 0 for v in values):
        raise ValueError(f"{name} must be non-negative, got {values}")
    return values


def print_config(config: Config, indent: int = 0):
    """
    Pretty print configuration

    Args:
        config: Configuration object
        indent: Indentation level
    """
    for key, value in config.__dict__.items():
        if isinstance(value, Config):
            print("  " * indent + f"{key}:")
            print_config(value, indent + 1)
        else:
            print("  " * indent + f"{key}: {value}")
