#! /usr/bin/env python3
# -*- coding: utf-8 -*-

import math
import sys
import time
import numpy as np
import matplotlib.pyplot as plt
# particle filter components
from landmark_pf.core import ParticleFilter
# landmark world simulator
from landmark_pf.simulation import LandmarkWorldSim, generate_landmarks
# configuration, map and output
from landmark_pf.utils import (load_config, get_particle_filter_params, get_init_params,
                               get_motion_params, get_sensor_params, get_simulation_params,
                               print_config, load_map)
from landmark_pf.utils.visualization import plot_particles, plot_trajectory


def build_components(config):
    """
    Map, simulator and initialized filter for a run.

    Simulator and filter draw from one generator so their noise streams never overlap.
    """
    sim_cfg = config.simulation
    rng = np.random.default_rng(config.get('random_seed'))

    # Map: from file, or random
    if sim_cfg.get('map_file'):
        landmarks = load_map(sim_cfg.map_file)
        print(f"Loaded {len(landmarks)} landmarks from {sim_cfg.map_file}")
    else:
        landmarks = generate_landmarks(sim_cfg.num_landmarks, sim_cfg.map_width, sim_cfg.map_height, rng)
        print(f"Generated {len(landmarks)} random landmarks")

    sim = LandmarkWorldSim(landmarks, rng=rng, **get_simulation_params(config))

    pf_params = get_particle_filter_params(config)
    pf_params.pop('seed')
    pf = ParticleFilter(rng=rng, **pf_params)
    pf.init(**get_init_params(config))
    return landmarks, sim, pf


def main(config_path="config.yaml"):
    # Load configuration
    try:
        config = load_config(config_path)
        print("=== Configuration Loaded ===")
        print_config(config)
        print("=" * 30 + "\n")
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    sim_cfg = config.simulation
    landmarks, sim, pf = build_components(config)

    motion = get_motion_params(config)
    sensor = get_sensor_params(config)

    output = config.get('output')
    state_file = output.get('state_file') if output is not None else None
    vis = config.get('visualization')
    show = vis is not None and vis.enabled

    if show:
        plt.ion()
        plt.figure(figsize=(vis.figure_width, vis.figure_height))
        ax1 = plt.subplot(121)
        ax2 = plt.subplot(122)

    estimates = []
    ground_truth_poses = []
    start_time = time.time()

    for i in range(sim_cfg.steps):
        observations, coordGT = sim.command(motion['delta_t'], motion['velocity'], motion['yaw_rate'])

        # Prediction step: apply motion model
        pf.predict(**motion)
        # Update step: weigh particles with the observations
        pf.update_weights(observations=observations, landmarks=landmarks, **sensor)

        estimate = pf.estimate()
        estimates.append(estimate)
        ground_truth_poses.append(coordGT)

        pf.resample()
        if pf.diverged:
            print(f"Step {i}: filter diverged, no particle explains the observations")

        if state_file:
            pf.write(state_file)

        if show and i % vis.update_frequency == 0:
            plot_particles(ax1, pf.particles, landmarks, estimate, coordGT, sensor['sensor_range'])
            ax2.clear()
            plot_trajectory(ax2, estimates, ground_truth_poses)
            plt.draw()
            plt.pause(0.01)

    elapsed = time.time() - start_time

    if show:
        plt.ioff()
        plt.show()

    # --- tracking performance ---
    if len(estimates) > 0:
        est = np.array(estimates)
        gt = np.array(ground_truth_poses)

        pos_error = np.sqrt((est[:, 0] - gt[:, 0])**2 + (est[:, 1] - gt[:, 1])**2)
        theta_error = np.abs(np.arctan2(np.sin(est[:, 2] - gt[:, 2]), np.cos(est[:, 2] - gt[:, 2])))

        print(f"\n=== Tracking Performance ===")
        print(f"Steps: {len(estimates)} in {elapsed:.2f} s")
        print(f"Mean position error: {np.mean(pos_error):.3f} m")
        print(f"Max position error: {np.max(pos_error):.3f} m")
        print(f"Mean theta error: {math.degrees(np.mean(theta_error)):.3f}°")
        print(f"Max theta error: {math.degrees(np.max(theta_error)):.3f}°")
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
