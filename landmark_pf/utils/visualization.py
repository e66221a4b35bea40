"""
Matplotlib plots of the particle set and the estimated trajectory
"""

import numpy as np


def plot_particles(ax, particles, landmarks, estimate=None, ground_truth=None, sensor_range=None):
    ax.clear()
    ax.set_title('Particle Distribution')
    ax.set_xlabel('x (m)')
    ax.set_ylabel('y (m)')

    if landmarks:
        lx = [lm.x for lm in landmarks]
        ly = [lm.y for lm in landmarks]
        ax.scatter(lx, ly, c='black', marker='^', s=30, label='Landmarks')

    px = [p.x for p in particles]
    py = [p.y for p in particles]
    ax.scatter(px, py, c='blue', s=10, alpha=0.5, label='Particles')

    if estimate is not None:
        ax.plot(estimate[0], estimate[1], 'go', markersize=10, label='Estimate', markeredgecolor='black')
        # heading arrow
        ax.arrow(estimate[0], estimate[1], 3 * np.cos(estimate[2]), 3 * np.sin(estimate[2]),
                 color='green', head_width=1.0)

    if ground_truth is not None:
        ax.plot(ground_truth[0], ground_truth[1], 'ro', markersize=10, label='GT', markeredgecolor='black')
        if sensor_range:
            ax.add_patch(_range_circle(ground_truth, sensor_range))

    ax.set_aspect('equal')
    ax.legend(loc='upper right')
    ax.grid(True, alpha=0.3)


def plot_trajectory(ax, estimates, ground_truth):
    est = np.asarray(estimates)
    gt = np.asarray(ground_truth)

    ax.plot(est[:, 0], est[:, 1], 'g-', label='Estimate (x,y)', linewidth=2)
    ax.plot(gt[:, 0], gt[:, 1], 'r--', label='Ground Truth (x,y)', linewidth=1)
    ax.scatter(est[0, 0], est[0, 1], c='green', s=100, marker='o', label='Start')
    ax.scatter(est[-1, 0], est[-1, 1], c='blue', s=100, marker='*', label='End')
    ax.set_title('Trajectory')
    ax.set_xlabel('x (m)')
    ax.set_ylabel('y (m)')
    ax.set_aspect('equal')
    ax.legend()
    ax.grid(True)


def _range_circle(center, radius):
    from matplotlib.patches import Circle
    return Circle((center[0], center[1]), radius, fill=False, linestyle=':', color='red', alpha=0.5)
