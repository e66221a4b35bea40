"""
Per-step particle state dump
"""


def write_particles(filename, particles):
    """
    Append one 'x y theta' line per particle to filename.

    Args:
        filename: output path, created if missing
        particles: iterable of objects with x, y, theta attributes
    """
    with open(filename, 'a') as f:
        for p in particles:
            f.write(f"{p.x} {p.y} {p.theta}\n")


def read_particles(filename):
    """
    Read back a dump written by write_particles.

    Returns:
        list of (x, y, theta) tuples, in file order
    """
    poses = []
    with open(filename, 'r') as f:
        for line in f:
            if not line.strip():
                continue
            x, y, theta = (float(v) for v in line.split())
            poses.append((x, y, theta))
    return poses
