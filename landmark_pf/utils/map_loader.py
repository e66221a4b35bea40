"""
Landmark map file reader
"""

import os
from typing import List

from ..core.particle import Landmark


def load_map(map_path: str) -> List[Landmark]:
    """
    Load landmarks from a whitespace separated text file.

    Each non-empty line holds `x y id`; lines starting with '#' are comments.

    Args:
        map_path: Path to map file

    Returns:
        Landmarks in file order

    Raises:
        FileNotFoundError: If map file doesn't exist
        ValueError: If a line cannot be parsed
    """
    if not os.path.exists(map_path):
        raise FileNotFoundError(f"Map file not found: {map_path}")

    landmarks = []
    with open(map_path, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            fields = line.split()
            if len(fields) != 3:
                raise ValueError(f"{map_path}:{line_no}: expected 'x y id', got {line!r}")
            try:
                x, y, lm_id = float(fields[0]), float(fields[1]), int(fields[2])
            except ValueError:
                raise ValueError(f"{map_path}:{line_no}: invalid landmark {line!r}") from None
            landmarks.append(Landmark(lm_id, x, y))
    return landmarks


def save_map(map_path: str, landmarks: List[Landmark]):
    """Write landmarks in the format read by load_map"""
    with open(map_path, 'w') as f:
        for lm in landmarks:
            f.write(f"{lm.x} {lm.y} {lm.id}\n")
