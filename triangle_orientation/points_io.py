"""
Space-delimited point files: one point per line, "x y [ignored columns]".
Blank lines and lines starting with '#' are skipped.
"""
import logging
from pathlib import Path

import numpy as np

from .errors import PointsFileError

logger = logging.getLogger(__name__)


def read_points(path):
    path = Path(path)
    try:
        lines = path.read_text().splitlines()
    except OSError as e:
        raise PointsFileError(f"Cannot read points file {path}: {e}") from e
    pts = []
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        cols = line.split()
        if len(cols) < 2:
            raise PointsFileError(f"{path}:{lineno}: expected 'x y', got {line!r}")
        try:
            pts.append((float(cols[0]), float(cols[1])))
        except ValueError as e:
            raise PointsFileError(f"{path}:{lineno}: {e}") from e
    logger.debug(f"Loaded {len(pts)} points from {path}")
    return np.array(pts, dtype=float).reshape(-1,2)

def write_points(path, pts, fmt="%.9f"):
    P = np.asarray(pts, dtype=float).reshape(-1,2)
    np.savetxt(path, P, fmt=fmt, delimiter=" ")
    return Path(path)
