
import numpy as np

from .utils import rotate_points

def random_points(N=12, extent=1000.0, seed=0):
    rng = np.random.default_rng(seed)
    return extent*rng.random((N,2))

def rotated_copy(pts, theta_deg, noise=0.0, shuffle=False, seed=0):
    """
    Second view of a point field: rotated about its centroid by theta_deg,
    with optional gaussian jitter (same units as the points) and a random
    reordering of the points.
    """
    rng = np.random.default_rng(seed)
    P = np.asarray(pts, dtype=float)
    Q = rotate_points(P, theta_deg, center=P.mean(axis=0))
    if noise > 0:
        Q = Q + rng.standard_normal(Q.shape)*noise
    if shuffle:
        Q = Q[rng.permutation(len(Q))]
    return Q
