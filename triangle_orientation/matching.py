
import logging

import numpy as np

from .config import OrientationConfig
from .triangles import order_clockwise
from .utils import wrap_deg

logger = logging.getLogger(__name__)


class QualifiedPairMap:
    """
    Orientation difference -> (triangle from set 1, triangle from set 2).

    Keys stay unique: a colliding difference from a different pair is moved
    to the first free key + k*epsilon (k = 1..max_retries), and dropped if
    every probed slot is taken. Iteration follows insertion order.
    """
    def __init__(self, epsilon=1e-6, max_retries=20):
        self.epsilon = epsilon
        self.max_retries = max_retries
        self._pairs = {}
        self.num_duplicates = 0
        self.num_dropped = 0

    @classmethod
    def from_config(cls, config):
        return cls(epsilon=config.epsilon, max_retries=config.num_epsilon_insert_retries)

    @staticmethod
    def _same_pair(pair, t1, t2):
        a, b = pair
        return (a is t1 and b is t2) or (a is t2 and b is t1)

    def insert(self, diff, t1, t2):
        """Store (t1, t2) under diff or a probed key; False if nothing was stored."""
        diff = float(diff)
        existing = self._pairs.get(diff)
        if existing is None:
            self._pairs[diff] = (t1, t2)
            return True
        if self._same_pair(existing, t1, t2):
            self.num_duplicates += 1
            return False
        for k in range(1, self.max_retries+1):
            key = diff + k*self.epsilon
            if key not in self._pairs:
                self._pairs[key] = (t1, t2)
                return True
        self.num_dropped += 1
        logger.debug(f"Dropped pair at diff={diff!r}: {self.max_retries} probe slots taken")
        return False

    def __getitem__(self, key):
        return self._pairs[key]

    def __contains__(self, key):
        return key in self._pairs

    def __len__(self):
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)

    def keys(self):
        return self._pairs.keys()

    def items(self):
        return self._pairs.items()


def _angle_table(triangles):
    if not triangles:
        return np.zeros((0,3)), np.zeros(0, dtype=bool)
    A = np.array([t.angles for t in triangles], dtype=float)
    deg = np.array([t.is_degenerate for t in triangles], dtype=bool)
    return A, deg

def filter_and_calculate_orientation_diff(triangles1, triangles2, config=None):
    """
    Cross-match two triangle arrays by positional angle similarity and map
    each qualified pair's orientation difference to the pair. With
    config.wrap_differences (default) the keys are wrapped into [-180, 180),
    so a rotation and its 360-complement land under the same key.
    """
    config = config or OrientationConfig()
    for t in list(triangles1) + list(triangles2):
        if not t.is_degenerate:
            order_clockwise(t)

    A2, deg2 = _angle_table(triangles2)
    thr = config.angles_threshold
    pairs = QualifiedPairMap.from_config(config)
    n_qualified = 0
    for t1 in triangles1:
        if t1.is_degenerate or A2.shape[0] == 0:
            continue
        ok = np.all(np.abs(A2 - t1.angles) < thr, axis=1) & ~deg2
        for j in np.flatnonzero(ok):
            t2 = triangles2[j]
            diff = t1.orientation_average - t2.orientation_average
            if config.wrap_differences:
                diff = float(wrap_deg(diff))
            n_qualified += 1
            pairs.insert(diff, t1, t2)

    logger.debug(f"{n_qualified} qualified pairs, {len(pairs)} stored, "
                 f"{pairs.num_duplicates} duplicates, {pairs.num_dropped} dropped")
    return pairs
