
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List

from .config import OrientationConfig
from .errors import ConfigError, InsufficientDataError, NoDominantOrientationError

logger = logging.getLogger(__name__)


@dataclass
class EstimationResult:
    orientation: float
    bucket_id: int
    bucket_width: int
    support: int                     # surviving keys in the winning bucket
    num_pairs: int
    buckets: Dict[int, List[float]] = field(default_factory=dict, repr=False)
    pairs: object = field(default=None, repr=False)   # the QualifiedPairMap estimated from


def build_buckets(keys, num_buckets=20):
    """Histogram the orientation diffs; returns (bucket_width, {id: [keys]})."""
    keys = list(keys)
    if num_buckets < 1:
        raise ConfigError(f"num_buckets must be >= 1, got {num_buckets}")
    width = int(math.floor((max(keys) - min(keys)) / num_buckets))
    buckets = {}
    for key in keys:
        # width 0: the diffs are too close together to split, one bucket
        b = int(math.floor(abs(key) / width)) if width > 0 else 0
        buckets.setdefault(b, []).append(key)
    return width, buckets

def _conflict(p, q):
    return p[0] is q[0] or p[0] is q[1] or p[1] is q[0] or p[1] is q[1]

def prune_conflicts(bucket, pairs):
    """
    Greedy one-to-one filter: walking the bucket in order, drop a key whose
    triangle pair shares a triangle with any key still in the bucket.
    """
    alive = list(bucket)
    for key in list(bucket):
        p = pairs[key]
        if any(other != key and _conflict(p, pairs[other]) for other in alive):
            alive.remove(key)
    return alive

def estimate_orientation(pairs, config=None):
    config = (config or OrientationConfig()).validate()
    if len(pairs) == 0:
        raise InsufficientDataError("No qualified triangle pairs to estimate an orientation from")

    width, buckets = build_buckets(pairs.keys(), config.num_buckets)
    best_id, best = None, []
    for b in sorted(buckets):
        buckets[b] = prune_conflicts(buckets[b], pairs)
        if best_id is None or len(buckets[b]) > len(best):
            best_id, best = b, buckets[b]
    if not best:
        raise NoDominantOrientationError(
            f"Every bucket is empty after one-to-one pruning ({len(pairs)} pairs, width {width})")

    s = sorted(best)
    res = EstimationResult(orientation=s[len(s)//2], bucket_id=best_id, bucket_width=width,
                           support=len(s), num_pairs=len(pairs), buckets=buckets, pairs=pairs)
    logger.debug(f"Bucket {best_id} (width {width}) won with {len(s)} of {len(pairs)} pairs")
    return res

def calculate_most_probable_orientation(pairs, config=None):
    return estimate_orientation(pairs, config).orientation
