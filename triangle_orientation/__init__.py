"""Rotational offset between two unordered 2D point sets by triangle matching."""
from .config import OrientationConfig, get_default_config
from .errors import (TriangleOrientationError, InvalidInputError, OrientationError, InsufficientDataError,
                     NoDominantOrientationError, ConfigError, PointsFileError)
from .triangles import Point, Triangle, create_triangles, is_clockwise_polygon, order_clockwise
from .matching import QualifiedPairMap, filter_and_calculate_orientation_diff
from .estimation import EstimationResult, build_buckets, prune_conflicts, estimate_orientation, \
    calculate_most_probable_orientation
from .pipeline import estimate_pipeline

__version__ = "0.1.0"
