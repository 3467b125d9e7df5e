
import logging

from .config import OrientationConfig
from .estimation import estimate_orientation
from .matching import filter_and_calculate_orientation_diff
from .triangles import create_triangles

logger = logging.getLogger(__name__)


def estimate_pipeline(points1, points2, config=None):
    """Rotation (deg) taking points2 onto points1, with the bucket details."""
    config = (config or OrientationConfig()).validate()
    triangles1 = create_triangles(points1, config)
    triangles2 = create_triangles(points2, config)
    logger.debug("All triangles created")

    pairs = filter_and_calculate_orientation_diff(triangles1, triangles2, config)
    logger.debug("All triangles filtered")

    res = estimate_orientation(pairs, config)
    logger.debug(f"Most probable orientation calculated: {res.orientation}")
    return res
