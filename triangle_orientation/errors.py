
class TriangleOrientationError(Exception):
    pass

class InvalidInputError(TriangleOrientationError, ValueError):
    """Fewer than three points handed to triangle enumeration."""

class OrientationError(TriangleOrientationError):
    """No vertex permutation of a triangle winds clockwise (zero area)."""

class InsufficientDataError(TriangleOrientationError):
    """No qualified triangle pairs to estimate from."""

class NoDominantOrientationError(TriangleOrientationError):
    """The most crowded bucket came out empty after one-to-one pruning."""

class ConfigError(TriangleOrientationError, ValueError):
    pass

class PointsFileError(TriangleOrientationError, ValueError):
    pass
