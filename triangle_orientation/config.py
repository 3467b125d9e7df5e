"""
Run configuration for the orientation estimator.

All angular values are in degrees. A config is frozen for the duration of a
run and handed explicitly to every stage of the pipeline.
"""
import json
from dataclasses import dataclass, asdict, fields, replace as dc_replace
from pathlib import Path

from .errors import ConfigError


@dataclass(frozen=True)
class OrientationConfig:
    epsilon: float = 1e-6                  # collision probe step
    angles_threshold: float = 0.5          # max per-angle difference of a qualified pair
    num_epsilon_insert_retries: int = 20   # probe bound
    num_buckets: int = 20                  # histogram bins for the mode search
    degeneracy_tolerance: float = 1e-9     # |cross| <= tol * longest_edge^2 -> collinear
    wrap_differences: bool = True          # wrap orientation diffs into [-180, 180)

    def _check_types(self):
        for f in fields(self):
            v = getattr(self, f.name)
            if f.type is bool:
                ok = isinstance(v, bool)
            elif f.type is int:
                ok = isinstance(v, int) and not isinstance(v, bool)
            else:
                ok = isinstance(v, (int, float)) and not isinstance(v, bool)
            if not ok:
                raise ConfigError(f"{f.name} must be {f.type.__name__}, got {v!r}")

    def validate(self):
        self._check_types()
        if not self.epsilon > 0:
            raise ConfigError(f"epsilon must be positive, got {self.epsilon}")
        if not self.angles_threshold > 0:
            raise ConfigError(f"angles_threshold must be positive, got {self.angles_threshold}")
        if self.num_epsilon_insert_retries < 1:
            raise ConfigError(f"num_epsilon_insert_retries must be >= 1, got {self.num_epsilon_insert_retries}")
        if self.num_buckets < 1:
            raise ConfigError(f"num_buckets must be >= 1, got {self.num_buckets}")
        if self.degeneracy_tolerance < 0:
            raise ConfigError(f"degeneracy_tolerance must be >= 0, got {self.degeneracy_tolerance}")
        return self

    def replace(self, **overrides):
        """Copy with the non-None overrides applied."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return dc_replace(self, **overrides).validate()

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")
        return cls(**data).validate()

    @classmethod
    def from_json(cls, path):
        try:
            data = json.loads(Path(path).read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must hold a JSON object")
        return cls.from_dict(data)


def get_default_config():
    return OrientationConfig()
