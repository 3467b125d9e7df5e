"""Tests for OrientationConfig."""
import dataclasses
import json

import pytest

from triangle_orientation.config import OrientationConfig, get_default_config
from triangle_orientation.errors import ConfigError


def test_defaults():
    c = get_default_config()
    assert c.num_epsilon_insert_retries == 20
    assert c.num_buckets == 20
    assert c.epsilon > 0 and c.angles_threshold > 0
    assert c.wrap_differences is True


def test_frozen():
    c = OrientationConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.epsilon = 1.0


def test_replace_ignores_none():
    c = OrientationConfig().replace(epsilon=None, num_buckets=5)
    assert c.num_buckets == 5
    assert c.epsilon == OrientationConfig().epsilon


@pytest.mark.parametrize("bad", [dict(epsilon=0.0), dict(angles_threshold=-1.0),
                                 dict(num_epsilon_insert_retries=0), dict(num_buckets=0),
                                 dict(degeneracy_tolerance=-1e-3)])
def test_validate_rejects(bad):
    with pytest.raises(ConfigError):
        OrientationConfig(**bad).validate()


def test_from_json(tmp_path):
    path = tmp_path/"settings.json"
    path.write_text(json.dumps({"epsilon": 1e-4, "angles_threshold": 0.25}))
    c = OrientationConfig.from_json(path)
    assert c.epsilon == 1e-4 and c.angles_threshold == 0.25
    assert c.num_buckets == 20


def test_from_json_errors(tmp_path):
    unknown = tmp_path/"unknown.json"
    unknown.write_text(json.dumps({"firstPtsFile": "a.txt"}))
    with pytest.raises(ConfigError, match="Unknown config keys"):
        OrientationConfig.from_json(unknown)

    broken = tmp_path/"broken.json"
    broken.write_text("{not json")
    with pytest.raises(ConfigError):
        OrientationConfig.from_json(broken)

    with pytest.raises(ConfigError):
        OrientationConfig.from_json(tmp_path/"missing.json")


@pytest.mark.parametrize("bad", [{"epsilon": "abc"}, {"epsilon": None}, {"angles_threshold": True},
                                 {"num_buckets": 2.5}, {"num_epsilon_insert_retries": "20"},
                                 {"wrap_differences": 1}])
def test_from_dict_rejects_wrong_types(bad):
    with pytest.raises(ConfigError, match=next(iter(bad))):
        OrientationConfig.from_dict(bad)


def test_int_accepted_for_float_fields():
    c = OrientationConfig.from_dict({"epsilon": 1, "angles_threshold": 2})
    assert c.epsilon == 1 and c.angles_threshold == 2


def test_cli_bad_config_type_exits_nonzero(tmp_path):
    from triangle_orientation.main import main
    cfg = tmp_path/"settings.json"
    cfg.write_text(json.dumps({"epsilon": "abc"}))
    assert main(["--demo", "--points", "5", "--config", str(cfg), "--out", str(tmp_path), "--no-plots"]) == 1
