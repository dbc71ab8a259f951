"""Tests for configuration loading, merging and space building."""

import pytest
import yaml
from pydantic import ValidationError

from bitclimb.core.config import (
    ClimbConfig,
    SearchConfig,
    SpaceConfig,
    build_space,
    default_config,
    load_config,
    merge_config,
    save_config,
)
from bitclimb.core.types import OptimizationGoal, SpaceConfigError


def test_default_config_values():
    config = default_config()

    assert config.space.a == -4.0
    assert config.space.b == 12.0
    assert config.space.d == 0.001
    assert config.search.rounds == 50
    assert config.search.goal is OptimizationGoal.MAX

    space = build_space(config.space)
    assert space.precision.l == 14


def test_space_config_single_precision_field():
    with pytest.raises(ValidationError, match="Specify only one"):
        SpaceConfig(d=0.1, l=5)


@pytest.mark.parametrize(
    "fields,expected_l",
    [
        ({"a": 0.0, "b": 1.0, "d": 0.1}, 4),
        ({"a": 0.0, "b": 1.0, "decimal_places": 1}, 4),
        ({"a": 0.0, "b": 1.0, "l": 6}, 6),
    ],
)
def test_build_space_dispatch(fields, expected_l):
    space = build_space(SpaceConfig(**fields))
    assert space.precision.l == expected_l


def test_build_space_propagates_rule():
    with pytest.raises(SpaceConfigError) as exc:
        build_space(SpaceConfig(a=0.0, b=1.0, l=40))
    assert exc.value.rule == "bit_length_out_of_range"


def test_search_config_rejects_negative_rounds():
    with pytest.raises(ValidationError):
        SearchConfig(rounds=-1)


def test_save_load_roundtrip(tmp_path):
    config = ClimbConfig(
        space=SpaceConfig(a=-1.0, b=2.0, decimal_places=2),
        search=SearchConfig(rounds=7, seed=3, goal="min"),
    )
    path = tmp_path / "nested" / "climb.yml"

    save_config(config, path)
    loaded = load_config(path)

    assert loaded == config
    assert loaded.search.goal is OptimizationGoal.MIN


def test_load_partial_yaml(tmp_path):
    path = tmp_path / "climb.yml"
    path.write_text(yaml.safe_dump({"space": {"l": 10, "a": 0.0, "b": 5.0}}))

    config = load_config(path)

    assert config.space.l == 10
    assert config.space.d is None
    assert config.search.rounds == 50


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == default_config()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "missing.yml")


def test_merge_precision_override_replaces_step():
    """Test that overriding l drops the base config's d."""
    merged = merge_config(default_config(), {"space": {"l": 20}})

    assert merged.space.l == 20
    assert merged.space.d is None
    assert merged.space.a == -4.0


def test_merge_search_overrides():
    merged = merge_config(default_config(), {"search": {"rounds": 3, "goal": "min"}})

    assert merged.search.rounds == 3
    assert merged.search.goal is OptimizationGoal.MIN
    assert merged.space.d == 0.001
