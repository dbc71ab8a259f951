"""Result file version guard tests."""

import json

import numpy as np
import pytest

from bitclimb.core.constants import RESULT_FORMAT_VERSION
from bitclimb.core.results_io import META_FILENAME, load_result, save_result
from bitclimb.search.hill_climb import hill_climb


def test_result_save_load(tmp_path, default_space):
    result = hill_climb(default_space, 2, np.random.default_rng(1))

    path = save_result(tmp_path, result, default_space, {"seed": 1})
    summary = load_result(tmp_path)

    assert path.name == META_FILENAME
    assert summary["format_version"] == RESULT_FORMAT_VERSION
    assert summary["seed"] == 1
    assert summary["x_raw"] == result.x
    assert summary["x"] == default_space.round(result.x)
    assert int(summary["x_bin"], 2) == result.pattern
    assert len(summary["x_bin"]) == 14
    assert summary["space"]["l"] == 14
    assert summary["rounds"] == 2
    assert summary["history"] == result.history


def test_result_load_version_mismatch(tmp_path, default_space):
    result = hill_climb(default_space, 0, np.random.default_rng(1))
    path = save_result(tmp_path, result, default_space)

    summary = json.loads(path.read_text())
    summary["format_version"] = "0.0"
    path.write_text(json.dumps(summary))

    with pytest.raises(ValueError, match="format version mismatch"):
        load_result(tmp_path)


def test_result_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match=META_FILENAME):
        load_result(tmp_path)
