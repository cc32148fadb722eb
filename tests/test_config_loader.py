from __future__ import annotations

from pathlib import Path
import json

import pytest

from quant_stochastics.config.loader import load_simulation_config
from quant_stochastics.sde.errors import ConfigurationError
from quant_stochastics.sde.processes.ho_lee import HoLee
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme


def test_load_config_yaml(tmp_path: Path):
    cfg_path = tmp_path / "sim.yaml"
    cfg_path.write_text(
        """
x0: 10.0
t0: 0.0
tn: 1.0
n_steps: 125
scheme: strang_splitting
m_paths: 1000
parallel: true
seed: 2024
"""
    )
    cfg = load_simulation_config(cfg_path)
    assert isinstance(cfg, SimulationConfig)
    assert cfg.x0 == 10.0
    assert cfg.n_steps == 125
    assert cfg.scheme is StochasticScheme.STRANG_SPLITTING
    assert cfg.parallel is True
    assert cfg.seed == 2024
    assert cfg.dt == pytest.approx(0.008)


def test_load_config_json(tmp_path: Path):
    cfg_path = tmp_path / "sim.json"
    data = {"x0": 10.0, "tn": 1.0, "n_steps": 20, "m_paths": 4, "seed": 1}
    cfg_path.write_text(json.dumps(data))
    cfg = load_simulation_config(cfg_path)
    assert cfg.t0 == 0.0
    assert cfg.scheme is StochasticScheme.EULER_MARUYAMA
    assert cfg.seed == 1

    out = HoLee(sigma=1.6, theta=2.0).generate(cfg)
    assert out.paths.shape == (4, 21)


def test_load_config_rejects_bad_files(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_simulation_config(tmp_path / "missing.yaml")

    txt = tmp_path / "sim.txt"
    txt.write_text("x0: 1.0")
    with pytest.raises(ValueError, match="YAML or JSON"):
        load_simulation_config(txt)

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ValueError, match="Failed to parse"):
        load_simulation_config(broken)

    reversed_times = tmp_path / "reversed.yaml"
    reversed_times.write_text("x0: 1.0\nt0: 2.0\ntn: 1.0\nn_steps: 5\nm_paths: 1\n")
    with pytest.raises(ValueError, match="Invalid SimulationConfig"):
        load_simulation_config(reversed_times)

    extra = tmp_path / "extra.json"
    extra.write_text(json.dumps({"x0": 1.0, "tn": 1.0, "n_steps": 5, "m_paths": 1, "foo": 1}))
    with pytest.raises(ValueError, match="Invalid SimulationConfig"):
        load_simulation_config(extra)


def test_load_config_rejects_infinite_horizon(tmp_path: Path):
    cfg_path = tmp_path / "inf.yaml"
    cfg_path.write_text("x0: 1.0\nt0: 0.0\ntn: .inf\nn_steps: 5\nm_paths: 1\n")
    with pytest.raises(ConfigurationError, match="Invalid SimulationConfig"):
        load_simulation_config(cfg_path)
