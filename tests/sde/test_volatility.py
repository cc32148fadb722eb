# tests/sde/test_volatility.py
import math

import numpy as np
import pytest

from quant_stochastics.sde.errors import ConfigurationError
from quant_stochastics.sde.integrators import gaussian_increments, spawn_path_seeds
from quant_stochastics.sde.processes.heston import Heston
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme
from quant_stochastics.sde.simulators.volatility import simulate_volatility
from quant_stochastics.sde.trajectories import VolatilityTrajectories


def _heston():
    return Heston(mu=0.05, kappa=2.0, theta=0.04, xi=0.3)


def test_heston_returns_both_factors():
    sim = SimulationConfig(x0=100.0, tn=1.0, n_steps=100, m_paths=500, seed=31)
    out = _heston().euler_maruyama(sim, y0=0.04)

    assert isinstance(out, VolatilityTrajectories)
    assert out.paths.shape == (500, 101)
    assert out.volatility_paths.shape == (500, 101)
    assert np.all(out.paths[:, 0] == 100.0)
    assert np.all(out.volatility_paths[:, 0] == 0.04)
    assert abs(np.mean(out.terminal_values) - 100.0 * math.exp(0.05)) < 5.0


def test_both_factors_share_one_wiener_increment():
    x0, y0, seed, n, m = 100.0, 0.04, 17, 10, 8
    sim = SimulationConfig(x0=x0, tn=1.0, n_steps=n, m_paths=m, seed=seed)
    out = simulate_volatility(_heston(), sim, y0)

    dW0 = gaussian_increments(spawn_path_seeds(seed, m), n, sim.dt)[:, 0]
    x1 = x0 + 0.05 * x0 * sim.dt + math.sqrt(y0) * x0 * dW0
    y1 = y0 + 2.0 * (0.04 - y0) * sim.dt + 0.3 * math.sqrt(y0) * dW0

    np.testing.assert_allclose(out.paths[:, 1], x1)
    np.testing.assert_allclose(out.volatility_paths[:, 1], y1)


def test_volatility_serial_and_parallel_agree():
    base = dict(x0=50.0, tn=0.5, n_steps=25, m_paths=300, seed=3)
    serial = _heston().euler_maruyama(SimulationConfig(**base), y0=0.09)
    parallel = _heston().euler_maruyama(
        SimulationConfig(**base, parallel=True, max_workers=3), y0=0.09
    )

    np.testing.assert_allclose(serial.paths, parallel.paths, rtol=1e-12)
    np.testing.assert_allclose(serial.volatility_paths, parallel.volatility_paths, rtol=1e-12)


def test_volatility_engine_rejects_other_schemes():
    sim = SimulationConfig(
        x0=100.0, tn=1.0, n_steps=10, m_paths=2, scheme=StochasticScheme.MILSTEIN
    )
    with pytest.raises(ConfigurationError):
        _heston().euler_maruyama(sim, y0=0.04)
