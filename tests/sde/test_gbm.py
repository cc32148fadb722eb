# tests/sde/test_gbm.py
import math

import numpy as np

from quant_stochastics.sde.integrators import gaussian_increments, spawn_path_seeds
from quant_stochastics.sde.processes.gbm import GeometricBrownianMotion
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme


def test_gbm_shapes_and_reproducibility():
    gbm = GeometricBrownianMotion(mu=0.03, sigma=0.15)
    sim = SimulationConfig(x0=100.0, tn=50 / 252, n_steps=50, m_paths=3, seed=777)

    S1 = gbm.generate(sim)
    S2 = gbm.generate(sim)
    assert S1.paths.shape == (3, 51)
    assert np.array_equal(S1.paths, S2.paths)
    assert np.all(S1.paths[:, 0] == 100.0)


def test_gbm_terminal_mean():
    gbm = GeometricBrownianMotion(mu=0.05, sigma=0.2)
    for scheme in (StochasticScheme.EULER_MARUYAMA, StochasticScheme.MILSTEIN):
        sim = SimulationConfig(
            x0=100.0, tn=1.0, n_steps=250, m_paths=2000, seed=1234, scheme=scheme
        )
        X_T = gbm.generate(sim).terminal_values
        assert abs(np.mean(X_T) - 100.0 * math.exp(0.05)) < 2.5


def test_milstein_has_smaller_strong_error_than_euler():
    mu, sigma, s0, T, n, m, seed = 0.05, 0.5, 1.0, 1.0, 50, 500, 99
    gbm = GeometricBrownianMotion(mu, sigma)

    dt = T / n
    W_T = gaussian_increments(spawn_path_seeds(seed, m), n, dt).sum(axis=1)
    exact = s0 * np.exp((mu - 0.5 * sigma**2) * T + sigma * W_T)

    errors = {}
    for scheme in (StochasticScheme.EULER_MARUYAMA, StochasticScheme.MILSTEIN):
        sim = SimulationConfig(
            x0=s0, tn=T, n_steps=n, m_paths=m, seed=seed, scheme=scheme
        )
        X_T = gbm.generate(sim).terminal_values
        errors[scheme] = float(np.mean(np.abs(X_T - exact)))

    assert errors[StochasticScheme.MILSTEIN] < errors[StochasticScheme.EULER_MARUYAMA]
