# tests/sde/test_vasicek.py
import math

import numpy as np
import pytest

from quant_stochastics.sde.processes.vasicek import ExtendedVasicek, Vasicek
from quant_stochastics.sde.schemas import SimulationConfig


def test_vasicek_shapes_and_reproducibility():
    vas = Vasicek(kappa=0.9, theta=0.03, sigma=0.01)
    sim = SimulationConfig(x0=0.02, tn=120 / 252, n_steps=120, m_paths=3, seed=2026)

    R1 = vas.generate(sim)
    R2 = vas.generate(sim)
    assert R1.paths.shape == (3, 121)
    assert np.array_equal(R1.paths, R2.paths)
    assert vas.parameters() == [0.9, 0.03, 0.01]


def test_extended_vasicek_terminal_mean():
    alpha, sigma, theta = 2.0, 2.0, 0.5
    ev = ExtendedVasicek(alpha, sigma, theta)
    sim = SimulationConfig(x0=10.0, tn=1.0, n_steps=150, m_paths=1000, seed=2023)

    X_T = ev.generate(sim).terminal_values
    expected = math.exp(-alpha) * 10.0 + (theta / alpha) * (1.0 - math.exp(-alpha))
    assert abs(np.mean(X_T) - expected) < 0.25


def test_extended_vasicek_time_dependent_sigma_checked_at_evaluation():
    ev = ExtendedVasicek(alpha=1.0, sigma=lambda t: 1.0 - t, theta=0.0)
    sim = SimulationConfig(x0=0.0, tn=2.0, n_steps=20, m_paths=2, seed=1)

    with pytest.raises(ValueError, match="sigma"):
        ev.generate(sim)
