# src/quant_stochastics/sde/simulators/volatility.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import numpy as np
from numpy.random import SeedSequence

from quant_stochastics.sde.errors import ConfigurationError
from quant_stochastics.sde.integrators import (
    euler_maruyama_step,
    gaussian_increments,
    spawn_path_seeds,
    time_grid,
)
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme
from quant_stochastics.sde.simulators.engine import check_finite, map_path_chunks
from quant_stochastics.sde.trajectories import VolatilityTrajectories

LOGGER = logging.getLogger(__name__)


class StochasticVolatilityProcess(ABC):
    """
    Two-factor process driven by a single Wiener increment per step:

        dX = a1(X, Y, t) dt + b1(X, Y, t) dW
        dY = a2(Y, t) dt + b2(Y, t) dW

    X is the asset factor and Y the volatility factor it reads.
    """

    @abstractmethod
    def drift_1(self, x: np.ndarray, y: np.ndarray, t: float) -> np.ndarray:
        ...

    @abstractmethod
    def diffusion_1(self, x: np.ndarray, y: np.ndarray, t: float) -> np.ndarray:
        ...

    @abstractmethod
    def drift_2(self, y: np.ndarray, t: float) -> np.ndarray:
        ...

    @abstractmethod
    def diffusion_2(self, y: np.ndarray, t: float) -> np.ndarray:
        ...

    def parameters(self) -> List[float]:
        return []

    def euler_maruyama(
        self,
        config: SimulationConfig,
        y0: float,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> VolatilityTrajectories:
        return simulate_volatility(self, config, y0, executor=executor)


def _integrate_two_factor(
    process: StochasticVolatilityProcess,
    x0: float,
    y0: float,
    times: np.ndarray,
    dt: float,
    dW: np.ndarray,
):
    n_paths, n_steps = dW.shape
    X = np.empty((n_paths, n_steps + 1), dtype=float)
    Y = np.empty((n_paths, n_steps + 1), dtype=float)
    X[:, 0] = x0
    Y[:, 0] = y0

    for k in range(n_steps):
        x, y, t = X[:, k], Y[:, k], times[k]
        X[:, k + 1] = euler_maruyama_step(
            x, process.drift_1(x, y, t), process.diffusion_1(x, y, t), dt, dW[:, k]
        )
        Y[:, k + 1] = euler_maruyama_step(
            y, process.drift_2(y, t), process.diffusion_2(y, t), dt, dW[:, k]
        )

    check_finite(X, f"{type(process).__name__} asset factor")
    check_finite(Y, f"{type(process).__name__} volatility factor")
    return X, Y


def simulate_volatility(
    process: StochasticVolatilityProcess,
    config: SimulationConfig,
    y0: float,
    executor: Optional[ThreadPoolExecutor] = None,
) -> VolatilityTrajectories:
    """
    Euler-Maruyama simulation of a two-factor process.

    config.x0 is the asset's initial value, y0 the volatility factor's.
    Returns both factors' paths on the shared grid.
    """
    if config.scheme is not StochasticScheme.EULER_MARUYAMA:
        raise ConfigurationError(
            f"stochastic volatility processes support euler_maruyama only "
            f"(got {config.scheme.value})"
        )

    times = time_grid(config.t0, config.tn, config.n_steps)
    dt = config.dt
    seeds = spawn_path_seeds(config.seed, config.m_paths)

    LOGGER.info(
        "Simulating %s: %d paths x %d steps, parallel=%s",
        type(process).__name__,
        config.m_paths,
        config.n_steps,
        config.parallel,
    )

    def work(chunk: Sequence[SeedSequence]):
        dW = gaussian_increments(chunk, config.n_steps, dt)
        return _integrate_two_factor(process, config.x0, y0, times, dt, dW)

    blocks = map_path_chunks(
        work,
        seeds,
        parallel=config.parallel,
        executor=executor,
        max_workers=config.max_workers,
    )
    return VolatilityTrajectories(
        times=times,
        paths=np.vstack([b[0] for b in blocks]),
        volatility_paths=np.vstack([b[1] for b in blocks]),
    )
