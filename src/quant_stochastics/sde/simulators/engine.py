# src/quant_stochastics/sde/simulators/engine.py
from __future__ import annotations

import logging
import math
import os
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, TypeVar

import numpy as np
from numpy.random import SeedSequence

from quant_stochastics.sde.errors import ConfigurationError, NumericalDomainError
from quant_stochastics.sde.integrators import (
    euler_maruyama_step,
    gaussian_increments,
    milstein_step,
    spawn_path_seeds,
    strang_splitting_step,
    time_grid,
)
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme
from quant_stochastics.sde.trajectories import Trajectories

if TYPE_CHECKING:
    from quant_stochastics.sde.process import StochasticProcess

LOGGER = logging.getLogger(__name__)

# Below this many paths the pool overhead usually outweighs the speed-up.
PARALLEL_PATH_THRESHOLD = 1000
DEFAULT_CHUNK_SIZE = 256

T = TypeVar("T")
Stepper = Callable[..., np.ndarray]


# =====================================================================
# Scheme steppers: (process, x, t, dt, dW) -> x_next
# =====================================================================


def _euler_maruyama(process, x, t, dt, dW):
    return euler_maruyama_step(x, process.drift(x, t), process.diffusion(x, t), dt, dW)


def _milstein(process, x, t, dt, dW):
    return milstein_step(
        x,
        process.drift(x, t),
        process.diffusion(x, t),
        process.diffusion_derivative(x, t),
        dt,
        dW,
    )


def _strang_splitting(process, x, t, dt, dW):
    return strang_splitting_step(process, x, t, dt, dW)


STEPPERS = {
    StochasticScheme.EULER_MARUYAMA: _euler_maruyama,
    StochasticScheme.MILSTEIN: _milstein,
    StochasticScheme.STRANG_SPLITTING: _strang_splitting,
}


# =====================================================================
# Path integration
# =====================================================================


def check_finite(block: np.ndarray, what: str) -> None:
    if not np.all(np.isfinite(block)):
        bad = int(np.sum(~np.all(np.isfinite(block), axis=1)))
        raise NumericalDomainError(
            f"{what}: {bad} path(s) left the model's domain (non-finite values)"
        )


def integrate_paths(
    process: "StochasticProcess",
    step: Stepper,
    x0: float,
    times: np.ndarray,
    dt: float,
    increments: np.ndarray,
) -> np.ndarray:
    """
    Advance a batch of paths through the grid.

    increments: shape (n_paths, n_steps), the noise driving each path
    Returns array of shape (n_paths, n_steps + 1).
    """
    n_paths, n_steps = increments.shape
    X = np.empty((n_paths, n_steps + 1), dtype=float)
    X[:, 0] = x0

    for k in range(n_steps):
        x = X[:, k]
        t = times[k]
        x_next = step(process, x, t, dt, increments[:, k])
        jump = process.jump(x, t)
        if jump is not None:
            x_next = x_next + jump
        X[:, k + 1] = x_next

    check_finite(X, type(process).__name__)
    return X


# =====================================================================
# Chunked execution
# =====================================================================


def split_chunks(n: int, chunk_size: int) -> List[slice]:
    chunk_size = max(1, int(chunk_size))
    return [slice(i, min(i + chunk_size, n)) for i in range(0, n, chunk_size)]


def map_path_chunks(
    work: Callable[[Sequence[SeedSequence]], T],
    seeds: Sequence[SeedSequence],
    parallel: bool,
    executor: Optional[ThreadPoolExecutor] = None,
    max_workers: Optional[int] = None,
) -> List[T]:
    """
    Apply ``work`` to consecutive chunks of per-path seeds, in path order.

    Serial mode runs the chunks in the calling thread. Parallel mode uses
    ``executor`` if given, otherwise a thread pool owned by this call.
    Chunk work closes over the process and grid, so only thread pools are
    accepted.
    """
    if executor is not None and not isinstance(executor, ThreadPoolExecutor):
        raise ConfigurationError(
            f"executor must be a ThreadPoolExecutor (got {type(executor).__name__}); "
            "path chunks are local closures that cannot be pickled to other processes"
        )
    n = len(seeds)
    if not parallel:
        chunks = [seeds[s] for s in split_chunks(n, DEFAULT_CHUNK_SIZE)]
        return [work(c) for c in chunks]

    if n < PARALLEL_PATH_THRESHOLD:
        LOGGER.debug(
            "parallel run with %d paths (< %d); pool overhead may dominate",
            n,
            PARALLEL_PATH_THRESHOLD,
        )

    workers = max_workers or os.cpu_count() or 1
    chunk_size = min(DEFAULT_CHUNK_SIZE, math.ceil(n / workers))
    chunks = [seeds[s] for s in split_chunks(n, chunk_size)]
    LOGGER.debug("dispatching %d chunk(s) of <= %d paths", len(chunks), chunk_size)

    if executor is not None:
        return list(executor.map(work, chunks))
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(work, chunks))


# =====================================================================
# Public entry point
# =====================================================================


def simulate(
    process: "StochasticProcess",
    config: SimulationConfig,
    executor: Optional[ThreadPoolExecutor] = None,
) -> Trajectories:
    """
    Simulate ``config.m_paths`` paths of ``process`` with the configured scheme.

    Each path draws its Wiener increments from its own stream derived from
    (config.seed, path index), so serial and parallel runs agree for a seed.
    """
    times = time_grid(config.t0, config.tn, config.n_steps)
    dt = config.dt
    step = STEPPERS[config.scheme]
    seeds = spawn_path_seeds(config.seed, config.m_paths)

    LOGGER.info(
        "Simulating %s: %d paths x %d steps, scheme=%s, parallel=%s",
        type(process).__name__,
        config.m_paths,
        config.n_steps,
        config.scheme.value,
        config.parallel,
    )

    def work(chunk: Sequence[SeedSequence]) -> np.ndarray:
        dW = gaussian_increments(chunk, config.n_steps, dt)
        return integrate_paths(process, step, config.x0, times, dt, dW)

    blocks = map_path_chunks(
        work,
        seeds,
        parallel=config.parallel,
        executor=executor,
        max_workers=config.max_workers,
    )
    return Trajectories(times=times, paths=np.vstack(blocks))
