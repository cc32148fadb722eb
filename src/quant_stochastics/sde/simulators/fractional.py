# src/quant_stochastics/sde/simulators/fractional.py
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np
from numpy.random import SeedSequence
from scipy.linalg import LinAlgError, cholesky, toeplitz

from quant_stochastics.sde.errors import ConfigurationError
from quant_stochastics.sde.integrators import rng_for_path, spawn_path_seeds, time_grid
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme
from quant_stochastics.sde.simulators.engine import (
    STEPPERS,
    integrate_paths,
    map_path_chunks,
)
from quant_stochastics.sde.trajectories import Trajectories

if TYPE_CHECKING:
    from quant_stochastics.sde.process import StochasticProcess

LOGGER = logging.getLogger(__name__)


class FractionalMethod(str, Enum):
    """How fractional Gaussian noise is sampled."""

    CHOLESKY = "cholesky"
    FFT = "fft"


def validate_hurst(hurst: float) -> float:
    h = float(hurst)
    if not 0.0 <= h <= 1.0:
        raise ConfigurationError(f"Hurst exponent must lie in [0, 1] (got {hurst})")
    return h


def fgn_autocovariance(n: int, hurst: float) -> np.ndarray:
    """
    Autocovariance of unit-step fractional Gaussian noise at lags 0..n-1:

        gamma(k) = 0.5 * (|k+1|^2H - 2|k|^2H + |k-1|^2H),  gamma(0) = 1

    The |k-1|^2H term is taken as 0 at k = 1 for every H, the H -> 0 limit.
    """
    k = np.arange(n, dtype=float)
    two_h = 2.0 * hurst
    gamma = 0.5 * (
        np.power(k + 1.0, two_h)
        - 2.0 * np.power(k, two_h)
        + np.where(k > 1, np.power(np.abs(k - 1.0), two_h), 0.0)
    )
    gamma[0] = 1.0
    return gamma


def _covariance_factor(cov: np.ndarray) -> np.ndarray:
    """
    Factor F with F @ F.T == cov.

    Lower Cholesky factor when cov is positive definite; for semi-definite
    cov (H = 1, or H close to it on long grids) falls back to the
    eigendecomposition, dropping eigenvalues at rounding level.
    """
    try:
        return cholesky(cov, lower=True)
    except LinAlgError:
        LOGGER.debug("covariance not positive definite, using eigendecomposition")
        w, v = np.linalg.eigh(cov)
        tol = w.max() * cov.shape[0] * np.finfo(float).eps
        w = np.where(w > tol, w, 0.0)
        return v * np.sqrt(w)


class FractionalNoiseGenerator:
    """
    Sampler of unit-step fractional Gaussian noise of fixed length.

    The Cholesky factor (exact, O(n^2) per sample) or the circulant
    eigenvalues of the Davies-Harte embedding (O(n log n) per sample) are
    computed once and shared read-only by every path.
    """

    def __init__(self, n: int, hurst: float, method: FractionalMethod):
        if n < 1:
            raise ConfigurationError(f"noise length must be >= 1 (got {n})")
        self.n = int(n)
        self.hurst = validate_hurst(hurst)
        self.method = FractionalMethod(method)

        if self.method is FractionalMethod.CHOLESKY:
            cov = toeplitz(fgn_autocovariance(self.n, self.hurst))
            self._factor = _covariance_factor(cov)
        else:
            gamma = fgn_autocovariance(self.n + 1, self.hurst)
            # first row of the 2n x 2n circulant embedding
            row = np.concatenate([gamma[: self.n + 1], gamma[self.n - 1 : 0 : -1]])
            eig = np.fft.fft(row).real
            self._sqrt_eig = np.sqrt(np.clip(eig, 0.0, None))

    def _cholesky_block(self, z: np.ndarray) -> np.ndarray:
        return z @ self._factor.T

    def _fft_block(self, z: np.ndarray) -> np.ndarray:
        n = self.n
        m = 2 * n
        w = np.empty(z.shape, dtype=np.complex128)
        w[:, 0] = self._sqrt_eig[0] * z[:, 0] / math.sqrt(m)
        w[:, n] = self._sqrt_eig[n] * z[:, n] / math.sqrt(m)
        if n > 1:
            half = self._sqrt_eig[1:n] / math.sqrt(2.0 * m)
            w[:, 1:n] = half * (z[:, 1:n] + 1j * z[:, n + 1 :])
            w[:, n + 1 :] = np.conj(w[:, 1:n][:, ::-1])
        return np.fft.fft(w, axis=1).real[:, :n]

    @property
    def draws_per_sample(self) -> int:
        return self.n if self.method is FractionalMethod.CHOLESKY else 2 * self.n

    def sample_block(self, seeds: Sequence[SeedSequence]) -> np.ndarray:
        """Noise of shape (len(seeds), n); row i is drawn from seeds[i]'s stream."""
        z = np.empty((len(seeds), self.draws_per_sample), dtype=float)
        for i, ss in enumerate(seeds):
            z[i] = rng_for_path(ss).standard_normal(self.draws_per_sample)
        if self.method is FractionalMethod.CHOLESKY:
            return self._cholesky_block(z)
        return self._fft_block(z)

    def sample(self, rng: Optional[np.random.Generator] = None) -> np.ndarray:
        rng = rng if rng is not None else np.random.default_rng()
        z = rng.standard_normal((1, self.draws_per_sample))
        if self.method is FractionalMethod.CHOLESKY:
            return self._cholesky_block(z)[0]
        return self._fft_block(z)[0]


def fgn_cholesky(
    n: int, hurst: float, rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Exact fractional Gaussian noise of length n via Cholesky factorisation."""
    return FractionalNoiseGenerator(n, hurst, FractionalMethod.CHOLESKY).sample(rng)


def fgn_fft(
    n: int, hurst: float, rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """Fractional Gaussian noise of length n via Davies-Harte circulant embedding."""
    return FractionalNoiseGenerator(n, hurst, FractionalMethod.FFT).sample(rng)


def simulate_fractional(
    process: "StochasticProcess",
    config: SimulationConfig,
    method: FractionalMethod,
    hurst: float,
    executor: Optional[ThreadPoolExecutor] = None,
) -> Trajectories:
    """
    Simulate paths driven by fractional Gaussian noise.

    Each path's noise has length n_steps, is scaled by dt^H and replaces the
    Wiener increment in the Euler-Maruyama recursion. H = 0.5 gives the
    Brownian dynamics back.
    """
    hurst = validate_hurst(hurst)
    if config.scheme is not StochasticScheme.EULER_MARUYAMA:
        LOGGER.warning(
            "scheme %s is not defined for fractional noise; using euler_maruyama",
            config.scheme.value,
        )

    times = time_grid(config.t0, config.tn, config.n_steps)
    dt = config.dt
    scale = dt**hurst
    noise = FractionalNoiseGenerator(config.n_steps, hurst, method)
    step = STEPPERS[StochasticScheme.EULER_MARUYAMA]
    seeds = spawn_path_seeds(config.seed, config.m_paths)

    LOGGER.info(
        "Simulating %s with fractional noise: H=%.3f, method=%s, %d paths x %d steps",
        type(process).__name__,
        hurst,
        noise.method.value,
        config.m_paths,
        config.n_steps,
    )

    def work(chunk: Sequence[SeedSequence]) -> np.ndarray:
        increments = noise.sample_block(chunk) * scale
        return integrate_paths(process, step, config.x0, times, dt, increments)

    blocks = map_path_chunks(
        work,
        seeds,
        parallel=config.parallel,
        executor=executor,
        max_workers=config.max_workers,
    )
    return Trajectories(times=times, paths=np.vstack(blocks))
