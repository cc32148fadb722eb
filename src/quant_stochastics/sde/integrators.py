# src/quant_stochastics/sde/integrators.py
from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np
from numpy.random import SeedSequence


def time_grid(t0: float, tn: float, n_steps: int) -> np.ndarray:
    """Evenly spaced grid of n_steps + 1 points with exact endpoints."""
    return np.linspace(t0, tn, n_steps + 1)


def spawn_path_seeds(seed: Optional[int], m_paths: int) -> List[SeedSequence]:
    """
    One independent seed sequence per path.

    Child i depends only on (seed, i), so a path draws the same numbers
    whichever worker generates it. ``seed=None`` draws fresh OS entropy.
    """
    return SeedSequence(seed).spawn(m_paths)


def rng_for_path(seed_seq: SeedSequence) -> np.random.Generator:
    return np.random.default_rng(seed_seq)


def gaussian_increments(
    seeds: Sequence[SeedSequence], n_steps: int, dt: float
) -> np.ndarray:
    """
    Return Wiener increments with variance dt, shape = (len(seeds), n_steps).
    Row i is drawn from the stream of seeds[i].
    """
    dW = np.empty((len(seeds), n_steps), dtype=float)
    scale = math.sqrt(dt)
    for i, ss in enumerate(seeds):
        dW[i] = rng_for_path(ss).standard_normal(n_steps) * scale
    return dW


def euler_maruyama_step(x, drift, diffusion, dt: float, dW):
    """
    Single Euler-Maruyama step:
    X_{t+dt} = X_t + a(X_t)*dt + b(X_t)*dW
    Here we pass precomputed drift and diffusion values for speed.
    """
    return x + drift * dt + diffusion * dW


def milstein_step(x, drift, diffusion, diff_derivative, dt: float, dW):
    """
    Single Milstein step:
    X_{t+dt} = X_t + a dt + b dW + 0.5 b b' (dW^2 - dt)
    where diff_derivative is b'(X_t)
    """
    return (
        x
        + drift * dt
        + diffusion * dW
        + 0.5 * diffusion * diff_derivative * (dW * dW - dt)
    )


def strang_splitting_step(process, x, t: float, dt: float, dW):
    """
    Single Strang splitting step: half drift flow, full diffusion, half drift.

    x_a = x + a(x, t) dt/2
    x_b = x_a + b(x_a, t) dW
    X_{t+dt} = x_b + a(x_b, t + dt/2) dt/2
    """
    half = 0.5 * dt
    x_a = x + process.drift(x, t) * half
    x_b = x_a + process.diffusion(x_a, t) * dW
    return x_b + process.drift(x_b, t + half) * half


def central_difference(fn, x, t: float, rel_step: float = 1e-6):
    """Derivative of fn(x, t) with respect to x by central differences."""
    h = rel_step * np.maximum(1.0, np.abs(x))
    return (fn(x + h, t) - fn(x - h, t)) / (2.0 * h)
