# src/quant_stochastics/sde/trajectories.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd


def _frozen(a) -> np.ndarray:
    arr = np.array(a, dtype=float)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Trajectories:
    """
    Time grid and simulated paths of a process.

    times: shape (n_steps + 1,)
    paths: shape (m_paths, n_steps + 1), one row per path

    Both arrays are copied on construction and made read-only.
    """

    times: np.ndarray
    paths: np.ndarray

    def __post_init__(self):
        times = _frozen(self.times)
        paths = _frozen(self.paths)
        if times.ndim != 1 or times.size < 2:
            raise ValueError("times must be a 1D grid with at least two points")
        if paths.ndim != 2 or paths.shape[1] != times.size:
            raise ValueError(
                f"paths must have shape (m_paths, {times.size}), got {paths.shape}"
            )
        object.__setattr__(self, "times", times)
        object.__setattr__(self, "paths", paths)

    @property
    def n_paths(self) -> int:
        return int(self.paths.shape[0])

    @property
    def n_steps(self) -> int:
        return int(self.times.size - 1)

    @property
    def terminal_values(self) -> np.ndarray:
        return self.paths[:, -1]

    def to_frame(self) -> pd.DataFrame:
        """Paths as a DataFrame indexed by time, one column per path."""
        return pd.DataFrame(
            self.paths.T,
            index=pd.Index(self.times, name="t"),
            columns=[f"path_{i}" for i in range(self.n_paths)],
        )


@dataclass(frozen=True, eq=False)
class VolatilityTrajectories(Trajectories):
    """Asset paths plus the paths of the volatility factor driving them."""

    volatility_paths: np.ndarray = None

    def __post_init__(self):
        super().__post_init__()
        vol = _frozen(self.volatility_paths)
        if vol.shape != self.paths.shape:
            raise ValueError(
                f"volatility_paths must have shape {self.paths.shape}, got {vol.shape}"
            )
        object.__setattr__(self, "volatility_paths", vol)

    @property
    def terminal_volatility(self) -> np.ndarray:
        return self.volatility_paths[:, -1]
