# src/quant_stochastics/sde/process.py
from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from quant_stochastics.sde.integrators import central_difference
from quant_stochastics.sde.schemas import SimulationConfig
from quant_stochastics.sde.simulators.engine import simulate
from quant_stochastics.sde.trajectories import Trajectories


class StochasticProcess(ABC):
    """
    Base class for one-factor processes dX = a(X, t) dt + b(X, t) dW (+ jump).

    ``x`` is either a float or an array holding the current state of a batch
    of paths; implementations must be vectorised over it and must not mutate
    the process, since paths are evaluated concurrently.
    """

    @abstractmethod
    def drift(self, x: np.ndarray, t: float) -> np.ndarray:
        ...

    @abstractmethod
    def diffusion(self, x: np.ndarray, t: float) -> np.ndarray:
        ...

    def jump(self, x: np.ndarray, t: float) -> Optional[np.ndarray]:
        """Jump added to the state at each step, or None for pure diffusions."""
        return None

    def diffusion_derivative(self, x: np.ndarray, t: float) -> np.ndarray:
        """d diffusion / dx, used by the Milstein correction."""
        return central_difference(self.diffusion, x, t)

    def parameters(self) -> List[float]:
        return []

    def generate(
        self, config: SimulationConfig, executor: Optional[ThreadPoolExecutor] = None
    ) -> Trajectories:
        return simulate(self, config, executor=executor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self.parameters()))})"
