# src/quant_stochastics/sde/processes/fractional.py
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess
from quant_stochastics.sde.schemas import SimulationConfig
from quant_stochastics.sde.simulators.fractional import (
    FractionalMethod,
    simulate_fractional,
    validate_hurst,
)
from quant_stochastics.sde.trajectories import Trajectories


class _FractionalProcess(StochasticProcess):
    def __init__(self, hurst: float, method: FractionalMethod):
        self.hurst = validate_hurst(hurst)
        self.method = FractionalMethod(method)

    def generate(
        self, config: SimulationConfig, executor: Optional[ThreadPoolExecutor] = None
    ) -> Trajectories:
        return simulate_fractional(
            self, config, self.method, self.hurst, executor=executor
        )


class FractionalBrownianMotion(_FractionalProcess):
    """Fractional Brownian motion B_H: Var(B_H(t) - B_H(0)) = t^(2H)."""

    def __init__(self, hurst: float, method: FractionalMethod = FractionalMethod.FFT):
        super().__init__(hurst, method)

    def drift(self, x, t):
        return 0.0

    def diffusion(self, x, t):
        return 1.0

    def parameters(self):
        return [self.hurst]


class FractionalOrnsteinUhlenbeck(_FractionalProcess):
    """
    Ornstein-Uhlenbeck process driven by fractional noise:

        dX_t = theta (mu - X_t) dt + sigma dB_H(t)
    """

    def __init__(
        self,
        mu: ParameterLike,
        sigma: ParameterLike,
        theta: ParameterLike,
        hurst: float,
        method: FractionalMethod = FractionalMethod.FFT,
    ):
        super().__init__(hurst, method)
        self.mu = as_parameter(mu)
        self.sigma = as_parameter(sigma)
        self.theta = as_parameter(theta)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.theta(t) * (self.mu(t) - x)

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def parameters(self):
        return [self.mu(0.0), self.sigma(0.0), self.theta(0.0), self.hurst]
