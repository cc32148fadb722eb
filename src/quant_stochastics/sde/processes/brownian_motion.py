# src/quant_stochastics/sde/processes/brownian_motion.py
from __future__ import annotations

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class BrownianMotion(StochasticProcess):
    """Standard Brownian motion: dX = dW."""

    def drift(self, x, t):
        return 0.0

    def diffusion(self, x, t):
        return 1.0

    def diffusion_derivative(self, x, t):
        return 0.0


class ArithmeticBrownianMotion(StochasticProcess):
    """
    Brownian motion with drift:

        dX_t = mu dt + sigma dW_t
    """

    def __init__(self, mu: ParameterLike, sigma: ParameterLike):
        self.mu = as_parameter(mu)
        self.sigma = as_parameter(sigma)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.mu(t)

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def diffusion_derivative(self, x, t):
        return 0.0

    def parameters(self):
        return [self.mu(0.0), self.sigma(0.0)]
