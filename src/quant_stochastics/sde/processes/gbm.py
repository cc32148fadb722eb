# src/quant_stochastics/sde/processes/gbm.py
from __future__ import annotations

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class GeometricBrownianMotion(StochasticProcess):
    """
    Geometric Brownian Motion:

        dS_t = mu S_t dt + sigma S_t dW_t
    """

    def __init__(self, mu: ParameterLike, sigma: ParameterLike):
        self.mu = as_parameter(mu)
        self.sigma = as_parameter(sigma)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.mu(t) * x

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma") * x

    def diffusion_derivative(self, x, t):
        return self.sigma(t)

    def parameters(self):
        return [self.mu(0.0), self.sigma(0.0)]
