# src/quant_stochastics/sde/processes/ou.py
from __future__ import annotations

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class OrnsteinUhlenbeck(StochasticProcess):
    """
    Ornstein-Uhlenbeck / mean-reverting process:

        dX_t = theta (mu - X_t) dt + sigma dW_t

    mu: long-run mean, theta: speed of reversion.
    """

    def __init__(self, mu: ParameterLike, sigma: ParameterLike, theta: ParameterLike):
        self.mu = as_parameter(mu)
        self.sigma = as_parameter(sigma)
        self.theta = as_parameter(theta)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.theta(t) * (self.mu(t) - x)

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def diffusion_derivative(self, x, t):
        return 0.0

    def parameters(self):
        return [self.mu(0.0), self.sigma(0.0), self.theta(0.0)]
