# src/quant_stochastics/sde/processes/ho_lee.py
from __future__ import annotations

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class HoLee(StochasticProcess):
    """
    Ho-Lee short-rate model:

        dr_t = theta(t) dt + sigma dW_t
    """

    def __init__(self, sigma: ParameterLike, theta: ParameterLike):
        self.sigma = as_parameter(sigma)
        self.theta = as_parameter(theta)
        require_non_negative(self.sigma, "sigma")
        require_non_negative(self.theta, "theta")

    def drift(self, x, t):
        return non_negative_at(self.theta, t, "theta")

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def diffusion_derivative(self, x, t):
        return 0.0

    def parameters(self):
        return [self.sigma(0.0), self.theta(0.0)]
