# src/quant_stochastics/sde/processes/heston.py
from __future__ import annotations

import numpy as np

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.simulators.volatility import StochasticVolatilityProcess


class Heston(StochasticVolatilityProcess):
    """
    Heston dynamics with both factors on one Brownian driver:

        dS_t = mu S_t dt + sqrt(v_t) S_t dW_t
        dv_t = kappa (theta - v_t) dt + xi sqrt(v_t) dW_t

    The variance is fully truncated (sqrt reads max(v_t, 0)).
    """

    def __init__(
        self,
        mu: ParameterLike,
        kappa: ParameterLike,
        theta: ParameterLike,
        xi: ParameterLike,
    ):
        self.mu = as_parameter(mu)
        self.kappa = as_parameter(kappa)
        self.theta = as_parameter(theta)
        self.xi = as_parameter(xi)
        require_non_negative(self.xi, "xi")

    def drift_1(self, x, y, t):
        return self.mu(t) * x

    def diffusion_1(self, x, y, t):
        return np.sqrt(np.maximum(y, 0.0)) * x

    def drift_2(self, y, t):
        return self.kappa(t) * (self.theta(t) - y)

    def diffusion_2(self, y, t):
        return non_negative_at(self.xi, t, "xi") * np.sqrt(np.maximum(y, 0.0))

    def parameters(self):
        return [self.mu(0.0), self.kappa(0.0), self.theta(0.0), self.xi(0.0)]
