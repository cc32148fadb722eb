# src/quant_stochastics/sde/processes/cir.py
from __future__ import annotations

import numpy as np

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class CoxIngersollRoss(StochasticProcess):
    """
    Cox-Ingersoll-Ross short-rate model:

        dr_t = theta (mu - r_t) dt + sigma sqrt(r_t) dW_t

    mu: long-run mean, theta: speed of reversion. With ``full_truncation``
    the square root reads max(r_t, 0); otherwise a negative state yields
    NaN and the run fails.
    """

    def __init__(
        self,
        mu: ParameterLike,
        sigma: ParameterLike,
        theta: ParameterLike,
        full_truncation: bool = False,
    ):
        self.mu = as_parameter(mu)
        self.sigma = as_parameter(sigma)
        self.theta = as_parameter(theta)
        self.full_truncation = full_truncation
        require_non_negative(self.sigma, "sigma")

    def _root(self, x):
        x = np.asarray(x, dtype=float)
        return np.sqrt(np.maximum(x, 0.0)) if self.full_truncation else np.sqrt(x)

    def drift(self, x, t):
        return self.theta(t) * (self.mu(t) - x)

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma") * self._root(x)

    def diffusion_derivative(self, x, t):
        root = self._root(x)
        out = np.zeros_like(root)
        return np.divide(0.5 * self.sigma(t), root, out=out, where=root > 0.0)

    def parameters(self):
        return [self.mu(0.0), self.sigma(0.0), self.theta(0.0)]
