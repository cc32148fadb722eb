# src/quant_stochastics/sde/processes/vasicek.py
from __future__ import annotations

from quant_stochastics.sde.parameters import (
    ParameterLike,
    as_parameter,
    non_negative_at,
    require_non_negative,
)
from quant_stochastics.sde.process import StochasticProcess


class Vasicek(StochasticProcess):
    """
    Vasicek short-rate model:

        dr_t = kappa (theta - r_t) dt + sigma dW_t
    """

    def __init__(
        self, kappa: ParameterLike, theta: ParameterLike, sigma: ParameterLike
    ):
        self.kappa = as_parameter(kappa)
        self.theta = as_parameter(theta)
        self.sigma = as_parameter(sigma)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.kappa(t) * (self.theta(t) - x)

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def diffusion_derivative(self, x, t):
        return 0.0

    def parameters(self):
        return [self.kappa(0.0), self.theta(0.0), self.sigma(0.0)]


class ExtendedVasicek(StochasticProcess):
    """
    Extended Vasicek (Hull-White form with time-dependent coefficients):

        dr_t = (theta(t) - alpha(t) r_t) dt + sigma(t) dW_t
    """

    def __init__(
        self, alpha: ParameterLike, sigma: ParameterLike, theta: ParameterLike
    ):
        self.alpha = as_parameter(alpha)
        self.sigma = as_parameter(sigma)
        self.theta = as_parameter(theta)
        require_non_negative(self.sigma, "sigma")

    def drift(self, x, t):
        return self.theta(t) - self.alpha(t) * x

    def diffusion(self, x, t):
        return non_negative_at(self.sigma, t, "sigma")

    def diffusion_derivative(self, x, t):
        return 0.0

    def parameters(self):
        return [self.alpha(0.0), self.sigma(0.0), self.theta(0.0)]
