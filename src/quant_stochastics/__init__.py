"""Monte-Carlo simulation of stochastic differential equations for quant finance."""

from quant_stochastics.sde.errors import (
    ConfigurationError,
    NumericalDomainError,
    SimulationError,
)
from quant_stochastics.sde.parameters import ModelParameter
from quant_stochastics.sde.process import StochasticProcess
from quant_stochastics.sde.schemas import SimulationConfig, StochasticScheme
from quant_stochastics.sde.simulators.engine import simulate
from quant_stochastics.sde.simulators.fractional import (
    FractionalMethod,
    simulate_fractional,
)
from quant_stochastics.sde.simulators.volatility import (
    StochasticVolatilityProcess,
    simulate_volatility,
)
from quant_stochastics.sde.trajectories import Trajectories, VolatilityTrajectories

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FractionalMethod",
    "ModelParameter",
    "NumericalDomainError",
    "SimulationConfig",
    "SimulationError",
    "StochasticProcess",
    "StochasticScheme",
    "StochasticVolatilityProcess",
    "Trajectories",
    "VolatilityTrajectories",
    "simulate",
    "simulate_fractional",
    "simulate_volatility",
]
