"""Concrete process definitions: drift/diffusion formulas over ModelParameters."""

from quant_stochastics.sde.processes.brownian_motion import (
    ArithmeticBrownianMotion,
    BrownianMotion,
)
from quant_stochastics.sde.processes.cir import CoxIngersollRoss
from quant_stochastics.sde.processes.fractional import (
    FractionalBrownianMotion,
    FractionalOrnsteinUhlenbeck,
)
from quant_stochastics.sde.processes.gbm import GeometricBrownianMotion
from quant_stochastics.sde.processes.heston import Heston
from quant_stochastics.sde.processes.ho_lee import HoLee
from quant_stochastics.sde.processes.ou import OrnsteinUhlenbeck
from quant_stochastics.sde.processes.vasicek import ExtendedVasicek, Vasicek

__all__ = [
    "ArithmeticBrownianMotion",
    "BrownianMotion",
    "CoxIngersollRoss",
    "ExtendedVasicek",
    "FractionalBrownianMotion",
    "FractionalOrnsteinUhlenbeck",
    "GeometricBrownianMotion",
    "Heston",
    "HoLee",
    "OrnsteinUhlenbeck",
    "Vasicek",
]
