# src/quant_stochastics/sde/schemas.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from quant_stochastics.sde.errors import ConfigurationError


class StochasticScheme(str, Enum):
    """Discretisation scheme used to advance a path by one time step."""

    EULER_MARUYAMA = "euler_maruyama"
    MILSTEIN = "milstein"
    STRANG_SPLITTING = "strang_splitting"


class SimulationConfig(BaseModel):
    """
    Configuration for simulating a stochastic process.

    x0: initial value of the process at t0
    t0, tn: start and terminal time (t0 < tn)
    n_steps: number of time steps (paths have n_steps + 1 points)
    scheme: discretisation scheme
    m_paths: number of Monte-Carlo paths
    parallel: generate paths on a worker pool (worth it above ~1000 paths)
    seed: optional base seed; path i always gets the i-th child stream
    max_workers: worker count for the pool the engine creates itself

    Times and x0 must be finite. Any violation raises ConfigurationError at
    construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    x0: float
    t0: float = 0.0
    tn: float
    n_steps: int = Field(..., ge=1)
    scheme: StochasticScheme = StochasticScheme.EULER_MARUYAMA
    m_paths: int = Field(..., ge=1)
    parallel: bool = False
    seed: Optional[int] = Field(default=None, ge=0)
    max_workers: Optional[int] = Field(default=None, ge=1)

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid SimulationConfig: {e}") from e

    @model_validator(mode="after")
    def _check_time_order(self) -> "SimulationConfig":
        if not self.t0 < self.tn:
            raise ValueError(f"t0 must be < tn (got t0={self.t0}, tn={self.tn})")
        return self

    @property
    def dt(self) -> float:
        return (self.tn - self.t0) / self.n_steps
