# src/quant_stochastics/sde/errors.py
from __future__ import annotations


class SimulationError(Exception):
    """Base class for failures raised by the simulation engine."""

    pass


class ConfigurationError(SimulationError, ValueError):
    """Raised when a process or simulation is configured with invalid values."""

    pass


class NumericalDomainError(SimulationError, ArithmeticError):
    """Raised when a run produces non-finite path values."""

    pass
