# src/quant_stochastics/sde/parameters.py
from __future__ import annotations

from numbers import Real
from typing import Callable, Union

ParameterLike = Union[float, int, "ModelParameter", Callable[[float], float]]


class ModelParameter:
    """
    Possibly time-dependent model coefficient.

    Wraps either a constant or a function of time so that model formulas can
    always call ``param(t)``:

        >>> ModelParameter(0.2)(5.0)
        0.2
        >>> ModelParameter(lambda t: 0.1 * t)(2.0)
        0.2
    """

    __slots__ = ("_value", "_fn")

    def __init__(self, value: ParameterLike):
        if isinstance(value, ModelParameter):
            fn, const = value._fn, value._value
        elif isinstance(value, Real) and not isinstance(value, bool):
            fn, const = None, float(value)
        elif callable(value):
            fn, const = value, None
        else:
            raise TypeError(
                f"ModelParameter expects a real number or a callable of time, "
                f"got {type(value).__name__}"
            )
        object.__setattr__(self, "_value", const)
        object.__setattr__(self, "_fn", fn)

    def __setattr__(self, name, value):
        raise AttributeError("ModelParameter is immutable")

    def __call__(self, t: float) -> float:
        if self._fn is None:
            return self._value
        return float(self._fn(t))

    @property
    def is_constant(self) -> bool:
        return self._fn is None

    def __repr__(self) -> str:
        if self._fn is None:
            return f"ModelParameter({self._value!r})"
        name = getattr(self._fn, "__name__", type(self._fn).__name__)
        return f"ModelParameter(<{name}>)"


def as_parameter(value: ParameterLike) -> ModelParameter:
    """Return ``value`` as a ModelParameter (no-op if it already is one)."""
    if isinstance(value, ModelParameter):
        return value
    return ModelParameter(value)


def require_non_negative(param: ModelParameter, name: str) -> None:
    """Reject a constant parameter that is negative at construction time."""
    if param.is_constant and param(0.0) < 0.0:
        raise ValueError(f"{name} must be non-negative (got {param(0.0)})")


def non_negative_at(param: ModelParameter, t: float, name: str) -> float:
    """Evaluate ``param`` at ``t`` and reject a negative value."""
    value = param(t)
    if value < 0.0:
        raise ValueError(f"{name} must be non-negative (got {value} at t={t})")
    return value
