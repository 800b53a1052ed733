"""
Exception hierarchy for the psychrometric engine.

Every error is local to a single computation: there is no external resource
to retry against, so callers either fix the input or decide whether an
approximate solver result is acceptable.
"""

from typing import Optional


class PsychrometricError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(PsychrometricError, ValueError):
    """Raised when inputs are physically impossible or out of range."""


class MissingPropertyError(InvalidInputError):
    """Raised when dry bulb is absent or the alternate property is ambiguous."""


class SupersaturatedStateError(InvalidInputError):
    """Raised when a state would hold more moisture than saturated air."""

    def __init__(self, message: str, relative_humidity_pct: Optional[float] = None) -> None:
        super().__init__(message)
        self.relative_humidity_pct = relative_humidity_pct


class ConvergenceError(PsychrometricError):
    """
    Raised when an iterative solver hits its iteration cap.

    Attributes:
        solver: Name of the solver that failed
        last_estimate: Value at the final iteration
        iterations: Number of iterations performed
        residual: Remaining residual in the solver's own units
    """

    def __init__(self, solver: str, last_estimate: float, iterations: int, residual: float) -> None:
        super().__init__(
            f"{solver} did not converge after {iterations} iterations "
            f"(last estimate {last_estimate:.6g}, residual {residual:.3g})"
        )
        self.solver = solver
        self.last_estimate = last_estimate
        self.iterations = iterations
        self.residual = residual
