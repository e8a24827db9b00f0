"""
Exceptions raised by the BATS distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameter(ValueError):
    r"""Raised at construction when a parameter set violates a constraint."""

    def __init__(self, message: str = "Invalid distribution parameters.") -> None:
        self.message = message
        super().__init__(self.message)


class InvalidQuantileInput(ValueError):
    r"""Raised when a probability outside the open interval (0, 1) is inverted."""

    def __init__(self, p: float) -> None:
        self.p = p
        self.message = f"Probability must lie strictly inside (0, 1), got {p!r}"
        super().__init__(self.message)


class NonConvergence(RuntimeError):
    """
    Raised when the quantile search exhausts its budget.

    Parameters
    ----------
    message : str
        Human-readable description.
    iterations : int
        Number of iterations (expansions or bisection steps) performed.
    bracket : tuple[float, float]
        Last bracket held by the solver.
    """

    def __init__(self, message: str, iterations: int, bracket: tuple[float, float]) -> None:
        self.message = message
        self.iterations = iterations
        self.bracket = bracket
        super().__init__(f"{message} (iterations={iterations}, bracket={bracket})")


__all__ = ["InvalidParameter", "InvalidQuantileInput", "NonConvergence"]
