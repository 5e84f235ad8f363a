"""Bounded root finders used to invert the saturation formulas.

Both solvers work on a closed search domain and carry an explicit iteration budget. When the
budget runs out they raise [`ConvergenceError`][py_psychrocalc.exceptions.ConvergenceError]
instead of returning a partial estimate.

Functions:
    newton_raphson: Newton-Raphson with a one-sided finite difference derivative. The probe
        point is taken towards the middle of the domain so it never leaves the domain, and
        every estimate is clamped to the domain.
    bisect_increasing: Bisection for a non-decreasing function. Derivative free and guaranteed
        to converge, used where the function has branch switches.
"""
from __future__ import annotations

from typing_extensions import Callable, Tuple

from py_psychrocalc.exceptions import ConvergenceError
from py_psychrocalc.logger import logger

__all__ = (
    'newton_raphson',
    'bisect_increasing',
)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def newton_raphson(func: Callable[[float], float],
                   initial_guess: float,
                   bounds: Tuple[float, float],
                   step: float,
                   tolerance: float,
                   max_iterations: int) -> float:
    """Find the root of `func` within `bounds`.

    Args:
        func: Residual function; its root is returned.
        initial_guess: Starting estimate, clamped into bounds.
        bounds: (low, high) search domain. func must be defined everywhere inside it.
        step: Finite difference step for the derivative estimate (positive).
        tolerance: Stop when successive estimates differ by no more than this.
        max_iterations: Iteration budget.

    Returns:
        Root estimate within bounds.

    Raises:
        ConvergenceError: Budget exhausted, or the derivative vanished.
    """
    low, high = bounds
    midpoint = (low + high) / 2
    estimate = _clamp(initial_guess, low, high)

    for iterations_count in range(1, max_iterations + 1):
        previous = estimate
        residual = func(previous)

        # Probe towards the middle of the domain
        h = step if previous < midpoint else -step
        slope = (func(previous + h) - residual) / h
        if slope == 0.0:
            raise ConvergenceError(previous, iterations_count, ConvergenceError.ZERO_DERIVATIVE)

        estimate = _clamp(previous - residual / slope, low, high)
        if abs(estimate - previous) <= tolerance:
            logger.debug(f"newton_raphson converged to {estimate} after {iterations_count} iterations")
            return estimate

    raise ConvergenceError(estimate, max_iterations, ConvergenceError.MAX_ITERATIONS_REACHED)


def bisect_increasing(func: Callable[[float], float],
                      target: float,
                      bounds: Tuple[float, float],
                      tolerance: float,
                      max_iterations: int) -> float:
    """Find x in `bounds` where non-decreasing `func` crosses `target`.

    The lower bound is raised while func(x) is below the target and the upper bound is lowered
    otherwise, until the bracket is narrower than the tolerance. If the target lies outside
    [func(low), func(high)] the result converges to the nearer bound.

    Args:
        func: Non-decreasing function.
        target: Value to match.
        bounds: (low, high) bracket.
        tolerance: Final bracket width.
        max_iterations: Iteration budget.

    Returns:
        Midpoint of the final bracket.

    Raises:
        ConvergenceError: Budget exhausted before the bracket became narrow enough.
    """
    low, high = bounds
    estimate = (low + high) / 2
    iterations_count = 0

    while (high - low) > tolerance:
        if iterations_count >= max_iterations:
            raise ConvergenceError(estimate, iterations_count, ConvergenceError.MAX_ITERATIONS_REACHED)
        if func(estimate) < target:
            low = estimate
        else:
            high = estimate
        estimate = (low + high) / 2
        iterations_count += 1

    logger.debug(f"bisect_increasing converged to {estimate} after {iterations_count} iterations")
    return estimate
