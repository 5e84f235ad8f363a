"""py_psychrocalc exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── ValueError
│   ├── DomainError
│   └── UnitSystemAliasError
└── RuntimeError
    ├── ConfigError
    └── SolverRuntimeError
        └── ConvergenceError

Exception Types
---------------

- DomainError: An input violates a physical precondition: relative humidity outside [0, 1],
  negative humidity ratio or vapor pressure, dew point or wet bulb above dry bulb,
  temperature outside the validity range of the saturation formula, specific humidity
  outside [0, 1), or a vapor pressure that no dew point can produce.
  Raised before any computation proceeds.

- UnitSystemAliasError: A string could not be resolved to a unit system.

- ConfigError: No unit system was selected, neither explicitly nor through configuration.

- SolverRuntimeError: Base class for iterative solver failures. Not raised directly.

- ConvergenceError: An iterative solver exceeded its iteration budget. Contains:
  - last_estimate: Last root estimate before giving up
  - iterations_count: Number of iterations performed
  - reason: Specific reason for failure
"""

__all__ = (
    'DomainError',
    'UnitSystemAliasError',
    'ConfigError',
    'SolverRuntimeError',
    'ConvergenceError',
)


class DomainError(ValueError):
    """Input outside the physical domain of a formula."""


class UnitSystemAliasError(ValueError):
    """Unit system alias error."""


class ConfigError(RuntimeError):
    """Unit system has not been configured."""


class SolverRuntimeError(RuntimeError):
    """Solver error."""


class ConvergenceError(SolverRuntimeError):
    """Exception for iterative solvers that do not converge within their iteration budget.

    Contains:
    - Last root estimate
    - Iteration count
    - Failure reason
    """

    MAX_ITERATIONS_REACHED = "Maximum iterations reached"
    ZERO_DERIVATIVE = "Zero derivative"

    def __init__(self,
                 last_estimate: float,
                 iterations_count: int,
                 reason: str = ""):
        """
        Parameters:
        - last_estimate: The last computed root estimate
        - iterations_count: The number of iterations performed
        - reason: The failure reason
        """
        self.last_estimate: float = last_estimate
        self.iterations_count: int = iterations_count
        self.reason: str = reason
        msg = f'Last estimate {last_estimate} after {iterations_count} iterations.'
        if reason:
            msg = f"{reason}. " + msg
        super().__init__(msg)
