"""Solver configuration for psychrometric sessions.

Provides:
    PsychroConfig: Dataclass configuration for the iterative solvers
    PsychroConfigDict: TypedDict version for partial configuration from dictionaries
    create_psychro_config: Merge a partial dictionary over the defaults

Configuration Constants:
    cMaxIterations: Maximum iterations for the dew point and wet bulb solvers
    cMinHumRatio: Humidity ratio floor used by the solvers
"""
from __future__ import annotations

from dataclasses import dataclass, asdict

from typing_extensions import Optional, TypedDict

from py_psychrocalc.constants import cMaxIterations, cMinHumRatio
from py_psychrocalc.unit import UnitSystemProps

__all__ = (
    'PsychroConfig',
    'PsychroConfigDict',
    'DEFAULT_PSYCHRO_CONFIG',
    'create_psychro_config',
)


@dataclass(frozen=True)
class PsychroConfig:
    """Configuration dataclass for the iterative solvers.

    Attributes:
        cMaxIterations: Maximum iterations before a solver raises ConvergenceError.
                        Defaults to 100; both solvers normally finish in 3 to 40 steps.
        cTolerance: Convergence tolerance in the session temperature scale.
                    None selects the unit system default (0.0018 °F or 0.001 °C).
        cMinHumRatio: Humidity ratio floor applied before bracketing the wet bulb
                      and inverting the dew point. Defaults to 1e-7.

    Examples:
        >>> from py_psychrocalc.unit import UnitSystem
        >>> config = PsychroConfig(cMaxIterations=50)
        >>> config.tolerance_for(UnitSystem.SI.props)
        0.001
    """

    cMaxIterations: int = cMaxIterations
    cTolerance: Optional[float] = None
    cMinHumRatio: float = cMinHumRatio

    def tolerance_for(self, props: UnitSystemProps) -> float:
        """Effective solver tolerance for the given unit system."""
        if self.cTolerance is None:
            return props.tolerance
        return self.cTolerance


#: Default configuration instance
DEFAULT_PSYCHRO_CONFIG: PsychroConfig = PsychroConfig()


class PsychroConfigDict(TypedDict, total=False):
    """TypedDict for partial solver configuration.

    Unspecified fields take their values from DEFAULT_PSYCHRO_CONFIG.

    Fields:
        - cMaxIterations: Maximum iterations for the solvers.
        - cTolerance: Convergence tolerance override.
        - cMinHumRatio: Humidity ratio floor.
    """

    cMaxIterations: Optional[int]
    cTolerance: Optional[float]
    cMinHumRatio: Optional[float]


def create_psychro_config(interface_config: Optional[PsychroConfigDict] = None) -> PsychroConfig:
    """Create PsychroConfig from optional dictionary configuration.

    Args:
        interface_config: Optional dictionary of overrides. Keys with None values are ignored.

    Returns:
        PsychroConfig with merged values.

    Raises:
        TypeError: If interface_config is not a dictionary, or holds unknown keys.
    """
    config = asdict(DEFAULT_PSYCHRO_CONFIG)
    if interface_config is not None:
        if not isinstance(interface_config, dict):
            raise TypeError("Invalid config type provided to create_psychro_config")
        for key, value in interface_config.items():
            if key not in config:
                raise TypeError(f"Unknown solver config key {key!r}")
            if value is not None:
                config[key] = value
    return PsychroConfig(**config)
