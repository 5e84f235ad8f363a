"""Psychrometric properties of moist air and the standard atmosphere, ASHRAE 2017 ch. 1."""

import importlib.metadata

__version__ = importlib.metadata.version("py_psychrocalc")

# Standard library imports
import importlib.resources
import os
import sys

# Third-party imports
from typing_extensions import Optional, Union

# Local imports
from .logger import logger as log
from .unit import UnitSystem, PreferredUnitSystem

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pypsy.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pypsy.toml or pypsy.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pypsy_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search for the config file starting from the specified directory and moving up.

        Args:
            start_dir: The directory to start searching from. Default is the current working directory.

        Returns:
            The absolute path to the config file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            pypsy_paths = [
                os.path.join(current_dir, '.pypsy.toml'),
                os.path.join(current_dir, 'pypsy.toml'),
            ]
            for pypsy_path in pypsy_paths:
                if os.path.exists(pypsy_path):
                    return os.path.abspath(pypsy_path)

            parent_dir = os.path.dirname(current_dir)

            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pypsy_toml()) is None:
            filepath = find_pypsy_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pypsy := _config.get('pypsy'):
                if (unit_system := _pypsy.get('unit_system')) is not None:
                    PreferredUnitSystem.set(unit_system)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pypsy.unit_system` value")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pypsy` section")

    log.debug("Preferred unit system load success" if PreferredUnitSystem.unit_system is not None
              else "No unit system configured")


def _basic_config(filename: Optional[str] = None,
                  unit_system: Optional[Union[UnitSystem, str]] = None,
                  suppress_warnings: bool = False) -> None:
    """Select the preferred unit system from a file or explicit value.

    Args:
        filename: Configuration file path
        unit_system: Unit system (enum or alias)
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and unit_system are provided
    """
    if filename and unit_system is not None:
        raise ValueError("Can't use unit_system and config file at same time")
    if not filename and unit_system is not None:
        PreferredUnitSystem.set(unit_system)
    else:
        # trying to load definitions from pypsy.toml
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    """Resolve a resource path relative to the package.

    Args:
        path: Resource path relative to package

    Returns:
        Resolved path
    """
    return str(importlib.resources.files('py_psychrocalc').joinpath(path))


def _load_imperial_units() -> None:
    """Select the IP unit system."""
    _basic_config(_resolve_resource_path('assets/.pypsy-imperial.toml'), suppress_warnings=True)


def _load_metric_units() -> None:
    """Select the SI unit system."""
    _basic_config(_resolve_resource_path('assets/.pypsy-metric.toml'), suppress_warnings=True)


loadImperialUnits = _load_imperial_units
loadMetricUnits = _load_metric_units

basicConfig = _basic_config

basicConfig()


from .atmosphere import StandardAtmosphere
from .config import PsychroConfig, PsychroConfigDict, create_psychro_config, DEFAULT_PSYCHRO_CONFIG
from .exceptions import (DomainError, UnitSystemAliasError, ConfigError,
                         SolverRuntimeError, ConvergenceError)
from .interface import Calculator
from .logger import logger, enable_file_logging, disable_file_logging
from .psychrometrics import Psychrometrics
from .state import PsychrometricState
from .unit import (UnitSystemProps, IP_PROPS, SI_PROPS,
                   t_rankine_from_t_fahrenheit, t_fahrenheit_from_t_rankine,
                   t_kelvin_from_t_celsius, t_celsius_from_t_kelvin,
                   t_celsius_from_t_fahrenheit, t_fahrenheit_from_t_celsius,
                   pressure_pa_from_psi, pressure_psi_from_pa)

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip private/internal symbols
    "_load_config", "_basic_config", "_resolve_resource_path",
    "_load_imperial_units", "_load_metric_units",
    # Skip submodules bound as package attributes
    "atmosphere", "config", "constants", "exceptions", "interface", "psychrometrics",
    "solvers", "state", "unit",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
# Add the public aliases for private functions
__all__.extend(["basicConfig", "loadImperialUnits", "loadMetricUnits"])
