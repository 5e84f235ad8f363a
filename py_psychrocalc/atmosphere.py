"""Standard atmosphere and barometric pressure corrections.

What this module provides
- StandardAtmosphere: Standard atmosphere pressure and temperature as functions of altitude,
    and conversion between station pressure and sea level pressure, in one unit system.

Design notes
- Units: IP altitudes in ft, temperatures in °F, pressures in psi.
    SI altitudes in m, temperatures in °C, pressures in Pa.
- Validity: The barometric formula describes the troposphere only. Altitudes above it
    (36,089 ft / 11,000 m) still return a value but emit a RuntimeWarning. Pressure raises
    DomainError where the formula would reach zero.

Examples:
>>> atm = StandardAtmosphere(UnitSystem.SI)
>>> atm.pressure(0)
101325.0
"""

from __future__ import annotations

import math
import warnings

from typing_extensions import Optional, Union

from py_psychrocalc.constants import cPressureExponent
from py_psychrocalc.exceptions import DomainError
from py_psychrocalc.unit import UnitSystem, UnitSystemProps, resolve_unit_system

__all__ = ('StandardAtmosphere',)


class StandardAtmosphere:
    """Standard atmosphere model, ASHRAE Handbook - Fundamentals (2017) ch. 1 eqns. 3 and 4."""

    def __init__(self, unit_system: Optional[Union[UnitSystem, str]] = None):
        """Initialize a `StandardAtmosphere` bound to a unit system.

        Args:
            unit_system: IP or SI (enum or alias). Defaults to PreferredUnitSystem.

        Raises:
            ConfigError: If unit_system is omitted and no preferred unit system is configured.
        """
        self._props: UnitSystemProps = resolve_unit_system(unit_system).props

    def __repr__(self) -> str:
        return f"StandardAtmosphere(unit_system={self.unit_system!r})"

    @property
    def unit_system(self) -> UnitSystem:
        return self._props.unit_system

    def _check_troposphere(self, altitude: float) -> None:
        if altitude > self._props.troposphere_limit:
            warnings.warn(
                f"Altitude {altitude} is above the modeled troposphere. Standard atmosphere not valid here.",
                RuntimeWarning,
            )

    def pressure(self, altitude: float) -> float:
        """Standard atmosphere barometric pressure at altitude, ASHRAE eqn. 3.

        Args:
            altitude: Altitude above mean sea level (ft or m).

        Returns:
            Pressure (psi or Pa).

        Raises:
            DomainError: The altitude is at or above the height where the formula reaches zero
                pressure (about 145,000 ft or 44,300 m).
        """
        self._check_troposphere(altitude)
        props = self._props
        base = 1 - props.altitude_factor * altitude
        if base <= 0:
            raise DomainError(f"Altitude {altitude} is at or above the zero pressure height of the barometric formula")
        return props.standard_pressure * math.pow(base, cPressureExponent)

    def temperature(self, altitude: float) -> float:
        """Standard atmosphere temperature at altitude, ASHRAE eqn. 4 (°F or °C)."""
        self._check_troposphere(altitude)
        props = self._props
        return props.standard_temperature - props.lapse_rate * altitude

    def sea_level_pressure(self, station_pressure: float, altitude: float, t_dry_bulb: float) -> float:
        """Sea level pressure from station pressure.

        The air column between station and sea level is treated as isothermal at its mean
        temperature, which is the average of the station temperature and the lapse adjusted
        temperature at sea level. See Hess SL, Introduction to theoretical meteorology (1959), p. 92.

        Args:
            station_pressure: Observed station pressure (psi or Pa).
            altitude: Station altitude above mean sea level (ft or m).
            t_dry_bulb: Dry bulb temperature at the station (°F or °C).

        Returns:
            Sea level barometric pressure (psi or Pa).
        """
        props = self._props
        t_column = t_dry_bulb + props.column_lapse_rate * altitude / 2
        scale_height = props.scale_height_gas_constant * props.absolute(t_column) / props.gravity
        return station_pressure * math.exp(altitude / scale_height)

    def station_pressure(self, sea_level_pressure: float, altitude: float, t_dry_bulb: float) -> float:
        """Station pressure from sea level pressure, the inverse of `sea_level_pressure`."""
        return sea_level_pressure / self.sea_level_pressure(1.0, altitude, t_dry_bulb)
