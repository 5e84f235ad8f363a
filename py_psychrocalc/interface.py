"""Psychrometric calculator interface.

This module provides the main `Calculator` class: one session object bound to a unit
system and solver configuration. It evaluates the full moist air state from a single humidity
anchor (wet bulb, dew point or relative humidity), and delegates every individual conversion
to its `Psychrometrics` and `StandardAtmosphere` instances.

Key Classes:
    - Calculator: Session object and aggregate evaluators
"""
from dataclasses import dataclass, field
from typing import Any

from typing_extensions import Optional, Union

from py_psychrocalc.atmosphere import StandardAtmosphere
from py_psychrocalc.config import PsychroConfig, PsychroConfigDict
from py_psychrocalc.exceptions import DomainError
from py_psychrocalc.logger import logger
from py_psychrocalc.psychrometrics import Psychrometrics
from py_psychrocalc.state import PsychrometricState
from py_psychrocalc.unit import UnitSystem, resolve_unit_system


@dataclass
class Calculator:
    """Basic interface for the psychrometric calculator.

    The unit system is captured at construction. Omitting it uses PreferredUnitSystem, and
    raises ConfigError when none is configured. Calculators in different unit systems can
    coexist in one process.

    Examples:
        >>> calc = Calculator(unit_system='SI')
        >>> state = calc.psychrometrics_from_rel_hum(25.0, 0.5, 101325.0)
        >>> round(state.t_dew_point, 1)
        13.9
        >>> calc.standard_atm_pressure(0)
        101325.0
    """

    unit_system: Optional[Union[UnitSystem, str]] = field(default=None)
    config: Optional[Union[PsychroConfig, PsychroConfigDict]] = field(default=None)
    _psychrometrics: Psychrometrics = field(init=False, repr=False, compare=False)
    _atmosphere: StandardAtmosphere = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.unit_system = resolve_unit_system(self.unit_system)
        self._psychrometrics = Psychrometrics(self.unit_system, self.config)
        self._atmosphere = StandardAtmosphere(self.unit_system)
        self.config = self._psychrometrics.config
        logger.debug(f"Calculator created for {self.unit_system!r} with {self.config}")

    def __getattr__(self, item: str) -> Any:
        """Delegate attribute access to the underlying Psychrometrics instance.

        Args:
            item: The name of the attribute to retrieve.

        Returns:
            Any: The value of the attribute from `_psychrometrics`.

        Raises:
            AttributeError: If the attribute is found neither on `Calculator` nor on its
                `Psychrometrics` instance.
        """
        if item.startswith('_'):
            raise AttributeError(item)
        if hasattr(self._psychrometrics, item):
            return getattr(self._psychrometrics, item)
        raise AttributeError(
            f"'{self.__class__.__name__}' object or its underlying "
            f"'{self._psychrometrics.__class__.__name__}' has no attribute '{item}'"
        )

    @property
    def psychrometrics(self) -> Psychrometrics:
        return self._psychrometrics

    @property
    def atmosphere(self) -> StandardAtmosphere:
        return self._atmosphere

    # ---------------------------------------------------------------------
    # Standard atmosphere
    # ---------------------------------------------------------------------
    def standard_atm_pressure(self, altitude: float) -> float:
        """Standard atmosphere barometric pressure at altitude (psi or Pa)."""
        return self._atmosphere.pressure(altitude)

    def standard_atm_temperature(self, altitude: float) -> float:
        """Standard atmosphere temperature at altitude (°F or °C)."""
        return self._atmosphere.temperature(altitude)

    def sea_level_pressure(self, station_pressure: float, altitude: float, t_dry_bulb: float) -> float:
        """Sea level pressure from station pressure (psi or Pa)."""
        return self._atmosphere.sea_level_pressure(station_pressure, altitude, t_dry_bulb)

    def station_pressure(self, sea_level_pressure: float, altitude: float, t_dry_bulb: float) -> float:
        """Station pressure from sea level pressure (psi or Pa)."""
        return self._atmosphere.station_pressure(sea_level_pressure, altitude, t_dry_bulb)

    # ---------------------------------------------------------------------
    # Aggregate evaluators
    # ---------------------------------------------------------------------
    def _state_from_hum_ratio(self, t_dry_bulb: float, pressure: float, hum_ratio: float, *,
                              sat_vap_pres: Optional[float] = None,
                              vap_pres: Optional[float] = None,
                              t_wet_bulb: Optional[float] = None,
                              t_dew_point: Optional[float] = None,
                              rel_hum: Optional[float] = None) -> PsychrometricState:
        """Derive the remaining state from (t_dry_bulb, hum_ratio, pressure) and what is already known.

        Saturation vapor pressure at the dry bulb is evaluated once and shared by relative
        humidity and degree of saturation.
        """
        psy = self._psychrometrics
        if sat_vap_pres is None:
            sat_vap_pres = psy.sat_vap_pres(t_dry_bulb)
        if vap_pres is None:
            vap_pres = psy.vap_pres_from_hum_ratio(hum_ratio, pressure)
        if rel_hum is None:
            rel_hum = vap_pres / sat_vap_pres
        if t_dew_point is None:
            if hum_ratio < psy.config.cMinHumRatio:
                t_dew_point = psy.t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
            else:
                t_dew_point = psy.t_dew_point_from_vap_pres(t_dry_bulb, vap_pres)
        if t_wet_bulb is None:
            t_wet_bulb = psy.t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, t_dew_point=t_dew_point)
        sat_hum_ratio = psy.hum_ratio_from_vap_pres(sat_vap_pres, pressure)
        return PsychrometricState(
            t_dry_bulb=t_dry_bulb,
            t_wet_bulb=t_wet_bulb,
            t_dew_point=t_dew_point,
            rel_hum=rel_hum,
            hum_ratio=hum_ratio,
            vap_pres=vap_pres,
            moist_air_enthalpy=psy.moist_air_enthalpy(t_dry_bulb, hum_ratio),
            moist_air_volume=psy.moist_air_volume(t_dry_bulb, hum_ratio, pressure),
            degree_of_saturation=hum_ratio / sat_hum_ratio,
            pressure=pressure,
            unit_system=psy.unit_system,
        )

    def psychrometrics_from_t_wet_bulb(self, t_dry_bulb: float, t_wet_bulb: float,
                                       pressure: float) -> PsychrometricState:
        """Moist air state from dry bulb, wet bulb and pressure.

        Args:
            t_dry_bulb: Dry bulb temperature (°F or °C).
            t_wet_bulb: Wet bulb temperature (°F or °C), not above t_dry_bulb.
            pressure: Atmospheric pressure (psi or Pa).

        Returns:
            PsychrometricState with humidity ratio, dew point, relative humidity, vapor pressure,
            enthalpy, specific volume and degree of saturation.
        """
        hum_ratio = self._psychrometrics.hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        return self._state_from_hum_ratio(t_dry_bulb, pressure, hum_ratio, t_wet_bulb=t_wet_bulb)

    def psychrometrics_from_t_dew_point(self, t_dry_bulb: float, t_dew_point: float,
                                        pressure: float) -> PsychrometricState:
        """Moist air state from dry bulb, dew point and pressure.

        Args:
            t_dry_bulb: Dry bulb temperature (°F or °C).
            t_dew_point: Dew point temperature (°F or °C), not above t_dry_bulb.
            pressure: Atmospheric pressure (psi or Pa).

        Returns:
            PsychrometricState with humidity ratio, wet bulb, relative humidity, vapor pressure,
            enthalpy, specific volume and degree of saturation.
        """
        psy = self._psychrometrics
        if t_dew_point > t_dry_bulb:
            raise DomainError(f"Dew point temperature {t_dew_point} is above dry bulb temperature {t_dry_bulb}")
        vap_pres = psy.vap_pres_from_t_dew_point(t_dew_point)
        hum_ratio = psy.hum_ratio_from_vap_pres(vap_pres, pressure)
        return self._state_from_hum_ratio(t_dry_bulb, pressure, hum_ratio,
                                          vap_pres=vap_pres, t_dew_point=t_dew_point)

    def psychrometrics_from_rel_hum(self, t_dry_bulb: float, rel_hum: float,
                                    pressure: float) -> PsychrometricState:
        """Moist air state from dry bulb, relative humidity and pressure.

        Args:
            t_dry_bulb: Dry bulb temperature (°F or °C).
            rel_hum: Relative humidity [0-1].
            pressure: Atmospheric pressure (psi or Pa).

        Returns:
            PsychrometricState with humidity ratio, wet bulb, dew point, vapor pressure,
            enthalpy, specific volume and degree of saturation.
        """
        psy = self._psychrometrics
        if rel_hum < 0 or rel_hum > 1:
            raise DomainError(f"Relative humidity {rel_hum} is outside range [0, 1]")
        sat_vap_pres = psy.sat_vap_pres(t_dry_bulb)
        vap_pres = rel_hum * sat_vap_pres
        hum_ratio = psy.hum_ratio_from_vap_pres(vap_pres, pressure)
        return self._state_from_hum_ratio(t_dry_bulb, pressure, hum_ratio, sat_vap_pres=sat_vap_pres,
                                          vap_pres=vap_pres, rel_hum=rel_hum)


__all__ = ('Calculator',)
