"""Psychrometric property conversions for moist air.

What this module provides
- Psychrometrics: A session bound to one unit system that converts between the state
    variables of moist air: dry bulb, wet bulb and dew point temperatures, relative humidity,
    humidity ratio, specific humidity, vapor pressure, enthalpy, specific volume and density.

Formulas follow ASHRAE Handbook - Fundamentals (2017) ch. 1; equation numbers below refer to it.

Design notes
- Units: All inputs and outputs are plain floats in the session unit system:
    IP: °F, psi, lb_H2O/lb_da, Btu/lb_da, ft³/lb_da.
    SI: °C, Pa, kg_H2O/kg_da, J/kg_da, m³/kg_da.
- Validation: Every public method checks its physical preconditions first and raises
    DomainError on violation. Nothing is computed from invalid input.
- Solvers: Dew point is found by Newton-Raphson on ln(Pws), wet bulb by bisection between
    dew point and dry bulb. Both raise ConvergenceError when their iteration budget runs out.

Examples:
>>> psy = Psychrometrics(UnitSystem.SI)
>>> round(psy.t_dew_point_from_rel_hum(25.0, 0.8), 2)
21.31
"""

from __future__ import annotations

import math

from typing_extensions import Optional, Union

from py_psychrocalc.config import PsychroConfig, PsychroConfigDict, create_psychro_config
from py_psychrocalc.constants import cMolarMassRatio, cVolumeHumidityFactor
from py_psychrocalc.exceptions import ConvergenceError, DomainError
from py_psychrocalc.logger import logger
from py_psychrocalc.solvers import bisect_increasing, newton_raphson
from py_psychrocalc.unit import UnitSystem, UnitSystemProps, resolve_unit_system

__all__ = ('Psychrometrics',)


def _as_config(config: Optional[Union[PsychroConfig, PsychroConfigDict]]) -> PsychroConfig:
    if isinstance(config, PsychroConfig):
        return config
    return create_psychro_config(config)


class Psychrometrics:  # pylint: disable=too-many-public-methods
    """Moist air property conversions in one unit system.

    Attributes:
        unit_system (UnitSystem): Unit system of every input and output.
        props (UnitSystemProps): Constants of the unit system.
        config (PsychroConfig): Solver configuration.
    """

    def __init__(self,
                 unit_system: Optional[Union[UnitSystem, str]] = None,
                 config: Optional[Union[PsychroConfig, PsychroConfigDict]] = None):
        """Initialize a `Psychrometrics` session.

        Args:
            unit_system: IP or SI (enum or alias). Defaults to PreferredUnitSystem.
            config: Solver configuration, as PsychroConfig or partial PsychroConfigDict.

        Raises:
            ConfigError: If unit_system is omitted and no preferred unit system is configured.
        """
        self._props: UnitSystemProps = resolve_unit_system(unit_system).props
        self._config: PsychroConfig = _as_config(config)
        self._tolerance: float = self._config.tolerance_for(self._props)

    def __repr__(self) -> str:
        return f"Psychrometrics(unit_system={self.unit_system!r}, config={self._config})"

    @property
    def unit_system(self) -> UnitSystem:
        return self._props.unit_system

    @property
    def props(self) -> UnitSystemProps:
        return self._props

    @property
    def config(self) -> PsychroConfig:
        return self._config

    @property
    def tolerance(self) -> float:
        """Solver convergence tolerance in the session temperature scale."""
        return self._tolerance

    # ---------------------------------------------------------------------
    # Validation helpers
    # ---------------------------------------------------------------------
    @staticmethod
    def _check_rel_hum(rel_hum: float) -> None:
        if rel_hum < 0 or rel_hum > 1:
            raise DomainError(f"Relative humidity {rel_hum} is outside range [0, 1]")

    @staticmethod
    def _check_hum_ratio(hum_ratio: float) -> None:
        if hum_ratio < 0:
            raise DomainError(f"Humidity ratio {hum_ratio} cannot be negative")

    @staticmethod
    def _check_vap_pres(vap_pres: float) -> None:
        if vap_pres < 0:
            raise DomainError(f"Partial pressure of water vapor {vap_pres} cannot be negative")

    @staticmethod
    def _check_pressure(pressure: float) -> None:
        if pressure <= 0:
            raise DomainError(f"Atmospheric pressure {pressure} must be positive")

    @staticmethod
    def _check_not_above_dry_bulb(name: str, t: float, t_dry_bulb: float) -> None:
        if t > t_dry_bulb:
            raise DomainError(f"{name} temperature {t} is above dry bulb temperature {t_dry_bulb}")

    def _check_temperature(self, t: float) -> None:
        if not self._props.in_bounds(t):
            low, high = self._props.temperature_bounds
            sym = self._props.temperature_symbol
            raise DomainError(f"Temperature {t}{sym} is outside range [{low}, {high}]{sym}")

    # ---------------------------------------------------------------------
    # Saturation model
    # ---------------------------------------------------------------------
    def sat_vap_pres(self, t_dry_bulb: float) -> float:
        """Saturation vapor pressure over liquid water or ice, ASHRAE eqns. 5 and 6.

        Ice regressions apply below the freezing point, liquid water at and above it. In SI the
        two branches are joined by a small ln(Pws) offset so the function is continuous at 0 °C.

        Args:
            t_dry_bulb: Dry bulb temperature, within [-148, 392] °F or [-100, 200] °C.

        Returns:
            Saturation vapor pressure (psi or Pa).
        """
        self._check_temperature(t_dry_bulb)
        return math.exp(self._props.ln_sat_vap_pres(t_dry_bulb))

    def sat_hum_ratio(self, t_dry_bulb: float, pressure: float) -> float:
        """Humidity ratio of saturated air, ASHRAE eqn. 23."""
        return self.hum_ratio_from_vap_pres(self.sat_vap_pres(t_dry_bulb), pressure)

    def sat_air_enthalpy(self, t_dry_bulb: float, pressure: float) -> float:
        """Moist air enthalpy at saturation (Btu/lb or J/kg)."""
        return self.moist_air_enthalpy(t_dry_bulb, self.sat_hum_ratio(t_dry_bulb, pressure))

    # ---------------------------------------------------------------------
    # Relative humidity and vapor pressure
    # ---------------------------------------------------------------------
    def vap_pres_from_rel_hum(self, t_dry_bulb: float, rel_hum: float) -> float:
        """Partial pressure of water vapor, ASHRAE eqn. 12."""
        self._check_rel_hum(rel_hum)
        return rel_hum * self.sat_vap_pres(t_dry_bulb)

    def rel_hum_from_vap_pres(self, t_dry_bulb: float, vap_pres: float) -> float:
        """Relative humidity [0-1], ASHRAE eqn. 12."""
        self._check_vap_pres(vap_pres)
        return vap_pres / self.sat_vap_pres(t_dry_bulb)

    def rel_hum_from_t_dew_point(self, t_dry_bulb: float, t_dew_point: float) -> float:
        """Relative humidity [0-1] from dew point, ASHRAE eqn. 37."""
        self._check_not_above_dry_bulb("Dew point", t_dew_point, t_dry_bulb)
        return self.sat_vap_pres(t_dew_point) / self.sat_vap_pres(t_dry_bulb)

    def vap_pres_from_t_dew_point(self, t_dew_point: float) -> float:
        """Partial pressure of water vapor as the saturation pressure at dew point, ASHRAE eqn. 36."""
        return self.sat_vap_pres(t_dew_point)

    def rel_hum_from_t_wet_bulb(self, t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
        """Relative humidity [0-1] from wet bulb temperature."""
        hum_ratio = self.hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        return self.rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    # ---------------------------------------------------------------------
    # Dew point
    # ---------------------------------------------------------------------
    def t_dew_point_from_vap_pres(self, t_dry_bulb: float, vap_pres: float) -> float:
        """Dew point temperature from partial pressure of water vapor, ASHRAE eqns. 5 and 6 inverted.

        No closed form inverse exists, so ln(Pws(T)) - ln(Pw) is solved with Newton-Raphson,
        starting from the dry bulb temperature. The result never exceeds the dry bulb
        temperature.

        Args:
            t_dry_bulb: Dry bulb temperature.
            vap_pres: Partial pressure of water vapor (psi or Pa).

        Returns:
            Dew point temperature (°F or °C).

        Raises:
            DomainError: t_dry_bulb is outside the saturation formula range, or vap_pres is
                outside the range that formula can produce.
            ConvergenceError: Neither Newton-Raphson nor the bisection fallback converged.
        """
        self._check_temperature(t_dry_bulb)
        self._check_vap_pres(vap_pres)
        low, high = bounds = self._props.temperature_bounds
        if vap_pres < self.sat_vap_pres(low) or vap_pres > self.sat_vap_pres(high):
            raise DomainError(f"Partial pressure of water vapor {vap_pres}{self._props.pressure_symbol} "
                              "is outside range of validity of equations")

        ln_vap_pres = math.log(vap_pres)
        ln_sat_vap_pres = self._props.ln_sat_vap_pres

        try:
            t_dew_point = newton_raphson(
                lambda t: ln_sat_vap_pres(t) - ln_vap_pres,
                t_dry_bulb, bounds, self._props.dew_point_step,
                self._tolerance, self._config.cMaxIterations,
            )
        except ConvergenceError as e:
            logger.warning(f"Newton-Raphson dew point search failed: {e} Falling back to bisection.")
            t_dew_point = bisect_increasing(ln_sat_vap_pres, ln_vap_pres, bounds,
                                            self._tolerance, self._config.cMaxIterations)

        return min(t_dew_point, t_dry_bulb)

    def t_dew_point_from_rel_hum(self, t_dry_bulb: float, rel_hum: float) -> float:
        """Dew point temperature from relative humidity."""
        vap_pres = self.vap_pres_from_rel_hum(t_dry_bulb, rel_hum)
        return self.t_dew_point_from_vap_pres(t_dry_bulb, vap_pres)

    def t_dew_point_from_hum_ratio(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Dew point temperature from humidity ratio.

        The humidity ratio is floored at `config.cMinHumRatio` since perfectly dry air has no dew point.
        """
        self._check_hum_ratio(hum_ratio)
        bounded_hum_ratio = max(hum_ratio, self._config.cMinHumRatio)
        vap_pres = self.vap_pres_from_hum_ratio(bounded_hum_ratio, pressure)
        return self.t_dew_point_from_vap_pres(t_dry_bulb, vap_pres)

    def t_dew_point_from_t_wet_bulb(self, t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
        """Dew point temperature from wet bulb temperature."""
        hum_ratio = self.hum_ratio_from_t_wet_bulb(t_dry_bulb, t_wet_bulb, pressure)
        return self.t_dew_point_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    # ---------------------------------------------------------------------
    # Wet bulb
    # ---------------------------------------------------------------------
    def hum_ratio_from_t_wet_bulb(self, t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
        """Humidity ratio from wet bulb temperature, ASHRAE eqns. 33 and 35.

        Args:
            t_dry_bulb: Dry bulb temperature.
            t_wet_bulb: Wet bulb temperature, not above t_dry_bulb.
            pressure: Atmospheric pressure.

        Returns:
            Humidity ratio, floored at `config.cMinHumRatio`.
        """
        self._check_not_above_dry_bulb("Wet bulb", t_wet_bulb, t_dry_bulb)
        self._check_pressure(pressure)
        hum_ratio = self._psychrometer_hum_ratio(t_dry_bulb, t_wet_bulb, pressure)
        return max(hum_ratio, self._config.cMinHumRatio)

    def _psychrometer_hum_ratio(self, t_dry_bulb: float, t_wet_bulb: float, pressure: float) -> float:
        # Unbounded below, so it stays strictly increasing in t_wet_bulb
        props = self._props
        ws_star = self.sat_hum_ratio(t_wet_bulb, pressure)
        a, b, c = props.wet_bulb_coefficients(t_wet_bulb)
        return (((a - b * t_wet_bulb) * ws_star - props.specific_heat_dry_air * (t_dry_bulb - t_wet_bulb))
                / (a + props.specific_heat_vapor * t_dry_bulb - c * t_wet_bulb))

    def t_wet_bulb_from_hum_ratio(self, t_dry_bulb: float, hum_ratio: float, pressure: float, *,
                                  t_dew_point: Optional[float] = None) -> float:
        """Wet bulb temperature from humidity ratio.

        Bisection between dew point and dry bulb: the wet bulb to humidity ratio mapping
        switches formulas at the freezing point, so a derivative free method is used.

        Args:
            t_dry_bulb: Dry bulb temperature.
            hum_ratio: Humidity ratio.
            pressure: Atmospheric pressure.
            t_dew_point: Dew point of this state, when already known. Skips its inversion.

        Raises:
            DomainError: Negative humidity ratio.
            ConvergenceError: Iteration budget exhausted.
        """
        self._check_hum_ratio(hum_ratio)
        self._check_pressure(pressure)
        bounded_hum_ratio = max(hum_ratio, self._config.cMinHumRatio)
        if t_dew_point is None:
            t_dew_point = self.t_dew_point_from_hum_ratio(t_dry_bulb, bounded_hum_ratio, pressure)
        else:
            self._check_not_above_dry_bulb("Dew point", t_dew_point, t_dry_bulb)
        return bisect_increasing(
            lambda t: self._psychrometer_hum_ratio(t_dry_bulb, t, pressure),
            bounded_hum_ratio, (t_dew_point, t_dry_bulb),
            self._tolerance, self._config.cMaxIterations,
        )

    def t_wet_bulb_from_t_dew_point(self, t_dry_bulb: float, t_dew_point: float, pressure: float) -> float:
        """Wet bulb temperature from dew point temperature."""
        self._check_not_above_dry_bulb("Dew point", t_dew_point, t_dry_bulb)
        hum_ratio = self.hum_ratio_from_t_dew_point(t_dew_point, pressure)
        return self.t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure, t_dew_point=t_dew_point)

    def t_wet_bulb_from_rel_hum(self, t_dry_bulb: float, rel_hum: float, pressure: float) -> float:
        """Wet bulb temperature from relative humidity."""
        hum_ratio = self.hum_ratio_from_rel_hum(t_dry_bulb, rel_hum, pressure)
        return self.t_wet_bulb_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)

    # ---------------------------------------------------------------------
    # Humidity ratio
    # ---------------------------------------------------------------------
    def hum_ratio_from_vap_pres(self, vap_pres: float, pressure: float) -> float:
        """Humidity ratio from partial pressure of water vapor, ASHRAE eqn. 20.

        Raises:
            DomainError: Negative vapor pressure, non-positive pressure, or vapor pressure not
                below the total pressure (no humidity ratio exists, e.g. saturation above boiling).
        """
        self._check_vap_pres(vap_pres)
        self._check_pressure(pressure)
        if vap_pres >= pressure:
            raise DomainError(f"Partial pressure of water vapor {vap_pres} is not below "
                              f"atmospheric pressure {pressure}{self._props.pressure_symbol}")
        return cMolarMassRatio * vap_pres / (pressure - vap_pres)

    def vap_pres_from_hum_ratio(self, hum_ratio: float, pressure: float) -> float:
        """Partial pressure of water vapor from humidity ratio, ASHRAE eqn. 20 solved for Pw."""
        self._check_hum_ratio(hum_ratio)
        self._check_pressure(pressure)
        return pressure * hum_ratio / (cMolarMassRatio + hum_ratio)

    def hum_ratio_from_rel_hum(self, t_dry_bulb: float, rel_hum: float, pressure: float) -> float:
        """Humidity ratio from relative humidity."""
        vap_pres = self.vap_pres_from_rel_hum(t_dry_bulb, rel_hum)
        return self.hum_ratio_from_vap_pres(vap_pres, pressure)

    def rel_hum_from_hum_ratio(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Relative humidity [0-1] from humidity ratio."""
        vap_pres = self.vap_pres_from_hum_ratio(hum_ratio, pressure)
        return self.rel_hum_from_vap_pres(t_dry_bulb, vap_pres)

    def hum_ratio_from_t_dew_point(self, t_dew_point: float, pressure: float) -> float:
        """Humidity ratio from dew point temperature, ASHRAE eqn. 22."""
        vap_pres = self.sat_vap_pres(t_dew_point)
        return self.hum_ratio_from_vap_pres(vap_pres, pressure)

    @staticmethod
    def specific_hum_from_hum_ratio(hum_ratio: float) -> float:
        """Specific humidity (mass of vapor per mass of moist air), ASHRAE eqn. 9b."""
        Psychrometrics._check_hum_ratio(hum_ratio)
        return hum_ratio / (1.0 + hum_ratio)

    @staticmethod
    def hum_ratio_from_specific_hum(specific_hum: float) -> float:
        """Humidity ratio from specific humidity, ASHRAE eqn. 9b solved for W."""
        if specific_hum < 0.0 or specific_hum >= 1.0:
            raise DomainError(f"Specific humidity {specific_hum} is outside range [0, 1)")
        return specific_hum / (1.0 - specific_hum)

    # ---------------------------------------------------------------------
    # Dry air
    # ---------------------------------------------------------------------
    def dry_air_enthalpy(self, t_dry_bulb: float) -> float:
        """Dry air enthalpy (Btu/lb or J/kg), ASHRAE eqn. 28."""
        props = self._props
        return props.specific_heat_dry_air * t_dry_bulb * props.enthalpy_scale

    def dry_air_volume(self, t_dry_bulb: float, pressure: float) -> float:
        """Dry air specific volume (ft³/lb or m³/kg), ASHRAE eqn. 28."""
        self._check_pressure(pressure)
        props = self._props
        return props.gas_constant_dry_air * props.absolute(t_dry_bulb) / (props.pressure_factor * pressure)

    def dry_air_density(self, t_dry_bulb: float, pressure: float) -> float:
        """Dry air density (lb/ft³ or kg/m³), ASHRAE eqn. 14."""
        return 1.0 / self.dry_air_volume(t_dry_bulb, pressure)

    # ---------------------------------------------------------------------
    # Moist air
    # ---------------------------------------------------------------------
    def moist_air_enthalpy(self, t_dry_bulb: float, hum_ratio: float) -> float:
        """Moist air enthalpy (Btu/lb or J/kg of dry air), ASHRAE eqns. 30 and 32."""
        self._check_hum_ratio(hum_ratio)
        props = self._props
        return ((props.specific_heat_dry_air * t_dry_bulb
                 + hum_ratio * (props.latent_heat + props.specific_heat_vapor * t_dry_bulb))
                * props.enthalpy_scale)

    def t_dry_bulb_from_enthalpy_and_hum_ratio(self, moist_air_enthalpy: float, hum_ratio: float) -> float:
        """Dry bulb temperature from enthalpy and humidity ratio, ASHRAE eqn. 30 solved for Tdb."""
        self._check_hum_ratio(hum_ratio)
        props = self._props
        return ((moist_air_enthalpy / props.enthalpy_scale - props.latent_heat * hum_ratio)
                / (props.specific_heat_dry_air + props.specific_heat_vapor * hum_ratio))

    def hum_ratio_from_enthalpy_and_t_dry_bulb(self, moist_air_enthalpy: float, t_dry_bulb: float) -> float:
        """Humidity ratio from enthalpy and dry bulb temperature, ASHRAE eqn. 30 solved for W.

        Raises:
            DomainError: The enthalpy is below that of dry air at t_dry_bulb.
        """
        props = self._props
        hum_ratio = ((moist_air_enthalpy / props.enthalpy_scale - props.specific_heat_dry_air * t_dry_bulb)
                     / (props.latent_heat + props.specific_heat_vapor * t_dry_bulb))
        if hum_ratio < 0:
            raise DomainError(f"Enthalpy {moist_air_enthalpy}{props.enthalpy_symbol} is below "
                              f"dry air enthalpy at {t_dry_bulb}{props.temperature_symbol}")
        return hum_ratio

    def moist_air_volume(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Moist air specific volume (ft³/lb or m³/kg of dry air), ASHRAE eqn. 26."""
        self._check_hum_ratio(hum_ratio)
        self._check_pressure(pressure)
        props = self._props
        return (props.gas_constant_dry_air * props.absolute(t_dry_bulb)
                * (1 + cVolumeHumidityFactor * hum_ratio) / (props.pressure_factor * pressure))

    def t_dry_bulb_from_moist_air_volume_and_hum_ratio(self, moist_air_volume: float,
                                                       hum_ratio: float, pressure: float) -> float:
        """Dry bulb temperature from moist air specific volume, ASHRAE eqn. 26 solved for Tdb."""
        self._check_hum_ratio(hum_ratio)
        self._check_pressure(pressure)
        props = self._props
        t_absolute = (moist_air_volume * props.pressure_factor * pressure
                      / (props.gas_constant_dry_air * (1 + cVolumeHumidityFactor * hum_ratio)))
        return t_absolute - props.absolute_offset

    def moist_air_density(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Moist air density (lb/ft³ or kg/m³), ASHRAE eqn. 11."""
        return (1 + hum_ratio) / self.moist_air_volume(t_dry_bulb, hum_ratio, pressure)

    def degree_of_saturation(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Degree of saturation: humidity ratio over saturation humidity ratio, ASHRAE eqn. 12."""
        self._check_hum_ratio(hum_ratio)
        return hum_ratio / self.sat_hum_ratio(t_dry_bulb, pressure)

    def vapor_pressure_deficit(self, t_dry_bulb: float, hum_ratio: float, pressure: float) -> float:
        """Vapor pressure deficit: saturation minus actual vapor pressure (psi or Pa)."""
        rel_hum = self.rel_hum_from_hum_ratio(t_dry_bulb, hum_ratio, pressure)
        return self.sat_vap_pres(t_dry_bulb) * (1 - rel_hum)
