"""Unit systems for psychrometric calculations.

Every psychrometric formula has an Imperial (IP) and an SI form. Rather than branching on the
unit system inside each formula, this module collects all unit-dependent constants and branch
predicates in one immutable [`UnitSystemProps`][py_psychrocalc.unit.UnitSystemProps] record per
system. Formulas read the record they are bound to and never mutate it.

Key Features:
    * `UnitSystem` enumeration with string alias parsing
    * `UnitSystemProps` strategy records (`IP_PROPS`, `SI_PROPS`)
    * `PreferredUnitSystem` process default, raising `ConfigError` when unset
    * Exact affine temperature conversions to and from absolute scales

Examples:
    >>> UnitSystem.parse('metric')
    SI
    >>> UnitSystem.SI.props.freezing_point
    0.0
    >>> t_rankine_from_t_fahrenheit(32.0)
    491.67
"""

# Standard library imports
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
import math

# Third-party imports
from typing_extensions import Dict, Final, Optional, Tuple, Union

# Local imports
from py_psychrocalc.constants import (
    cDegreesFtoR,
    cDegreesCtoK,
    cPaPerPsi,
    cSquareInchesPerSquareFoot,
    cFreezingPointF, cFreezingPointC,
    cLowestTempF, cHighestTempF,
    cLowestTempC, cHighestTempC,
    cToleranceF, cToleranceC,
    cDewPointStepF, cDewPointStepC,
    cGasConstantDryAirIP, cGasConstantDryAirSI,
    cSpecificHeatDryAirIP, cSpecificHeatDryAirSI,
    cSpecificHeatVaporIP, cSpecificHeatVaporSI,
    cLatentHeatIP, cLatentHeatSI,
    cSatVapPresCorrectionSI,
    cSatVapPresIceIP, cSatVapPresWaterIP,
    cSatVapPresIceSI, cSatVapPresWaterSI,
    cWetBulbWaterIP, cWetBulbIceIP,
    cWetBulbWaterSI, cWetBulbIceSI,
    cStandardPressurePsi, cStandardPressurePa,
    cStandardTemperatureF, cStandardTemperatureC,
    cAltitudeFactorImperial, cAltitudeFactorMetric,
    cLapseRateImperial, cLapseRateMetric,
    cColumnLapseRateImperial,
    cScaleHeightGasConstantIP, cScaleHeightGasConstantSI,
    cGravitySI,
    cTroposphereLimitFeet, cTroposphereLimitMeters,
)
from py_psychrocalc.exceptions import ConfigError, UnitSystemAliasError
from py_psychrocalc.logger import logger


# =============================================================================
# Temperature converters
# =============================================================================

def t_rankine_from_t_fahrenheit(t_fahrenheit: float) -> float:
    """Convert temperature from °F to °R (ASHRAE 2017 ch. 1 section 3)."""
    return t_fahrenheit + cDegreesFtoR


def t_fahrenheit_from_t_rankine(t_rankine: float) -> float:
    """Convert temperature from °R to °F."""
    return t_rankine - cDegreesFtoR


def t_kelvin_from_t_celsius(t_celsius: float) -> float:
    """Convert temperature from °C to K (ASHRAE 2017 ch. 1 section 3)."""
    return t_celsius + cDegreesCtoK


def t_celsius_from_t_kelvin(t_kelvin: float) -> float:
    """Convert temperature from K to °C."""
    return t_kelvin - cDegreesCtoK


def t_celsius_from_t_fahrenheit(t_fahrenheit: float) -> float:
    return (t_fahrenheit - 32.) * 5. / 9


def t_fahrenheit_from_t_celsius(t_celsius: float) -> float:
    return t_celsius * 9. / 5 + 32.


def pressure_pa_from_psi(pressure_psi: float) -> float:
    return pressure_psi * cPaPerPsi


def pressure_psi_from_pa(pressure_pa: float) -> float:
    return pressure_pa / cPaPerPsi


# =============================================================================
# Unit systems
# =============================================================================

class UnitSystem(IntEnum):
    """Unit system of a psychrometric computation.

    * IP: °F, psi, lb/lb, Btu/lb, ft³/lb, ft
    * SI: °C, Pa, kg/kg, J/kg, m³/kg, m
    """

    IP = 0
    SI = 1

    def __repr__(self) -> str:
        return self.name

    @property
    def props(self) -> UnitSystemProps:
        """Constants and branch predicates of this unit system."""
        return UnitSystemPropsDict[self]

    @staticmethod
    def parse(value: Union[UnitSystem, str, int]) -> UnitSystem:
        """Resolve a unit system from an enum member, its value, or a string alias.

        Args:
            value: `UnitSystem`, integer value, or alias such as 'IP', 'imperial', 'SI', 'metric'.

        Returns:
            Matching UnitSystem.

        Raises:
            UnitSystemAliasError: If the value does not name a unit system.
        """
        if isinstance(value, UnitSystem):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for unit_system, aliases in UnitSystemAliases.items():
                if key in aliases:
                    return unit_system
            raise UnitSystemAliasError(f"Unknown unit system alias {value!r}")
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return UnitSystem(value)
            except ValueError as e:
                raise UnitSystemAliasError(f"Unknown unit system value {value!r}") from e
        raise UnitSystemAliasError(f"Can't resolve unit system from {type(value).__name__}")


UnitSystemAliases: Dict[UnitSystem, Tuple[str, ...]] = {
    UnitSystem.IP: ('ip', 'imperial', 'i-p', 'inch-pound', 'us', 'english'),
    UnitSystem.SI: ('si', 'metric', 'international'),
}


@dataclass(frozen=True)
class UnitSystemProps:  # pylint: disable=too-many-instance-attributes
    """Unit-dependent constants consumed uniformly by every formula.

    Attributes:
        unit_system: Owning unit system.
        temperature_symbol, pressure_symbol, enthalpy_symbol, volume_symbol, density_symbol,
        hum_ratio_symbol: Display symbols.
        absolute_offset: Offset to the absolute temperature scale (°R or K).
        freezing_point: Freezing point of water; ice regressions apply strictly below it.
        temperature_bounds: Validity range of the saturation pressure regressions.
        tolerance: Convergence tolerance of the iterative solvers.
        dew_point_step: Finite difference step for the Newton-Raphson derivative.
        gas_constant_dry_air: R_da.
        pressure_factor: Multiplier turning pressure into gas-law units (144 in IP, 1 in SI).
        specific_heat_dry_air, specific_heat_vapor, latent_heat: Enthalpy coefficients.
        enthalpy_scale: Multiplier from coefficient units to output units (1 in IP, 1000 in SI).
        sat_vap_pres_ice, sat_vap_pres_water: ln(Pws) regression coefficients.
        sat_vap_pres_correction: ln(Pws) offset added below and subtracted above freezing.
        wet_bulb_ice, wet_bulb_water: (A, B, C) wet bulb coefficients.
        standard_pressure, standard_temperature: Sea level standard atmosphere.
        altitude_factor, lapse_rate: Standard atmosphere coefficients.
        column_lapse_rate: Lapse rate for the mean air column temperature.
        scale_height_gas_constant, gravity: Scale height H = R * T / g.
        troposphere_limit: Altitude above which the barometric formula is not valid.
    """

    unit_system: UnitSystem
    temperature_symbol: str
    pressure_symbol: str
    enthalpy_symbol: str
    volume_symbol: str
    density_symbol: str
    hum_ratio_symbol: str
    absolute_offset: float
    freezing_point: float
    temperature_bounds: Tuple[float, float]
    tolerance: float
    dew_point_step: float
    gas_constant_dry_air: float
    pressure_factor: float
    specific_heat_dry_air: float
    specific_heat_vapor: float
    latent_heat: float
    enthalpy_scale: float
    sat_vap_pres_ice: Tuple[float, ...]
    sat_vap_pres_water: Tuple[float, ...]
    sat_vap_pres_correction: float
    wet_bulb_ice: Tuple[float, float, float]
    wet_bulb_water: Tuple[float, float, float]
    standard_pressure: float
    standard_temperature: float
    altitude_factor: float
    lapse_rate: float
    column_lapse_rate: float
    scale_height_gas_constant: float
    gravity: float
    troposphere_limit: float

    def absolute(self, t_dry_bulb: float) -> float:
        """Temperature on the absolute scale of this unit system (°R or K)."""
        return t_dry_bulb + self.absolute_offset

    def is_below_freezing(self, t: float) -> bool:
        return t < self.freezing_point

    def in_bounds(self, t: float) -> bool:
        low, high = self.temperature_bounds
        return low <= t <= high

    def ln_sat_vap_pres(self, t_dry_bulb: float) -> float:
        """Natural log of saturation vapor pressure, without range validation."""
        t = self.absolute(t_dry_bulb)
        if self.is_below_freezing(t_dry_bulb):
            c = self.sat_vap_pres_ice
            correction = self.sat_vap_pres_correction
        else:
            c = self.sat_vap_pres_water
            correction = -self.sat_vap_pres_correction
        return (c[0] / t + c[1] + c[2] * t + c[3] * t ** 2 + c[4] * t ** 3 + c[5] * t ** 4
                + c[6] * math.log(t) + correction)

    def wet_bulb_coefficients(self, t_wet_bulb: float) -> Tuple[float, float, float]:
        if self.is_below_freezing(t_wet_bulb):
            return self.wet_bulb_ice
        return self.wet_bulb_water


IP_PROPS: Final[UnitSystemProps] = UnitSystemProps(
    unit_system=UnitSystem.IP,
    temperature_symbol='°F',
    pressure_symbol='psi',
    enthalpy_symbol='Btu/lb',
    volume_symbol='ft³/lb',
    density_symbol='lb/ft³',
    hum_ratio_symbol='lb/lb',
    absolute_offset=cDegreesFtoR,
    freezing_point=cFreezingPointF,
    temperature_bounds=(cLowestTempF, cHighestTempF),
    tolerance=cToleranceF,
    dew_point_step=cDewPointStepF,
    gas_constant_dry_air=cGasConstantDryAirIP,
    pressure_factor=cSquareInchesPerSquareFoot,
    specific_heat_dry_air=cSpecificHeatDryAirIP,
    specific_heat_vapor=cSpecificHeatVaporIP,
    latent_heat=cLatentHeatIP,
    enthalpy_scale=1.0,
    sat_vap_pres_ice=cSatVapPresIceIP,
    sat_vap_pres_water=cSatVapPresWaterIP,
    sat_vap_pres_correction=0.0,
    wet_bulb_ice=cWetBulbIceIP,
    wet_bulb_water=cWetBulbWaterIP,
    standard_pressure=cStandardPressurePsi,
    standard_temperature=cStandardTemperatureF,
    altitude_factor=cAltitudeFactorImperial,
    lapse_rate=cLapseRateImperial,
    column_lapse_rate=cColumnLapseRateImperial,
    scale_height_gas_constant=cScaleHeightGasConstantIP,
    gravity=1.0,  # IP gas constant is already in ft/°R
    troposphere_limit=cTroposphereLimitFeet,
)

SI_PROPS: Final[UnitSystemProps] = UnitSystemProps(
    unit_system=UnitSystem.SI,
    temperature_symbol='°C',
    pressure_symbol='Pa',
    enthalpy_symbol='J/kg',
    volume_symbol='m³/kg',
    density_symbol='kg/m³',
    hum_ratio_symbol='kg/kg',
    absolute_offset=cDegreesCtoK,
    freezing_point=cFreezingPointC,
    temperature_bounds=(cLowestTempC, cHighestTempC),
    tolerance=cToleranceC,
    dew_point_step=cDewPointStepC,
    gas_constant_dry_air=cGasConstantDryAirSI,
    pressure_factor=1.0,
    specific_heat_dry_air=cSpecificHeatDryAirSI,
    specific_heat_vapor=cSpecificHeatVaporSI,
    latent_heat=cLatentHeatSI,
    enthalpy_scale=1000.0,
    sat_vap_pres_ice=cSatVapPresIceSI,
    sat_vap_pres_water=cSatVapPresWaterSI,
    sat_vap_pres_correction=cSatVapPresCorrectionSI,
    wet_bulb_ice=cWetBulbIceSI,
    wet_bulb_water=cWetBulbWaterSI,
    standard_pressure=cStandardPressurePa,
    standard_temperature=cStandardTemperatureC,
    altitude_factor=cAltitudeFactorMetric,
    lapse_rate=cLapseRateMetric,
    column_lapse_rate=cLapseRateMetric,
    scale_height_gas_constant=cScaleHeightGasConstantSI,
    gravity=cGravitySI,
    troposphere_limit=cTroposphereLimitMeters,
)

UnitSystemPropsDict: Dict[UnitSystem, UnitSystemProps] = {
    UnitSystem.IP: IP_PROPS,
    UnitSystem.SI: SI_PROPS,
}


class PreferredUnitSystemMeta(type):
    """Provide representation method for the static holder."""

    def __repr__(cls):
        return f'unit_system = {getattr(cls, "unit_system")!r}'


class PreferredUnitSystem(metaclass=PreferredUnitSystemMeta):
    """Process-wide default unit system.

    Consulted only when a `Calculator` (or `Psychrometrics`, `StandardAtmosphere`) is created
    without an explicit unit system. Treat it as write-once, read-many: sessions capture the
    value at construction, so changing it later never affects existing sessions.

    Examples:
        >>> PreferredUnitSystem.set('SI')
        >>> PreferredUnitSystem.get()
        SI
        >>> PreferredUnitSystem.restore_defaults()
    """

    unit_system: Optional[UnitSystem] = None

    @classmethod
    def restore_defaults(cls) -> None:
        """Forget the configured unit system."""
        cls.unit_system = None

    @classmethod
    def set(cls, unit_system: Union[UnitSystem, str, int]) -> None:
        """Set the default unit system from an enum member or alias."""
        cls.unit_system = UnitSystem.parse(unit_system)
        logger.debug(f"Preferred unit system set to {cls.unit_system!r}")

    @classmethod
    def get(cls) -> UnitSystem:
        """Return the default unit system.

        Raises:
            ConfigError: If no unit system has been configured.
        """
        if cls.unit_system is None:
            raise ConfigError("Unit system is not set. Use basicConfig(unit_system='IP' or 'SI'), "
                              "a .pypsy.toml file, or pass unit_system explicitly.")
        return cls.unit_system


def resolve_unit_system(unit_system: Optional[Union[UnitSystem, str, int]] = None) -> UnitSystem:
    """Explicit unit system if given, otherwise the preferred one."""
    if unit_system is None:
        return PreferredUnitSystem.get()
    return UnitSystem.parse(unit_system)


__all__ = (
    'UnitSystem',
    'UnitSystemAliases',
    'UnitSystemProps',
    'UnitSystemPropsDict',
    'IP_PROPS',
    'SI_PROPS',
    'PreferredUnitSystem',
    'resolve_unit_system',
    't_rankine_from_t_fahrenheit',
    't_fahrenheit_from_t_rankine',
    't_kelvin_from_t_celsius',
    't_celsius_from_t_kelvin',
    't_celsius_from_t_fahrenheit',
    't_fahrenheit_from_t_celsius',
    'pressure_pa_from_psi',
    'pressure_psi_from_pa',
)
