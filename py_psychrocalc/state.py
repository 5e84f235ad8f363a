"""Result bundle of the aggregate psychrometric evaluators.

Classes:
    PsychrometricState: Full moist air state at one dry bulb temperature and pressure,
        as produced by `Calculator.psychrometrics_from_*`.
"""

from __future__ import annotations

from typing_extensions import NamedTuple, Tuple

from py_psychrocalc.unit import UnitSystem

__all__ = ('PsychrometricState',)


# pylint: disable=too-many-instance-attributes
class PsychrometricState(NamedTuple):
    """Moist air state.

    Attributes:
        t_dry_bulb: Dry bulb temperature (°F or °C)
        t_wet_bulb: Wet bulb temperature (°F or °C)
        t_dew_point: Dew point temperature (°F or °C)
        rel_hum: Relative humidity [0-1]
        hum_ratio: Humidity ratio (lb_H2O/lb_da or kg_H2O/kg_da)
        vap_pres: Partial pressure of water vapor (psi or Pa)
        moist_air_enthalpy: Enthalpy per mass of dry air (Btu/lb or J/kg)
        moist_air_volume: Specific volume per mass of dry air (ft³/lb or m³/kg)
        degree_of_saturation: Humidity ratio over saturation humidity ratio [0-1]
        pressure: Atmospheric pressure (psi or Pa)
        unit_system: Unit system of all the above
    """

    t_dry_bulb: float
    t_wet_bulb: float
    t_dew_point: float
    rel_hum: float
    hum_ratio: float
    vap_pres: float
    moist_air_enthalpy: float
    moist_air_volume: float
    degree_of_saturation: float
    pressure: float
    unit_system: UnitSystem

    @property
    def moist_air_density(self) -> float:
        """Moist air density (lb/ft³ or kg/m³), ASHRAE eqn. 11."""
        return (1 + self.hum_ratio) / self.moist_air_volume

    @property
    def specific_hum(self) -> float:
        """Specific humidity [0-1)."""
        return self.hum_ratio / (1 + self.hum_ratio)

    def formatted(self) -> Tuple[str, ...]:
        """Return attributes as tuple of strings with unit symbols of `unit_system`.

        Returns:
            Tuple of formatted strings, in field order (without unit_system).
        """
        props = self.unit_system.props
        t = props.temperature_symbol
        return (
            f'{self.t_dry_bulb:.2f} {t}',
            f'{self.t_wet_bulb:.2f} {t}',
            f'{self.t_dew_point:.2f} {t}',
            f'{self.rel_hum * 100:.1f} %',
            f'{self.hum_ratio:.6f} {props.hum_ratio_symbol}',
            f'{self.vap_pres:.5g} {props.pressure_symbol}',
            f'{self.moist_air_enthalpy:.6g} {props.enthalpy_symbol}',
            f'{self.moist_air_volume:.5f} {props.volume_symbol}',
            f'{self.degree_of_saturation:.4f}',
            f'{self.pressure:.6g} {props.pressure_symbol}',
        )
