"""Physical and psychrometric constants for moist air calculations.

Constant Categories:
    - Global constants: Valid in either unit system
    - Imperial (IP) constants: °F, psi, Btu/lb, ft
    - SI constants: °C, Pa, J/kg, m
    - Saturation regression coefficients: ln(Pws) over ice and over liquid water
    - Runtime limits: Solver bounds

References:
    - ASHRAE Handbook - Fundamentals (2017) ch. 1
    - Hyland & Wexler (1983) saturation pressure regressions
"""

# Third-party imports
from typing_extensions import Final, Tuple

# =============================================================================
# Global Constants
# =============================================================================

cMolarMassRatio: Final[float] = 0.621945  # M_water / M_dry_air
"""Ratio of the molar masses of water vapor and dry air (dimensionless), ASHRAE eqn. 22"""

cVolumeHumidityFactor: Final[float] = 1.607858  # 1 / cMolarMassRatio
"""Humidity ratio multiplier in the moist air specific volume formula, ASHRAE eqn. 26"""

cPressureExponent: Final[float] = 5.2559
"""Exponent of the standard atmosphere barometric formula, ASHRAE eqn. 3 (dimensionless)"""

cMinHumRatio: Final[float] = 1e-7
"""Smallest humidity ratio handed to the solvers (kg/kg or lb/lb)"""

# =============================================================================
# Conversion Factors
# =============================================================================

cDegreesFtoR: Final[float] = 459.67  # °R = °F + 459.67
"""Fahrenheit to Rankine conversion constant (°R)"""

cDegreesCtoK: Final[float] = 273.15  # K = °C + 273.15
"""Celsius to Kelvin conversion constant (K)"""

cPaPerPsi: Final[float] = 6894.757293168
"""Pascals in one pound-force per square inch"""

cSquareInchesPerSquareFoot: Final[float] = 144.0
"""Converts psi to lbf/ft² in the IP gas law"""

# =============================================================================
# Imperial (IP) Constants
# =============================================================================

cFreezingPointF: Final[float] = 32.0  # °F
"""Freezing point of water (°F)"""

cLowestTempF: Final[float] = -148.0  # °F
cHighestTempF: Final[float] = 392.0  # °F

cToleranceF: Final[float] = 0.001 * 9. / 5.  # °F
"""Solver convergence tolerance in Fahrenheit, same resolution as cToleranceC"""

cDewPointStepF: Final[float] = 0.01 * 9. / 5.  # °F
"""Finite difference step for the dew point Newton-Raphson derivative (°F)"""

cGasConstantDryAirIP: Final[float] = 53.350  # ft·lbf/lb_da/°R
"""Universal gas constant for dry air, IP (ft·lbf/lb_da/°R)"""

cSpecificHeatDryAirIP: Final[float] = 0.240  # Btu/lb/°F
cSpecificHeatVaporIP: Final[float] = 0.444  # Btu/lb/°F
cLatentHeatIP: Final[float] = 1061.0  # Btu/lb

cStandardPressurePsi: Final[float] = 14.696  # psi
"""Standard atmospheric pressure at sea level (psi)"""

cStandardTemperatureF: Final[float] = 59.0  # °F
"""Standard temperature at sea level (°F)"""

cAltitudeFactorImperial: Final[float] = 6.8754e-06  # 1/ft
cLapseRateImperial: Final[float] = 0.0035662  # °F/ft
cColumnLapseRateImperial: Final[float] = 0.0036  # °F/ft
cScaleHeightGasConstantIP: Final[float] = 53.351  # ft/°R
cTroposphereLimitFeet: Final[float] = 36089.0  # ft

# =============================================================================
# SI Constants
# =============================================================================

cFreezingPointC: Final[float] = 0.0  # °C
"""Freezing point of water (°C)"""

cLowestTempC: Final[float] = -100.0  # °C
cHighestTempC: Final[float] = 200.0  # °C

cToleranceC: Final[float] = 0.001  # °C
"""Solver convergence tolerance in Celsius"""

cDewPointStepC: Final[float] = 0.01  # °C
"""Finite difference step for the dew point Newton-Raphson derivative (°C)"""

cGasConstantDryAirSI: Final[float] = 287.042  # J/kg_da/K
"""Universal gas constant for dry air, SI (J/kg_da/K)"""

cSpecificHeatDryAirSI: Final[float] = 1.006  # kJ/kg/°C
cSpecificHeatVaporSI: Final[float] = 1.86  # kJ/kg/°C
cLatentHeatSI: Final[float] = 2501.0  # kJ/kg

cSatVapPresCorrectionSI: Final[float] = 4.851e-5
"""ln(Pws) offset that joins the ice and liquid water regressions at 0 °C"""

cStandardPressurePa: Final[float] = 101325.0  # Pa
"""Standard atmospheric pressure at sea level (Pa)"""

cStandardTemperatureC: Final[float] = 15.0  # °C
"""Standard temperature at sea level (°C)"""

cAltitudeFactorMetric: Final[float] = 2.25577e-05  # 1/m
cLapseRateMetric: Final[float] = 0.0065  # °C/m
cScaleHeightGasConstantSI: Final[float] = 287.055  # J/kg/K
cGravitySI: Final[float] = 9.807  # m/s²
cTroposphereLimitMeters: Final[float] = 11000.0  # m

# =============================================================================
# Saturation Regression Coefficients
# ln(Pws) = C1/T + C2 + C3*T + C4*T^2 + C5*T^3 + C6*T^4 + C7*ln(T)
# =============================================================================

cSatVapPresIceIP: Final[Tuple[float, ...]] = (
    -1.0214165E+04, -4.8932428, -5.3765794E-03, 1.9202377E-07,
    3.5575832E-10, -9.0344688E-14, 4.1635019,
)
cSatVapPresWaterIP: Final[Tuple[float, ...]] = (
    -1.0440397E+04, -1.1294650E+01, -2.7022355E-02, 1.2890360E-05,
    -2.4780681E-09, 0.0, 6.5459673,
)
cSatVapPresIceSI: Final[Tuple[float, ...]] = (
    -5.6745359E+03, 6.3925247, -9.677843E-03, 6.2215701E-07,
    2.0747825E-09, -9.484024E-13, 4.1635019,
)
cSatVapPresWaterSI: Final[Tuple[float, ...]] = (
    -5.8002206E+03, 1.3914993, -4.8640239E-02, 4.1764768E-05,
    -1.4452093E-08, 0.0, 6.5459673,
)

# =============================================================================
# Wet Bulb Coefficients (ASHRAE eqns. 33 and 35)
# W = ((A - B*Twb)*Ws* - cp_da*(Tdb - Twb)) / (A + cp_v*Tdb - C*Twb)
# =============================================================================

cWetBulbWaterIP: Final[Tuple[float, float, float]] = (1093.0, 0.556, 1.0)
cWetBulbIceIP: Final[Tuple[float, float, float]] = (1220.0, 0.04, 0.48)
cWetBulbWaterSI: Final[Tuple[float, float, float]] = (2501.0, 2.326, 4.186)
cWetBulbIceSI: Final[Tuple[float, float, float]] = (2830.0, 0.24, 2.1)

# =============================================================================
# Runtime Limits
# =============================================================================

cMaxIterations: Final[int] = 100
"""Maximum iterations for the dew point and wet bulb solvers"""

__all__ = (
    # Global
    'cMolarMassRatio',
    'cVolumeHumidityFactor',
    'cPressureExponent',
    'cMinHumRatio',
    # Conversion factors
    'cDegreesFtoR',
    'cDegreesCtoK',
    'cPaPerPsi',
    'cSquareInchesPerSquareFoot',
    # IP
    'cFreezingPointF',
    'cLowestTempF', 'cHighestTempF',
    'cToleranceF',
    'cDewPointStepF',
    'cGasConstantDryAirIP',
    'cSpecificHeatDryAirIP', 'cSpecificHeatVaporIP', 'cLatentHeatIP',
    'cStandardPressurePsi',
    'cStandardTemperatureF',
    'cAltitudeFactorImperial', 'cLapseRateImperial', 'cColumnLapseRateImperial',
    'cScaleHeightGasConstantIP', 'cTroposphereLimitFeet',
    # SI
    'cFreezingPointC',
    'cLowestTempC', 'cHighestTempC',
    'cToleranceC',
    'cDewPointStepC',
    'cGasConstantDryAirSI',
    'cSpecificHeatDryAirSI', 'cSpecificHeatVaporSI', 'cLatentHeatSI',
    'cSatVapPresCorrectionSI',
    'cStandardPressurePa',
    'cStandardTemperatureC',
    'cAltitudeFactorMetric', 'cLapseRateMetric',
    'cScaleHeightGasConstantSI', 'cGravitySI', 'cTroposphereLimitMeters',
    # Regressions
    'cSatVapPresIceIP', 'cSatVapPresWaterIP',
    'cSatVapPresIceSI', 'cSatVapPresWaterSI',
    'cWetBulbWaterIP', 'cWetBulbIceIP',
    'cWetBulbWaterSI', 'cWetBulbIceSI',
    # Runtime limits
    'cMaxIterations',
)
