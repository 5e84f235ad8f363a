import logging

import pytest

from py_psychrocalc import Psychrometrics, StandardAtmosphere, Calculator, PreferredUnitSystem, UnitSystem
from py_psychrocalc.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def clean_preferred_unit_system():
    """Each test starts without a process default unit system."""
    PreferredUnitSystem.restore_defaults()
    yield
    PreferredUnitSystem.restore_defaults()


@pytest.fixture(scope="class")
def psy_si():
    return Psychrometrics(UnitSystem.SI)


@pytest.fixture(scope="class")
def psy_ip():
    return Psychrometrics(UnitSystem.IP)


@pytest.fixture(scope="class")
def atm_si():
    return StandardAtmosphere(UnitSystem.SI)


@pytest.fixture(scope="class")
def atm_ip():
    return StandardAtmosphere(UnitSystem.IP)


@pytest.fixture(scope="class")
def calc_si():
    return Calculator(unit_system=UnitSystem.SI)


@pytest.fixture(scope="class")
def calc_ip():
    return Calculator(unit_system=UnitSystem.IP)
