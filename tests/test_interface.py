import pytest

from py_psychrocalc import (Calculator, PsychrometricState, PsychroConfig, PreferredUnitSystem, UnitSystem,
                            ConfigError, DomainError, Psychrometrics, StandardAtmosphere, basicConfig)


class TestCalculator:

    def test_explicit_unit_system(self):
        calc = Calculator(unit_system='SI')
        assert calc.unit_system == UnitSystem.SI
        assert isinstance(calc.psychrometrics, Psychrometrics)
        assert isinstance(calc.atmosphere, StandardAtmosphere)
        assert isinstance(calc.config, PsychroConfig)

    def test_unset_unit_system(self):
        with pytest.raises(ConfigError):
            Calculator()

    def test_preferred_unit_system_captured(self):
        basicConfig(unit_system='IP')
        calc = Calculator()
        PreferredUnitSystem.set('SI')
        assert calc.unit_system == UnitSystem.IP
        assert calc.sat_vap_pres(77.0) == pytest.approx(0.4596558, rel=1e-6)
        assert Calculator().unit_system == UnitSystem.SI

    def test_sessions_coexist(self, calc_si, calc_ip):
        assert calc_si.standard_atm_pressure(0) == 101325.0
        assert calc_ip.standard_atm_pressure(0) == 14.696

    def test_config_dict(self):
        calc = Calculator(unit_system='SI', config={'cMaxIterations': 20})
        assert calc.config.cMaxIterations == 20
        assert calc.psychrometrics.config is calc.config

    def test_getattr_delegation(self, calc_si):
        assert calc_si.hum_ratio_from_rel_hum(25.0, 0.5, 101325.0) == pytest.approx(0.009880557, rel=1e-6)
        assert calc_si.tolerance == 0.001

    def test_getattr_missing_attribute_message(self, calc_si):
        with pytest.raises(AttributeError) as ei:
            _ = calc_si.this_method_does_not_exist  # type: ignore[attr-defined]
        assert "has no attribute" in str(ei.value)

    def test_atmosphere_wrappers(self, calc_si):
        assert calc_si.standard_atm_temperature(1000) == pytest.approx(8.5)
        sea_level = calc_si.sea_level_pressure(95000, 1000, 20)
        assert calc_si.station_pressure(sea_level, 1000, 20) == pytest.approx(95000)


class TestAggregates:

    def test_from_rel_hum_si(self, calc_si):
        state = calc_si.psychrometrics_from_rel_hum(25.0, 0.8, 101325.0)
        assert isinstance(state, PsychrometricState)
        assert state.unit_system == UnitSystem.SI
        assert state.rel_hum == 0.8
        assert state.hum_ratio == pytest.approx(0.01596103, rel=1e-6)
        assert state.vap_pres == pytest.approx(2535.250, rel=1e-6)
        assert state.t_dew_point == pytest.approx(21.3094, abs=1e-3)
        assert state.t_wet_bulb == pytest.approx(22.3803, abs=1e-3)
        assert state.moist_air_enthalpy == pytest.approx(65810.72, rel=1e-6)
        assert state.moist_air_volume == pytest.approx(0.8663001, rel=1e-6)
        assert state.degree_of_saturation == pytest.approx(0.7948674, rel=1e-6)

    def test_from_rel_hum_ip(self, calc_ip):
        state = calc_ip.psychrometrics_from_rel_hum(77.0, 0.8, 14.696)
        assert state.hum_ratio == pytest.approx(0.01596176, rel=1e-6)
        assert state.t_dew_point == pytest.approx(70.3569, abs=2e-3)
        assert state.t_wet_bulb == pytest.approx(72.2829, abs=2e-3)
        assert state.moist_air_enthalpy == pytest.approx(35.96113, rel=1e-6)
        assert state.moist_air_volume == pytest.approx(13.876672, rel=1e-6)

    def test_from_t_wet_bulb(self, calc_si, calc_ip):
        state = calc_si.psychrometrics_from_t_wet_bulb(30.0, 25.0, 95461.0)
        assert state.t_wet_bulb == 25.0
        assert state.hum_ratio == pytest.approx(0.0192237, rel=1e-5)
        assert state.t_dew_point == pytest.approx(23.3023, abs=1e-3)
        assert state.rel_hum == pytest.approx(0.6741068, rel=1e-5)
        assert state.moist_air_enthalpy == pytest.approx(79331.16, rel=1e-5)
        assert state.moist_air_volume == pytest.approx(0.9397176, rel=1e-6)

        state = calc_ip.psychrometrics_from_t_wet_bulb(86.0, 77.0, 14.175)
        assert state.hum_ratio == pytest.approx(0.0187159, rel=1e-5)
        assert state.t_dew_point == pytest.approx(73.8694, abs=2e-3)
        assert state.rel_hum == pytest.approx(0.6724203, rel=1e-5)

    def test_from_t_dew_point(self, calc_si, calc_ip):
        state = calc_si.psychrometrics_from_t_dew_point(25.0, 15.0, 101325.0)
        assert state.t_dew_point == 15.0
        assert state.vap_pres == pytest.approx(1705.365, rel=1e-6)
        assert state.hum_ratio == pytest.approx(0.01064693, rel=1e-6)
        assert state.rel_hum == pytest.approx(0.5381292, rel=1e-6)
        assert state.t_wet_bulb == pytest.approx(18.5037, abs=1e-3)
        assert state.moist_air_enthalpy == pytest.approx(52273.05, rel=1e-6)

        state = calc_ip.psychrometrics_from_t_dew_point(77.0, 59.0, 14.696)
        assert state.t_wet_bulb == pytest.approx(65.3023, abs=2e-3)
        assert state.moist_air_enthalpy == pytest.approx(30.14092, rel=1e-6)

    def test_dew_point_above_dry_bulb(self, calc_si):
        with pytest.raises(DomainError):
            calc_si.psychrometrics_from_t_dew_point(25.0, 26.0, 101325.0)

    def test_wet_bulb_above_dry_bulb(self, calc_si):
        with pytest.raises(DomainError):
            calc_si.psychrometrics_from_t_wet_bulb(25.0, 26.0, 101325.0)

    def test_rel_hum_out_of_range(self, calc_si):
        with pytest.raises(DomainError):
            calc_si.psychrometrics_from_rel_hum(25.0, 1.2, 101325.0)

    @pytest.mark.parametrize("t_dry_bulb, rel_hum", [(-20.0, 0.5), (0.5, 0.3), (25.0, 0.5), (40.0, 0.95)])
    def test_anchors_agree(self, calc_si, t_dry_bulb, rel_hum):
        from_rel_hum = calc_si.psychrometrics_from_rel_hum(t_dry_bulb, rel_hum, 101325.0)
        from_dew_point = calc_si.psychrometrics_from_t_dew_point(t_dry_bulb, from_rel_hum.t_dew_point, 101325.0)
        from_wet_bulb = calc_si.psychrometrics_from_t_wet_bulb(t_dry_bulb, from_rel_hum.t_wet_bulb, 101325.0)

        assert from_dew_point.rel_hum == pytest.approx(rel_hum, abs=1e-3)
        assert from_wet_bulb.rel_hum == pytest.approx(rel_hum, abs=2e-3)
        assert from_dew_point.t_wet_bulb == pytest.approx(from_rel_hum.t_wet_bulb, abs=2e-3)
        assert from_wet_bulb.t_dew_point == pytest.approx(from_rel_hum.t_dew_point, abs=1e-2)

    @pytest.mark.parametrize("t_dry_bulb", [-40.0, -5.0, 0.0, 15.0, 35.0, 60.0])
    @pytest.mark.parametrize("rel_hum", [0.1, 0.5, 1.0])
    def test_state_invariants(self, calc_si, t_dry_bulb, rel_hum):
        state = calc_si.psychrometrics_from_rel_hum(t_dry_bulb, rel_hum, 101325.0)
        assert state.t_dew_point <= state.t_wet_bulb + 1e-3
        assert state.t_wet_bulb <= state.t_dry_bulb
        assert state.t_dew_point <= state.t_dry_bulb
        assert 0.0 <= state.degree_of_saturation <= state.rel_hum + 1e-12
        assert state.moist_air_density == pytest.approx(
            calc_si.moist_air_density(t_dry_bulb, state.hum_ratio, 101325.0))

    def test_unit_systems_agree(self, calc_si, calc_ip):
        si = calc_si.psychrometrics_from_rel_hum(25.0, 0.8, 101325.0)
        ip = calc_ip.psychrometrics_from_rel_hum(77.0, 0.8, 14.696)
        assert ip.hum_ratio == pytest.approx(si.hum_ratio, rel=1e-4)
        assert (ip.t_dew_point - 32) * 5 / 9 == pytest.approx(si.t_dew_point, abs=5e-3)
        assert (ip.t_wet_bulb - 32) * 5 / 9 == pytest.approx(si.t_wet_bulb, abs=5e-3)


class TestPsychrometricState:

    def test_derived_properties(self, calc_si):
        state = calc_si.psychrometrics_from_rel_hum(25.0, 0.5, 101325.0)
        assert state.specific_hum == pytest.approx(state.hum_ratio / (1 + state.hum_ratio))
        assert state.moist_air_density == pytest.approx((1 + state.hum_ratio) / state.moist_air_volume)

    def test_formatted(self, calc_si, calc_ip):
        formatted = calc_si.psychrometrics_from_rel_hum(25.0, 0.5, 101325.0).formatted()
        assert len(formatted) == 10
        assert formatted[0] == '25.00 °C'
        assert formatted[3] == '50.0 %'
        assert formatted[-1] == '101325 Pa'
        assert calc_ip.psychrometrics_from_rel_hum(77.0, 0.5, 14.696).formatted()[0] == '77.00 °F'

    def test_is_tuple(self, calc_si):
        state = calc_si.psychrometrics_from_rel_hum(25.0, 0.5, 101325.0)
        t_dry_bulb, t_wet_bulb, t_dew_point, *_ = state
        assert t_dry_bulb == 25.0
        assert t_dew_point <= t_wet_bulb <= t_dry_bulb


class TestAggregateEvaluation:

    @pytest.fixture
    def recorded(self, monkeypatch):
        calc = Calculator(unit_system='SI')
        psy = calc.psychrometrics
        calls = {}

        def record(name):
            original = getattr(psy, name)

            def wrapper(*args, **kwargs):
                calls.setdefault(name, []).append(args)
                return original(*args, **kwargs)

            monkeypatch.setattr(psy, name, wrapper)

        for name in ('sat_vap_pres', 'vap_pres_from_hum_ratio', 'degree_of_saturation',
                     'rel_hum_from_vap_pres', 'vap_pres_from_rel_hum'):
            record(name)
        return calc, calls

    def test_from_rel_hum_saturation_pressure_once(self, recorded):
        calc, calls = recorded
        state = calc.psychrometrics_from_rel_hum(25.0, 0.8, 101325.0)
        assert [args for args in calls['sat_vap_pres'] if args[0] == 25.0] == [(25.0,)]
        assert 'vap_pres_from_hum_ratio' not in calls
        assert 'vap_pres_from_rel_hum' not in calls
        assert 'degree_of_saturation' not in calls
        assert state.degree_of_saturation == pytest.approx(0.7948674, rel=1e-6)

    def test_from_t_wet_bulb_saturation_pressure_once(self, recorded):
        calc, calls = recorded
        state = calc.psychrometrics_from_t_wet_bulb(30.0, 25.0, 95461.0)
        assert [args for args in calls['sat_vap_pres'] if args[0] == 30.0] == [(30.0,)]
        assert len(calls['vap_pres_from_hum_ratio']) == 1
        assert 'rel_hum_from_vap_pres' not in calls
        assert 'degree_of_saturation' not in calls
        assert state.rel_hum == pytest.approx(0.6741068, rel=1e-5)

    def test_from_t_dew_point_saturation_pressure_once(self, recorded):
        calc, calls = recorded
        state = calc.psychrometrics_from_t_dew_point(25.0, 15.0, 101325.0)
        assert [args for args in calls['sat_vap_pres'] if args[0] == 25.0] == [(25.0,)]
        assert 'vap_pres_from_hum_ratio' not in calls
        assert state.rel_hum == pytest.approx(0.5381292, rel=1e-6)

    def test_dry_air_dew_point_floored(self, calc_si):
        state = calc_si.psychrometrics_from_rel_hum(25.0, 0.0, 101325.0)
        assert state.hum_ratio == 0.0
        assert state.t_dew_point == pytest.approx(
            calc_si.t_dew_point_from_hum_ratio(25.0, calc_si.config.cMinHumRatio, 101325.0))
        assert state.degree_of_saturation == 0.0
