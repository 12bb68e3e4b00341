import pandas as pd
import pytest

from src.physics_validator import PhysicsValidator, ValidationResult


@pytest.fixture
def validator():
    return PhysicsValidator(verbose=False)


def test_default_parameters_valid(validator, parameters):
    result = validator.validate_parameters(parameters.to_dict(), "SOFC")
    assert result.is_valid
    assert result.warnings == []


def test_violations_are_categorised(validator, parameters):
    params = parameters.to_dict()
    params.update({"T": -5.0, "alpha": 1.2, "area_resistance": -0.1})
    result = validator.validate_parameters(params)
    assert not result.is_valid
    summary = result.get_summary()
    assert summary["physics_errors"] == 3
    assert all(v.startswith("[physics]") for v in result.violations)


def test_unusual_values_only_warn(validator, parameters):
    params = parameters.to_dict()
    params.update({"T": 400.0, "area_resistance": 2.0})
    result = validator.validate_parameters(params)
    assert result.is_valid
    assert len(result.warnings) == 2


def test_unsupported_system_type(validator):
    result = validator.validate_parameters({"alpha": 0.5}, "PEMFC")
    assert not result.is_valid


def test_verbose_prints_status(parameters, capsys):
    PhysicsValidator(verbose=True).validate_parameters(parameters.to_dict())
    assert "✓ Parameter validation passed" in capsys.readouterr().out


def test_polarization_data_from_evaluator(validator, evaluator):
    df = evaluator.polarization_curve()
    result = validator.validate_polarization_data(df)
    assert result.is_valid
    # i < i0 for the documented cell
    assert any("eta_act" in w for w in result.warnings)


def test_polarization_data_violations(validator):
    df = pd.DataFrame({
        "current_density_A_cm2": [0.5, 1.0, 1.5],
        "voltage_V": [0.9, 0.95, 0.7],
        "eta_ohm_V": [0.05, -0.1, 0.15],
    })
    result = validator.validate_polarization_data(df)
    assert not result.is_valid
    assert len(result.physics_errors) == 2


def test_polarization_data_missing_columns_and_units(validator):
    df = pd.DataFrame({"current_density_A_cm2": [1.0]})
    result = validator.validate_polarization_data(df, {"unit": "mA/cm2"})
    assert len(result.dimensional_errors) == 2


def test_validation_result_warning_does_not_invalidate():
    result = ValidationResult(is_valid=True)
    result.add_warning("check")
    assert result.is_valid
    result.add_violation("dimensional", "mixed units")
    assert not result.is_valid
    assert result.dimensional_errors == ["mixed units"]


@pytest.mark.parametrize("asr", [float("nan"), float("inf")])
def test_non_finite_area_resistance_is_a_violation(validator, parameters, asr):
    params = parameters.to_dict()
    params["area_resistance"] = asr
    result = validator.validate_parameters(params)
    assert not result.is_valid
    assert result.warnings == []
