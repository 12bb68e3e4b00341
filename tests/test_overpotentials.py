import math
import numpy as np
import pytest

from config.physics_constants import R, F, P_ATM, SOFCParams
from src.sofc_model import (
    DomainError,
    ConfigurationError,
    to_model_current_density,
    gas_concentration,
    exchange_current_density,
    limiting_current_density,
    activation_overpotential,
    diffusion_overpotential,
    ohmic_overpotential,
    operating_voltage,
)

T = SOFCParams.Operating.T_kelvin
C_O2 = 0.18 * 101325 / (R * T)
C_CH4 = 0.60 * 101325 / (R * T)


def test_gas_concentration_ideal_gas_law():
    assert math.isclose(gas_concentration(0.18 * P_ATM, R, T), C_O2)
    assert math.isclose(gas_concentration(0.60 * P_ATM, R, T), C_CH4)
    assert math.isclose(C_O2, 2.2541, rel_tol=1e-4)


@pytest.mark.parametrize("R_gas, T_K", [(R, 0.0), (R, -10.0), (0.0, T), (-1.0, T)])
def test_gas_concentration_rejects_non_physical_constants(R_gas, T_K):
    with pytest.raises(ConfigurationError):
        gas_concentration(0.18 * P_ATM, R_gas, T_K)


def test_exchange_current_density_is_positive():
    i0_c = exchange_current_density(3.8e6, 8170, T, C_O2)
    i0_a = exchange_current_density(1.3e7, 8427, T, C_CH4)
    assert i0_c > 0 and i0_a > 0
    assert math.isclose(i0_c, 3.8e6 * np.exp(-8170 / T) * C_O2)
    assert math.isclose(i0_a, 1.3e7 * np.exp(-8427 / T) * C_CH4)


@pytest.mark.parametrize("concentration", [0.0, -1.0])
def test_exchange_current_density_rejects_non_positive_concentration(concentration):
    with pytest.raises(DomainError) as excinfo:
        exchange_current_density(3.8e6, 8170, T, concentration)
    assert excinfo.value.term == "exchange_current"
    assert excinfo.value.current_density is None


def test_activation_overpotential_zero_at_exchange_current():
    assert activation_overpotential(1936.0, 1936.0, 0.5) == 0
    assert activation_overpotential(1e-3, 1e-3, 0.3) == 0


def test_activation_overpotential_tafel_slope():
    eta = activation_overpotential(10.0, 1.0, 0.5, R, T, F)
    assert math.isclose(eta, R * T / (0.5 * F) * math.log(10.0))


def test_activation_overpotential_increasing_in_current():
    currents = np.linspace(0.01, 5.0, 50)
    eta = [activation_overpotential(i, 1e-3, 0.5) for i in currents]
    assert np.all(np.diff(eta) > 0)


def test_activation_overpotential_decreasing_in_alpha():
    alphas = [0.1, 0.25, 0.5, 0.75, 1.0]
    eta = [activation_overpotential(2.0, 1e-3, a) for a in alphas]
    assert np.all(np.diff(eta) < 0)


def test_activation_overpotential_negative_below_exchange_current():
    assert activation_overpotential(1.0, 10.0, 0.5) < 0


@pytest.mark.parametrize("i, i0", [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0), (1.0, -2.0), (1.0, float("nan"))])
def test_activation_overpotential_domain_error(i, i0):
    with pytest.raises(DomainError) as excinfo:
        activation_overpotential(i, i0, 0.5)
    assert excinfo.value.current_density == i
    assert "non-positive current density/exchange current" in str(excinfo.value)


def test_limiting_current_density():
    i_lim = limiting_current_density(C_O2, 3.66e-7, 10e-6, F)
    assert math.isclose(i_lim, F * 3.66e-7 * C_O2 / 10e-6)


def test_diffusion_overpotential_zero_at_zero_current():
    assert diffusion_overpotential(0.0, C_O2, 3.66e-7, 10e-6) == 0
    assert diffusion_overpotential(0.0, C_CH4, 9.66e-7, 200e-6) == 0


def test_diffusion_overpotential_increasing_and_non_negative():
    currents = np.linspace(0.0, 10.0, 40)
    eta = np.array([diffusion_overpotential(i, C_CH4, 9.66e-7, 200e-6) for i in currents])
    assert np.all(eta >= 0)
    assert np.all(np.diff(eta) > 0)


def test_diffusion_overpotential_finite_at_limiting_current():
    i_lim = limiting_current_density(C_O2, 3.66e-7, 10e-6)
    eta = diffusion_overpotential(i_lim, C_O2, 3.66e-7, 10e-6)
    n = SOFCParams.n_electrons
    assert math.isclose(eta, R * T / (n * F) * math.log(2.0))
    assert np.isfinite(diffusion_overpotential(10 * i_lim, C_O2, 3.66e-7, 10e-6))


@pytest.mark.parametrize("C_star, D, delta", [(0.0, 3.66e-7, 10e-6), (C_O2, -1e-7, 10e-6), (C_O2, 3.66e-7, 0.0)])
def test_diffusion_overpotential_rejects_non_positive_limiting_current(C_star, D, delta):
    with pytest.raises(DomainError) as excinfo:
        diffusion_overpotential(1.0, C_star, D, delta)
    assert excinfo.value.current_density == 1.0


@pytest.mark.parametrize("i", [-0.5, float("nan")])
def test_diffusion_overpotential_rejects_negative_or_undefined_current(i):
    with pytest.raises(DomainError) as excinfo:
        diffusion_overpotential(i, C_O2, 3.66e-7, 10e-6)
    assert excinfo.value.term == "diffusion"


def test_activation_overpotential_rejects_nan_current():
    with pytest.raises(DomainError) as excinfo:
        activation_overpotential(float("nan"), 1.0, 0.5)
    assert math.isnan(excinfo.value.current_density)


def test_diffusion_overpotential_rejects_nan_layer_thickness():
    with pytest.raises(DomainError):
        diffusion_overpotential(1.0, C_O2, 3.66e-7, float("nan"))


def test_ohmic_overpotential_is_linear():
    for i in [0.0, 0.3, 1.0, 2.5, 7.1]:
        assert ohmic_overpotential(2 * i, 0.1) == 2 * ohmic_overpotential(i, 0.1)
    assert math.isclose(ohmic_overpotential(2.5, 0.1), 0.25)


def test_operating_voltage_subtracts_all_losses():
    V = operating_voltage(1.229, 0.1, 0.2, 0.01, 0.02, 0.1)
    assert math.isclose(V, 1.229 - 0.43)


def test_operating_voltage_rejects_nan():
    with pytest.raises(DomainError) as excinfo:
        operating_voltage(1.229, float("nan"), 0.0, 0.0, 0.0, 0.0, current_density=1.0)
    assert excinfo.value.current_density == 1.0


@pytest.mark.parametrize("value, unit", [(1.0, "A/cm2"), (1000.0, "mA/cm2"), (10000.0, "A/m2")])
def test_to_model_current_density(value, unit):
    assert to_model_current_density(value, unit) == pytest.approx(1.0)


def test_to_model_current_density_unknown_unit():
    with pytest.raises(ConfigurationError):
        to_model_current_density(1.0, "A/in2")
