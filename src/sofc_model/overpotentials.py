"""
SOFC Overpotential Expressions
Closed-form loss terms for a methane/oxygen solid-oxide fuel cell.

Implements:
- Ideal gas concentration: C = p / (R·T)
- Exchange current density (Arrhenius): i0 = A · exp(-E/T) · C
- Activation overpotential (Tafel): η_act = (RT/αF) · ln(i/i0)
- Diffusion overpotential (Fick): η_diff = (RT/nF) · ln(1 + i/i_lim)
- Ohmic overpotential: η_Ω = ASR · i

All current densities are in the model unit (A/cm²).
"""

import os
import numpy as np
from typing import Optional

import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from config.physics_constants import (
    R, F,
    SOFCParams,
    CURRENT_DENSITY_UNITS,
    ideal_gas_concentration,
    arrhenius_i0
)
from src.sofc_model.errors import DomainError, ConfigurationError


T_DEFAULT = SOFCParams.Operating.T_kelvin


def to_model_current_density(value: float, unit: str = "A/cm2") -> float:
    """
    Convert a current density to the model unit (A/cm²).

    Args:
        value: Current density in `unit`
        unit: One of CURRENT_DENSITY_UNITS

    Returns:
        Current density [A/cm²]
    """
    if unit not in CURRENT_DENSITY_UNITS:
        raise ConfigurationError(
            f"Unknown current density unit '{unit}' "
            f"(expected one of {sorted(CURRENT_DENSITY_UNITS)})"
        )
    return value * CURRENT_DENSITY_UNITS[unit]


def gas_concentration(
    partial_pressure: float,
    R_gas: float = R,
    T: float = T_DEFAULT
) -> float:
    """
    Molar concentration from the ideal gas law.

    Args:
        partial_pressure: Partial pressure [Pa]
        R_gas: Gas constant [J/(mol·K)]
        T: Temperature [K]

    Returns:
        C: Concentration [mol/m³]
    """
    if not (R_gas > 0) or not (T > 0):
        raise ConfigurationError(
            f"Gas constant and temperature must be positive (R={R_gas}, T={T})"
        )
    return ideal_gas_concentration(partial_pressure, T, R_gas)


def exchange_current_density(
    prefactor: float,
    T_activation: float,
    T: float,
    concentration: float
) -> float:
    """
    Exchange current density from an Arrhenius-type expression.

    i0 = A · exp(-E/T) · C

    Args:
        prefactor: Pre-exponential factor A
        T_activation: Activation temperature E [K]
        T: Temperature [K]
        concentration: Reactant concentration [mol/m³]

    Returns:
        i0: Exchange current density (strictly positive)
    """
    if not (concentration > 0):
        raise DomainError(
            f"non-positive gas concentration C={concentration}",
            term="exchange_current"
        )
    return arrhenius_i0(prefactor, T_activation, T, concentration)


def activation_overpotential(
    i: float,
    i0: float,
    alpha: float,
    R_gas: float = R,
    T: float = T_DEFAULT,
    F_const: float = F
) -> float:
    """
    Activation overpotential using the Tafel equation.

    η_act = (RT/αF) · ln(i/i0)

    α ∈ (0, 1] is expected from the caller. For i < i0 the result is
    negative and returned as is.

    Args:
        i: Current density [A/cm²]
        i0: Exchange current density
        alpha: Transfer coefficient

    Returns:
        η_act: Activation overpotential [V]
    """
    if not (i > 0) or not (i0 > 0):
        raise DomainError(
            f"non-positive current density/exchange current (i={i}, i0={i0})",
            current_density=i,
            term="activation"
        )
    return (R_gas * T / (alpha * F_const)) * np.log(i / i0)


def limiting_current_density(
    C_star: float,
    D: float,
    delta: float,
    F_const: float = F
) -> float:
    """
    Limiting current density implied by Fickian transport across a layer.

    i_lim = F · D · C* / δ
    """
    return F_const * D * C_star / delta


def diffusion_overpotential(
    i: float,
    C_star: float,
    D: float,
    delta: float,
    R_gas: float = R,
    T: float = T_DEFAULT,
    F_const: float = F,
    n: int = SOFCParams.n_electrons
) -> float:
    """
    Diffusion overpotential from Fick's law.

    η_diff = (RT/nF) · ln(1 + i/i_lim)

    The additive form has no singularity at i = i_lim.

    Args:
        i: Current density [A/cm²]
        C_star: Bulk gas concentration [mol/m³]
        D: Effective diffusivity [m²/s]
        delta: Diffusion layer thickness [m]
        n: Electrons transferred per fuel molecule

    Returns:
        η_diff: Diffusion overpotential [V]
    """
    if not (delta > 0):
        raise DomainError(
            f"non-positive diffusion layer thickness δ={delta}",
            current_density=i,
            term="diffusion"
        )
    i_lim = limiting_current_density(C_star, D, delta, F_const)
    if not (i_lim > 0):
        raise DomainError(
            f"non-positive limiting current density i_lim={i_lim}",
            current_density=i,
            term="diffusion"
        )
    if not (i >= 0):
        raise DomainError(
            f"negative or undefined current density i={i}",
            current_density=i,
            term="diffusion"
        )
    return (R_gas * T / (n * F_const)) * np.log(1 + (i / i_lim))


def ohmic_overpotential(i: float, area_specific_resistance: float) -> float:
    """Ohmic overpotential η_Ω = ASR · i [V]."""
    return area_specific_resistance * i


def operating_voltage(
    E_nernst: float,
    eta_activation_c: float,
    eta_activation_a: float,
    eta_diffusion_c: float,
    eta_diffusion_a: float,
    eta_ohmic: float,
    current_density: Optional[float] = None
) -> float:
    """
    Operating voltage: Nernst voltage minus the sum of all losses.

    V = E_Nernst - (η_act,c + η_act,a + η_diff,c + η_diff,a + η_Ω)
    """
    V = E_nernst - (eta_activation_c + eta_activation_a +
                    eta_diffusion_c + eta_diffusion_a + eta_ohmic)
    if not np.isfinite(V):
        raise DomainError(
            f"non-finite operating voltage {V}",
            current_density=current_density,
            term="operating_voltage"
        )
    return float(V)
