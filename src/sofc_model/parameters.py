"""
SOFC Parameter Sets
Immutable value objects holding the fixed constants and the quantities
derived from them once at start-up.
"""

import os
from dataclasses import dataclass, field
from typing import Dict

import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from config.physics_constants import R, F, P_ATM, SOFCParams
from src.sofc_model.overpotentials import (
    gas_concentration,
    exchange_current_density,
    limiting_current_density
)


@dataclass(frozen=True)
class PhysicalConstants:
    """Universal constants."""
    R: float = R  # Gas constant [J/(mol·K)]
    F: float = F  # Faraday constant [C/mol]


@dataclass(frozen=True)
class CellConditions:
    """Operating conditions of the cell."""
    T: float = SOFCParams.Operating.T_kelvin  # Temperature [K]
    n_electrons: int = SOFCParams.n_electrons  # Electrons per CH4 molecule
    alpha: float = SOFCParams.alpha  # Transfer coefficient
    area_resistance: float = SOFCParams.area_resistance  # [Ω·cm²]
    E_nernst: float = SOFCParams.E_NERNST  # [V]


@dataclass(frozen=True)
class TransportParameters:
    """Porous-layer transport at one electrode."""
    D_eff: float  # Effective diffusivity [m²/s]
    delta: float  # Diffusion layer thickness [m]


@dataclass(frozen=True)
class KineticParameters:
    """Arrhenius coefficients of the exchange current at one electrode."""
    prefactor: float
    T_activation: float  # [K]


@dataclass(frozen=True)
class GasState:
    """Reactant concentrations at the cathode (O2) and anode (CH4)."""
    C_O2: float  # [mol/m³]
    C_CH4: float  # [mol/m³]

    @classmethod
    def from_partial_pressures(
        cls,
        p_O2: float,
        p_CH4: float,
        constants: PhysicalConstants,
        conditions: CellConditions
    ) -> "GasState":
        """
        Derive concentrations from partial pressures via C = p/(R·T).

        Args:
            p_O2: Oxygen partial pressure [Pa]
            p_CH4: Methane partial pressure [Pa]
        """
        return cls(
            C_O2=gas_concentration(p_O2, constants.R, conditions.T),
            C_CH4=gas_concentration(p_CH4, constants.R, conditions.T)
        )


@dataclass(frozen=True)
class ExchangeCurrentDensities:
    """Baseline reaction rates at each electrode (strictly positive)."""
    i0_cathode: float
    i0_anode: float

    @classmethod
    def from_conditions(
        cls,
        gas: GasState,
        conditions: CellConditions,
        cathode: KineticParameters,
        anode: KineticParameters
    ) -> "ExchangeCurrentDensities":
        return cls(
            i0_cathode=exchange_current_density(
                cathode.prefactor, cathode.T_activation, conditions.T, gas.C_O2
            ),
            i0_anode=exchange_current_density(
                anode.prefactor, anode.T_activation, conditions.T, gas.C_CH4
            )
        )


@dataclass(frozen=True)
class SOFCParameters:
    """
    Complete fixed parameter set of the cell.

    Defaults reproduce the documented methane/oxygen cell at 973.15 K.
    Override individual entries with dataclasses.replace().
    """
    constants: PhysicalConstants = field(default_factory=PhysicalConstants)
    conditions: CellConditions = field(default_factory=CellConditions)
    p_O2: float = SOFCParams.Cathode.x_O2 * P_ATM  # [Pa]
    p_CH4: float = SOFCParams.Anode.x_CH4 * P_ATM  # [Pa]
    cathode_transport: TransportParameters = field(
        default_factory=lambda: TransportParameters(
            SOFCParams.Cathode.D_eff, SOFCParams.Cathode.delta
        )
    )
    anode_transport: TransportParameters = field(
        default_factory=lambda: TransportParameters(
            SOFCParams.Anode.D_eff, SOFCParams.Anode.delta
        )
    )
    cathode_kinetics: KineticParameters = field(
        default_factory=lambda: KineticParameters(
            SOFCParams.Kinetics.i0_prefactor_cathode,
            SOFCParams.Kinetics.T_activation_cathode
        )
    )
    anode_kinetics: KineticParameters = field(
        default_factory=lambda: KineticParameters(
            SOFCParams.Kinetics.i0_prefactor_anode,
            SOFCParams.Kinetics.T_activation_anode
        )
    )

    @classmethod
    def default(cls) -> "SOFCParameters":
        return cls()

    @classmethod
    def reference(cls) -> "SOFCParameters":
        """Parameter set that produced SOFCParams.Operating.reference_voltages."""
        return cls(conditions=CellConditions(T=SOFCParams.Operating.T_kelvin_reference))

    def gas_state(self) -> GasState:
        return GasState.from_partial_pressures(
            self.p_O2, self.p_CH4, self.constants, self.conditions
        )

    def limiting_current_densities(self, gas: GasState) -> Dict[str, float]:
        """Cathode and anode limiting current densities [A/m² scale]."""
        return {
            "cathode": limiting_current_density(
                gas.C_O2,
                self.cathode_transport.D_eff,
                self.cathode_transport.delta,
                self.constants.F
            ),
            "anode": limiting_current_density(
                gas.C_CH4,
                self.anode_transport.D_eff,
                self.anode_transport.delta,
                self.constants.F
            ),
        }

    def to_dict(self) -> Dict[str, float]:
        """Flat parameter dictionary, as consumed by PhysicsValidator."""
        return {
            "R": self.constants.R,
            "F": self.constants.F,
            "T": self.conditions.T,
            "n_electrons": self.conditions.n_electrons,
            "alpha": self.conditions.alpha,
            "area_resistance": self.conditions.area_resistance,
            "E_nernst": self.conditions.E_nernst,
            "p_O2": self.p_O2,
            "p_CH4": self.p_CH4,
            "D_cathode": self.cathode_transport.D_eff,
            "delta_cathode": self.cathode_transport.delta,
            "D_anode": self.anode_transport.D_eff,
            "delta_anode": self.anode_transport.delta,
            "i0_prefactor_cathode": self.cathode_kinetics.prefactor,
            "i0_prefactor_anode": self.anode_kinetics.prefactor,
        }
