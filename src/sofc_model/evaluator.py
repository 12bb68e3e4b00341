"""
SOFC Operating-Point Evaluator
Computes the operating voltage of a methane/oxygen solid-oxide fuel cell.

V = E_Nernst - η_act,c - η_act,a - η_diff,c - η_diff,a - η_Ω
"""

import os
import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from config.physics_constants import SOFCParams, kelvin_to_celsius
from src.physics_validator.validator import PhysicsValidator, ValidationResult
from src.sofc_model.errors import DomainError, ConfigurationError
from src.sofc_model.overpotentials import (
    activation_overpotential,
    diffusion_overpotential,
    ohmic_overpotential,
    operating_voltage
)
from src.sofc_model.parameters import (
    SOFCParameters,
    GasState,
    ExchangeCurrentDensities
)


@dataclass(frozen=True)
class OperatingPoint:
    """One current density and the losses and voltage it produces."""
    current_density: float  # [A/cm²]
    voltage: float  # [V]

    eta_act_cathode: float
    eta_act_anode: float
    eta_diff_cathode: float
    eta_diff_anode: float
    eta_ohm: float

    @property
    def total_overpotential(self) -> float:
        return (self.eta_act_cathode + self.eta_act_anode +
                self.eta_diff_cathode + self.eta_diff_anode + self.eta_ohm)

    @property
    def power_density(self) -> float:
        """Power density [W/cm²]."""
        return self.voltage * self.current_density

    def format_line(self) -> str:
        return f"Operating Voltage at i = {self.current_density} A/cm²: {self.voltage} V"


Outcome = Union[OperatingPoint, DomainError]


@dataclass
class SweepResult:
    """Outcomes of a current-density sweep, in input order."""
    outcomes: List[Outcome] = field(default_factory=list)

    @property
    def points(self) -> List[OperatingPoint]:
        return [o for o in self.outcomes if isinstance(o, OperatingPoint)]

    @property
    def failures(self) -> List[DomainError]:
        return [o for o in self.outcomes if isinstance(o, DomainError)]

    @property
    def all_succeeded(self) -> bool:
        return not self.failures

    def voltages(self) -> np.ndarray:
        return np.array([p.voltage for p in self.points])

    def report_lines(self) -> List[str]:
        lines = []
        for outcome in self.outcomes:
            if isinstance(outcome, OperatingPoint):
                lines.append(outcome.format_line())
            else:
                lines.append(
                    f"Operating point at i = {outcome.current_density} A/cm² "
                    f"failed ({outcome.term}): {outcome.reason}"
                )
        return lines

    def to_dataframe(self) -> pd.DataFrame:
        """Successful operating points as a DataFrame (one row per point)."""
        points = self.points
        return pd.DataFrame({
            "current_density_A_cm2": [p.current_density for p in points],
            "voltage_V": [p.voltage for p in points],
            "eta_act_cathode_V": [p.eta_act_cathode for p in points],
            "eta_act_anode_V": [p.eta_act_anode for p in points],
            "eta_diff_cathode_V": [p.eta_diff_cathode for p in points],
            "eta_diff_anode_V": [p.eta_diff_anode for p in points],
            "eta_ohm_V": [p.eta_ohm for p in points],
            "power_density_W_cm2": [p.power_density for p in points],
        })


class SOFCEvaluator:
    """
    Evaluates SOFC operating points from fixed parameters.

    Implements:
    - Gas concentrations from the ideal gas law
    - Arrhenius exchange current densities
    - Tafel activation losses at both electrodes
    - Fickian diffusion losses at both electrodes
    - Ohmic loss
    """

    def __init__(
        self,
        parameters: Optional[SOFCParameters] = None,
        verbose: bool = False
    ):
        """
        Initialize evaluator. Validates parameters and derives the
        gas state and exchange current densities once.

        Args:
            parameters: Fixed parameter set (defaults to the documented cell)
            verbose: Print progress messages

        Raises:
            ConfigurationError: if any constant is non-physical
        """
        self.parameters = parameters or SOFCParameters.default()
        self.verbose = verbose

        self.validation = self._check_configuration()

        try:
            self.gas: GasState = self.parameters.gas_state()
            self.i0: ExchangeCurrentDensities = ExchangeCurrentDensities.from_conditions(
                self.gas,
                self.parameters.conditions,
                self.parameters.cathode_kinetics,
                self.parameters.anode_kinetics
            )
        except DomainError as e:
            raise ConfigurationError(f"Cannot derive exchange current densities: {e}") from e

        if self.verbose:
            T = self.parameters.conditions.T
            print(f"✓ SOFC Evaluator initialized")
            print(f"  Temperature: {T} K ({kelvin_to_celsius(T):.1f}°C)")
            print(f"  C_O2: {self.gas.C_O2:.4f} mol/m³, C_CH4: {self.gas.C_CH4:.4f} mol/m³")
            print(f"  i0 cathode: {self.i0.i0_cathode:.4e}, i0 anode: {self.i0.i0_anode:.4e}")

    def _check_configuration(self) -> ValidationResult:
        validator = PhysicsValidator(verbose=self.verbose)
        result = validator.validate_parameters(self.parameters.to_dict(), "SOFC")
        if not result.is_valid:
            raise ConfigurationError(
                "Non-physical SOFC parameters: " + "; ".join(result.violations),
                violations=result.violations
            )
        if self.verbose:
            for warning in result.warnings:
                print(f"  ⚠ {warning}")
        return result

    def limiting_current_densities(self) -> Dict[str, float]:
        """Mass-transport limiting current densities of cathode and anode."""
        return self.parameters.limiting_current_densities(self.gas)

    def evaluate(self, i: float) -> OperatingPoint:
        """
        Evaluate one operating point.

        Args:
            i: Current density [A/cm²]

        Returns:
            OperatingPoint

        Raises:
            DomainError: tagged with i and the failing term
        """
        p = self.parameters
        R_gas, F_const = p.constants.R, p.constants.F
        T = p.conditions.T
        alpha = p.conditions.alpha
        n = p.conditions.n_electrons

        terms = {}
        steps = [
            ("activation_cathode", lambda: activation_overpotential(
                i, self.i0.i0_cathode, alpha, R_gas, T, F_const)),
            ("activation_anode", lambda: activation_overpotential(
                i, self.i0.i0_anode, alpha, R_gas, T, F_const)),
            ("diffusion_cathode", lambda: diffusion_overpotential(
                i, self.gas.C_O2, p.cathode_transport.D_eff, p.cathode_transport.delta,
                R_gas, T, F_const, n)),
            ("diffusion_anode", lambda: diffusion_overpotential(
                i, self.gas.C_CH4, p.anode_transport.D_eff, p.anode_transport.delta,
                R_gas, T, F_const, n)),
            ("ohmic", lambda: ohmic_overpotential(i, p.conditions.area_resistance)),
        ]
        for term, compute in steps:
            try:
                terms[term] = compute()
            except DomainError as e:
                raise e.at(i, term) from e

        V = operating_voltage(
            p.conditions.E_nernst,
            terms["activation_cathode"],
            terms["activation_anode"],
            terms["diffusion_cathode"],
            terms["diffusion_anode"],
            terms["ohmic"],
            current_density=i
        )

        return OperatingPoint(
            current_density=i,
            voltage=V,
            eta_act_cathode=float(terms["activation_cathode"]),
            eta_act_anode=float(terms["activation_anode"]),
            eta_diff_cathode=float(terms["diffusion_cathode"]),
            eta_diff_anode=float(terms["diffusion_anode"]),
            eta_ohm=float(terms["ohmic"])
        )

    def iter_operating_points(self, i_values: Iterable[float]) -> Iterator[Outcome]:
        """
        Stream outcomes in input order. A failing input yields its
        DomainError and evaluation continues with the next input.
        """
        for i in i_values:
            try:
                yield self.evaluate(i)
            except DomainError as e:
                if self.verbose:
                    print(f"  ✗ {e}")
                yield e

    def sweep(self, i_values: Iterable[float]) -> SweepResult:
        """Evaluate every current density and collect the outcomes."""
        return SweepResult(outcomes=list(self.iter_operating_points(i_values)))

    def polarization_curve(
        self,
        i_min: float = 0.1,
        i_max: float = 2.5,
        n_points: int = 25
    ) -> pd.DataFrame:
        """
        Generate a polarization curve with its loss breakdown.

        Args:
            i_min: Minimum current density [A/cm²]
            i_max: Maximum current density [A/cm²]
            n_points: Number of data points

        Returns:
            DataFrame with voltage and overpotential columns
        """
        i = np.linspace(i_min, i_max, n_points)
        result = self.sweep(float(x) for x in i)
        if not result.all_succeeded:
            raise result.failures[0]

        df = result.to_dataframe()
        df["temperature_C"] = kelvin_to_celsius(self.parameters.conditions.T)
        df["E_nernst_V"] = self.parameters.conditions.E_nernst
        df["i0_cathode"] = self.i0.i0_cathode
        df["i0_anode"] = self.i0.i0_anode
        return df

    def validate_data(self, df: pd.DataFrame) -> Dict[str, bool]:
        """
        Validate generated data against physical expectations.

        Args:
            df: DataFrame from polarization_curve()

        Returns:
            Dictionary of validation results
        """
        i_sorted = df.sort_values("current_density_A_cm2")
        checks = {
            "current_positive": bool((df["current_density_A_cm2"] > 0).all()),
            "diffusion_non_negative": bool(
                (df["eta_diff_cathode_V"] >= 0).all() and (df["eta_diff_anode_V"] >= 0).all()
            ),
            "ohmic_non_negative": bool((df["eta_ohm_V"] >= 0).all()),
            "voltage_decreasing": bool(np.all(np.diff(i_sorted["voltage_V"].to_numpy()) < 0)),
        }
        checks["all_checks_passed"] = all(checks.values())
        return checks


def main(
    i_values: Optional[List[float]] = None,
    parameters: Optional[SOFCParameters] = None
) -> SweepResult:
    """
    Evaluate the documented operating points and print one line each.

    Without `parameters` the default cell (973.15 K) is reported. Pass
    SOFCParameters.reference() to reproduce the recorded run at 973 K.
    """
    evaluator = SOFCEvaluator(parameters)
    if i_values is None:
        i_values = SOFCParams.Operating.current_densities

    result = evaluator.sweep(i_values)
    for line in result.report_lines():
        print(line)

    return result


if __name__ == "__main__":
    main()
