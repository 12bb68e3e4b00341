"""
Physics Validator
Checks SOFC parameter sets and polarization data against physical constraints.
"""

import os
from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field
import numpy as np
import pandas as pd

import sys
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from config.physics_constants import VALIDATION_BOUNDS


@dataclass
class ValidationResult:
    """Results from physics validation."""
    is_valid: bool
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    dimensional_errors: List[str] = field(default_factory=list)
    physics_errors: List[str] = field(default_factory=list)

    def add_violation(self, category: str, message: str):
        """Add a violation to the appropriate list."""
        self.violations.append(f"[{category}] {message}")
        self.is_valid = False

        if category == "dimensional":
            self.dimensional_errors.append(message)
        elif category == "physics":
            self.physics_errors.append(message)

    def add_warning(self, message: str):
        """Add a warning (doesn't invalidate)."""
        self.warnings.append(message)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        return {
            "is_valid": self.is_valid,
            "total_violations": len(self.violations),
            "dimensional_errors": len(self.dimensional_errors),
            "physics_errors": len(self.physics_errors),
            "warnings": len(self.warnings)
        }


class PhysicsValidator:
    """
    Validates SOFC model inputs and outputs for physics correctness.

    Checks:
    1. Positive constants (T, R, F, n, D, δ, partial pressures, prefactors)
    2. Transfer coefficient α ∈ (0, 1]
    3. Non-negative area-specific resistance
    4. Polarization data: non-negative losses, voltage decreasing with current
    """

    # Parameters that must be strictly positive
    POSITIVE_PARAMETERS = {
        "R": "Gas constant",
        "F": "Faraday constant",
        "T": "Temperature",
        "n_electrons": "Electrons per fuel molecule",
        "p_O2": "Oxygen partial pressure",
        "p_CH4": "Methane partial pressure",
        "D_cathode": "Cathode diffusivity",
        "delta_cathode": "Cathode diffusion layer thickness",
        "D_anode": "Anode diffusivity",
        "delta_anode": "Anode diffusion layer thickness",
        "i0_prefactor_cathode": "Cathode exchange current prefactor",
        "i0_prefactor_anode": "Anode exchange current prefactor",
        "E_nernst": "Nernst voltage",
    }

    def __init__(self, verbose: bool = True):
        """
        Initialize validator.

        Args:
            verbose: Print validation messages
        """
        self.verbose = verbose
        self.physics_bounds = VALIDATION_BOUNDS["SOFC"]

    def validate_parameters(
        self,
        params: Dict[str, float],
        param_type: str = "SOFC"
    ) -> ValidationResult:
        """
        Validate parameter values against physical bounds.

        Args:
            params: Dictionary of parameter values
            param_type: System type (only "SOFC" is supported)

        Returns:
            ValidationResult
        """
        result = ValidationResult(is_valid=True)

        if param_type != "SOFC":
            result.add_violation("physics", f"Unsupported system type '{param_type}'")
            return result

        for key, label in self.POSITIVE_PARAMETERS.items():
            if key not in params:
                continue
            value = params[key]
            if not np.isfinite(value) or value <= 0:
                result.add_violation("physics", f"{label} {key}={value} must be positive")

        if 'alpha' in params:
            alpha = params['alpha']
            if not (0 < alpha <= 1):
                result.add_violation(
                    "physics",
                    f"Transfer coefficient α={alpha} out of bounds (0, 1]"
                )

        if 'area_resistance' in params:
            asr = params['area_resistance']
            if not np.isfinite(asr) or asr < 0:
                result.add_violation(
                    "physics",
                    f"Area-specific resistance ASR={asr} Ω·cm² must be finite and non-negative"
                )
            elif asr > self.physics_bounds['area_resistance'][1]:
                result.add_warning(f"Unusually high resistance: ASR={asr} Ω·cm²")

        if 'T' in params and params['T'] > 0:
            T = params['T']
            T_low, T_high = self.physics_bounds['temperature']
            if not (T_low <= T <= T_high):
                result.add_warning(
                    f"Temperature T={T} K outside the usual SOFC window "
                    f"[{T_low}, {T_high}] K"
                )

        if self.verbose:
            summary = result.get_summary()
            if result.is_valid:
                print(f"✓ Parameter validation passed ({summary['warnings']} warnings)")
            else:
                print(f"✗ Parameter validation failed ({summary['total_violations']} violations)")

        return result

    def validate_polarization_data(
        self,
        df: pd.DataFrame,
        context: Optional[Dict[str, Any]] = None
    ) -> ValidationResult:
        """
        Validate a generated polarization curve.

        Args:
            df: DataFrame with columns current_density_A_cm2, voltage_V and eta_*_V
            context: Optional context (e.g. {"unit": "A/cm2"})

        Returns:
            ValidationResult
        """
        result = ValidationResult(is_valid=True)
        context = context or {}

        if context.get("unit", "A/cm2") != "A/cm2":
            result.add_violation(
                "dimensional",
                f"Polarization data must be in A/cm², got {context['unit']}"
            )

        required = ["current_density_A_cm2", "voltage_V"]
        missing = [c for c in required if c not in df.columns]
        if missing:
            result.add_violation("dimensional", f"Missing columns: {missing}")
            return result

        i = df["current_density_A_cm2"].to_numpy()
        V = df["voltage_V"].to_numpy()

        if not np.all(np.isfinite(V)):
            result.add_violation("physics", "Non-finite operating voltage")

        if np.any(i <= 0):
            result.add_violation("physics", "Current density must be positive")

        i_high = self.physics_bounds['current_density'][1]
        if np.any(i > i_high):
            result.add_warning(f"Current density above {i_high} A/cm²")

        for column in ["eta_diff_cathode_V", "eta_diff_anode_V", "eta_ohm_V"]:
            if column in df.columns and (df[column] < 0).any():
                result.add_violation("physics", f"{column} must be non-negative")

        for column in ["eta_act_cathode_V", "eta_act_anode_V"]:
            if column in df.columns and (df[column] < 0).any():
                result.add_warning(f"{column} negative: i < i0 at some points")

        order = np.argsort(i)
        if len(V) > 1 and not np.all(np.diff(V[order]) < 0):
            result.add_violation(
                "physics",
                "Operating voltage must decrease strictly with current density"
            )

        return result
