"""
SOFC Overpotential Model
Operating voltage of a methane/oxygen solid-oxide fuel cell from closed-form losses.
"""

from .errors import DomainError, ConfigurationError
from .overpotentials import (
    to_model_current_density,
    gas_concentration,
    exchange_current_density,
    limiting_current_density,
    activation_overpotential,
    diffusion_overpotential,
    ohmic_overpotential,
    operating_voltage,
)
from .parameters import (
    PhysicalConstants,
    CellConditions,
    GasState,
    TransportParameters,
    KineticParameters,
    ExchangeCurrentDensities,
    SOFCParameters,
)
from .evaluator import OperatingPoint, SweepResult, SOFCEvaluator

__all__ = [
    'DomainError',
    'ConfigurationError',
    'to_model_current_density',
    'gas_concentration',
    'exchange_current_density',
    'limiting_current_density',
    'activation_overpotential',
    'diffusion_overpotential',
    'ohmic_overpotential',
    'operating_voltage',
    'PhysicalConstants',
    'CellConditions',
    'GasState',
    'TransportParameters',
    'KineticParameters',
    'ExchangeCurrentDensities',
    'SOFCParameters',
    'OperatingPoint',
    'SweepResult',
    'SOFCEvaluator',
]
