"""
Physics Validator Package
Validates SOFC parameter sets and polarization data against physical constraints.
"""

from .validator import PhysicsValidator, ValidationResult

__all__ = ['PhysicsValidator', 'ValidationResult']
