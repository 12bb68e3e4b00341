"""
Error types raised by the SOFC overpotential model.
"""

from typing import Optional


class DomainError(ValueError):
    """
    A logarithm or division received a non-positive argument.

    Attributes:
        current_density: Current density [A/cm²] that triggered the error,
            or None when raised while deriving setup quantities
        term: Name of the failing term (e.g. "activation_cathode")
        reason: Short description of the violated precondition
    """

    def __init__(
        self,
        reason: str,
        current_density: Optional[float] = None,
        term: Optional[str] = None
    ):
        self.reason = reason
        self.current_density = current_density
        self.term = term
        super().__init__(self._format())

    def _format(self) -> str:
        parts = []
        if self.current_density is not None:
            parts.append(f"i = {self.current_density} A/cm²")
        if self.term is not None:
            parts.append(self.term)
        if parts:
            return f"[{', '.join(parts)}] {self.reason}"
        return self.reason

    def at(self, current_density: float, term: Optional[str] = None) -> "DomainError":
        """Return a copy tagged with the operating point that failed."""
        return DomainError(
            self.reason,
            current_density=current_density,
            term=term if term is not None else self.term
        )


class ConfigurationError(ValueError):
    """A fixed physical constant is non-physical. Detected once at setup."""

    def __init__(self, message: str, violations=None):
        self.violations = list(violations or [])
        super().__init__(message)
