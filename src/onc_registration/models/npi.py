"""NPI validation result model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IdentifierValidationResult:
    """Outcome of validating an NPI; ``error`` is set iff the NPI is invalid."""

    valid: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.valid and self.error is not None:
            raise ValueError("A valid result cannot carry an error")
        if not self.valid and not self.error:
            raise ValueError("An invalid result must carry an error")

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "error": self.error}

    @classmethod
    def ok(cls) -> IdentifierValidationResult:
        return cls(valid=True)

    @classmethod
    def invalid(cls, error: str) -> IdentifierValidationResult:
        return cls(valid=False, error=error)
