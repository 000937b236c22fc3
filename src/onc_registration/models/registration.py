"""Registration verification and completeness models."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class VerificationResult:
    """Whether the FHIR endpoint appears on the published URLs page.

    ``error`` is set only when the status could not be determined; a
    successful check that finds no listing has ``registered=False`` and no
    error.
    """

    registered: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.registered and self.error is not None:
            raise ValueError("A registered result cannot carry an error")

    def to_dict(self) -> dict[str, object]:
        return {"registered": self.registered, "error": self.error}

    @classmethod
    def unavailable(cls, error: str) -> VerificationResult:
        return cls(registered=False, error=error)


@dataclass(frozen=True)
class RegistrationInfoStatus:
    """Whether the organization details needed to register are all present."""

    missing: tuple[str, ...]

    @property
    def complete(self) -> bool:
        return not self.missing

    def to_dict(self) -> dict[str, object]:
        return {"complete": self.complete, "missing": list(self.missing)}

    @classmethod
    def from_iterable(cls, missing: Iterable[str]) -> RegistrationInfoStatus:
        return cls(missing=tuple(missing))
