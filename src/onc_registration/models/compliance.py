"""Required-setting rules and their evaluation results."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable


@dataclass(frozen=True)
class RequiredSettingRule:
    """A host setting that must hold an exact value."""

    key: str
    required_value: str
    description: str

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Rule key must be non-empty")
        if not self.description:
            raise ValueError(f"Rule '{self.key}' must have a description")


@dataclass(frozen=True)
class ComplianceResult:
    """Outcome of comparing one live setting against its rule."""

    key: str
    description: str
    required_value: str
    actual_value: str
    passed: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "setting": self.key,
            "description": self.description,
            "required": self.required_value,
            "actual": self.actual_value,
            "passed": self.passed,
        }

    @classmethod
    def evaluate(cls, rule: RequiredSettingRule, actual_value: str) -> ComplianceResult:
        return cls(
            key=rule.key,
            description=rule.description,
            required_value=rule.required_value,
            actual_value=actual_value,
            passed=actual_value == rule.required_value,
        )


@dataclass(frozen=True)
class ComplianceSummary:
    """Pass/fail counts across a rule table."""

    passed: int
    failed: int
    total: int

    def __post_init__(self) -> None:
        if self.passed < 0 or self.failed < 0:
            raise ValueError("Counts must be non-negative")
        if self.passed + self.failed != self.total:
            raise ValueError("total must equal passed + failed")

    def to_dict(self) -> dict[str, int]:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "total": self.total,
        }

    @classmethod
    def from_results(cls, results: Iterable[ComplianceResult]) -> ComplianceSummary:
        passed = 0
        failed = 0
        for result in results:
            if result.passed:
                passed += 1
            else:
                failed += 1
        return cls(passed=passed, failed=failed, total=passed + failed)
