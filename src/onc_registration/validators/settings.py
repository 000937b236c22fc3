"""Compare live host settings against the ONC required-settings table."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import REQUIRED_SETTINGS, ConfigurationSource
from ..models import ComplianceResult, ComplianceSummary, RequiredSettingRule


class SettingsComplianceChecker:
    """Evaluate a fixed, ordered rule table against a configuration source.

    Values are compared as exact strings. An unset setting reads as an empty
    string and fails its rule.
    """

    def __init__(
        self,
        source: ConfigurationSource,
        rules: Iterable[RequiredSettingRule] = REQUIRED_SETTINGS,
    ) -> None:
        self._source = source
        self._rules = tuple(rules)
        if not self._rules:
            raise ValueError("At least one required-setting rule must be provided")
        keys = [rule.key for rule in self._rules]
        if len(set(keys)) != len(keys):
            raise ValueError("Required-setting rule keys must be unique")

    @property
    def rules(self) -> tuple[RequiredSettingRule, ...]:
        return self._rules

    def evaluate_all(self) -> dict[str, ComplianceResult]:
        """Return one result per rule, keyed by setting, in declared order."""
        return {
            rule.key: ComplianceResult.evaluate(rule, self._source.get_setting_value(rule.key))
            for rule in self._rules
        }

    def all_pass(self) -> bool:
        return all(result.passed for result in self.evaluate_all().values())

    def summarize(self) -> ComplianceSummary:
        return ComplianceSummary.from_results(self.evaluate_all().values())
