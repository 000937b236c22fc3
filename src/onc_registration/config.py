"""Configuration sources for the ONC registration checks.

The host application owns settings storage. The checks only read values
through the narrow ``ConfigurationSource`` protocol, so they run against an
in-memory mapping in tests, against a JSON settings file from the CLI, or
against an environment overlay in containerized deployments.

Settings files are a single JSON object mapping setting keys to scalar values:

    {
        "gbl_fhir_rest_api": "1",
        "site_addr_oath": "https://emr.example.com",
        "oce_onc_registration_org_npi": "1234567893"
    }
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from collections.abc import Mapping

from .errors import ConfigError
from .models import RequiredSettingRule


DEFAULT_SETTINGS_PATH = Path("settings.json")
SETTINGS_PATH_ENV_VAR = "ONC_REGISTRATION_SETTINGS"
ENV_CONFIG_VAR = "OCE_ONC_REGISTRATION_ENV_CONFIG"

_TRUTHY = {"1", "true", "yes", "y", "on"}

# Module settings
CONFIG_OPTION_ENABLED = "oce_onc_registration_enabled"
CONFIG_OPTION_ORG_NAME = "oce_onc_registration_org_name"
CONFIG_OPTION_ORG_LOCATION = "oce_onc_registration_org_location"
CONFIG_OPTION_ORG_NPI = "oce_onc_registration_org_npi"
CONFIG_OPTION_FHIR_ENDPOINT = "oce_onc_registration_fhir_endpoint"
CONFIG_OPTION_REGISTRATION_DATE = "oce_onc_registration_date"
CONFIG_OPTION_REGISTRATION_STATUS = "oce_onc_registration_status"

# Host settings read by the module
SITE_ADDRESS_KEY = "site_addr_oath"
FHIR_API_SUFFIX = "/apis/default/fhir/r4"

# Host settings that must hold these exact values for ONC certification.
REQUIRED_SETTINGS: tuple[RequiredSettingRule, ...] = (
    RequiredSettingRule(
        key="gbl_fhir_rest_api",
        required_value="1",
        description="Enable OpenEMR Standard FHIR REST API",
    ),
    RequiredSettingRule(
        key="oauth_hash_algo",
        required_value="SHA512",
        description="Hash Algorithm for Authentication",
    ),
    RequiredSettingRule(
        key="oauth_token_hash_algo",
        required_value="SHA512",
        description="Hash Algorithm for Token",
    ),
    RequiredSettingRule(
        key="enable_auditlog_encryption",
        required_value="1",
        description="Enable Audit Log Encryption",
    ),
)

# Module settings that may be overridden from the environment.
ENV_KEY_MAP: dict[str, str] = {
    CONFIG_OPTION_ENABLED: "OCE_ONC_REGISTRATION_ENABLED",
    CONFIG_OPTION_ORG_NAME: "OCE_ONC_REGISTRATION_ORG_NAME",
    CONFIG_OPTION_ORG_LOCATION: "OCE_ONC_REGISTRATION_ORG_LOCATION",
    CONFIG_OPTION_ORG_NPI: "OCE_ONC_REGISTRATION_ORG_NPI",
    CONFIG_OPTION_FHIR_ENDPOINT: "OCE_ONC_REGISTRATION_FHIR_ENDPOINT",
}


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


@runtime_checkable
class ConfigurationSource(Protocol):
    """Read-only access to host settings."""

    def get_setting_value(self, key: str) -> str:
        """Return the raw setting value, or an empty string when unset."""
        ...

    def get_string(self, key: str, default: str = "") -> str:
        ...

    def get_boolean(self, key: str, default: bool = False) -> bool:
        ...


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class MappingConfigSource:
    """Settings held in memory, keyed by setting name.

    An empty value is treated as unset, so the typed getters fall back to
    their default for it.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, str] = {
            str(key): _render(value) for key, value in (values or {}).items() if value is not None
        }

    def get_setting_value(self, key: str) -> str:
        return self._values.get(key, "")

    def get_string(self, key: str, default: str = "") -> str:
        value = self._values.get(key, "")
        return value if value != "" else default

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key, "")
        if value == "":
            return default
        return parse_bool(value)


class EnvironmentConfigSource:
    """Overlay environment variables on top of another source.

    Only module settings listed in ``ENV_KEY_MAP`` are read from the
    environment; host settings always come from the fallback source.
    """

    def __init__(
        self,
        fallback: ConfigurationSource,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._fallback = fallback
        self._environ = os.environ if environ is None else environ

    def _lookup(self, key: str) -> str | None:
        env_var = ENV_KEY_MAP.get(key)
        if env_var is None:
            return None
        return self._environ.get(env_var)

    def get_setting_value(self, key: str) -> str:
        value = self._lookup(key)
        if value is not None:
            return value
        return self._fallback.get_setting_value(key)

    def get_string(self, key: str, default: str = "") -> str:
        value = self._lookup(key)
        if value is not None:
            return value
        return self._fallback.get_string(key, default)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self._lookup(key)
        if value is not None:
            return parse_bool(value)
        return self._fallback.get_boolean(key, default)


def is_env_config_mode(environ: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if environ is None else environ
    return parse_bool(environ.get(ENV_CONFIG_VAR, ""))


def _resolve_settings_path(path: Path | str | None = None) -> Path:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. ONC_REGISTRATION_SETTINGS environment variable
    3. settings.json in the working directory
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(SETTINGS_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return DEFAULT_SETTINGS_PATH


def load_settings(path: Path | str | None = None) -> MappingConfigSource:
    """Load settings from a JSON file.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    settings_path = _resolve_settings_path(path)

    if not settings_path.exists():
        raise ConfigError(f"Settings file not found: {settings_path}")

    try:
        content = settings_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read settings file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in settings file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Settings must be a JSON object")

    for key, value in data.items():
        if value is not None and not isinstance(value, (str, int, float, bool)):
            raise ConfigError(f"Setting '{key}' must be a string, number or boolean")

    return MappingConfigSource(data)


def create_config_source(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigurationSource:
    """Load the settings file, adding the environment overlay when enabled."""
    source: ConfigurationSource = load_settings(path)
    if is_env_config_mode(environ):
        return EnvironmentConfigSource(source, environ)
    return source


def derive_fhir_endpoint(site_base_url: str) -> str:
    """Return the FHIR R4 base URL for a site address, or "" when unset."""
    if site_base_url == "":
        return ""
    return site_base_url.rstrip("/") + FHIR_API_SUFFIX


class ModuleConfig:
    """Typed accessors for the module's own settings."""

    def __init__(self, source: ConfigurationSource) -> None:
        self.source = source

    def is_enabled(self) -> bool:
        return self.source.get_boolean(CONFIG_OPTION_ENABLED, False)

    def is_configured(self) -> bool:
        return self.org_name() != "" and self.org_npi() != "" and self.fhir_endpoint() != ""

    def org_name(self) -> str:
        return self.source.get_string(CONFIG_OPTION_ORG_NAME, "")

    def org_location(self) -> str:
        return self.source.get_string(CONFIG_OPTION_ORG_LOCATION, "")

    def org_npi(self) -> str:
        return self.source.get_string(CONFIG_OPTION_ORG_NPI, "")

    def fhir_endpoint(self) -> str:
        """Return the configured FHIR endpoint, falling back to detection."""
        configured = self.source.get_string(CONFIG_OPTION_FHIR_ENDPOINT, "")
        if configured != "":
            return configured
        return self.detect_fhir_endpoint()

    def detect_fhir_endpoint(self) -> str:
        return derive_fhir_endpoint(self.source.get_string(SITE_ADDRESS_KEY, ""))

    def registration_date(self) -> str:
        return self.source.get_string(CONFIG_OPTION_REGISTRATION_DATE, "")

    def registration_status(self) -> str:
        return self.source.get_string(CONFIG_OPTION_REGISTRATION_STATUS, "")
