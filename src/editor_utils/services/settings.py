"""Settings dataclass and its JSON/environment loader."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping

from jsonschema import Draft7Validator, ValidationError

__all__ = ["Settings", "SettingsStore", "SETTINGS_SCHEMA"]

LOGGER = logging.getLogger(__name__)
_SETTINGS_DIR = Path.home() / ".editor_utils"
_DEFAULT_SETTINGS_PATH = _SETTINGS_DIR / "settings.json"
_ENV_OVERRIDES: Mapping[str, str] = {
    "EDITOR_UTILS_COMMAND_PREFIX": "command_prefix",
    "EDITOR_UTILS_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "EDITOR_UTILS_DEBUG_LOGGING": "debug_logging",
    "EDITOR_UTILS_CONSOLE_LOGGING": "console_logging",
    "EDITOR_UTILS_TELEMETRY": "telemetry_enabled",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}

SETTINGS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "command_prefix": {"type": "string", "minLength": 1, "pattern": "^[^:\\s]+$"},
        "debug_logging": {"type": "boolean"},
        "console_logging": {"type": "boolean"},
        "log_dir": {"type": ["string", "null"]},
        "telemetry_enabled": {"type": "boolean"},
    },
    "additionalProperties": True,
}

_SETTINGS_VALIDATOR = Draft7Validator(SETTINGS_SCHEMA)


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the command layer."""

    command_prefix: str = "editor-utils"
    debug_logging: bool = False
    console_logging: bool = True
    log_dir: str | None = None
    telemetry_enabled: bool = True

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug_logging else logging.INFO


class SettingsStore:
    """Loads :class:`Settings` from an optional JSON file plus overrides."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or _DEFAULT_SETTINGS_PATH

    @property
    def path(self) -> Path:
        """Return the resolved path backing this store."""

        return self._path

    def load(self, *, overrides: Mapping[str, Any] | None = None) -> Settings:
        """Load settings from disk, then apply environment and runtime overrides."""

        settings = Settings()
        payload = self._read_payload()
        if payload:
            settings = self._apply_overrides(settings, payload, source="file")
        settings = self._apply_env_overrides(settings)
        if overrides:
            settings = self._apply_overrides(settings, overrides)
        return settings

    def _read_payload(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError as exc:
            LOGGER.warning("Settings file %s is not valid JSON: %s", self._path, exc)
            return {}
        try:
            _SETTINGS_VALIDATOR.validate(payload)
        except ValidationError as error:
            LOGGER.warning("Settings file %s failed validation: %s", self._path, _format_validation_error(error))
            return {}
        return payload

    def _apply_overrides(
        self,
        settings: Settings,
        overrides: Mapping[str, Any],
        *,
        source: str = "runtime",
    ) -> Settings:
        allowed = {field.name for field in fields(Settings)}
        filtered: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key not in allowed or value is None:
                continue
            filtered[key] = value
        if filtered:
            LOGGER.debug("Applying %s settings overrides: %s", source, sorted(filtered))
            settings = replace(settings, **filtered)
        return settings

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        overrides: Dict[str, Any] = {}
        for env_name, field_name in _ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value
        for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is not None:
                overrides[field_name] = value.strip().lower() in _TRUE_VALUES
        if overrides:
            settings = self._apply_overrides(settings, overrides, source="environment")
        return settings


def _format_validation_error(error: ValidationError) -> str:
    location = ".".join(str(part) for part in error.absolute_path)
    if location:
        return f"{location}: {error.message}"
    return error.message
