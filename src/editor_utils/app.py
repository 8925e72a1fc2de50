"""Bootstrap helpers: load settings, configure logging, build the command table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .commands.registry import CommandRegistry, LineMover
from .services.settings import Settings, SettingsStore
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: Settings, *, force: bool = False) -> Path:
    """Configure logging for the command layer."""

    log_path = logging_utils.setup_logging(settings, force=force)
    _LOGGER.debug("Logging configured (level=%s)", logging.getLevelName(settings.log_level))
    return log_path


def load_settings(
    path: Optional[Path] = None,
    *,
    store: SettingsStore | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load settings or fall back to defaults."""

    active_store = store or SettingsStore(path)
    return active_store.load(overrides=overrides)


def build_registry(settings: Settings | None = None, *, line_mover: LineMover | None = None) -> CommandRegistry:
    """Return a registry holding the built-in commands under the configured prefix."""

    active = settings or Settings()
    registry = CommandRegistry(
        prefix=active.command_prefix,
        line_mover=line_mover,
        telemetry_enabled=active.telemetry_enabled,
    )
    _LOGGER.debug("Registered %d commands under '%s'", len(registry), active.command_prefix)
    return registry


def bootstrap(
    settings_path: Optional[Path] = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    line_mover: LineMover | None = None,
) -> CommandRegistry:
    """Load settings, configure logging and return the command registry."""

    settings = load_settings(settings_path, overrides=overrides)
    configure_logging(settings)
    return build_registry(settings, line_mover=line_mover)


__all__ = ["bootstrap", "build_registry", "configure_logging", "load_settings"]
