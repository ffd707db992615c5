"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        CharsheetError: Base exception for all application errors.
        RulesEngineError: Precondition violations in the rules engine.
        SyncError: Remote character store failures.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from charsheet.core.config import (
    Settings,
    SyncSettings,
    UISettings,
    clear_settings_cache,
    get_settings,
)
from charsheet.core.exceptions import (
    CharsheetError,
    ConfigurationError,
    DiceRollError,
    RulesEngineError,
    SessionStateError,
    SyncError,
    SyncLoadError,
    SyncSaveError,
    UIError,
    UnknownAttributeError,
    UnknownClassError,
    UnknownSkillError,
)
from charsheet.core.logging import (
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Base exception
    "CharsheetError",
    # Rules engine exceptions
    "RulesEngineError",
    "UnknownAttributeError",
    "UnknownSkillError",
    "UnknownClassError",
    "DiceRollError",
    # Sync exceptions
    "SyncError",
    "SyncLoadError",
    "SyncSaveError",
    # Configuration exceptions
    "ConfigurationError",
    # UI exceptions
    "UIError",
    "SessionStateError",
    # Configuration
    "Settings",
    "SyncSettings",
    "UISettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
