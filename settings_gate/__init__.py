"""Validate proposed system setting values before they are written to the settings store."""

from .settings_config import (
    ConfigError,
    GateConfig,
    UnknownKeyPolicy,
    load_gate_config,
    load_rules_file,
)
from .validation import ValidatorRegistry, build_system_settings_registry
from .write_gate import (
    InvalidSettingValueError,
    SettingsWriteGate,
    SettingValidationError,
    UnknownSettingError,
)

__all__ = [
    "ConfigError",
    "GateConfig",
    "UnknownKeyPolicy",
    "load_gate_config",
    "load_rules_file",
    "ValidatorRegistry",
    "build_system_settings_registry",
    "SettingsWriteGate",
    "SettingValidationError",
    "UnknownSettingError",
    "InvalidSettingValueError",
]
