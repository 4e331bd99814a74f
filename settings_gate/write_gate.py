"""Write gate: decides whether a proposed setting write may reach the store."""
import logging
from collections.abc import Mapping

from settings_gate.settings_config import (
    GateConfig,
    UnknownKeyPolicy,
    load_gate_config,
    load_rules_file,
)
from settings_gate.validation.registry import ValidatorRegistry
from settings_gate.validation.system_settings import build_system_settings_registry

logger = logging.getLogger(__name__)


class SettingValidationError(ValueError):
    """A write was refused."""

    def __init__(self, key: str, message: str):
        super().__init__(message)
        self.key = key


class UnknownSettingError(SettingValidationError):
    def __init__(self, key: str):
        super().__init__(key, f"Invalid setting: {key}")


class InvalidSettingValueError(SettingValidationError):
    def __init__(self, key: str, value: str | None):
        super().__init__(key, f"Invalid value: {value!r} for setting: {key}")
        self.value = value


class SettingsWriteGate:
    """Applies the registry to proposed writes. Created once at service startup."""

    def __init__(
        self,
        registry: ValidatorRegistry,
        unknown_key_policy: UnknownKeyPolicy = UnknownKeyPolicy.REJECT,
    ):
        self.registry = registry
        self.unknown_key_policy = unknown_key_policy

    @classmethod
    def from_config(cls, config: GateConfig | None = None) -> "SettingsWriteGate":
        """Build the system registry (plus any rules file) and wrap it in a gate."""
        config = config or load_gate_config()
        extra_rules = load_rules_file(config.rules_file) if config.rules_file else None
        registry = build_system_settings_registry(extra_rules)
        return cls(registry, config.unknown_key_policy)

    def is_allowed(self, key: str, value: str | None) -> bool:
        result = self.registry.validate(key, value)
        if result is None:
            return self.unknown_key_policy is UnknownKeyPolicy.ACCEPT
        return result

    def check_write(self, key: str, value: str | None) -> None:
        """Raise if the write must be refused."""
        result = self.registry.validate(key, value)
        if result is None:
            if self.unknown_key_policy is UnknownKeyPolicy.ACCEPT:
                return
            logger.warning("Rejected write to unknown setting %s", key)
            raise UnknownSettingError(key)
        if not result:
            logger.warning("Rejected value %r for setting %s", value, key)
            raise InvalidSettingValueError(key, value)

    def check_writes(self, values: Mapping[str, str | None]) -> list[tuple[str, str]]:
        """Check a batch of writes. Returns (key, message) for each refused write."""
        failures: list[tuple[str, str]] = []
        for key, value in values.items():
            try:
                self.check_write(key, value)
            except SettingValidationError as e:
                failures.append((e.key, str(e)))
        return failures
