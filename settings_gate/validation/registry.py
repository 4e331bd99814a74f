"""Key -> rule registry: built once at startup, read-only afterwards."""
import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Self

from .rules import Rule
from .strategies import InvalidRuleParamsError, UnknownRuleError, build_rule

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base class for registry build errors."""


class DuplicateRuleError(RegistryError):
    def __init__(self, key: str):
        super().__init__(f"A rule is already registered for setting {key!r}")
        self.key = key


class RegistryFrozenError(RegistryError):
    def __init__(self, key: str):
        super().__init__(f"Cannot register {key!r}: registry has already been built")
        self.key = key


class ValidatorRegistry:
    """Read-only mapping from setting key to rule.

    Unknown keys give None from lookup(); what to do about them is the caller's call.
    """

    def __init__(self, rules: Mapping[str, Rule]):
        self._rules = MappingProxyType(dict(rules))

    def lookup(self, key: str) -> Rule | None:
        return self._rules.get(key)

    def validate(self, key: str, value: str | None) -> bool | None:
        """Apply the rule for key to value. None when no rule is registered."""
        rule = self._rules.get(key)
        if rule is None:
            return None
        return rule.validate(value)

    def keys(self) -> list[str]:
        return list(self._rules)

    def as_mapping(self) -> Mapping[str, Rule]:
        return self._rules

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __repr__(self):
        return f"ValidatorRegistry({len(self._rules)} rules)"


class RegistryBuilder:
    """Collects key -> rule entries. One rule per key; build() freezes it."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}
        self._built = False

    def register(self, key: str, rule: Rule) -> Self:
        if self._built:
            raise RegistryFrozenError(key)
        if key in self._rules:
            raise DuplicateRuleError(key)
        self._rules[key] = rule
        return self

    def register_all(self, keys: Iterable[str], rule: Rule) -> Self:
        for key in keys:
            self.register(key, rule)
        return self

    def register_entries(self, entries: Iterable[tuple[str, Rule]]) -> Self:
        for key, rule in entries:
            self.register(key, rule)
        return self

    def register_from_config(self, config: dict) -> Self:
        """Register rules described as {"rules": [{"key", "rule", "params"}]}.

        Entries that can't be built are logged and skipped. Duplicate keys still raise.
        """
        for entry in config.get("rules", []):
            if not isinstance(entry, dict):
                logger.warning("Skipping rule entry that is not an object: %r", entry)
                continue
            key = entry.get("key")
            rule_name = entry.get("rule")
            if not isinstance(key, str) or not isinstance(rule_name, str) or not key or not rule_name:
                logger.warning("Skipping rule entry without key or rule: %s", entry)
                continue
            params = entry.get("params") or {}
            if not isinstance(params, dict):
                logger.warning("Skipping setting %s: params must be an object, got %r", key, params)
                continue
            try:
                rule = build_rule(rule_name, params)
            except UnknownRuleError:
                logger.warning("Unknown rule %r for setting %s", rule_name, key)
                continue
            except InvalidRuleParamsError as e:
                logger.warning("Skipping setting %s: %s", key, e)
                continue
            self.register(key, rule)
        return self

    def build(self) -> ValidatorRegistry:
        self._built = True
        registry = ValidatorRegistry(self._rules)
        logger.info("Built validator registry with %d rules", len(registry))
        return registry
