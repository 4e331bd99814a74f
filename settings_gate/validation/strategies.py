"""Composite rule definitions and the name -> constructor table for config-driven rules."""
from collections.abc import Callable, Iterable
from itertools import combinations
from typing import Any

from .rules import (
    ANY_STRING_RULE,
    BOOLEAN_RULE,
    CUSTOM_VIBRATION_PATTERN_RULE,
    LENIENT_IP_ADDRESS_RULE,
    URI_RULE,
    VIBRATION_INTENSITY_RULE,
    AnyIntegerRule,
    ComponentNameRule,
    DiscreteValueRule,
    InclusiveFloatRangeRule,
    InclusiveIntegerRangeRule,
    NonNegativeIntegerRule,
    Rule,
    is_absent,
    is_integer,
    parse_int,
)


class UnknownRuleError(KeyError):
    """No rule constructor is registered under the requested name."""


class InvalidRuleParamsError(ValueError):
    """A rule constructor rejected the params it was given."""


class BitmaskRule(Rule):
    """Zero or any union of the given flag bits."""

    def __init__(self, flags: Iterable[int]):
        super().__init__("bitmask")
        self.flags = tuple(flags)
        if not self.flags:
            raise ValueError("BitmaskRule needs at least one flag")
        allowed = {0}
        for size in range(1, len(self.flags) + 1):
            for combo in combinations(self.flags, size):
                mask = 0
                for flag in combo:
                    mask |= flag
                allowed.add(mask)
        self.allowed = frozenset(allowed)
        self.tests = [is_integer, self._is_allowed_combination]

    @property
    def params(self) -> dict:
        return {"flags": list(self.flags)}

    def _is_allowed_combination(self, value: Any) -> bool:
        return parse_int(value) in self.allowed


class BoundedLengthTextRule(Rule):
    """Absent, or shorter than max_length characters.

    Loose on purpose: used where the real format of the value is not known.
    """

    def __init__(self, max_length: int):
        super().__init__("bounded_length_text")
        self.max_length = max_length
        self.tests = [self._absent_or_short]

    @property
    def params(self) -> dict:
        return {"max_length": self.max_length}

    def _absent_or_short(self, value: Any) -> bool:
        if is_absent(value):
            return True
        return isinstance(value, str) and len(value) < self.max_length


class SegmentedListRule(Rule):
    """A fixed number of delimited segments, each a list of allowed tokens.

    e.g. with segments=2: "home,wallet;none" where "none" is the segment sentinel.
    A value equal to value_sentinel is valid as a whole.
    """

    def __init__(
        self,
        allowed: Iterable[str],
        segments: int,
        delimiter: str = ";",
        separator: str = ",",
        segment_sentinel: str | None = None,
        value_sentinel: str | None = None,
        allow_absent: bool = False,
    ):
        super().__init__("segmented_list")
        if segments < 1:
            raise ValueError(f"segments must be at least 1, got {segments}")
        if not delimiter or not separator:
            raise ValueError("delimiter and separator must be non-empty")
        self.allowed = frozenset(allowed)
        self.segments = segments
        self.delimiter = delimiter
        self.separator = separator
        self.segment_sentinel = segment_sentinel
        self.value_sentinel = value_sentinel
        self.allow_absent = allow_absent
        self.tests = [self._is_valid_list]

    @property
    def params(self) -> dict:
        return {
            "allowed": sorted(self.allowed),
            "segments": self.segments,
            "delimiter": self.delimiter,
            "separator": self.separator,
            "segment_sentinel": self.segment_sentinel,
            "value_sentinel": self.value_sentinel,
            "allow_absent": self.allow_absent,
        }

    def _is_valid_list(self, value: Any) -> bool:
        if is_absent(value):
            return self.allow_absent
        if not isinstance(value, str):
            return False
        if self.value_sentinel is not None and value == self.value_sentinel:
            return True
        parts = value.split(self.delimiter)
        if len(parts) != self.segments:
            return False
        return all(self._is_valid_segment(part) for part in parts)

    def _is_valid_segment(self, segment: str) -> bool:
        if self.segment_sentinel is not None and segment == self.segment_sentinel:
            return True
        return all(token in self.allowed for token in segment.split(self.separator))


class NumericPairRule(Rule):
    """The sentinel, or exactly two comma-separated integers each >= minimum."""

    def __init__(self, sentinel: str = "1", minimum: int = 1, allow_absent: bool = True):
        super().__init__("numeric_pair")
        self.sentinel = sentinel
        self.minimum = minimum
        self.allow_absent = allow_absent
        self.tests = [self._is_sentinel_or_pair]

    @property
    def params(self) -> dict:
        return {"sentinel": self.sentinel, "minimum": self.minimum, "allow_absent": self.allow_absent}

    def _is_sentinel_or_pair(self, value: Any) -> bool:
        if is_absent(value):
            return self.allow_absent
        if not isinstance(value, str):
            return False
        if value == self.sentinel:
            return True
        tokens = value.split(",")
        if len(tokens) != 2:
            return False
        for token in tokens:
            parsed = parse_int(token)
            if parsed is None or parsed < self.minimum:
                return False
        return True


class AnyOfRule(Rule):
    """Valid when at least one member rule accepts the value."""

    def __init__(self, *rules: Rule):
        super().__init__("any_of")
        if not rules:
            raise ValueError("AnyOfRule needs at least one rule")
        self.rules = rules
        self.tests = [self._any_accepts]

    @property
    def params(self) -> dict:
        return {"rules": list(self.rules)}

    def _any_accepts(self, value: Any) -> bool:
        return any(rule.validate(value) for rule in self.rules)


def _shared(rule: Rule) -> Callable[[], Rule]:
    """Constructor for a parameterless rule: always hands back the shared instance."""

    def factory() -> Rule:
        return rule

    return factory


RULE_FACTORIES: dict[str, Callable[..., Rule]] = {
    "boolean": _shared(BOOLEAN_RULE),
    "any_integer": AnyIntegerRule,
    "non_negative_integer": NonNegativeIntegerRule,
    "integer_range": InclusiveIntegerRangeRule,
    "float_range": InclusiveFloatRangeRule,
    "discrete": DiscreteValueRule,
    "any_string": _shared(ANY_STRING_RULE),
    "uri": _shared(URI_RULE),
    "component_name": ComponentNameRule,
    "lenient_ip_address": _shared(LENIENT_IP_ADDRESS_RULE),
    "vibration_intensity": _shared(VIBRATION_INTENSITY_RULE),
    "custom_vibration_pattern": _shared(CUSTOM_VIBRATION_PATTERN_RULE),
    "bitmask": BitmaskRule,
    "bounded_length_text": BoundedLengthTextRule,
    "segmented_list": SegmentedListRule,
    "numeric_pair": NumericPairRule,
}


def build_rule(name: str, params: dict | None = None) -> Rule:
    """Build a rule from its registered name and keyword params."""
    factory = RULE_FACTORIES.get(name)
    if factory is None:
        raise UnknownRuleError(name)
    try:
        return factory(**(params or {}))
    except (TypeError, ValueError) as e:
        raise InvalidRuleParamsError(f"Invalid params for rule {name!r}: {e}") from e
