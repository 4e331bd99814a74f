"""Rule primitives: total predicates over a raw setting value."""
import ipaddress
import re
from collections.abc import Callable, Iterable
from enum import IntEnum
from typing import Any
from urllib.parse import urlsplit

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PERCENT_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Canonical boolean spellings, (true, false).
BOOLEAN_TOKEN_PAIRS = (("1", "0"), ("true", "false"))


class VibrationIntensity(IntEnum):
    OFF = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3


VIBRATION_INTENSITY_LEVELS = frozenset(level.value for level in VibrationIntensity)


def parse_int(value: Any, bits: int = 32) -> int | None:
    """Parse a base-10 signed integer of the given width. None if it doesn't parse."""
    if not isinstance(value, str) or not _INTEGER_RE.fullmatch(value):
        return None
    digits = value.lstrip("+-").lstrip("0") or "0"
    # A bits-wide value never has more than bits decimal digits
    if len(digits) > bits:
        return None
    parsed = -int(digits) if value.startswith("-") else int(digits)
    limit = 1 << (bits - 1)
    if not -limit <= parsed < limit:
        return None
    return parsed


def parse_float(value: Any) -> float | None:
    """Parse a plain decimal or scientific float. No nan/inf, no whitespace."""
    if not isinstance(value, str) or not _FLOAT_RE.fullmatch(value):
        return None
    parsed = float(value)
    # Overflows like "1e999" parse to inf
    if parsed in (float("inf"), float("-inf")):
        return None
    return parsed


def is_absent(value: Any) -> bool:
    return value is None


def is_absent_or_empty(value: Any) -> bool:
    return value is None or value == ""


def is_boolean(value: Any) -> bool:
    return any(value in pair for pair in BOOLEAN_TOKEN_PAIRS)


def is_integer(value: Any) -> bool:
    return parse_int(value) is not None


def is_uri(value: Any) -> bool:
    """Syntactic URI reference check. Absent and empty values pass."""
    if is_absent_or_empty(value):
        return True
    if not isinstance(value, str):
        return False
    if any(c.isspace() or ord(c) < 0x20 or ord(c) == 0x7F for c in value):
        return False
    if _PERCENT_ESCAPE_RE.search(value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates bracketed IPv6 hosts and port digits
        parts.port
    except ValueError:
        return False
    return True


def is_ip_address(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def split_component_name(value: Any) -> tuple[str, str] | None:
    """Split "package/class" into (package, class), expanding ".Short" class names."""
    if not isinstance(value, str):
        return None
    package, sep, cls = value.partition("/")
    if not sep or not package or not cls:
        return None
    if cls.startswith("."):
        cls = package + cls
    return package, cls


class Rule:
    """A value is valid only when every test passes."""

    tests: list[Callable[[Any], bool]]

    def __init__(self, name: str):
        self.name = name
        self.tests = []

    @property
    def params(self) -> dict:
        return {}

    def validate(self, value: str | None) -> bool:
        for test in self.tests:
            if not test(value):
                return False
        return True

    def __call__(self, value: str | None) -> bool:
        return self.validate(value)

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{self.__class__.__name__}({args})"


class BooleanRule(Rule):
    def __init__(self):
        super().__init__("boolean")
        self.tests = [is_boolean]


class AnyIntegerRule(Rule):
    def __init__(self, bits: int = 32):
        super().__init__("any_integer")
        self.bits = bits
        self.tests = [self._parses]

    @property
    def params(self) -> dict:
        return {"bits": self.bits}

    def _parses(self, value: Any) -> bool:
        return parse_int(value, self.bits) is not None


class NonNegativeIntegerRule(AnyIntegerRule):
    def __init__(self, bits: int = 32):
        super().__init__(bits)
        self.name = "non_negative_integer"
        self.tests = [self._parses, self._non_negative]

    def _non_negative(self, value: Any) -> bool:
        return parse_int(value, self.bits) >= 0


class InclusiveIntegerRangeRule(Rule):
    def __init__(self, min_value: int, max_value: int):
        super().__init__("integer_range")
        if min_value > max_value:
            raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
        self.min_value = min_value
        self.max_value = max_value
        self.tests = [is_integer, self._in_range]

    @property
    def params(self) -> dict:
        return {"min_value": self.min_value, "max_value": self.max_value}

    def _in_range(self, value: Any) -> bool:
        return self.min_value <= parse_int(value) <= self.max_value


class InclusiveFloatRangeRule(Rule):
    def __init__(self, min_value: float, max_value: float):
        super().__init__("float_range")
        if min_value > max_value:
            raise ValueError(f"min_value {min_value} is greater than max_value {max_value}")
        self.min_value = float(min_value)
        self.max_value = float(max_value)
        self.tests = [self._in_range]

    @property
    def params(self) -> dict:
        return {"min_value": self.min_value, "max_value": self.max_value}

    def _in_range(self, value: Any) -> bool:
        parsed = parse_float(value)
        return parsed is not None and self.min_value <= parsed <= self.max_value


class DiscreteValueRule(Rule):
    """Exact match against an ordered list of literals. None counts only if listed."""

    def __init__(self, values: Iterable[str | None]):
        super().__init__("discrete")
        self.values = tuple(values)
        if not self.values:
            raise ValueError("DiscreteValueRule needs at least one allowed value")
        self.tests = [self._is_listed]

    @property
    def params(self) -> dict:
        return {"values": list(self.values)}

    def _is_listed(self, value: Any) -> bool:
        return value in self.values


class AnyStringRule(Rule):
    """Accepts anything, absent included. Validation is left to the consumer."""

    def __init__(self):
        super().__init__("any_string")


class UriRule(Rule):
    def __init__(self):
        super().__init__("uri")
        self.tests = [is_uri]


class ComponentNameRule(Rule):
    def __init__(self, max_length: int | None = None):
        super().__init__("component_name")
        self.max_length = max_length
        self.tests = [self._within_length, self._is_component_name]

    @property
    def params(self) -> dict:
        return {"max_length": self.max_length}

    def _within_length(self, value: Any) -> bool:
        if self.max_length is None or not isinstance(value, str):
            return True
        return len(value) <= self.max_length

    def _is_component_name(self, value: Any) -> bool:
        return split_component_name(value) is not None


class LenientIpAddressRule(Rule):
    """Empty or absent, or an IPv4/IPv6 literal."""

    def __init__(self):
        super().__init__("lenient_ip_address")
        self.tests = [self._empty_or_ip]

    def _empty_or_ip(self, value: Any) -> bool:
        return is_absent_or_empty(value) or is_ip_address(value)


class VibrationIntensityRule(Rule):
    def __init__(self):
        super().__init__("vibration_intensity")
        self.tests = [is_integer, self._is_level]

    def _is_level(self, value: Any) -> bool:
        return parse_int(value) in VIBRATION_INTENSITY_LEVELS


class CustomVibrationPatternRule(Rule):
    """Absent, or comma-separated non-negative integers (timings in ms)."""

    def __init__(self):
        super().__init__("custom_vibration_pattern")
        self.tests = [self._absent_or_pattern]

    def _absent_or_pattern(self, value: Any) -> bool:
        if is_absent(value):
            return True
        if not isinstance(value, str):
            return False
        for token in value.split(","):
            parsed = parse_int(token)
            if parsed is None or parsed < 0:
                return False
        return True


BOOLEAN_RULE = BooleanRule()
ANY_INTEGER_RULE = AnyIntegerRule()
NON_NEGATIVE_INTEGER_RULE = NonNegativeIntegerRule()
ANY_STRING_RULE = AnyStringRule()
URI_RULE = UriRule()
COMPONENT_NAME_RULE = ComponentNameRule()
LENIENT_IP_ADDRESS_RULE = LenientIpAddressRule()
VIBRATION_INTENSITY_RULE = VibrationIntensityRule()
CUSTOM_VIBRATION_PATTERN_RULE = CustomVibrationPatternRule()
