"""Validation: rule primitives, composite rules and the key -> rule registry."""

from .registry import (
    DuplicateRuleError,
    RegistryBuilder,
    RegistryError,
    RegistryFrozenError,
    ValidatorRegistry,
)
from .rules import (
    ANY_INTEGER_RULE,
    ANY_STRING_RULE,
    BOOLEAN_RULE,
    COMPONENT_NAME_RULE,
    CUSTOM_VIBRATION_PATTERN_RULE,
    LENIENT_IP_ADDRESS_RULE,
    NON_NEGATIVE_INTEGER_RULE,
    URI_RULE,
    VIBRATION_INTENSITY_RULE,
    AnyIntegerRule,
    AnyStringRule,
    BooleanRule,
    ComponentNameRule,
    CustomVibrationPatternRule,
    DiscreteValueRule,
    InclusiveFloatRangeRule,
    InclusiveIntegerRangeRule,
    LenientIpAddressRule,
    NonNegativeIntegerRule,
    Rule,
    UriRule,
    VibrationIntensity,
    VibrationIntensityRule,
    parse_float,
    parse_int,
)
from .strategies import (
    RULE_FACTORIES,
    AnyOfRule,
    BitmaskRule,
    BoundedLengthTextRule,
    InvalidRuleParamsError,
    NumericPairRule,
    SegmentedListRule,
    UnknownRuleError,
    build_rule,
)
from .system_settings import SYSTEM_SETTINGS_RULES, build_system_settings_registry

__all__ = [
    "Rule",
    "BooleanRule",
    "AnyIntegerRule",
    "NonNegativeIntegerRule",
    "InclusiveIntegerRangeRule",
    "InclusiveFloatRangeRule",
    "DiscreteValueRule",
    "AnyStringRule",
    "UriRule",
    "ComponentNameRule",
    "LenientIpAddressRule",
    "VibrationIntensity",
    "VibrationIntensityRule",
    "CustomVibrationPatternRule",
    "BOOLEAN_RULE",
    "ANY_INTEGER_RULE",
    "NON_NEGATIVE_INTEGER_RULE",
    "ANY_STRING_RULE",
    "URI_RULE",
    "COMPONENT_NAME_RULE",
    "LENIENT_IP_ADDRESS_RULE",
    "VIBRATION_INTENSITY_RULE",
    "CUSTOM_VIBRATION_PATTERN_RULE",
    "parse_int",
    "parse_float",
    "BitmaskRule",
    "BoundedLengthTextRule",
    "SegmentedListRule",
    "NumericPairRule",
    "AnyOfRule",
    "RULE_FACTORIES",
    "build_rule",
    "UnknownRuleError",
    "InvalidRuleParamsError",
    "ValidatorRegistry",
    "RegistryBuilder",
    "RegistryError",
    "DuplicateRuleError",
    "RegistryFrozenError",
    "SYSTEM_SETTINGS_RULES",
    "build_system_settings_registry",
]
