import unittest

from settings_gate.validation.rules import (
    ANY_STRING_RULE,
    BOOLEAN_RULE,
    COMPONENT_NAME_RULE,
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
    parse_float,
    parse_int,
    split_component_name,
)


class TestParseInt(unittest.TestCase):
    def test_plain_and_signed_integers_parse(self) -> None:
        self.assertEqual(parse_int("42"), 42)
        self.assertEqual(parse_int("-7"), -7)
        self.assertEqual(parse_int("+7"), 7)

    def test_malformed_integers_are_none(self) -> None:
        for value in ["", " 1", "1 ", "1.0", "1_000", "0x10", "abc", "١٢"]:
            self.assertIsNone(parse_int(value), value)

    def test_non_strings_are_none(self) -> None:
        self.assertIsNone(parse_int(None))
        self.assertIsNone(parse_int(5))

    def test_width_is_enforced(self) -> None:
        self.assertEqual(parse_int("2147483647"), 2**31 - 1)
        self.assertEqual(parse_int("-2147483648"), -(2**31))
        self.assertIsNone(parse_int("2147483648"))
        self.assertEqual(parse_int("2147483648", bits=64), 2**31)

    def test_very_long_digit_strings_are_none(self) -> None:
        self.assertIsNone(parse_int("9" * 5000))
        self.assertIsNone(parse_int("-" + "1" * 5000, bits=64))
        self.assertEqual(parse_int("0" * 5000 + "7"), 7)
        self.assertFalse(AnyIntegerRule().validate("9" * 5000))
        self.assertFalse(NonNegativeIntegerRule().validate("1" * 5000))
        self.assertFalse(CUSTOM_VIBRATION_PATTERN_RULE.validate("1," + "1" * 5000))


class TestParseFloat(unittest.TestCase):
    def test_decimal_and_scientific_parse(self) -> None:
        self.assertEqual(parse_float("1"), 1.0)
        self.assertEqual(parse_float("-1.5"), -1.5)
        self.assertEqual(parse_float(".5"), 0.5)
        self.assertEqual(parse_float("2e3"), 2000.0)

    def test_special_and_malformed_values_are_none(self) -> None:
        for value in ["nan", "inf", "-Infinity", "1e999", " 1.0", "1,5", "", "1.0f"]:
            self.assertIsNone(parse_float(value), value)
        self.assertIsNone(parse_float(None))


class TestBooleanRule(unittest.TestCase):
    def test_canonical_tokens_are_valid(self) -> None:
        for value in ["true", "false", "1", "0"]:
            self.assertTrue(BOOLEAN_RULE.validate(value), value)

    def test_other_values_are_invalid(self) -> None:
        for value in ["maybe", "TRUE", "2", "", None]:
            self.assertFalse(BOOLEAN_RULE.validate(value), value)


class TestIntegerRules(unittest.TestCase):
    def test_any_integer(self) -> None:
        rule = AnyIntegerRule()
        self.assertTrue(rule.validate("-123"))
        self.assertFalse(rule.validate("12.3"))
        self.assertFalse(rule.validate(None))

    def test_non_negative_integer(self) -> None:
        rule = NonNegativeIntegerRule()
        self.assertTrue(rule.validate("0"))
        self.assertTrue(rule.validate("30000"))
        self.assertFalse(rule.validate("-1"))
        self.assertFalse(rule.validate("abc"))

    def test_non_negative_long(self) -> None:
        rule = NonNegativeIntegerRule(bits=64)
        self.assertTrue(rule.validate("1577836800000"))
        self.assertFalse(NonNegativeIntegerRule().validate("1577836800000"))

    def test_inclusive_integer_range(self) -> None:
        rule = InclusiveIntegerRangeRule(0, 3)
        self.assertTrue(rule.validate("0"))
        self.assertTrue(rule.validate("3"))
        self.assertFalse(rule.validate("4"))
        self.assertFalse(rule.validate("-1"))
        self.assertFalse(rule.validate("abc"))
        self.assertFalse(rule.validate(None))

    def test_inverted_range_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            InclusiveIntegerRangeRule(3, 0)


class TestInclusiveFloatRangeRule(unittest.TestCase):
    def setUp(self) -> None:
        self.rule = InclusiveFloatRangeRule(-1, 1)

    def test_bounds_are_inclusive(self) -> None:
        self.assertTrue(self.rule.validate("-1.0"))
        self.assertTrue(self.rule.validate("1.0"))
        self.assertTrue(self.rule.validate("0"))

    def test_out_of_range_or_malformed_is_invalid(self) -> None:
        self.assertFalse(self.rule.validate("1.1"))
        self.assertFalse(self.rule.validate("-1.01"))
        self.assertFalse(self.rule.validate("nan"))
        self.assertFalse(self.rule.validate("one"))
        self.assertFalse(self.rule.validate(None))


class TestDiscreteValueRule(unittest.TestCase):
    def test_listed_values_including_none(self) -> None:
        rule = DiscreteValueRule(["12", "24", None])
        self.assertTrue(rule.validate("12"))
        self.assertTrue(rule.validate("24"))
        self.assertTrue(rule.validate(None))
        self.assertFalse(rule.validate("36"))
        self.assertFalse(rule.validate(""))

    def test_none_is_invalid_unless_listed(self) -> None:
        rule = DiscreteValueRule(["SIP_ALWAYS", "SIP_ADDRESS_ONLY"])
        self.assertFalse(rule.validate(None))
        self.assertFalse(rule.validate("sip_always"))

    def test_empty_list_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DiscreteValueRule([])


class TestAnyStringRule(unittest.TestCase):
    def test_everything_is_valid(self) -> None:
        for value in ["", "anything at all", None]:
            self.assertTrue(ANY_STRING_RULE.validate(value))


class TestUriRule(unittest.TestCase):
    def test_well_formed_uris_are_valid(self) -> None:
        for value in [
            "content://settings/system/ringtone",
            "content://media/internal/audio/media/12?title=Beep&canonical=1",
            "file:///sdcard/Ringtones/song%20one.mp3",
            "http://[::1]:8080/path",
            "relative/path",
        ]:
            self.assertTrue(URI_RULE.validate(value), value)

    def test_empty_and_absent_are_valid(self) -> None:
        self.assertTrue(URI_RULE.validate(""))
        self.assertTrue(URI_RULE.validate(None))

    def test_malformed_uris_are_invalid(self) -> None:
        for value in [
            "content://media/has space",
            "file:///bad%zzescape",
            "http://[::1/broken",
            "http://host:port/",
            "line\nbreak",
        ]:
            self.assertFalse(URI_RULE.validate(value), value)


class TestComponentNameRule(unittest.TestCase):
    def test_package_class_pairs_are_valid(self) -> None:
        self.assertTrue(COMPONENT_NAME_RULE.validate("com.example.app/com.example.app.Receiver"))
        self.assertTrue(COMPONENT_NAME_RULE.validate("com.example.app/.Receiver"))

    def test_malformed_names_are_invalid(self) -> None:
        for value in ["com.example.app", "com.example.app/", "/.Receiver", "", None]:
            self.assertFalse(COMPONENT_NAME_RULE.validate(value), value)

    def test_short_class_name_is_expanded(self) -> None:
        self.assertEqual(
            split_component_name("com.example/.Main"),
            ("com.example", "com.example.Main"),
        )

    def test_max_length(self) -> None:
        rule = ComponentNameRule(max_length=20)
        self.assertTrue(rule.validate("a.b/.C"))
        self.assertFalse(rule.validate("com.example.app/.SomeLongActivity"))


class TestLenientIpAddressRule(unittest.TestCase):
    def test_ip_literals_are_valid(self) -> None:
        for value in ["192.168.1.10", "255.255.255.0", "::1", "2001:db8::8a2e:370:7334"]:
            self.assertTrue(LENIENT_IP_ADDRESS_RULE.validate(value), value)

    def test_empty_and_absent_are_valid(self) -> None:
        self.assertTrue(LENIENT_IP_ADDRESS_RULE.validate(""))
        self.assertTrue(LENIENT_IP_ADDRESS_RULE.validate(None))

    def test_non_addresses_are_invalid(self) -> None:
        for value in ["256.1.1.1", "192.168.1", "router.local", "1"]:
            self.assertFalse(LENIENT_IP_ADDRESS_RULE.validate(value), value)


class TestVibrationIntensityRule(unittest.TestCase):
    def test_defined_levels_are_valid(self) -> None:
        for value in ["0", "1", "2", "3"]:
            self.assertTrue(VIBRATION_INTENSITY_RULE.validate(value), value)

    def test_other_values_are_invalid(self) -> None:
        for value in ["4", "-1", "high", None]:
            self.assertFalse(VIBRATION_INTENSITY_RULE.validate(value), value)


class TestCustomVibrationPatternRule(unittest.TestCase):
    def test_patterns_are_valid(self) -> None:
        self.assertTrue(CUSTOM_VIBRATION_PATTERN_RULE.validate("0,800,800"))
        self.assertTrue(CUSTOM_VIBRATION_PATTERN_RULE.validate("250"))
        self.assertTrue(CUSTOM_VIBRATION_PATTERN_RULE.validate(None))

    def test_malformed_patterns_are_invalid(self) -> None:
        for value in ["", "0,-800", "0,,800", "0, 800", "a,b"]:
            self.assertFalse(CUSTOM_VIBRATION_PATTERN_RULE.validate(value), value)


class TestRuleBehaviour(unittest.TestCase):
    def test_rules_are_callable(self) -> None:
        self.assertTrue(BOOLEAN_RULE("1"))

    def test_repeated_calls_agree(self) -> None:
        rule = InclusiveIntegerRangeRule(0, 3)
        for value in ["2", "7", "x", None]:
            first = rule.validate(value)
            for _ in range(3):
                self.assertEqual(rule.validate(value), first)

    def test_non_string_input_never_raises(self) -> None:
        rules = [
            BOOLEAN_RULE,
            AnyIntegerRule(),
            InclusiveFloatRangeRule(0, 1),
            URI_RULE,
            COMPONENT_NAME_RULE,
            LENIENT_IP_ADDRESS_RULE,
            CUSTOM_VIBRATION_PATTERN_RULE,
        ]
        for rule in rules:
            for value in [3, 1.5, object(), ["1"]]:
                self.assertFalse(rule.validate(value), (rule, value))

    def test_repr_shows_params(self) -> None:
        self.assertEqual(
            repr(InclusiveIntegerRangeRule(0, 3)),
            "InclusiveIntegerRangeRule(min_value=0, max_value=3)",
        )


if __name__ == "__main__":
    unittest.main()
