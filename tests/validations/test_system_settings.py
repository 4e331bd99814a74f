"""Tests for the system settings rule table."""
import unittest
from collections import Counter

from settings_gate import settings_keys as keys
from settings_gate.validation import (
    BOOLEAN_RULE,
    SYSTEM_SETTINGS_RULES,
    DuplicateRuleError,
    build_system_settings_registry,
)


def _all_keys() -> list[str]:
    return [
        value
        for name, value in vars(keys).items()
        if name.isupper() and isinstance(value, str)
    ]


class TestSystemSettingsTable(unittest.TestCase):
    def test_each_key_has_exactly_one_entry(self) -> None:
        counts = Counter(key for key, _ in SYSTEM_SETTINGS_RULES)
        duplicates = [key for key, count in counts.items() if count > 1]
        self.assertEqual(duplicates, [])

    def test_every_known_key_has_a_rule(self) -> None:
        registry = build_system_settings_registry()
        missing = [key for key in _all_keys() if key not in registry]
        self.assertEqual(missing, [])
        self.assertEqual(len(registry), len(_all_keys()))

    def test_each_build_is_a_fresh_registry(self) -> None:
        self.assertIsNot(build_system_settings_registry(), build_system_settings_registry())

    def test_config_rules_are_added(self) -> None:
        config = {"rules": [{"key": "my_toggle", "rule": "boolean"}]}
        registry = build_system_settings_registry(config)
        self.assertIs(registry.lookup("my_toggle"), BOOLEAN_RULE)
        self.assertIn(keys.DIM_SCREEN, registry)

    def test_config_cannot_redefine_a_system_key(self) -> None:
        config = {"rules": [{"key": keys.SCREEN_OFF_TIMEOUT, "rule": "any_string"}]}
        with self.assertRaises(DuplicateRuleError):
            build_system_settings_registry(config)


class TestSystemSettingRules(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.registry = build_system_settings_registry()

    def assertValid(self, key: str, *values) -> None:
        for value in values:
            self.assertTrue(self.registry.validate(key, value), f"{key}={value!r}")

    def assertInvalid(self, key: str, *values) -> None:
        for value in values:
            self.assertFalse(self.registry.validate(key, value), f"{key}={value!r}")

    def test_very_long_integers_are_invalid(self) -> None:
        self.assertInvalid(keys.SCREEN_OFF_TIMEOUT, "1" * 5000)
        self.assertInvalid(keys.EGG_MODE, "9" * 5000)
        self.assertInvalid(keys.STAY_ON_WHILE_PLUGGED_IN, "1" * 5000)
        self.assertInvalid(keys.DEFAULT_NOTIFICATION_TORCH, "1," + "1" * 5000)

    def test_stay_on_while_plugged_in(self) -> None:
        self.assertValid(keys.STAY_ON_WHILE_PLUGGED_IN, "0", "1", "2", "3", "4", "5", "6", "7")
        self.assertInvalid(keys.STAY_ON_WHILE_PLUGGED_IN, "8", "-1", "usb", None)

    def test_boolean_settings(self) -> None:
        self.assertValid(keys.WIFI_USE_STATIC_IP, "0", "1", "true", "false")
        self.assertInvalid(keys.HAPTIC_FEEDBACK_ENABLED, "2", "yes", None)

    def test_integer_ranges(self) -> None:
        self.assertValid(keys.END_BUTTON_BEHAVIOR, "0", "3")
        self.assertInvalid(keys.END_BUTTON_BEHAVIOR, "4", "-1", "abc")
        self.assertValid(keys.VOLUME_BUTTON_MUSIC_CONTROL_DELAY, "300", "2000")
        self.assertInvalid(keys.VOLUME_BUTTON_MUSIC_CONTROL_DELAY, "299", "2001")
        self.assertValid(keys.SCREEN_BRIGHTNESS_FOR_VR, "255")
        self.assertInvalid(keys.SCREEN_BRIGHTNESS_FOR_VR, "256")

    def test_float_ranges(self) -> None:
        self.assertValid(keys.FONT_SCALE, "0.25", "1.15", "5.0")
        self.assertInvalid(keys.FONT_SCALE, "0.2", "5.01", "big")
        self.assertValid(keys.SCREEN_AUTO_BRIGHTNESS_ADJ, "-1.0", "1.0")
        self.assertInvalid(keys.SCREEN_AUTO_BRIGHTNESS_ADJ, "1.1")
        self.assertValid(keys.POINTER_SPEED, "-7", "7")

    def test_next_alarm_formatted(self) -> None:
        self.assertValid(keys.NEXT_ALARM_FORMATTED, None, "Mon 7:00 AM")
        self.assertInvalid(keys.NEXT_ALARM_FORMATTED, "x" * 1000)

    def test_display_color_mode(self) -> None:
        self.assertValid(keys.DISPLAY_COLOR_MODE, "0", "3", "256", "511")
        self.assertInvalid(keys.DISPLAY_COLOR_MODE, "4", "255", "512", None)

    def test_time_12_24(self) -> None:
        self.assertValid(keys.TIME_12_24, "12", "24", None)
        self.assertInvalid(keys.TIME_12_24, "36", "")

    def test_wallpaper_activity(self) -> None:
        self.assertValid(keys.WALLPAPER_ACTIVITY, "com.example.wall/.PickerActivity")
        self.assertInvalid(keys.WALLPAPER_ACTIVITY, None, "no-slash", "a/" + "b" * 1000)

    def test_egg_mode_accepts_long_values(self) -> None:
        self.assertValid(keys.EGG_MODE, "0", "1577836800000")
        self.assertInvalid(keys.EGG_MODE, "-1", "9223372036854775808")

    def test_static_ip_settings(self) -> None:
        self.assertValid(keys.WIFI_STATIC_IP, "192.168.0.2", "", None)
        self.assertValid(keys.WIFI_STATIC_DNS2, "2001:4860:4860::8888")
        self.assertInvalid(keys.WIFI_STATIC_GATEWAY, "192.168.0")

    def test_ringtone_uris(self) -> None:
        self.assertValid(keys.RINGTONE, "content://media/internal/audio/media/32", None)
        self.assertInvalid(keys.ALARM_ALERT, "content://media/bad uri")

    def test_vibration_settings(self) -> None:
        self.assertValid(keys.RING_VIBRATION_INTENSITY, "0", "3")
        self.assertInvalid(keys.RING_VIBRATION_INTENSITY, "4")
        self.assertValid(keys.CUSTOM_RINGTONE_VIBRATION_PATTERN, "0,800,800", None)
        self.assertInvalid(keys.CUSTOM_NOTIFICATION_VIBRATION_PATTERN, "0,-1")

    def test_navbar_layout_views(self) -> None:
        self.assertValid(keys.NAVBAR_LAYOUT_VIEWS, "default", "space;back,home,recent;space")
        self.assertInvalid(
            keys.NAVBAR_LAYOUT_VIEWS,
            "back;home",
            "back;home;recent;space",
            "back;menu;recent",
            # trailing delimiter leaves an empty final segment
            "left,back;home;",
            None,
        )

    def test_keyguard_quick_toggles(self) -> None:
        self.assertValid(
            keys.KEYGUARD_QUICK_TOGGLES,
            "home,wallet;none",
            "home;camera,flashlight",
            "none;qr",
            None,
        )
        self.assertInvalid(
            keys.KEYGUARD_QUICK_TOGGLES,
            "home,bogus;none",
            "home;camera;extra",
            "home",
        )

    def test_default_notification_torch(self) -> None:
        self.assertValid(keys.DEFAULT_NOTIFICATION_TORCH, "1", "2,3", None)
        self.assertInvalid(keys.DEFAULT_NOTIFICATION_TORCH, "0,3", "2,3,4", "2")

    def test_free_text_settings(self) -> None:
        self.assertValid(keys.QS_FOOTER_TEXT_STRING, "#KeepItSimple", "", None)
        self.assertValid(keys.BATTERY_LIGHT_LOW_COLOR, "0xFFFF0000")

    def test_network_traffic_threshold_takes_any_integer(self) -> None:
        self.assertValid(keys.NETWORK_TRAFFIC_AUTOHIDE_THRESHOLD, "-5", "0", "10")
        self.assertInvalid(keys.NETWORK_TRAFFIC_AUTOHIDE_THRESHOLD, "1.5")

    def test_sip_call_options(self) -> None:
        self.assertValid(keys.SIP_CALL_OPTIONS, "SIP_ALWAYS", "SIP_ADDRESS_ONLY")
        self.assertInvalid(keys.SIP_CALL_OPTIONS, "SIP_ASK_ME_EACH_TIME", None)


if __name__ == "__main__":
    unittest.main()
