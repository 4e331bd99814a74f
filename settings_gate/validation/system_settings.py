"""Validation rules for the system settings namespace."""
from settings_gate import settings_keys as keys

from .registry import RegistryBuilder, ValidatorRegistry
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
    ComponentNameRule,
    DiscreteValueRule,
    InclusiveFloatRangeRule,
    InclusiveIntegerRangeRule,
    NonNegativeIntegerRule,
)
from .strategies import (
    AnyOfRule,
    BitmaskRule,
    BoundedLengthTextRule,
    NumericPairRule,
    SegmentedListRule,
)

# Power sources a device can be plugged into
BATTERY_PLUGGED_AC = 1
BATTERY_PLUGGED_USB = 2
BATTERY_PLUGGED_WIRELESS = 4

COLOR_MODE_NATURAL = 0
COLOR_MODE_AUTOMATIC = 3
VENDOR_COLOR_MODE_RANGE_MIN = 256
VENDOR_COLOR_MODE_RANGE_MAX = 511

NAVBAR_LAYOUT_BUTTONS = ("left", "right", "back", "home", "recent", "space")
KEYGUARD_QUICK_TOGGLE_BUTTONS = ("home", "wallet", "qr", "camera", "flashlight")

SYSTEM_SETTINGS_RULES = (
    (
        keys.STAY_ON_WHILE_PLUGGED_IN,
        BitmaskRule([BATTERY_PLUGGED_AC, BATTERY_PLUGGED_USB, BATTERY_PLUGGED_WIRELESS]),
    ),
    (keys.END_BUTTON_BEHAVIOR, InclusiveIntegerRangeRule(0, 3)),
    (keys.WIFI_USE_STATIC_IP, BOOLEAN_RULE),
    (keys.BLUETOOTH_DISCOVERABILITY, InclusiveIntegerRangeRule(0, 2)),
    (keys.BLUETOOTH_DISCOVERABILITY_TIMEOUT, NON_NEGATIVE_INTEGER_RULE),
    # Format of the formatted alarm string is unknown
    (keys.NEXT_ALARM_FORMATTED, BoundedLengthTextRule(1000)),
    (keys.FONT_SCALE, InclusiveFloatRangeRule(0.25, 5.0)),
    (keys.DIM_SCREEN, BOOLEAN_RULE),
    # Whether the device supports the mode is checked by the display service
    (
        keys.DISPLAY_COLOR_MODE,
        AnyOfRule(
            InclusiveIntegerRangeRule(COLOR_MODE_NATURAL, COLOR_MODE_AUTOMATIC),
            InclusiveIntegerRangeRule(VENDOR_COLOR_MODE_RANGE_MIN, VENDOR_COLOR_MODE_RANGE_MAX),
        ),
    ),
    (keys.DISPLAY_COLOR_MODE_VENDOR_HINT, ANY_STRING_RULE),
    (keys.SCREEN_OFF_TIMEOUT, NON_NEGATIVE_INTEGER_RULE),
    (keys.SCREEN_BRIGHTNESS_FOR_VR, InclusiveIntegerRangeRule(0, 255)),
    (keys.SCREEN_BRIGHTNESS_MODE, BOOLEAN_RULE),
    (keys.ADAPTIVE_SLEEP, BOOLEAN_RULE),
    (keys.MODE_RINGER_STREAMS_AFFECTED, NON_NEGATIVE_INTEGER_RULE),
    (keys.MUTE_STREAMS_AFFECTED, NON_NEGATIVE_INTEGER_RULE),
    (keys.VIBRATE_ON, BOOLEAN_RULE),
    (keys.APPLY_RAMPING_RINGER, BOOLEAN_RULE),
    (keys.ALARM_VIBRATION_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.MEDIA_VIBRATION_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.NOTIFICATION_VIBRATION_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.RING_VIBRATION_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.HAPTIC_FEEDBACK_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.HARDWARE_HAPTIC_FEEDBACK_INTENSITY, VIBRATION_INTENSITY_RULE),
    (keys.HAPTIC_FEEDBACK_ENABLED, BOOLEAN_RULE),
    (keys.RINGTONE, URI_RULE),
    (keys.NOTIFICATION_SOUND, URI_RULE),
    (keys.ALARM_ALERT, URI_RULE),
    (keys.TEXT_AUTO_REPLACE, BOOLEAN_RULE),
    (keys.TEXT_AUTO_CAPS, BOOLEAN_RULE),
    (keys.TEXT_AUTO_PUNCTUATE, BOOLEAN_RULE),
    (keys.TEXT_SHOW_PASSWORD, BOOLEAN_RULE),
    (keys.AUTO_TIME, BOOLEAN_RULE),
    (keys.AUTO_TIME_ZONE, BOOLEAN_RULE),
    (keys.SHOW_GTALK_SERVICE_STATUS, BOOLEAN_RULE),
    (keys.WALLPAPER_ACTIVITY, ComponentNameRule(max_length=1000)),
    (keys.TIME_12_24, DiscreteValueRule(["12", "24", None])),
    (keys.SETUP_WIZARD_HAS_RUN, BOOLEAN_RULE),
    (keys.ACCELEROMETER_ROTATION, BOOLEAN_RULE),
    (keys.USER_ROTATION, InclusiveIntegerRangeRule(0, 3)),
    (keys.DTMF_TONE_WHEN_DIALING, BOOLEAN_RULE),
    (keys.SOUND_EFFECTS_ENABLED, BOOLEAN_RULE),
    (keys.POWER_SOUNDS_ENABLED, BOOLEAN_RULE),
    (keys.DOCK_SOUNDS_ENABLED, BOOLEAN_RULE),
    (keys.SHOW_WEB_SUGGESTIONS, BOOLEAN_RULE),
    (keys.ADVANCED_SETTINGS, BOOLEAN_RULE),
    (keys.SCREEN_AUTO_BRIGHTNESS_ADJ, InclusiveFloatRangeRule(-1, 1)),
    (keys.VIBRATE_INPUT_DEVICES, BOOLEAN_RULE),
    (keys.MASTER_MONO, BOOLEAN_RULE),
    (keys.MASTER_BALANCE, InclusiveFloatRangeRule(-1.0, 1.0)),
    (keys.NOTIFICATIONS_USE_RING_VOLUME, BOOLEAN_RULE),
    (keys.VIBRATE_IN_SILENT, BOOLEAN_RULE),
    (keys.MEDIA_BUTTON_RECEIVER, COMPONENT_NAME_RULE),
    (keys.HIDE_ROTATION_LOCK_TOGGLE_FOR_ACCESSIBILITY, BOOLEAN_RULE),
    (keys.VIBRATE_WHEN_RINGING, BOOLEAN_RULE),
    (keys.DTMF_TONE_TYPE_WHEN_DIALING, BOOLEAN_RULE),
    (keys.HEARING_AID, BOOLEAN_RULE),
    (keys.TTY_MODE, InclusiveIntegerRangeRule(0, 3)),
    (keys.NOTIFICATION_LIGHT_PULSE, BOOLEAN_RULE),
    (keys.POINTER_LOCATION, BOOLEAN_RULE),
    (keys.SHOW_TOUCHES, BOOLEAN_RULE),
    (keys.WINDOW_ORIENTATION_LISTENER_LOG, BOOLEAN_RULE),
    (keys.LOCKSCREEN_SOUNDS_ENABLED, BOOLEAN_RULE),
    (keys.LOCKSCREEN_DISABLED, BOOLEAN_RULE),
    (keys.SIP_RECEIVE_CALLS, BOOLEAN_RULE),
    (keys.SIP_CALL_OPTIONS, DiscreteValueRule(["SIP_ALWAYS", "SIP_ADDRESS_ONLY"])),
    (keys.SIP_ALWAYS, BOOLEAN_RULE),
    (keys.SIP_ADDRESS_ONLY, BOOLEAN_RULE),
    (keys.SIP_ASK_ME_EACH_TIME, BOOLEAN_RULE),
    (keys.POINTER_SPEED, InclusiveFloatRangeRule(-7, 7)),
    (keys.LOCK_TO_APP_ENABLED, BOOLEAN_RULE),
    (keys.EGG_MODE, NonNegativeIntegerRule(bits=64)),
    (keys.WIFI_STATIC_IP, LENIENT_IP_ADDRESS_RULE),
    (keys.WIFI_STATIC_GATEWAY, LENIENT_IP_ADDRESS_RULE),
    (keys.WIFI_STATIC_NETMASK, LENIENT_IP_ADDRESS_RULE),
    (keys.WIFI_STATIC_DNS1, LENIENT_IP_ADDRESS_RULE),
    (keys.WIFI_STATIC_DNS2, LENIENT_IP_ADDRESS_RULE),
    (keys.FORCE_FULLSCREEN_CUTOUT_APPS, ANY_STRING_RULE),
    (keys.SHOW_BATTERY_PERCENT, BOOLEAN_RULE),
    (keys.QS_FOOTER_TEXT_SHOW, BOOLEAN_RULE),
    (keys.QS_FOOTER_TEXT_STRING, ANY_STRING_RULE),
    (keys.LOCKSCREEN_BATTERY_INFO, BOOLEAN_RULE),
    (keys.NETWORK_TRAFFIC_STATE, BOOLEAN_RULE),
    (keys.NETWORK_TRAFFIC_TYPE, InclusiveIntegerRangeRule(0, 4)),
    (keys.NETWORK_TRAFFIC_AUTOHIDE_THRESHOLD, ANY_INTEGER_RULE),
    (keys.NETWORK_TRAFFIC_ARROW, BOOLEAN_RULE),
    (keys.NETWORK_TRAFFIC_FONT_SIZE, NON_NEGATIVE_INTEGER_RULE),
    (keys.NETWORK_TRAFFIC_VIEW_LOCATION, BOOLEAN_RULE),
    (keys.GAMING_MODE_HEADS_UP, BOOLEAN_RULE),
    (keys.GAMING_MODE_ZEN, BOOLEAN_RULE),
    (keys.GAMING_MODE_RINGER, InclusiveIntegerRangeRule(0, 2)),
    (keys.GAMING_MODE_NAVBAR, BOOLEAN_RULE),
    (keys.GAMING_MODE_HW_BUTTONS, BOOLEAN_RULE),
    (keys.GAMING_MODE_NIGHT_LIGHT, BOOLEAN_RULE),
    (keys.GAMING_MODE_BATTERY_SCHEDULE, BOOLEAN_RULE),
    (keys.GAMING_MODE_BRIGHTNESS_ENABLED, BOOLEAN_RULE),
    (keys.GAMING_MODE_BRIGHTNESS, InclusiveIntegerRangeRule(0, 100)),
    (keys.GAMING_MODE_MEDIA_ENABLED, BOOLEAN_RULE),
    (keys.GAMING_MODE_MEDIA, InclusiveIntegerRangeRule(0, 100)),
    (keys.GAMING_MODE_SCREEN_OFF, BOOLEAN_RULE),
    (keys.NOTIFICATION_HEADERS, BOOLEAN_RULE),
    (keys.RINGTONE_VIBRATION_PATTERN, InclusiveIntegerRangeRule(0, 5)),
    (keys.CUSTOM_RINGTONE_VIBRATION_PATTERN, CUSTOM_VIBRATION_PATTERN_RULE),
    (keys.VIBRATE_ON_CONNECT, BOOLEAN_RULE),
    (keys.VIBRATE_ON_CALLWAITING, BOOLEAN_RULE),
    (keys.VIBRATE_ON_DISCONNECT, BOOLEAN_RULE),
    (keys.FLASHLIGHT_ON_CALL, InclusiveIntegerRangeRule(0, 4)),
    (keys.FLASHLIGHT_ON_CALL_IGNORE_DND, BOOLEAN_RULE),
    (keys.FLASHLIGHT_ON_CALL_RATE, InclusiveIntegerRangeRule(1, 5)),
    (keys.VOLUME_DIALOG_TIMEOUT, InclusiveIntegerRangeRule(1, 7)),
    (keys.TORCH_POWER_BUTTON_GESTURE, InclusiveIntegerRangeRule(0, 2)),
    (keys.DOUBLE_TAP_SLEEP_LOCKSCREEN, BOOLEAN_RULE),
    (keys.DOUBLE_TAP_SLEEP_GESTURE, BOOLEAN_RULE),
    (keys.VOLUME_BUTTON_MUSIC_CONTROL, BOOLEAN_RULE),
    (keys.VOLUME_BUTTON_MUSIC_CONTROL_DELAY, InclusiveIntegerRangeRule(300, 2000)),
    (keys.OMNI_ADVANCED_REBOOT, BOOLEAN_RULE),
    (keys.BATTERY_LIGHT_ENABLED, BOOLEAN_RULE),
    (keys.BATTERY_LIGHT_ALLOW_ON_DND, BOOLEAN_RULE),
    (keys.BATTERY_LIGHT_LOW_BLINKING, BOOLEAN_RULE),
    (keys.BATTERY_LIGHT_LOW_COLOR, ANY_STRING_RULE),
    (keys.BATTERY_LIGHT_MEDIUM_COLOR, ANY_STRING_RULE),
    (keys.BATTERY_LIGHT_FULL_COLOR, ANY_STRING_RULE),
    (keys.BATTERY_LIGHT_REALLYFULL_COLOR, ANY_STRING_RULE),
    (keys.NOTIFICATION_PULSE, BOOLEAN_RULE),
    (keys.AOD_NOTIFICATION_PULSE, BOOLEAN_RULE),
    (keys.NOTIFICATION_PULSE_COLOR_MODE, InclusiveIntegerRangeRule(0, 3)),
    (keys.NOTIFICATION_PULSE_COLOR, ANY_INTEGER_RULE),
    (keys.NOTIFICATION_PULSE_REPEATS, ANY_INTEGER_RULE),
    (keys.NOTIFICATION_PULSE_DURATION, ANY_INTEGER_RULE),
    (keys.QS_FOOTER_SERVICES_SHOW, BOOLEAN_RULE),
    (keys.KEYGUARD_MEDIA_ART, BOOLEAN_RULE),
    (keys.QS_SHOW_BATTERY_ESTIMATE, BOOLEAN_RULE),
    (keys.ENABLE_FLOATING_ROTATION_BUTTON, BOOLEAN_RULE),
    (keys.NAVIGATION_BAR_INVERSE, BOOLEAN_RULE),
    (
        keys.NAVBAR_LAYOUT_VIEWS,
        SegmentedListRule(NAVBAR_LAYOUT_BUTTONS, segments=3, value_sentinel="default"),
    ),
    (keys.VOLUME_KEY_CURSOR_CONTROL, InclusiveIntegerRangeRule(0, 2)),
    (keys.STATUS_BAR_BATTERY_STYLE, InclusiveIntegerRangeRule(0, 2)),
    (keys.SHOW_BATTERY_PERCENT_INSIDE, BOOLEAN_RULE),
    (keys.VOLUME_BUTTON_QUICK_MUTE, BOOLEAN_RULE),
    (keys.VOLUME_BUTTON_QUICK_MUTE_DELAY, InclusiveIntegerRangeRule(300, 1500)),
    (keys.BACK_GESTURE_HEIGHT, InclusiveIntegerRangeRule(0, 5)),
    (keys.VOLUME_PANEL_ON_LEFT, BOOLEAN_RULE),
    (keys.VOLUME_PANEL_ON_LEFT_LAND, BOOLEAN_RULE),
    (keys.STATUS_BAR_BRIGHTNESS_CONTROL, BOOLEAN_RULE),
    (keys.STATUSBAR_CLOCK_POSITION, InclusiveIntegerRangeRule(0, 2)),
    (keys.NOTIFICATION_VIBRATION_PATTERN, InclusiveIntegerRangeRule(0, 5)),
    (keys.CUSTOM_NOTIFICATION_VIBRATION_PATTERN, CUSTOM_VIBRATION_PATTERN_RULE),
    # "1" means the default torch pattern, otherwise "<count>,<interval>"
    (keys.DEFAULT_NOTIFICATION_TORCH, NumericPairRule(sentinel="1", minimum=1)),
    (keys.STATUS_BAR_NOTIF_COUNT, BOOLEAN_RULE),
    (
        keys.KEYGUARD_QUICK_TOGGLES,
        SegmentedListRule(
            KEYGUARD_QUICK_TOGGLE_BUTTONS,
            segments=2,
            segment_sentinel="none",
            allow_absent=True,
        ),
    ),
)


def build_system_settings_registry(config: dict | None = None) -> ValidatorRegistry:
    """Build a registry of the system settings rules, plus any rules described in config.

    Call once at startup and hand the result to whatever gates writes.
    """
    builder = RegistryBuilder().register_entries(SYSTEM_SETTINGS_RULES)
    if config:
        builder.register_from_config(config)
    return builder.build()
