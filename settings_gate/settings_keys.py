"""Key names in the system settings namespace."""

STAY_ON_WHILE_PLUGGED_IN = "stay_on_while_plugged_in"
END_BUTTON_BEHAVIOR = "end_button_behavior"
WIFI_USE_STATIC_IP = "wifi_use_static_ip"
BLUETOOTH_DISCOVERABILITY = "bluetooth_discoverability"
BLUETOOTH_DISCOVERABILITY_TIMEOUT = "bluetooth_discoverability_timeout"
NEXT_ALARM_FORMATTED = "next_alarm_formatted"
FONT_SCALE = "font_scale"
DIM_SCREEN = "dim_screen"
DISPLAY_COLOR_MODE = "display_color_mode"
DISPLAY_COLOR_MODE_VENDOR_HINT = "display_color_mode_vendor_hint"
SCREEN_OFF_TIMEOUT = "screen_off_timeout"
SCREEN_BRIGHTNESS_FOR_VR = "screen_brightness_for_vr"
SCREEN_BRIGHTNESS_MODE = "screen_brightness_mode"
ADAPTIVE_SLEEP = "adaptive_sleep"
MODE_RINGER_STREAMS_AFFECTED = "mode_ringer_streams_affected"
MUTE_STREAMS_AFFECTED = "mute_streams_affected"
VIBRATE_ON = "vibrate_on"
APPLY_RAMPING_RINGER = "apply_ramping_ringer"
ALARM_VIBRATION_INTENSITY = "alarm_vibration_intensity"
MEDIA_VIBRATION_INTENSITY = "media_vibration_intensity"
NOTIFICATION_VIBRATION_INTENSITY = "notification_vibration_intensity"
RING_VIBRATION_INTENSITY = "ring_vibration_intensity"
HAPTIC_FEEDBACK_INTENSITY = "haptic_feedback_intensity"
HARDWARE_HAPTIC_FEEDBACK_INTENSITY = "hardware_haptic_feedback_intensity"
HAPTIC_FEEDBACK_ENABLED = "haptic_feedback_enabled"
RINGTONE = "ringtone"
NOTIFICATION_SOUND = "notification_sound"
ALARM_ALERT = "alarm_alert"
TEXT_AUTO_REPLACE = "text_auto_replace"
TEXT_AUTO_CAPS = "text_auto_caps"
TEXT_AUTO_PUNCTUATE = "text_auto_punctuate"
TEXT_SHOW_PASSWORD = "text_show_password"
AUTO_TIME = "auto_time"
AUTO_TIME_ZONE = "auto_time_zone"
SHOW_GTALK_SERVICE_STATUS = "SHOW_GTALK_SERVICE_STATUS"
WALLPAPER_ACTIVITY = "wallpaper_activity"
TIME_12_24 = "time_12_24"
SETUP_WIZARD_HAS_RUN = "setup_wizard_has_run"
ACCELEROMETER_ROTATION = "accelerometer_rotation"
USER_ROTATION = "user_rotation"
DTMF_TONE_WHEN_DIALING = "dtmf_tone_when_dialing"
SOUND_EFFECTS_ENABLED = "sound_effects_enabled"
POWER_SOUNDS_ENABLED = "power_sounds_enabled"
DOCK_SOUNDS_ENABLED = "dock_sounds_enabled"
SHOW_WEB_SUGGESTIONS = "show_web_suggestions"
ADVANCED_SETTINGS = "advanced_settings"
SCREEN_AUTO_BRIGHTNESS_ADJ = "screen_auto_brightness_adj"
VIBRATE_INPUT_DEVICES = "vibrate_input_devices"
MASTER_MONO = "master_mono"
MASTER_BALANCE = "master_balance"
NOTIFICATIONS_USE_RING_VOLUME = "notifications_use_ring_volume"
VIBRATE_IN_SILENT = "vibrate_in_silent"
MEDIA_BUTTON_RECEIVER = "media_button_receiver"
HIDE_ROTATION_LOCK_TOGGLE_FOR_ACCESSIBILITY = "hide_rotation_lock_toggle_for_accessibility"
VIBRATE_WHEN_RINGING = "vibrate_when_ringing"
DTMF_TONE_TYPE_WHEN_DIALING = "dtmf_tone_type"
HEARING_AID = "hearing_aid"
TTY_MODE = "tty_mode"
NOTIFICATION_LIGHT_PULSE = "notification_light_pulse"
POINTER_LOCATION = "pointer_location"
SHOW_TOUCHES = "show_touches"
WINDOW_ORIENTATION_LISTENER_LOG = "window_orientation_listener_log"
LOCKSCREEN_SOUNDS_ENABLED = "lockscreen_sounds_enabled"
LOCKSCREEN_DISABLED = "lockscreen_disabled"
SIP_RECEIVE_CALLS = "sip_receive_calls"
SIP_CALL_OPTIONS = "sip_call_options"
SIP_ALWAYS = "sip_always"
SIP_ADDRESS_ONLY = "sip_address_only"
SIP_ASK_ME_EACH_TIME = "sip_ask_me_each_time"
POINTER_SPEED = "pointer_speed"
LOCK_TO_APP_ENABLED = "lock_to_app_enabled"
EGG_MODE = "egg_mode"
WIFI_STATIC_IP = "wifi_static_ip"
WIFI_STATIC_GATEWAY = "wifi_static_gateway"
WIFI_STATIC_NETMASK = "wifi_static_netmask"
WIFI_STATIC_DNS1 = "wifi_static_dns1"
WIFI_STATIC_DNS2 = "wifi_static_dns2"
FORCE_FULLSCREEN_CUTOUT_APPS = "force_fullscreen_cutout_apps"
SHOW_BATTERY_PERCENT = "show_battery_percent"
QS_FOOTER_TEXT_SHOW = "qs_footer_text_show"
QS_FOOTER_TEXT_STRING = "qs_footer_text_string"
LOCKSCREEN_BATTERY_INFO = "lockscreen_battery_info"
NETWORK_TRAFFIC_STATE = "network_traffic_state"
NETWORK_TRAFFIC_TYPE = "network_traffic_type"
NETWORK_TRAFFIC_AUTOHIDE_THRESHOLD = "network_traffic_autohide_threshold"
NETWORK_TRAFFIC_ARROW = "network_traffic_arrow"
NETWORK_TRAFFIC_FONT_SIZE = "network_traffic_font_size"
NETWORK_TRAFFIC_VIEW_LOCATION = "network_traffic_view_location"
GAMING_MODE_HEADS_UP = "gaming_mode_heads_up"
GAMING_MODE_ZEN = "gaming_mode_zen"
GAMING_MODE_RINGER = "gaming_mode_ringer"
GAMING_MODE_NAVBAR = "gaming_mode_navbar"
GAMING_MODE_HW_BUTTONS = "gaming_mode_hw_buttons"
GAMING_MODE_NIGHT_LIGHT = "gaming_mode_night_light"
GAMING_MODE_BATTERY_SCHEDULE = "gaming_mode_battery_schedule"
GAMING_MODE_BRIGHTNESS_ENABLED = "gaming_mode_brightness_enabled"
GAMING_MODE_BRIGHTNESS = "gaming_mode_brightness"
GAMING_MODE_MEDIA_ENABLED = "gaming_mode_media_enabled"
GAMING_MODE_MEDIA = "gaming_mode_media"
GAMING_MODE_SCREEN_OFF = "gaming_mode_screen_off"
NOTIFICATION_HEADERS = "notification_headers"
RINGTONE_VIBRATION_PATTERN = "ringtone_vibration_pattern"
CUSTOM_RINGTONE_VIBRATION_PATTERN = "custom_ringtone_vibration_pattern"
VIBRATE_ON_CONNECT = "vibrate_on_connect"
VIBRATE_ON_CALLWAITING = "vibrate_on_callwaiting"
VIBRATE_ON_DISCONNECT = "vibrate_on_disconnect"
FLASHLIGHT_ON_CALL = "flashlight_on_call"
FLASHLIGHT_ON_CALL_IGNORE_DND = "flashlight_on_call_ignore_dnd"
FLASHLIGHT_ON_CALL_RATE = "flashlight_on_call_rate"
VOLUME_DIALOG_TIMEOUT = "volume_dialog_timeout"
TORCH_POWER_BUTTON_GESTURE = "torch_power_button_gesture"
DOUBLE_TAP_SLEEP_LOCKSCREEN = "double_tap_sleep_lockscreen"
DOUBLE_TAP_SLEEP_GESTURE = "double_tap_sleep_gesture"
VOLUME_BUTTON_MUSIC_CONTROL = "volume_button_music_control"
VOLUME_BUTTON_MUSIC_CONTROL_DELAY = "volume_button_music_control_delay"
OMNI_ADVANCED_REBOOT = "omni_advanced_reboot"
BATTERY_LIGHT_ENABLED = "battery_light_enabled"
BATTERY_LIGHT_ALLOW_ON_DND = "battery_light_allow_on_dnd"
BATTERY_LIGHT_LOW_BLINKING = "battery_light_low_blinking"
BATTERY_LIGHT_LOW_COLOR = "battery_light_low_color"
BATTERY_LIGHT_MEDIUM_COLOR = "battery_light_medium_color"
BATTERY_LIGHT_FULL_COLOR = "battery_light_full_color"
BATTERY_LIGHT_REALLYFULL_COLOR = "battery_light_reallyfull_color"
NOTIFICATION_PULSE = "notification_pulse"
AOD_NOTIFICATION_PULSE = "aod_notification_pulse"
NOTIFICATION_PULSE_COLOR_MODE = "notification_pulse_color_mode"
NOTIFICATION_PULSE_COLOR = "notification_pulse_color"
NOTIFICATION_PULSE_REPEATS = "notification_pulse_repeats"
NOTIFICATION_PULSE_DURATION = "notification_pulse_duration"
QS_FOOTER_SERVICES_SHOW = "qs_footer_services_show"
KEYGUARD_MEDIA_ART = "keyguard_media_art"
QS_SHOW_BATTERY_ESTIMATE = "qs_show_battery_estimate"
ENABLE_FLOATING_ROTATION_BUTTON = "enable_floating_rotation_button"
NAVIGATION_BAR_INVERSE = "navigation_bar_inverse"
NAVBAR_LAYOUT_VIEWS = "navbar_layout_views"
VOLUME_KEY_CURSOR_CONTROL = "volume_key_cursor_control"
STATUS_BAR_BATTERY_STYLE = "status_bar_battery_style"
SHOW_BATTERY_PERCENT_INSIDE = "show_battery_percent_inside"
VOLUME_BUTTON_QUICK_MUTE = "volume_button_quick_mute"
VOLUME_BUTTON_QUICK_MUTE_DELAY = "volume_button_quick_mute_delay"
BACK_GESTURE_HEIGHT = "back_gesture_height"
VOLUME_PANEL_ON_LEFT = "volume_panel_on_left"
VOLUME_PANEL_ON_LEFT_LAND = "volume_panel_on_left_land"
STATUS_BAR_BRIGHTNESS_CONTROL = "status_bar_brightness_control"
STATUSBAR_CLOCK_POSITION = "statusbar_clock_position"
NOTIFICATION_VIBRATION_PATTERN = "notification_vibration_pattern"
CUSTOM_NOTIFICATION_VIBRATION_PATTERN = "custom_notification_vibration_pattern"
DEFAULT_NOTIFICATION_TORCH = "default_notification_torch"
STATUS_BAR_NOTIF_COUNT = "status_bar_notif_count"
KEYGUARD_QUICK_TOGGLES = "keyguard_quick_toggles"
