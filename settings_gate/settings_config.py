"""Gate configuration from the environment (or a .env file) and the optional JSON rules file."""
import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

UNKNOWN_KEY_POLICY_ENV = "SETTINGS_GATE_UNKNOWN_KEY_POLICY"
RULES_FILE_ENV = "SETTINGS_GATE_RULES_FILE"


class ConfigError(Exception):
    """Gate configuration could not be loaded."""


class UnknownKeyPolicy(str, Enum):
    """What to do with a write to a key that has no rule."""

    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class GateConfig:
    unknown_key_policy: UnknownKeyPolicy = UnknownKeyPolicy.REJECT
    rules_file: Path | None = None


def load_gate_config(env_file: str | Path | None = None) -> GateConfig:
    """Read gate settings from the environment. Values already set win over the .env file."""
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()

    policy_name = os.getenv(UNKNOWN_KEY_POLICY_ENV, UnknownKeyPolicy.REJECT.value).strip().lower()
    try:
        policy = UnknownKeyPolicy(policy_name)
    except ValueError as e:
        raise ConfigError(
            f"{UNKNOWN_KEY_POLICY_ENV} must be one of "
            f"{[p.value for p in UnknownKeyPolicy]}, got {policy_name!r}"
        ) from e

    rules_file_str = os.getenv(RULES_FILE_ENV, "").strip()
    rules_file = Path(rules_file_str) if rules_file_str else None

    logger.info("Loaded gate config: unknown_key_policy=%s, rules_file=%s", policy.value, rules_file)
    return GateConfig(unknown_key_policy=policy, rules_file=rules_file)


def load_rules_file(path: str | Path) -> dict:
    """Load a JSON rules file: {"rules": [{"key": ..., "rule": ..., "params": {...}}]}."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Rules file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Rules file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("rules", []), list):
        raise ConfigError(f"Rules file {path} must be an object with a 'rules' list")
    logger.info("Loaded %d rule entries from %s", len(data.get("rules", [])), path)
    return data
