import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

_DEFAULT_MAX_KEY_LENGTH = 16384


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


# Longest key text accepted before decoding; larger inputs are Invalid and sanitize passes them through
MAX_KEY_LENGTH = _int_env("KEYPRINT_MAX_KEY_LENGTH", _DEFAULT_MAX_KEY_LENGTH)
LOG_LEVEL = os.getenv("KEYPRINT_LOG_LEVEL", "WARNING").upper()
METRICS_ENABLED = os.getenv("KEYPRINT_METRICS_ENABLED", "true").lower() == "true"


@dataclass(frozen=True)
class Settings:
    max_key_length: int = MAX_KEY_LENGTH
    log_level: str = LOG_LEVEL
    metrics_enabled: bool = METRICS_ENABLED


def load_settings() -> Settings:
    """Re-read the environment (tests monkeypatch it after import)."""
    return Settings(
        max_key_length=_int_env("KEYPRINT_MAX_KEY_LENGTH", MAX_KEY_LENGTH),
        log_level=os.getenv("KEYPRINT_LOG_LEVEL", LOG_LEVEL).upper(),
        metrics_enabled=os.getenv("KEYPRINT_METRICS_ENABLED", str(METRICS_ENABLED)).lower() == "true",
    )
