import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _load_environment() -> None:
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path, override=False)


_load_environment()


def get_env_variable(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_env_variable_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


def default_config_path() -> Optional[str]:
    return get_env_variable("UNICODE_CENSUS_CONFIG")


def default_log_level() -> str:
    return (get_env_variable("UNICODE_CENSUS_LOG_LEVEL") or "WARNING").upper()


def default_by_extension() -> bool:
    return get_env_variable_bool("UNICODE_CENSUS_BY_EXTENSION", False)


def default_skip_traversal_errors() -> bool:
    return get_env_variable_bool("UNICODE_CENSUS_SKIP_UNREADABLE_DIRS", False)
