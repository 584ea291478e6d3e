"""Env-var backed settings for the phonebook service.

Resolution order: env var > default. Entry points call load_env_file() first
so values from a .env file end up in the environment.
All settings are defined in SETTING_DEFS.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettingDef:
    """Definition of a single setting."""

    key: str
    env_var: str
    default: str
    is_secret: bool
    description: str
    group: str  # e.g. "database", "server", "logging"


# ── Registry ─────────────────────────────────────────────────────────────────

SETTING_DEFS: dict[str, SettingDef] = {}


def _reg(key: str, env_var: str, default: str, is_secret: bool, description: str, group: str):
    SETTING_DEFS[key] = SettingDef(key, env_var, default, is_secret, description, group)


# Database
_reg(
    "database.url",
    "DATABASE_URL",
    "sqlite:///phonebook.db",
    True,
    "SQLAlchemy connection string for the record store",
    "database",
)

# Server
_reg("server.host", "HOST", "0.0.0.0", False, "Interface to bind", "server")
_reg("server.port", "PORT", "3001", False, "Port to listen on", "server")
_reg(
    "server.static_dir",
    "STATIC_DIR",
    "dist",
    False,
    "Directory with the built frontend, served at / when it exists",
    "server",
)
_reg(
    "server.cors_origins",
    "CORS_ORIGINS",
    "*",
    False,
    "Comma-separated list of allowed CORS origins",
    "server",
)

# Logging
_reg("logging.level", "LOG_LEVEL", "INFO", False, "Root log level", "logging")
_reg(
    "logging.access_log",
    "ACCESS_LOG",
    "true",
    False,
    "Log one line per HTTP request, including the request body",
    "logging",
)


# ── Accessors ────────────────────────────────────────────────────────────────


def load_env_file(path: str | None = None) -> bool:
    """Load a .env file into os.environ without overriding variables already set.

    Without *path*, the nearest .env found from the working directory upwards
    is used. Returns True if a file was loaded.
    """
    dotenv_path = path or find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path, override=False)


def _get_def(key: str) -> SettingDef:
    defn = SETTING_DEFS.get(key)
    if defn is None:
        raise KeyError(f"Unknown setting: {key}")
    return defn


def get_setting(key: str) -> str:
    """Return the effective value for *key*.

    Resolution: env var (non-empty) > default.
    Raises KeyError for unknown keys.
    """
    defn = _get_def(key)
    env_val = os.environ.get(defn.env_var, "")
    if env_val:
        return env_val
    return defn.default


def get_setting_int(key: str, fallback: int | None = None) -> int:
    """get_setting() coerced to int."""
    raw = get_setting(key)
    try:
        return int(raw)
    except (ValueError, TypeError):
        if fallback is not None:
            return fallback
        raise


def get_setting_bool(key: str) -> bool:
    return get_setting(key).strip().lower() in {"1", "true", "yes", "on"}


def get_setting_list(key: str) -> list[str]:
    """get_setting() split on commas into a list of stripped strings."""
    return [s.strip() for s in get_setting(key).split(",") if s.strip()]


def get_setting_source(key: str) -> str:
    """Return where the effective value comes from: 'env' or 'default'."""
    defn = _get_def(key)
    if os.environ.get(defn.env_var, ""):
        return "env"
    return "default"


def _mask_secret(value: str) -> str:
    """Mask a secret value for display."""
    if not value or len(value) <= 8:
        return "****"
    return value[:4] + "****" + value[-4:]


def list_settings(group: str | None = None) -> list[dict]:
    """List all settings with metadata, values (masked if secret), and sources."""
    result = []
    for defn in SETTING_DEFS.values():
        if group and defn.group != group:
            continue

        raw_value = get_setting(defn.key)
        if defn.is_secret and raw_value:
            display_value = _mask_secret(raw_value)
        else:
            display_value = raw_value

        result.append(
            {
                "key": defn.key,
                "value": display_value,
                "source": get_setting_source(defn.key),
                "is_secret": defn.is_secret,
                "description": defn.description,
                "group": defn.group,
                "env_var": defn.env_var,
                "default": defn.default,
            }
        )
    return result


def log_settings_sources() -> None:
    """Log the source of each setting on startup."""
    for item in list_settings():
        logger.info(f"Setting {item['key']}: source={item['source']}, value={item['value'] or '(empty)'}")
