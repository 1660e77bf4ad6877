"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_file: str = "logs.txt"
    recent_default: int = 10
    color: bool = False
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s (%s), using defaults", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def _pick(cli_value, env_key: str, yaml_data: dict, yaml_key: str, default):
    """CLI flag, then env var, then YAML, then the dataclass default."""
    if cli_value is not None:
        return cli_value
    if env_key in os.environ:
        return os.environ[env_key]
    return yaml_data.get(yaml_key, default)


def load_config(cli_args=None, yaml_data: dict | None = None) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data."""
    yaml_data = yaml_data or {}

    log_level = str(
        _pick(None, "LOG_ANALYZER_LOG_LEVEL", yaml_data, "log_level", Config.log_level)
    ).upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Unknown log level %r, using %s", log_level, Config.log_level)
        log_level = Config.log_level

    # --color is a store_true flag; only an explicit True overrides the env var
    cli_color = True if getattr(cli_args, "color", False) else None

    return Config(
        log_file=str(
            _pick(getattr(cli_args, "file", None), "LOG_ANALYZER_FILE",
                  yaml_data, "log_file", Config.log_file)
        ),
        recent_default=int(
            _pick(None, "LOG_ANALYZER_RECENT_DEFAULT",
                  yaml_data, "recent_default", Config.recent_default)
        ),
        color=_parse_bool(
            _pick(cli_color, "LOG_ANALYZER_COLOR", yaml_data, "color", Config.color)
        ),
        log_level=log_level,
    )
