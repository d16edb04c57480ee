"""Configuración de la app (valores por defecto + variables de entorno)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from dateutil import tz

from glucosa_tool.window import DEFAULT_WINDOW_DAYS

ENV_EXPORT_DIR = "GLUCOSA_EXPORT_DIR"
ENV_TIMEZONE = "GLUCOSA_TZ"
ENV_LOG_LEVEL = "GLUCOSA_LOG_LEVEL"
DEFAULT_FILE_PREFIX = "registro-glucosa"


class ConfigError(ValueError):
    """Configuración inválida."""


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration for the tracker."""

    export_dir: Path = Path("salidas")
    window_days: int = DEFAULT_WINDOW_DAYS
    timezone: str | None = None
    file_prefix: str = DEFAULT_FILE_PREFIX
    log_level: str = "INFO"


def load_config(**overrides: object) -> AppConfig:
    """Build config from defaults, environment and explicit overrides.

    Overrides with value None are ignored.

    Raises:
        ConfigError: If a value is out of range or unknown.
    """
    config = AppConfig()
    env_values: dict[str, object] = {}
    if os.environ.get(ENV_EXPORT_DIR):
        env_values["export_dir"] = os.environ[ENV_EXPORT_DIR]
    if os.environ.get(ENV_TIMEZONE):
        env_values["timezone"] = os.environ[ENV_TIMEZONE]
    if os.environ.get(ENV_LOG_LEVEL):
        env_values["log_level"] = os.environ[ENV_LOG_LEVEL]

    merged = {**env_values, **{k: v for k, v in overrides.items() if v is not None}}
    if "export_dir" in merged:
        merged["export_dir"] = Path(str(merged["export_dir"])).expanduser()
    try:
        config = replace(config, **merged)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc
    _validate(config)
    return config


def _validate(config: AppConfig) -> None:
    if config.window_days < 1:
        raise ConfigError(f"window_days debe ser >= 1 (recibido {config.window_days})")
    if config.timezone and tz.gettz(config.timezone) is None:
        raise ConfigError(f"Zona horaria desconocida: {config.timezone}")
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ConfigError(f"Nivel de log desconocido: {config.log_level}")
    if not config.file_prefix.strip():
        raise ConfigError("file_prefix no puede estar vacío")
    if "/" in config.file_prefix or "\\" in config.file_prefix:
        raise ConfigError(
            f"file_prefix no puede contener separadores: {config.file_prefix}"
        )
