"""Typed, layered configuration loader with precedence handling.

Layers (later wins):
    0. embedded defaults (``_DEFAULTS``)
    1. ``core/config/defaults.ini``
    2. environment variables ``DOCLIFECYCLE_<SECTION>__<KEY>``
    3. user overrides (``$XDG_CONFIG_HOME/doclifecycle/config.ini``)

The service only reads; it never writes a config file.
"""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

CONFIG_DIR = Path(__file__).resolve().parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
ENV_PREFIX = "DOCLIFECYCLE_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "General": {
        "app_name": "DocLifecycle",
        "version": "1.0.0",
        "timezone": "Europe/Berlin",
    },
    "Lifecycle": {
        "preview_length": "30",
        "preview_suffix": "...",
    },
    "Logging": {
        "level": "INFO",
        "feature": "documentlifecycle",
        "echo": "false",
        "database": "",
    },
}


class ConfigError(ValueError):
    """Raised when a configuration value cannot be cast or is out of range."""


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class GeneralConfig:
    app_name: str = "DocLifecycle"
    version: str = "1.0.0"
    timezone: str = "Europe/Berlin"


@dataclass
class LifecycleConfig:
    preview_length: int = 30
    preview_suffix: str = "..."


@dataclass
class LoggingConfig:
    level: str = "INFO"
    feature: str = "documentlifecycle"
    echo: bool = False
    database: str = ""  # empty -> in-memory only


@dataclass
class AppConfig:
    general: GeneralConfig
    lifecycle: LifecycleConfig
    logging: LoggingConfig


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    # dataclass annotations are strings under `from __future__ import annotations`
    name = typ if isinstance(typ, str) else getattr(typ, "__name__", str(typ))
    try:
        if name == "Path":
            return Path(str(value)).expanduser()
        if name == "bool":
            if isinstance(value, bool):
                return value
            return str(value).strip().lower() in {"1", "true", "yes", "on"}
        if name == "int":
            return int(str(value).strip())
        if name == "float":
            return float(str(value).strip())
        return str(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value!r} to {name}") from exc


def _build_dataclass(cls: type, data: Dict[str, Any], section: str) -> Any:
    kwargs = {}
    for field in fields(cls):
        val = data.get(field.name, field.default)
        try:
            kwargs[field.name] = _cast(val, field.type)
        except ConfigError as exc:
            raise ConfigError(f"[{section}] {field.name}: {exc}") from exc
    return cls(**kwargs)


def _env_overlays(environ: Mapping[str, str]) -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        section = section.title()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path(environ: Mapping[str, str]) -> Path:
    if os.name == "nt":
        appdata = environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "DocLifecycle" / "config.ini"
    return Path(environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "doclifecycle" / "config.ini"


def _validate(cfg: AppConfig) -> None:
    try:
        ZoneInfo(cfg.general.timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"[General] timezone: unknown timezone {cfg.general.timezone!r}") from exc
    if cfg.lifecycle.preview_length < 0:
        raise ConfigError("[Lifecycle] preview_length must not be negative")
    level = cfg.logging.level.strip().upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        raise ConfigError(f"[Logging] level: unknown level {cfg.logging.level!r}")
    cfg.logging.level = level


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(
        self,
        *,
        defaults_ini: Optional[Path] = DEFAULTS_INI,
        user_ini: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._lock = RLock()
        self._defaults_ini = defaults_ini
        self._environ = os.environ if environ is None else environ
        self._user_ini = user_ini if user_ini is not None else _user_config_path(self._environ)
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if self._defaults_ini is not None and self._defaults_ini.exists():
                _apply(merged, _read_ini(self._defaults_ini), "defaults.ini",
                       str(self._defaults_ini), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(self._environ), "env", "os.environ", sources)

            # Layer 3: user overrides
            if self._user_ini.exists():
                _apply(merged, _read_ini(self._user_ini), "user", str(self._user_ini), sources)

            config = AppConfig(
                general=_build_dataclass(GeneralConfig, merged.get("General", {}), "General"),
                lifecycle=_build_dataclass(LifecycleConfig, merged.get("Lifecycle", {}), "Lifecycle"),
                logging=_build_dataclass(LoggingConfig, merged.get("Logging", {}), "Logging"),
            )
            _validate(config)

            self._merged = merged
            self._sources = sources
            self.config = config
            self.general = config.general
            self.lifecycle = config.lifecycle
            self.logging = config.logging

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
