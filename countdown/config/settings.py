# countdown/config/settings.py
# Configuration management for the countdown CLI: default durations & display options

import os
from dataclasses import dataclass, asdict, fields, replace
from pathlib import Path
from typing import Dict, Any, Optional, cast

import typer

from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..timer_io.generics import read_json_safe, write_json_safe

# environment variable overriding the config file location
CONFIG_ENV_VAR = "COUNTDOWN_CONFIG"


# * Default settings dataclass for countdown runs (durations in seconds)
@dataclass
class CountdownSettings:
    # countdown defaults
    total: float = 10.0
    interval: float = 1.0
    auto_start: bool = True

    # display setting
    show_progress: bool = True

    # dev mode setting (enables DEBUG-level scheduling logs w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        for name in ("total", "interval"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise SettingsValidationError(
                    f"{name} must be a number, got {type(value).__name__}", name, value
                )
            if value <= 0:
                raise SettingsValidationError(
                    f"{name} must be positive, got {value}", name, value
                )

        # strict bool validation (no coercion)
        for name in ("auto_start", "show_progress", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    name,
                    value,
                )


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            env_path = os.getenv(CONFIG_ENV_VAR)
            config_path = (
                Path(env_path) if env_path else Path.home() / ".countdown" / "config.json"
            )
        self.config_path = config_path
        self._settings: Optional[CountdownSettings] = None

    # load settings from file or return defaults
    def load(self) -> CountdownSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = CountdownSettings(**data)
            except (JSONParsingError, SettingsValidationError, TypeError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = CountdownSettings()
        else:
            self._settings = CountdownSettings()

        return self._settings

    # save settings to file
    def save(self, settings: CountdownSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; replace() re-runs validation
    def set(self, key: str, value: Any) -> None:
        if key not in known_keys():
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)
        self.save(replace(self.load(), **{key: value}))

    # reset to default settings
    def reset(self) -> None:
        self.save(CountdownSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# names of all configurable settings
def known_keys() -> set[str]:
    return {f.name for f in fields(CountdownSettings)}


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[CountdownSettings] = None
) -> CountdownSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for CountdownSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, CountdownSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
