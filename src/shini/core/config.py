from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from shini.core.errors import SettingsError
from shini.core.models import LoadSettings, UIConfig

# Python 3.11+ has tomllib; for 3.9/3.10 use tomli
try:
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore


# Project-local settings (closest one in the parent chain wins)
DEFAULT_LOCAL_CONFIG_FILES = (".shini/config.toml",)

# Global settings (applies on this machine)
DEFAULT_GLOBAL_CONFIG_FILES = (
    "~/.config/shini/config.toml",
    "~/.shini/config.toml",
)


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8", errors="replace"))
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML in {path}: {e}", path=str(path)) from e
    if not isinstance(data, dict):
        return {}
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge override into base (dict-only). Lists/scalars are replaced.
    """
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _expand_paths(paths: tuple[str, ...]) -> list[Path]:
    return [Path(p).expanduser().resolve() for p in paths]


def find_local_config(start_dir: Path) -> Optional[Path]:
    """
    Walk upward to find a project-local settings file.
    Finds the closest one in the parent chain.
    """
    cur = start_dir.resolve()
    for parent in [cur, *cur.parents]:
        for rel in DEFAULT_LOCAL_CONFIG_FILES:
            p = (parent / rel).resolve()
            if p.exists() and p.is_file():
                return p
    return None


def find_global_config() -> Optional[Path]:
    for p in _expand_paths(DEFAULT_GLOBAL_CONFIG_FILES):
        if p.exists() and p.is_file():
            return p
    return None


def _section(merged: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = merged.get(name) or {}
    if not isinstance(value, dict):
        return {}
    return value


@dataclass(frozen=True)
class LoadedSettings:
    load: LoadSettings
    ui_config: UIConfig
    global_path: Optional[Path]
    local_path: Optional[Path]


def load_settings(
    start_dir: Path,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> LoadedSettings:
    """
    Precedence (lowest -> highest):
      defaults (LoadSettings/UIConfig) ->
      global config ->
      local config (closest) ->
      cli_overrides
    """
    cli_overrides = cli_overrides or {}

    global_path = find_global_config()
    local_path = find_local_config(start_dir)

    merged: Dict[str, Any] = {}

    if global_path:
        merged = _deep_merge(merged, _read_toml(global_path))

    if local_path:
        merged = _deep_merge(merged, _read_toml(local_path))

    # CLI overrides are expected to be in the same shape as TOML (namespaced)
    merged = _deep_merge(merged, cli_overrides)

    try:
        load = LoadSettings.model_validate(_section(merged, "load"))
        ui_config = UIConfig.model_validate(_section(merged, "ui"))
    except ValidationError as e:
        where = local_path or global_path
        raise SettingsError(f"Invalid shini settings: {e}", path=str(where) if where else None) from e

    return LoadedSettings(
        load=load,
        ui_config=ui_config,
        global_path=global_path,
        local_path=local_path,
    )
