from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict


CONFIG_DIR = Path.home() / ".config" / "md2html"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"

# Keys understood by the commands, with their built-in defaults.
DEFAULTS: Dict[str, Any] = {
    "naming": "replace",
    "theme": "default",
    "highlight": True,
    "dark_toggle": True,
    "copy_buttons": True,
    "dialog": False,
    "lang": "en",
}


def get_default_config_path() -> Path:
    env = os.environ.get("MD2HTML_CONFIG")
    return Path(env) if env else DEFAULT_CONFIG_PATH


def _toml_value(v: Any) -> str:
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    if v is None:
        return '""'
    sval = str(v).replace("\\", "\\\\").replace('"', '\\"')
    return f"\"{sval}\""


def _toml_dump(data: Dict[str, Dict[str, Any]]) -> str:
    lines: list[str] = []
    for section, values in data.items():
        lines.append(f"[{section}]")
        for k, v in values.items():
            lines.append(f"{k} = {_toml_value(v)}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def load_config(config_path: str | None, profile: str = "default") -> dict[str, Any]:
    """
    Load one profile table from the TOML config.

    Falls back to the [default] table when the profile is missing. A missing,
    unreadable or malformed file yields an empty mapping.
    """
    cfg: dict[str, Any] = {}
    path = Path(config_path) if config_path else get_default_config_path()
    if not path.is_file():
        return cfg
    data = _read_toml(path)
    if not data:
        return cfg
    if profile in data:
        cfg.update(data.get(profile, {}))
    elif "default" in data:
        cfg.update(data.get("default", {}))
    cfg["_meta"] = {"config_path": str(path), "profile": profile}
    return cfg


def save_config(config_path: str | Path, profile: str, updates: Dict[str, Any]) -> None:
    path = Path(config_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    existing: Dict[str, Dict[str, Any]] = _read_toml(path) if path.exists() else {}

    current = existing.get(profile, {})
    current.update(updates)
    existing[profile] = current

    if "default" not in existing:
        existing.setdefault("default", {})

    path.write_text(_toml_dump(existing), encoding="utf-8")


def coerce_value(raw: str) -> Any:
    """Turn a command-line string into the TOML scalar it most likely means."""
    lowered = raw.strip().lower()
    if lowered in ("true", "yes", "on"):
        return True
    if lowered in ("false", "no", "off"):
        return False
    return raw


def resolve_option(key: str, value: Any, cfg: dict) -> Any:
    """
    Prefer an explicit command-line value; otherwise fall back to the
    profile, then to the built-in default.
    """
    if value is not None and value != "":
        return value
    if key in cfg and cfg[key] not in (None, ""):
        return cfg[key]
    return DEFAULTS.get(key)


def resolve_flag(key: str, value: Any, cfg: dict) -> bool:
    """resolve_option for on/off settings; "false"-style strings from a hand-edited file count as off."""
    resolved = resolve_option(key, value, cfg)
    if isinstance(resolved, str):
        resolved = coerce_value(resolved)
    return bool(resolved)
