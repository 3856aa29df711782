from __future__ import annotations

import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from .errors import ThemeNotFound


THEMES_PATH = Path(__file__).parent / "templates" / "themes.toml"


@dataclass(frozen=True)
class ThemeValue:
    light: str
    dark: str


@dataclass(frozen=True)
class Theme:
    name: str
    variables: Dict[str, ThemeValue]

    def light_css(self) -> List[str]:
        return [f"--{k}: {v.light};" for k, v in self.variables.items()]

    def dark_css(self) -> List[str]:
        return [f"--{k}: {v.dark};" for k, v in self.variables.items()]


def parse_themes(data: dict) -> Dict[str, Theme]:
    themes: Dict[str, Theme] = {}
    for name, table in data.items():
        variables = {}
        for prop, pair in table.items():
            light = pair.get("light", "")
            # A missing dark value keeps the light one.
            variables[prop] = ThemeValue(light=light, dark=pair.get("dark", light))
        themes[name] = Theme(name=name, variables=variables)
    return themes


@lru_cache(maxsize=None)
def load_themes(path: Path = THEMES_PATH) -> Dict[str, Theme]:
    return parse_themes(tomllib.loads(path.read_text(encoding="utf-8")))


def get_theme(name: str) -> Theme:
    themes = load_themes()
    try:
        return themes[name]
    except KeyError:
        available = ", ".join(sorted(themes))
        raise ThemeNotFound(f"Unknown theme {name!r} (available: {available})") from None
