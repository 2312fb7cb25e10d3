"""Settings for the zoo demo: clock timing, animal names, colours and window size."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union


@dataclass
class ClockConfig:
    cycle_interval: float = 10.0  # seconds between day/night flips
    racoon_name: str = "Racoon"
    parrot_name: str = "Parrot"


@dataclass
class ThemeConfig:
    day_background: str = "#ffffff"
    day_foreground: str = "#000000"
    night_background: str = "#000000"
    night_foreground: str = "#ffffff"
    sleeping_tint: str = "#808080"
    awake_tint: str = "#34c759"
    icon_size: int = 50
    transition_ms: int = 350


@dataclass
class WindowConfig:
    title: str = "Zoo"
    width: int = 420
    height: int = 640


@dataclass
class ZooConfig:
    clock: ClockConfig = field(default_factory=ClockConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    window: WindowConfig = field(default_factory=WindowConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        sections = dict(self.iter_sections())
        for section_name, section_values in data.items():
            section = sections.get(section_name)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            known = {f.name for f in fields(section)}
            for key, value in section_values.items():
                if key in known:
                    setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "clock", self.clock
        yield "theme", self.theme
        yield "window", self.window


def load_config(path: Union[str, Path]) -> ZooConfig:
    """Read a JSON config file on top of the defaults."""
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Failed to load config from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config in {path} must be a JSON object at the top level.")
    config = ZooConfig()
    config.update_from_mapping(data)
    return config


DEFAULT_CONFIG = ZooConfig()
