from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_tree.yml"


class GTConfig:
    def __init__(self, data: Dict[str, Any]):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.notes = data.get("notes", {}) or {}
        self.export = data.get("export", {}) or {}
        self.debug = bool(data.get("debug", False))

    @property
    def conc_inline(self) -> bool:
        return bool(self.notes.get("conc_inline", False))


def load_config(path: Optional[Union[str, Path]] = None) -> GTConfig:
    """
    Load configuration from YAML.

    An explicit ``path`` must exist. When no path is given and the bundled
    ``config/gedcom_tree.yml`` is absent (e.g. a non-editable install), the
    built-in defaults are used.
    """
    if path is not None:
        cfg_path = Path(path)
        if not cfg_path.exists():
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
    else:
        cfg_path = CONFIG_PATH
        if not cfg_path.exists():
            return GTConfig({})

    with open(cfg_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GTConfig(data)


_config_cache: Optional[GTConfig] = None


def get_config() -> GTConfig:
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
