# config/settings.py

import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import List, Optional

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default.json")


@dataclass
class PlayerConfig:
    default_backend: str = "linux"  # fallback when the host platform has no backend
    demo_backend: str = "windows"
    supported_formats: List[str] = field(default_factory=lambda: ["mp3", "wav"])
    log_dir: str = "logs"
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    enable_playback_logging: bool = True
    # Keys present in the file but not understood; reported once logging is set up
    ignored_keys: List[str] = field(default_factory=list, init=False, compare=False, repr=False)

    def level(self, name: str) -> int:
        """Resolve a level name such as 'INFO' to its logging constant"""
        value = logging.getLevelName(name.upper())
        return value if isinstance(value, int) else logging.INFO


def load_config(path: Optional[str] = None) -> PlayerConfig:
    """Load a PlayerConfig from JSON, defaulting to the packaged default.json"""
    cfg_path = path or DEFAULT_CONFIG_PATH
    with open(cfg_path) as f:
        cfg_dict = json.load(f)

    if not isinstance(cfg_dict, dict):
        raise ValueError(f"{cfg_path}: expected a JSON object, got {type(cfg_dict).__name__}")

    known = {f.name for f in fields(PlayerConfig) if f.init}
    config = PlayerConfig(**{k: v for k, v in cfg_dict.items() if k in known})
    config.ignored_keys = sorted(set(cfg_dict) - known)
    config.supported_formats = [ext.lower().lstrip('.') for ext in config.supported_formats]
    return config
