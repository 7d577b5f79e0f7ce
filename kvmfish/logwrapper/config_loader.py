from __future__ import annotations
import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_DEFAULT_CFG_PATH = Path(__file__).parent / "config" / "config.yml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "console_level": "INFO",
    "file_path": "logs/kvmfish.log",
    "rotate_bytes": 2 * 1024 * 1024,
    "backup_count": 5,
    "buffer_size": 1000,
    "module_levels": {"hardware": "INFO", "redfish": "INFO"},
}


def _deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _deep_update(base[k], v)
        else:
            base[k] = v
    return base


def load_config(path: str | os.PathLike | None = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg_path = Path(path) if path else _DEFAULT_CFG_PATH
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict):
            cfg = _deep_update(cfg, data)
    if overrides:
        cfg = _deep_update(cfg, overrides)

    # LOG_LEVEL / LOG_FILE win over files and overrides; LOG_FILE="" disables the file
    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        cfg["console_level"] = env_level
    env_file = os.getenv("LOG_FILE")
    if env_file is not None:
        cfg["file_path"] = env_file
    return cfg
