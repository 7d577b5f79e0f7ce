from __future__ import annotations
import copy
import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8080},
    "service": {},
    "boot": {},
    "include": {"hardware": True, "logs": True},
}


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    cfg: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
    candidates = []
    # Highest priority: explicit path, then env var path
    if path:
        candidates.append(path)
    env_path = os.getenv("REDFISH_CONFIG")
    if env_path:
        candidates.append(env_path)
    here = os.path.dirname(__file__)
    candidates.append(os.path.join(here, "config", "config.yml"))
    for p in candidates:
        if os.path.exists(p):
            with open(p, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                cfg = _deep_update(cfg, data)
            break

    env: Dict[str, Any] = {}
    host = os.getenv("REDFISH_HOST")
    port = os.getenv("REDFISH_PORT")
    if host:
        env.setdefault("server", {})["host"] = host
    if port:
        env.setdefault("server", {})["port"] = int(port)
    cfg = _deep_update(cfg, env)
    if overrides:
        cfg = _deep_update(cfg, overrides)
    return cfg


def _deep_update(base: Dict[str, Any], up: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in up.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)  # type: ignore
        else:
            out[k] = v
    return out
