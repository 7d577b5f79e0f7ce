from __future__ import annotations
import copy
import os
from pathlib import Path
from typing import Any, Dict

import yaml

_DEFAULT_CFG_PATH = Path(__file__).parent / "config" / "config.yml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "hw_version_file": "/etc/kvm/hw",
    "gpio": {"sysfs_root": "/sys/class/gpio", "serialize_pulses": True},
    "power_led": {"active_low": True},
    "pulse": {"reset_ms": 800, "short_press_ms": 800, "long_press_ms": 1000},
}


def _deep_update(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            base[k] = _deep_update(base[k], v)
        else:
            base[k] = v
    return base


def load_config(path: str | os.PathLike | None = None) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg_path = Path(path) if path else _DEFAULT_CFG_PATH
    if not cfg_path.exists():
        cfg_path = _DEFAULT_CFG_PATH
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict):
            cfg = _deep_update(cfg, data)

    # Env overrides (flat minimal set)
    env: Dict[str, Any] = {}
    hw_file = os.getenv("KVM_HW_FILE")
    if hw_file:
        env["hw_version_file"] = hw_file
    gpio_root = os.getenv("KVM_GPIO_ROOT")
    if gpio_root:
        env.setdefault("gpio", {})["sysfs_root"] = gpio_root
    return _deep_update(cfg, env)
