from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from .config_loader import load_config, _deep_update
from .services.detect import detect
from .services.gpio import GPIOLineDriver
from .services.power import PowerControl, PulseTimings
from .services.profiles import HardwareProfile

logger = logging.getLogger("hardware.service")


class xHardwareService:
    """Owns the active board profile and the power control built on it.

    Hardware detection runs once, in the constructor. A detection error is
    raised to the caller; the service is unusable without a profile.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config_overrides: Optional[Dict[str, Any]] = None,
        profile: Optional[HardwareProfile] = None,
    ) -> None:
        self.cfg = load_config(config_path)
        if config_overrides:
            self.cfg = _deep_update(self.cfg, config_overrides)

        gpio_cfg = self.cfg.get("gpio", {})
        if profile is None:
            profile = detect(str(self.cfg["hw_version_file"]))
        self.profile = profile.rebased(str(gpio_cfg.get("sysfs_root", "")))

        self.driver = GPIOLineDriver(serialize_pulses=bool(gpio_cfg.get("serialize_pulses", True)))
        self.power = PowerControl(
            self.profile,
            self.driver,
            PulseTimings.from_config(self.cfg.get("pulse", {})),
            led_active_low=bool(self.cfg.get("power_led", {}).get("active_low", True)),
        )
        logger.info(
            "hardware ready: %s (reset=%s power=%s led=%s)",
            self.profile.variant.value,
            self.profile.reset_line,
            self.profile.power_line,
            self.profile.power_led_line,
        )
