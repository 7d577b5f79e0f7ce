from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .gpio import GPIOLineDriver
from .profiles import HardwareProfile

logger = logging.getLogger("hardware.power")


class PowerState(str, Enum):
    ON = "On"
    OFF = "Off"


@dataclass(frozen=True)
class PulseTimings:
    reset_ms: int = 800
    short_press_ms: int = 800
    # must stay above the board's long-press threshold
    long_press_ms: int = 1000

    def __post_init__(self) -> None:
        if min(self.reset_ms, self.short_press_ms, self.long_press_ms) < 0:
            raise ValueError("pulse durations must be >= 0")
        if self.long_press_ms <= self.short_press_ms:
            raise ValueError("long_press_ms must be longer than short_press_ms")

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "PulseTimings":
        base = cls()
        return cls(
            reset_ms=int(cfg.get("reset_ms", base.reset_ms)),
            short_press_ms=int(cfg.get("short_press_ms", base.short_press_ms)),
            long_press_ms=int(cfg.get("long_press_ms", base.long_press_ms)),
        )


class PowerControl:
    """Power state and button presses on the active board profile.

    The power LED is active-low on every supported board: a 0 on the LED
    line means the host is powered.
    """

    def __init__(
        self,
        profile: HardwareProfile,
        driver: GPIOLineDriver | None = None,
        timings: PulseTimings | None = None,
        led_active_low: bool = True,
    ) -> None:
        self.profile = profile
        self.driver = driver or GPIOLineDriver()
        self.timings = timings or PulseTimings()
        self.led_active_low = led_active_low

    def get_power_state(self) -> PowerState:
        high = self.driver.read_line(self.profile.power_led_line) != 0
        on = not high if self.led_active_low else high
        return PowerState.ON if on else PowerState.OFF

    def reset(self) -> None:
        logger.info("reset pulse (%dms)", self.timings.reset_ms)
        self.driver.pulse_line(self.profile.reset_line, self.timings.reset_ms)

    def short_press(self) -> None:
        logger.info("power button short press (%dms)", self.timings.short_press_ms)
        self.driver.pulse_line(self.profile.power_line, self.timings.short_press_ms)

    def long_press(self) -> None:
        logger.info("power button long press (%dms)", self.timings.long_press_ms)
        self.driver.pulse_line(self.profile.power_line, self.timings.long_press_ms)

    def read_hdd_activity(self) -> bool:
        return self.driver.read_line(self.profile.hdd_led_line) != 0
