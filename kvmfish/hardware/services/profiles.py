from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict

SYSFS_GPIO_ROOT = "/sys/class/gpio"


class HardwareVariant(str, Enum):
    ALPHA = "alpha"
    BETA = "beta"
    PCIE = "pcie"


def _line(num: int) -> str:
    return f"{SYSFS_GPIO_ROOT}/gpio{num}/value"


@dataclass(frozen=True)
class HardwareProfile:
    variant: HardwareVariant
    reset_line: str
    power_line: str
    power_led_line: str
    # empty: no HDD LED wired on this board
    hdd_led_line: str = ""

    @property
    def has_hdd_led(self) -> bool:
        return bool(self.hdd_led_line)

    def rebased(self, root: str) -> "HardwareProfile":
        """Move every wired line from the sysfs GPIO root to ``root``."""
        root = root.rstrip("/")
        if not root or root == SYSFS_GPIO_ROOT:
            return self

        def _move(path: str) -> str:
            if path and path.startswith(SYSFS_GPIO_ROOT + "/"):
                return root + path[len(SYSFS_GPIO_ROOT):]
            return path

        return replace(
            self,
            reset_line=_move(self.reset_line),
            power_line=_move(self.power_line),
            power_led_line=_move(self.power_led_line),
            hdd_led_line=_move(self.hdd_led_line),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.variant.value,
            "reset_line": self.reset_line,
            "power_line": self.power_line,
            "power_led_line": self.power_led_line,
            "hdd_led_line": self.hdd_led_line or None,
        }


PROFILES: Dict[HardwareVariant, HardwareProfile] = {
    HardwareVariant.ALPHA: HardwareProfile(
        variant=HardwareVariant.ALPHA,
        reset_line=_line(507),
        power_line=_line(503),
        power_led_line=_line(504),
        hdd_led_line=_line(505),
    ),
    HardwareVariant.BETA: HardwareProfile(
        variant=HardwareVariant.BETA,
        reset_line=_line(505),
        power_line=_line(503),
        power_led_line=_line(504),
    ),
    HardwareVariant.PCIE: HardwareProfile(
        variant=HardwareVariant.PCIE,
        reset_line=_line(505),
        power_line=_line(503),
        power_led_line=_line(504),
    ),
}


def resolve(variant: HardwareVariant) -> HardwareProfile:
    return PROFILES[variant]
