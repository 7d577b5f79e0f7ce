from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from kvmfish.hardware.services.gpio import GPIOLineDriver
from kvmfish.hardware.xHardwareService import xHardwareService


class RecordingDriver(GPIOLineDriver):
    """Real file IO, with every write recorded as (path, value)."""

    def __init__(self) -> None:
        super().__init__(serialize_pulses=False)
        self.writes: List[Tuple[str, int]] = []
        self.holds: List[Tuple[str, int]] = []

    def write_line(self, ref: str, value: int) -> None:
        self.writes.append((ref, value))
        super().write_line(ref, value)

    def _pulse(self, ref: str, hold_ms: int) -> None:
        self.holds.append((ref, hold_ms))
        # skip the hold, keep the write sequence
        super()._pulse(ref, 0)


def make_board(root: Path, variant: str = "alpha", led: str = "1") -> xHardwareService:
    hw_file = root / "hw"
    hw_file.write_text(variant + "\n", encoding="utf-8")
    for num in (503, 504, 505, 507):
        d = root / "gpio" / f"gpio{num}"
        d.mkdir(parents=True, exist_ok=True)
        (d / "value").write_text("0", encoding="utf-8")
    (root / "gpio" / "gpio504" / "value").write_text(led, encoding="utf-8")
    return xHardwareService(
        config_overrides={
            "hw_version_file": str(hw_file),
            "gpio": {"sysfs_root": str(root / "gpio"), "serialize_pulses": False},
        }
    )


@pytest.fixture
def board(tmp_path: Path) -> xHardwareService:
    hw = make_board(tmp_path)
    hw.power.driver = RecordingDriver()
    hw.driver = hw.power.driver
    return hw


@pytest.fixture
def led(board: xHardwareService):
    """Setter for the power LED line of ``board``."""

    def _set(value: str) -> None:
        Path(board.profile.power_led_line).write_text(value, encoding="utf-8")

    return _set


@pytest.fixture
def board_factory(tmp_path: Path):
    """Build an unrecorded board (real driver, real holds) under tmp_path."""

    def _make(variant: str = "alpha", led: str = "1") -> xHardwareService:
        return make_board(tmp_path, variant, led)

    return _make
