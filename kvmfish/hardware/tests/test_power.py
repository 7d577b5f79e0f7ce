from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from kvmfish.errors import CapabilityAbsent, LineIOError, MalformedValue
from kvmfish.hardware.services.gpio import GPIOLineDriver
from kvmfish.hardware.services.power import PowerControl, PowerState, PulseTimings
from kvmfish.hardware.services.profiles import HardwareVariant, resolve


class RecordingDriver(GPIOLineDriver):
    """Records pulses instead of sleeping through them."""

    def __init__(self) -> None:
        super().__init__(serialize_pulses=False)
        self.pulses: list[tuple[str, int]] = []

    def pulse_line(self, ref: str, hold_ms: int) -> None:
        if not ref:
            raise CapabilityAbsent()
        self.pulses.append((ref, hold_ms))


def _board(tmp_path: Path, variant: HardwareVariant = HardwareVariant.ALPHA, led: str = "1"):
    prof = resolve(variant).rebased(str(tmp_path))
    for path in (prof.reset_line, prof.power_line, prof.power_led_line, prof.hdd_led_line):
        if path:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            Path(path).write_text("0", encoding="utf-8")
    Path(prof.power_led_line).write_text(led, encoding="utf-8")
    return prof


def test_power_state_is_active_low(tmp_path: Path) -> None:
    prof = _board(tmp_path, led="0")
    pc = PowerControl(prof, RecordingDriver())
    assert pc.get_power_state() is PowerState.ON
    Path(prof.power_led_line).write_text("1\n", encoding="utf-8")
    assert pc.get_power_state() is PowerState.OFF
    Path(prof.power_led_line).write_text("2", encoding="utf-8")
    assert pc.get_power_state() is PowerState.OFF


def test_power_state_active_high_option(tmp_path: Path) -> None:
    prof = _board(tmp_path, led="1")
    pc = PowerControl(prof, RecordingDriver(), led_active_low=False)
    assert pc.get_power_state() is PowerState.ON


def test_power_state_propagates_errors(tmp_path: Path) -> None:
    prof = _board(tmp_path)
    pc = PowerControl(prof, RecordingDriver())
    Path(prof.power_led_line).write_text("xyz", encoding="utf-8")
    with pytest.raises(MalformedValue):
        pc.get_power_state()
    Path(prof.power_led_line).unlink()
    with pytest.raises(LineIOError):
        pc.get_power_state()
    with pytest.raises(CapabilityAbsent):
        PowerControl(replace(prof, power_led_line=""), RecordingDriver()).get_power_state()


def test_press_durations(tmp_path: Path) -> None:
    prof = _board(tmp_path)
    drv = RecordingDriver()
    pc = PowerControl(prof, drv)
    pc.reset()
    pc.short_press()
    pc.long_press()
    assert drv.pulses == [
        (prof.reset_line, 800),
        (prof.power_line, 800),
        (prof.power_line, 1000),
    ]


def test_timings_from_config_and_margin() -> None:
    t = PulseTimings.from_config({"short_press_ms": 500, "long_press_ms": 900})
    assert (t.reset_ms, t.short_press_ms, t.long_press_ms) == (800, 500, 900)
    with pytest.raises(ValueError):
        PulseTimings(short_press_ms=1000, long_press_ms=1000)


def test_hdd_activity(tmp_path: Path) -> None:
    alpha = _board(tmp_path / "a")
    Path(alpha.hdd_led_line).write_text("1", encoding="utf-8")
    assert PowerControl(alpha, RecordingDriver()).read_hdd_activity() is True
    beta = _board(tmp_path / "b", HardwareVariant.BETA)
    with pytest.raises(CapabilityAbsent):
        PowerControl(beta, RecordingDriver()).read_hdd_activity()
