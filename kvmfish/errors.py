from __future__ import annotations
"""Error kinds shared by the hardware and redfish modules."""


class KvmError(Exception):
    """Base class for every error raised by kvmfish services."""


class HardwareDetectionError(KvmError):
    """Startup-time failure; the process must not serve without a profile."""


class UnknownHardware(HardwareDetectionError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"unknown hardware version: {tag!r}")
        self.tag = tag


class ConfigUnreadable(HardwareDetectionError):
    def __init__(self, path: str) -> None:
        super().__init__(f"failed to read hardware version from {path}")
        self.path = path


class CapabilityAbsent(KvmError):
    """The requested line is not wired on this hardware variant."""

    def __init__(self, what: str = "GPIO line") -> None:
        super().__init__(f"{what} not available for this hardware")


class LineIOError(KvmError):
    """Reading or writing a GPIO line failed."""

    def __init__(self, path: str, op: str) -> None:
        super().__init__(f"failed to {op} GPIO {path}")
        self.path = path
        self.op = op


class MalformedValue(KvmError):
    def __init__(self, path: str, raw: str) -> None:
        super().__init__(f"failed to parse GPIO value {raw!r} from {path}")
        self.path = path
        self.raw = raw


class InvalidBootTarget(KvmError):
    def __init__(self, target: str) -> None:
        super().__init__(f"invalid BootSourceOverrideTarget: {target}")
        self.target = target


class InvalidActionName(KvmError):
    def __init__(self, name: str) -> None:
        super().__init__(f"invalid ResetType: {name}")
        self.name = name


__all__ = [
    "KvmError",
    "HardwareDetectionError",
    "UnknownHardware",
    "ConfigUnreadable",
    "CapabilityAbsent",
    "LineIOError",
    "MalformedValue",
    "InvalidBootTarget",
    "InvalidActionName",
]
