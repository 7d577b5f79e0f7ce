from .profiles import HardwareProfile, HardwareVariant, PROFILES, resolve
from .detect import detect
from .gpio import GPIOLineDriver
from .power import PowerControl, PowerState, PulseTimings

__all__ = [
    "HardwareProfile",
    "HardwareVariant",
    "PROFILES",
    "resolve",
    "detect",
    "GPIOLineDriver",
    "PowerControl",
    "PowerState",
    "PulseTimings",
]
