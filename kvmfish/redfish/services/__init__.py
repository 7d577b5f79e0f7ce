from .boot import BootOverrideConfig, BootOverrideStore
from .actions import ActionDispatcher, DispatchResult, ResetType, UnrecognizedReset, parse_reset_type

__all__ = [
    "BootOverrideConfig",
    "BootOverrideStore",
    "ActionDispatcher",
    "DispatchResult",
    "ResetType",
    "UnrecognizedReset",
    "parse_reset_type",
]
