from __future__ import annotations
"""In-memory BootSourceOverride settings of the managed system."""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from ...errors import InvalidBootTarget

logger = logging.getLogger("redfish.boot")

DEFAULT_ALLOWABLE_TARGETS: Tuple[str, ...] = (
    "None", "Pxe", "Cd", "Usb", "Hdd", "BiosSetup",
    "Utilities", "Diags", "UefiShell", "UefiTarget",
    "SDCard", "UefiHttp", "RemoteDrive", "UefiBootNext",
)

# Advertised in the Boot document; PATCH writes Enabled through unchecked
OVERRIDE_ENABLED_VALUES: Tuple[str, ...] = ("Disabled", "Once", "Continuous")


@dataclass(frozen=True)
class BootOverrideConfig:
    enabled: str = "Disabled"
    mode: str = "UEFI"
    target: str = "None"
    allowable_targets: Tuple[str, ...] = DEFAULT_ALLOWABLE_TARGETS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "BootSourceOverrideEnabled": self.enabled,
            "BootSourceOverrideEnabled@Redfish.AllowableValues": list(OVERRIDE_ENABLED_VALUES),
            "BootSourceOverrideMode": self.mode,
            "BootSourceOverrideTarget": self.target,
            "BootSourceOverrideTarget@Redfish.AllowableValues": list(self.allowable_targets),
        }


class BootOverrideStore:
    def __init__(
        self,
        enabled: str = "Disabled",
        mode: str = "UEFI",
        target: str = "None",
        allowable_targets: Iterable[str] = DEFAULT_ALLOWABLE_TARGETS,
    ) -> None:
        allowed = tuple(allowable_targets)
        if target not in allowed:
            raise ValueError(f"default boot target {target!r} is not an allowable target")
        self._lock = threading.Lock()
        self._config = BootOverrideConfig(enabled, mode, target, allowed)

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "BootOverrideStore":
        kwargs: Dict[str, Any] = {}
        for key in ("enabled", "mode", "target"):
            if cfg.get(key) is not None:
                kwargs[key] = str(cfg[key])
        targets = cfg.get("allowable_targets")
        if targets:
            kwargs["allowable_targets"] = [str(t) for t in targets]
        return cls(**kwargs)

    def get(self) -> BootOverrideConfig:
        with self._lock:
            return self._config

    def apply_patch(
        self,
        enabled: Optional[str] = None,
        mode: Optional[str] = None,
        target: Optional[str] = None,
    ) -> BootOverrideConfig:
        """Apply the present fields of a partial update in one step.

        ``None`` and ``""`` mean the field was not sent. An unknown target
        rejects the whole update.
        """
        changes: Dict[str, str] = {}
        if enabled:
            changes["enabled"] = enabled
        if mode:
            changes["mode"] = mode
        with self._lock:
            if target:
                if target not in self._config.allowable_targets:
                    raise InvalidBootTarget(target)
                changes["target"] = target
            if changes:
                self._config = replace(self._config, **changes)
                logger.info("boot override updated: %s", changes)
            return self._config
