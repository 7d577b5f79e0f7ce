from __future__ import annotations
import logging
import os

from ...errors import ConfigUnreadable, UnknownHardware
from .profiles import HardwareProfile, HardwareVariant, resolve

logger = logging.getLogger("hardware.detect")

DEFAULT_HW_VERSION_FILE = "/etc/kvm/hw"

_BY_TAG = {v.value: v for v in HardwareVariant}


def detect(path: str | os.PathLike = DEFAULT_HW_VERSION_FILE) -> HardwareProfile:
    """Select the board profile from the version file.

    The file holds a single tag (``alpha``, ``beta`` or ``pcie``); surrounding
    whitespace is ignored, case is not.
    """
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise ConfigUnreadable(str(path)) from exc

    try:
        tag = raw.decode("utf-8").strip()
    except UnicodeDecodeError as exc:
        raise UnknownHardware(raw.decode("utf-8", errors="replace").strip()) from exc
    variant = _BY_TAG.get(tag)
    if variant is None:
        raise UnknownHardware(tag)
    logger.info("Detected hardware version: %s", variant.value)
    return resolve(variant)
