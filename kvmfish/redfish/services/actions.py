from __future__ import annotations
"""ComputerSystem.Reset dispatch onto power control."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from ...errors import InvalidActionName
from ...hardware.services.power import PowerControl, PowerState

logger = logging.getLogger("redfish.actions")


class ResetType(str, Enum):
    ON = "On"
    FORCE_OFF = "ForceOff"
    GRACEFUL_SHUTDOWN = "GracefulShutdown"
    FORCE_RESTART = "ForceRestart"


@dataclass(frozen=True)
class UnrecognizedReset:
    name: str


ResetAction = Union[ResetType, UnrecognizedReset]

ALLOWED_RESET_TYPES = [t.value for t in ResetType]

# reset type -> (state the press applies in, PowerControl method); None: any state
_TRANSITIONS: Dict[ResetType, Tuple[Optional[PowerState], str]] = {
    ResetType.ON: (PowerState.OFF, "short_press"),
    ResetType.FORCE_OFF: (PowerState.ON, "long_press"),
    ResetType.GRACEFUL_SHUTDOWN: (PowerState.ON, "short_press"),
    ResetType.FORCE_RESTART: (None, "reset"),
}


def parse_reset_type(name: str) -> ResetAction:
    try:
        return ResetType(name)
    except ValueError:
        return UnrecognizedReset(name)


@dataclass(frozen=True)
class DispatchResult:
    reset_type: ResetType
    observed: Optional[PowerState]
    performed: Optional[str]

    @property
    def noop(self) -> bool:
        return self.performed is None


class ActionDispatcher:
    """Stateless: every dispatch reads the power LED again before acting."""

    def __init__(self, power: PowerControl) -> None:
        self.power = power

    def dispatch(self, action: Union[str, ResetAction]) -> DispatchResult:
        if isinstance(action, str) and not isinstance(action, ResetType):
            action = parse_reset_type(action)
        if isinstance(action, UnrecognizedReset):
            raise InvalidActionName(action.name)

        required, press = _TRANSITIONS[action]
        observed: Optional[PowerState] = None
        if required is not None:
            observed = self.power.get_power_state()
            if observed is not required:
                logger.info("%s ignored, power already %s", action.value, observed.value)
                return DispatchResult(action, observed, None)

        logger.info("%s -> %s", action.value, press)
        getattr(self.power, press)()
        return DispatchResult(action, observed, press)
